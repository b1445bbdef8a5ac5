import pytest

from taskboard.adapters import Queue, Stack


def test_queue_is_fifo():
    q = Queue()
    for item in ("a", "b", "c"):
        q.insert(item)
    assert [q.remove(), q.remove(), q.remove()] == ["a", "b", "c"]
    assert len(q) == 0


def test_queue_remove_empty_raises():
    with pytest.raises(IndexError):
        Queue().remove()


def test_queue_front_and_next_walk():
    q = Queue()
    for item in (1, 2, 3):
        q.insert(item)
    seen = []
    item = q.front()
    while item is not None:
        seen.append(item)
        item = q.next()
    assert seen == [1, 2, 3]
    assert len(q) == 3


def test_queue_front_empty_is_none():
    assert Queue().front() is None


def test_queue_iter_and_clean():
    q = Queue()
    q.insert("x")
    q.insert("y")
    assert list(q) == ["x", "y"]
    q.clean()
    assert list(q) == []
    assert q.front() is None


def test_stack_is_lifo():
    s = Stack()
    for item in (1, 2, 3):
        s.push(item)
    assert s.top() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]


def test_stack_top_empty_is_none():
    assert Stack().top() is None


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_stack_iterates_top_to_bottom_and_cleans():
    s = Stack()
    s.push("bottom")
    s.push("top")
    assert list(s) == ["top", "bottom"]
    assert len(s) == 2
    s.clean()
    assert len(s) == 0