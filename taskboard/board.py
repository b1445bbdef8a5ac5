"""Task board: categories with pending counts and a first-in first-out task queue."""

from __future__ import annotations

import string
from dataclasses import dataclass
from datetime import datetime

from taskboard.adapters import Queue

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class TaskBoardError(Exception):
    """Base error for task board operations."""


class DuplicateCategoryError(TaskBoardError):
    """A category with that name is already registered."""


class UnknownCategoryError(TaskBoardError):
    """No category with that name is registered."""


def normalize_name(name: str) -> str:
    """Return ``name`` with its ASCII letters in upper case."""
    return name.translate(_ASCII_UPPER)


@dataclass
class Category:
    """A named category and the number of tasks still pending in it."""

    name: str
    pending: int = 0


@dataclass(frozen=True)
class Task:
    """A pending task and the moment it was registered."""

    description: str
    category: str
    when: datetime


class TaskBoard:
    """Categories in creation order and tasks in the order they are attended."""

    def __init__(self) -> None:
        self._categories: list[Category] = []
        self._tasks = Queue()

    def add_category(self, name: str) -> Category:
        """Register a new category; raise DuplicateCategoryError if it exists."""
        key = normalize_name(name)
        if self.find_category(key) is not None:
            raise DuplicateCategoryError(key)
        category = Category(key)
        self._categories.append(category)
        return category

    def remove_category(self, name: str) -> Category:
        """Remove a category together with all of its tasks and return it."""
        key = normalize_name(name)
        category = self.find_category(key)
        if category is None:
            raise UnknownCategoryError(key)
        self._categories.remove(category)
        kept = [task for task in self._tasks if task.category != key]
        self._tasks.clean()
        for task in kept:
            self._tasks.insert(task)
        return category

    def find_category(self, name: str) -> Category | None:
        """Return the category with that name, or None."""
        key = normalize_name(name)
        return next((c for c in self._categories if c.name == key), None)

    def categories(self) -> list[Category]:
        """Return the categories in creation order."""
        return list(self._categories)

    def add_task(
        self, category: str, description: str, when: datetime | None = None
    ) -> Task:
        """Queue a task, creating its category when it does not exist yet."""
        key = normalize_name(category)
        target = self.find_category(key) or self.add_category(key)
        task = Task(description, key, when if when is not None else datetime.now())
        self._tasks.insert(task)
        target.pending += 1
        return task

    def attend_next(self) -> Task:
        """Remove and return the oldest task; raise TaskBoardError when none is left."""
        if not len(self._tasks):
            raise TaskBoardError("no pending tasks")
        task = self._tasks.remove()
        category = self.find_category(task.category)
        if category is not None:
            category.pending -= 1
        return task

    def peek_next(self) -> Task | None:
        """Return the oldest task without removing it, or None."""
        return self._tasks.front()

    def tasks(self) -> list[Task]:
        """Return every pending task, oldest first."""
        return list(self._tasks)

    def tasks_in(self, category: str) -> list[Task]:
        """Return the pending tasks of one category, oldest first."""
        key = normalize_name(category)
        if self.find_category(key) is None:
            raise UnknownCategoryError(key)
        return [task for task in self._tasks if task.category == key]