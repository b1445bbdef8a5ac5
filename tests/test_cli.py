import io
import re
from datetime import datetime

import pytest

from taskboard.board import TaskBoard
from taskboard.cli import (
    format_timestamp,
    main,
    render_categories,
    render_filtered,
    render_menu,
    render_tasks,
)

MOMENT = datetime(2024, 3, 5, 7, 9)


def run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_format_timestamp():
    assert format_timestamp(MOMENT) == "05/03/2024 07:09"


def test_render_menu_lists_options():
    menu = render_menu()
    assert "1) Nueva Categoría" in menu
    assert menu.rstrip("\n").endswith("8) Salir")


def test_render_categories_empty():
    out = render_categories(TaskBoard())
    assert "No se han registrado categorías aún." in out
    assert "Total:" not in out


def test_render_categories_rows():
    board = TaskBoard()
    board.add_category("HOME")
    board.add_task("WORK", "x", MOMENT)
    out = render_categories(board)
    rows = [line for line in out.splitlines() if line.startswith("| ") and "CATEGOR" not in line]
    assert [row.split("|")[1].strip() for row in rows] == ["HOME", "WORK"]
    assert [row.split("|")[2].strip() for row in rows] == ["0", "1"]
    assert "Total: 2 categorías encontradas." in out


def test_render_categories_rows_have_equal_width():
    board = TaskBoard()
    board.add_category("A")
    board.add_category("LONGER NAME")
    lines = [line for line in render_categories(board).splitlines() if line.startswith(("|", "+"))]
    assert len({len(line) for line in lines}) == 1


def test_render_tasks_empty():
    assert "No se han registrado tareas aún." in render_tasks(TaskBoard())


def test_render_tasks_lists_in_order():
    board = TaskBoard()
    board.add_task("A", "first job", MOMENT)
    board.add_task("B", "second job", MOMENT)
    out = render_tasks(board)
    assert out.index("first job") < out.index("second job")
    assert format_timestamp(MOMENT) in out
    assert "Te falta un total de 2 tarea(s)." in out


def test_render_filtered_unknown():
    assert render_filtered(TaskBoard(), "NOPE") == "La categoría 'NOPE' no existe.\n"


def test_render_filtered_no_pending():
    board = TaskBoard()
    board.add_category("IDLE")
    assert render_filtered(board, "idle") == "La categoría 'IDLE' no tiene tareas pendientes.\n"


def test_render_filtered_only_category():
    board = TaskBoard()
    board.add_task("A", "alpha task", MOMENT)
    board.add_task("B", "beta task", MOMENT)
    out = render_filtered(board, "a")
    assert "alpha task" in out
    assert "beta task" not in out
    assert "de la categoría: A" in out


def test_main_exit(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "8\n\n")
    assert code == 0
    assert "Saliendo del sistema Smart TODO" in out
    assert "Presione una tecla para continuar..." in out


def test_main_eof_ends(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "")
    assert code == 0
    assert "Ingrese su opción: " in out


def test_main_invalid_option(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "9\n\n8\n")
    assert "Opción no válida. Por favor, intente de nuevo." in out


def test_main_new_and_duplicate_category(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "1\nWORK\n\n1\nWORK\n\n8\n")
    assert "¡Se ha creado la categoría WORK con éxito!" in out
    assert "¡Ya existe la categoría WORK!" in out


def test_main_remove_unknown_category(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "2\nGHOST\n\n8\n")
    assert "¡La categoría que deseas eliminar no se encuentra registrada!" in out


def test_main_register_and_list(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "4\nWORK\nWrite report\n\n6\n\n8\n")
    assert "Se ha creado la nueva categoría: WORK." in out
    assert re.search(
        r"¡Tarea registrada con éxito en la categoría WORK, a las \d{2}/\d{2}/\d{4} \d{2}:\d{2}!",
        out,
    )
    assert "Write report" in out
    assert "Te falta un total de 1 tarea(s)." in out


def test_main_attend(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "4\nWORK\nOnly task\n\n5\n\n5\n\n8\n")
    assert "Atendiendo: Only task | Categoría: WORK" in out
    assert "¡No te quedan tareas pendientes por completar!" in out
    assert "¡Libre de pendientes!" in out


def test_main_filter_without_tasks(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "7\n\n8\n")
    assert "No hay tareas registradas en el sistema." in out


@pytest.mark.parametrize("option", ["3", "6"])
def test_main_listings_empty(monkeypatch, capsys, option):
    _, out = run(monkeypatch, capsys, f"{option}\n\n8\n")
    assert "aún." in out