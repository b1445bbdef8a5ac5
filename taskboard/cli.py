"""Interactive menu for the task board."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import Callable, TextIO

from taskboard.board import (
    DuplicateCategoryError,
    TaskBoard,
    TaskBoardError,
    UnknownCategoryError,
    normalize_name,
)
from taskboard.extra import clear_screen, wait_for_key

NAME_LIMIT = 49
DESCRIPTION_LIMIT = 99

_MENU = (
    "========================================",
    "     Sistema de Gestión de Tareas",
    "========================================",
    "1) Nueva Categoría",
    "2) Eliminar Categoría",
    "3) Mostrar Categorías",
    "4) Registrar Pendiente",
    "5) Atender Siguiente",
    "6) Visualización del Tablero General",
    "7) Filtrado por Categoría",
    "8) Salir",
)

_CATEGORY_BORDER = "+---------------------------+-----------------------+\n"
_TASK_BORDER = "+------+------------------------+--------------------+------------------+\n"
_FILTER_BORDER = "+------+--------------------------------+------------------+\n"


def format_timestamp(moment: datetime) -> str:
    """Format a moment as day/month/year hour:minute."""
    return moment.strftime("%d/%m/%Y %H:%M")


def render_menu() -> str:
    """Return the main menu."""
    return "\n".join(_MENU) + "\n"


def render_categories(board: TaskBoard) -> str:
    """Return the table of categories with their pending counts."""
    categories = board.categories()
    parts = [
        "==== LISTADO DE CATEGORÍAS ===\n\n",
        _CATEGORY_BORDER,
        "| CATEGORÍA                 | TAREAS PENDIENTES     |\n",
        _CATEGORY_BORDER,
    ]
    parts.extend(
        f"| {c.name:<25} |          {c.pending:>4}         |\n" for c in categories
    )
    parts.append(_CATEGORY_BORDER)
    if categories:
        parts.append(f"\nTotal: {len(categories)} categorías encontradas.\n")
    else:
        parts.append("No se han registrado categorías aún.\n")
    return "".join(parts)


def render_tasks(board: TaskBoard) -> str:
    """Return the table of every pending task."""
    tasks = board.tasks()
    header = "=== LISTADO DE TAREAS ===\n\n"
    if not tasks:
        return header + "No se han registrado tareas aún.\n"
    parts = [
        header,
        _TASK_BORDER,
        "|  ID  | DESCRIPCIÓN            | CATEGORÍA          | FECHA/HORA       |\n",
        _TASK_BORDER,
    ]
    parts.extend(
        f"|  {number}  | {t.description:<22} | {t.category:<18} "
        f"| {format_timestamp(t.when):<16} |\n"
        for number, t in enumerate(tasks, start=1)
    )
    parts.append(_TASK_BORDER)
    parts.append(f"\nTe falta un total de {len(tasks)} tarea(s).\n")
    return "".join(parts)


def render_filtered(board: TaskBoard, category: str) -> str:
    """Return the table of the pending tasks of one category, or why there is none."""
    name = normalize_name(category)
    found = board.find_category(name)
    if found is None:
        return f"La categoría '{name}' no existe.\n"
    if found.pending == 0:
        return f"La categoría '{name}' no tiene tareas pendientes.\n"
    parts = [
        f"\nTienes {found.pending} encontradas de la categoría: {name}\n",
        _FILTER_BORDER,
        "|  ID  | DESCRIPCIÓN                    | FECHA/HORA       |\n",
        _FILTER_BORDER,
    ]
    parts.extend(
        f"|  {number:>2}  | {t.description:<30} | {format_timestamp(t.when):<16} |\n"
        for number, t in enumerate(board.tasks_in(name), start=1)
    )
    parts.append(_FILTER_BORDER)
    return "".join(parts)


class _Reader:
    """Character reader over a text stream with one character of push-back."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: str | None = None

    def read(self, size: int = 1) -> str:
        chars = []
        while len(chars) < size:
            if self._pending is not None:
                ch, self._pending = self._pending, None
            else:
                ch = self._stream.read(1)
            if not ch:
                break
            chars.append(ch)
        return "".join(chars)

    def _skip_space(self) -> str:
        ch = self.read(1)
        while ch and ch.isspace():
            ch = self.read(1)
        if not ch:
            raise EOFError
        return ch

    def char(self) -> str:
        """Skip whitespace and return the next character."""
        return self._skip_space()

    def field(self, limit: int) -> str:
        """Skip whitespace and read up to ``limit`` characters of the line."""
        chars = [self._skip_space()]
        while len(chars) < limit:
            ch = self.read(1)
            if not ch:
                break
            if ch == "\n":
                self._pending = ch
                break
            chars.append(ch)
        return "".join(chars)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _new_category(board: TaskBoard, reader: _Reader) -> None:
    _write("==== REGISTRAR NUEVA CATEGORÍA ====\n")
    _write("Ingresa el nombre de la nueva categoría: ")
    name = normalize_name(reader.field(NAME_LIMIT))
    _write("\n")
    try:
        board.add_category(name)
    except DuplicateCategoryError:
        _write(f"¡Ya existe la categoría {name}!\n")
        return
    _write(f"¡Se ha creado la categoría {name} con éxito!")


def _remove_category(board: TaskBoard, reader: _Reader) -> None:
    _write("==== ELIMINAR CATEGORÍA ====\n")
    _write("Ingresa el nombre de la categoría que quieres eliminar: ")
    name = normalize_name(reader.field(NAME_LIMIT))
    _write("\n")
    try:
        removed = board.remove_category(name)
    except UnknownCategoryError:
        _write("¡La categoría que deseas eliminar no se encuentra registrada!")
        return
    _write(f"¡La categoría {name} se ha eliminado, contaba con {removed.pending} tareas!")


def _show_categories(board: TaskBoard, reader: _Reader) -> None:
    _write(render_categories(board))


def _add_task(board: TaskBoard, reader: _Reader) -> None:
    _write("==== REGISTRAR NUEVA TAREA ====\n")
    _write(
        "Ingresa la categoría a la que pertenecerá está tarea (Si no existe se creará): "
    )
    name = normalize_name(reader.field(NAME_LIMIT))
    _write("\n")
    if board.find_category(name) is None:
        board.add_category(name)
        _write(f"Se ha creado la nueva categoría: {name}. \n")
    _write("Ingresa la descripción de tu tarea (máx 99 car.): ")
    description = reader.field(DESCRIPTION_LIMIT)
    _write("\n")
    task = board.add_task(name, description, datetime.now())
    _write(
        f"\n¡Tarea registrada con éxito en la categoría {name}, "
        f"a las {format_timestamp(task.when)}!\n"
    )


def _attend(board: TaskBoard, reader: _Reader) -> None:
    try:
        task = board.attend_next()
    except TaskBoardError:
        _write("¡Libre de pendientes!\n")
        return
    _write(
        f"Atendiendo: {task.description} | Categoría: {task.category} "
        f"| Momento del registro: {format_timestamp(task.when)}\n"
    )
    upcoming = board.peek_next()
    if upcoming is None:
        _write("¡No te quedan tareas pendientes por completar!\n")
    else:
        _write(
            f"Próxima Tarea: Descripción: {upcoming.description} "
            f"| Categoría: {upcoming.category} "
            f"| Momento del registro: {format_timestamp(upcoming.when)}\n"
        )


def _show_tasks(board: TaskBoard, reader: _Reader) -> None:
    _write(render_tasks(board))


def _filter(board: TaskBoard, reader: _Reader) -> None:
    _write("==== FILTRADO POR CATEGORÍA ====\n\n")
    if not board.tasks():
        _write("No hay tareas registradas en el sistema.\n")
        return
    _write("Ingresa el nombre de la categoría que deseas filtrar: ")
    name = reader.field(NAME_LIMIT)
    _write(render_filtered(board, name))


_ACTIONS: dict[str, Callable[[TaskBoard, _Reader], None]] = {
    "1": _new_category,
    "2": _remove_category,
    "3": _show_categories,
    "4": _add_task,
    "5": _attend,
    "6": _show_tasks,
    "7": _filter,
}


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="taskboard", description="Gestor de tareas pendientes por categoría."
    )
    parser.parse_args(argv)

    board = TaskBoard()
    reader = _Reader(sys.stdin)
    while True:
        if sys.stdout.isatty():
            clear_screen()
        _write(render_menu())
        _write("Ingrese su opción: ")
        try:
            option = reader.char()
            if option == "8":
                _write("Saliendo del sistema Smart TODO\n")
            else:
                action = _ACTIONS.get(option)
                if action is None:
                    _write("Opción no válida. Por favor, intente de nuevo.\n")
                else:
                    action(board, reader)
        except EOFError:
            return 0
        wait_for_key(reader)
        if option == "8":
            return 0


if __name__ == "__main__":
    sys.exit(main())