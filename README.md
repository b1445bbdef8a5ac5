# taskboard

A small interactive task board for the terminal. Tasks are filed under
categories and handled strictly in the order they were registered.

## Installing

    pip install .

## Running

    taskboard

The program reads its answers from standard input. It shows a menu
(in Spanish) and waits for an option:

1. Nueva Categoría – create a category
2. Eliminar Categoría – delete a category together with all its tasks
3. Mostrar Categorías – list categories and their pending counts
4. Registrar Pendiente – add a task (its category is created if missing)
5. Atender Siguiente – take the oldest task off the queue and show the next one
6. Visualización del Tablero General – show every pending task
7. Filtrado por Categoría – show the pending tasks of one category
8. Salir – quit

After each action it asks for a key before showing the menu again. When
standard output is a terminal the screen is cleared before each menu.
The program also ends when its input runs out.

Category names are compared with their letters in upper case, so `work`
and `WORK` are the same category. Names are read up to 49 characters and
descriptions up to 99. Every task records the moment it was registered,
shown as `dd/mm/YYYY HH:MM`.

## Using it from Python

```python
from datetime import datetime
from taskboard.board import TaskBoard

board = TaskBoard()
board.add_category("home")
board.add_task("work", "Send report", datetime(2024, 5, 1, 9, 30))
print([c.name for c in board.categories()])   # ['HOME', 'WORK']
task = board.attend_next()
print(task.description)                        # Send report
```

`taskboard.board` holds `TaskBoard`, the `Task` and `Category` records,
`normalize_name`, and the errors `TaskBoardError`,
`DuplicateCategoryError` and `UnknownCategoryError`. `TaskBoard` offers
`add_category`, `remove_category`, `find_category`, `categories`,
`add_task`, `attend_next`, `peek_next`, `tasks` and `tasks_in`.

`taskboard.cli` provides `render_menu`, `render_categories`,
`render_tasks`, `render_filtered` and `format_timestamp` for producing the
same text the program prints, and `main`, which runs the menu.

The package also ships the plain containers the board is built on:
`taskboard.linked_list.LinkedList` (a sequence with a movable cursor),
`taskboard.adapters.Queue` and `Stack`, `taskboard.heap.Heap` (a
max-priority heap), `taskboard.ordered_map.Map`, `MultiMap`, `Set` and
`MapPair`, and the helpers in `taskboard.extra` (`read_csv_line`,
`split_string`, `clear_screen`, `wait_for_key`).

## What it does not do

The board lives only in memory: categories and tasks are not saved
anywhere and are lost when the program ends. There is no way to edit a
task, reorder the queue or attend a task other than the oldest one.

## Tests

    pip install .[test]
    pytest