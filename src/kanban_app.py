"""Kanban render callback: input row on top, three status columns below.

Buttons drawn inside the columns only record actions. The board is changed
after the last column is drawn, when no column view is iterating it.
"""
from typing import Optional, Tuple
from actions import ActionBuffer, apply_actions
from board import Board
from frame import DANGER, Ui
from models import HEADER_TITLES, STATUSES, TRANSITIONS, Task

INPUT_KEY = "new-task"
ADD_KEY = "add"
ARROW_LABELS = {"back": "⬅", "forward": "➡"}
ARROW_KEYS = {"back": "<", "forward": ">"}
DELETE_LABEL = "\U0001f5d1"


def move_key(task_id: int, direction: str) -> str:
    return f"{task_id}{ARROW_KEYS[direction]}"


def delete_key(task_id: int) -> str:
    return f"{task_id}x"


class KanbanApp:
    title = "Kanban"
    window_size: Optional[Tuple[int, int]] = (800, 600)

    def __init__(self, board: Optional[Board] = None):
        self.board: Board = board if board is not None else Board()
        self.draft: str = ""

    def update(self, ui: Ui) -> None:
        ui.heading("Kanban")
        ui.separator()
        self._draw_add_row(ui)
        ui.add_space(10)
        ui.separator()

        actions = ActionBuffer()
        with ui.columns(len(STATUSES)) as cols:
            for col, status in zip(cols, STATUSES):
                col.heading(HEADER_TITLES[status])
                col.separator()
                for task in self.board.tasks_by_status(status):
                    self._draw_task(col, task, actions)
                    col.add_space(5)

        apply_actions(self.board, actions.drain())

    def _draw_add_row(self, ui: Ui) -> None:
        with ui.horizontal() as row:
            row.label("Add task:")
            response = row.text_input(INPUT_KEY, self.draft)
            self.draft = response.value
            clicked = row.button(ADD_KEY, "Add")
            if (clicked or response.submitted) and self.board.add_task(self.draft) is not None:
                self.draft = ""
                # keep typing without clicking back into the field
                row.request_focus(INPUT_KEY)

    def _draw_task(self, col: Ui, task: Task, actions: ActionBuffer) -> None:
        with col.group() as card:
            card.label(f"#{task.id} {task.text}", tone=task.status)
            with card.horizontal() as buttons:
                for direction, target in TRANSITIONS[task.status]:
                    if buttons.button(move_key(task.id, direction), ARROW_LABELS[direction]):
                        actions.change_status(task.id, target)
                if buttons.button(delete_key(task.id), DELETE_LABEL, fill=DANGER):
                    actions.delete(task.id)
