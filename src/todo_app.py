"""To-Do render callback: one input row and a scrolling list of items."""
from typing import Optional, Tuple
from actions import ActionBuffer, apply_actions
from frame import DANGER, Ui
from kanban_app import ADD_KEY, DELETE_LABEL, INPUT_KEY, delete_key
from todo_list import TodoList


class TodoApp:
    title = "To-Do"
    window_size: Optional[Tuple[int, int]] = None  # toolkit default

    def __init__(self, todos: Optional[TodoList] = None):
        self.todos: TodoList = todos if todos is not None else TodoList()
        self.draft: str = ""

    def update(self, ui: Ui) -> None:
        ui.heading("To-Do")
        with ui.horizontal() as row:
            response = row.text_input(INPUT_KEY, self.draft, hint="New task")
            self.draft = response.value
            clicked = row.button(ADD_KEY, "Add")
            if (clicked or response.submitted) and self.todos.add_item(self.draft) is not None:
                self.draft = ""
                row.request_focus(INPUT_KEY)
        ui.separator()

        actions = ActionBuffer()
        with ui.scroll() as region:
            for item in self.todos.items():
                with region.horizontal() as line:
                    line.label(item.text)
                    if line.button(delete_key(item.id), DELETE_LABEL, fill=DANGER, min_width=30):
                        actions.delete(item.id)

        apply_actions(self.todos, actions.drain())
