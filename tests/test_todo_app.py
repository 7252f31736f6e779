"""To-Do render callback."""
from __future__ import annotations

from kanban_app import ADD_KEY, INPUT_KEY, delete_key
from todo_app import TodoApp
from todo_list import TodoList


def test_add_and_list(scripted_ui) -> None:
    app = TodoApp()
    ui = scripted_ui(submit={INPUT_KEY: "milk"})
    app.update(ui)
    assert [item.text for item in app.todos.items()] == ["milk"]
    assert "milk" in ui.labels
    assert ui.focus == INPUT_KEY
    assert app.draft == ""


def test_blank_submission_keeps_draft(scripted_ui) -> None:
    app = TodoApp()
    app.update(scripted_ui(submit={INPUT_KEY: "   "}))
    assert len(app.todos) == 0
    assert app.draft == "   "


def test_delete_uses_item_id(scripted_ui) -> None:
    todos = TodoList()
    for text in ["a", "b", "c"]:
        todos.add_item(text)
    todos.remove_item_by_id(0)
    app = TodoApp(todos)
    app.update(scripted_ui(clicks={delete_key(2)}))
    assert [item.text for item in app.todos.items()] == ["b"]


def test_list_is_drawn_inside_scroll_region(scripted_ui) -> None:
    app = TodoApp()
    app.todos.add_item("a")
    ui = scripted_ui()
    app.update(ui)
    assert ("open", "scroll") in ui.log
    assert ADD_KEY in ui.buttons
