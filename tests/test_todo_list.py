"""To-Do store: stable ids instead of positions."""
from __future__ import annotations

from models import TodoItem
from todo_list import TodoList


def test_add_assigns_increasing_ids_and_skips_blank() -> None:
    todos = TodoList()
    assert todos.add_item("a") == 0
    assert todos.add_item("   ") is None
    assert todos.add_item("b") == 1
    assert len(todos) == 2


def test_delete_by_id_hits_the_right_row_after_earlier_deletes() -> None:
    todos = TodoList()
    for text in ["a", "b", "c", "d"]:
        todos.add_item(text)
    # the row showing "c" was drawn at index 2; deleting "a" first shifts it
    todos.remove_item_by_id(0)
    todos.remove_item_by_id(2)
    assert todos.items() == [TodoItem(1, "b"), TodoItem(3, "d")]


def test_delete_by_index_shifts_with_earlier_deletes() -> None:
    todos = TodoList()
    for text in ["a", "b", "c", "d"]:
        todos.add_item(text)
    # same two clicks by position remove "d" instead of "c"
    todos.remove_item_by_index(0)
    todos.remove_item_by_index(2)
    assert [item.text for item in todos.items()] == ["b", "c"]


def test_delete_by_index_out_of_bounds_is_a_no_op() -> None:
    todos = TodoList()
    todos.add_item("a")
    assert todos.remove_item_by_index(1) is False
    assert todos.remove_item_by_index(-1) is False
    assert len(todos) == 1


def test_delete_missing_id_is_a_no_op() -> None:
    todos = TodoList()
    todos.add_item("a")
    assert todos.remove_item_by_id(5) is False
    assert len(todos) == 1


def test_items_returns_a_copy() -> None:
    todos = TodoList()
    todos.add_item("a")
    todos.items().clear()
    assert len(todos) == 1
