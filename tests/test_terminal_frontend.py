"""Terminal host: command lines become clicks and submissions."""
from __future__ import annotations

from typing import Iterable

import pytest

from kanban_app import KanbanApp
from terminal_frontend import TerminalHost, TerminalUi, FrameState, visible_len
from todo_app import TodoApp


def _feed(lines: Iterable[str]):
    it = iter(lines)

    def _input(prompt: str) -> str:
        return next(it)

    return _input


@pytest.fixture
def kanban_host(plain_theme) -> TerminalHost:
    host = TerminalHost(KanbanApp(), plain_theme, alt_screen=False)
    host.frame(90)
    return host


def _type(host: TerminalHost, line: str) -> list:
    assert host.handle_line(line) is True
    return host.frame(90)


def test_text_line_adds_a_task(kanban_host) -> None:
    lines = _type(kanban_host, "write report")
    assert [t.text for t in kanban_host.app.board.all_tasks()] == ["write report"]
    assert any("#0 write report" in line for line in lines)
    assert any("[0>]" in line and "[0x]" in line for line in lines)


def test_button_key_clicks_and_result_shows_same_frame(kanban_host) -> None:
    _type(kanban_host, "A")
    lines = _type(kanban_host, "0>")
    assert kanban_host.app.board.find(0).status == "in-progress"
    assert any("[0<]" in line for line in lines)


def test_delete_key(kanban_host) -> None:
    _type(kanban_host, "A")
    _type(kanban_host, "B")
    _type(kanban_host, "0x")
    assert [t.text for t in kanban_host.app.board.all_tasks()] == ["B"]


def test_add_prefix_types_button_like_text(kanban_host) -> None:
    _type(kanban_host, "A")
    _type(kanban_host, "add 0x")
    assert [t.text for t in kanban_host.app.board.all_tasks()] == ["A", "0x"]


def test_unknown_button_is_reported_not_added(kanban_host) -> None:
    _type(kanban_host, "9x")
    assert len(kanban_host.app.board) == 0
    assert kanban_host.message and "9x" in kanban_host.message


def test_exit_and_blank_lines(kanban_host) -> None:
    assert kanban_host.handle_line("") is True
    assert kanban_host.handle_line("exit") is False
    assert kanban_host.handle_line(":q") is False


def test_columns_render_side_by_side(plain_theme) -> None:
    app = KanbanApp()
    app.board.add_task("A")
    app.board.add_task("B")
    app.board.move_task_by_id(1, "in-progress")
    host = TerminalHost(app, plain_theme, alt_screen=False)
    lines = host.frame(90)
    header = next(line for line in lines if "TO DO" in line)
    assert "IN-PROGRESS" in header and "DONE" in header
    row = next(line for line in lines if "#0 A" in line)
    assert "#1 B" in row
    assert row.index("#0 A") < row.index("#1 B")


def test_long_labels_wrap_inside_their_column(plain_theme) -> None:
    app = KanbanApp()
    app.board.add_task("a fairly long task description that cannot fit one column")
    host = TerminalHost(app, plain_theme, alt_screen=False)
    lines = host.frame(60)
    assert all(visible_len(line) <= 60 for line in lines if "|" in line)


def test_fill_wraps_tokens() -> None:
    tokens = [(w, len(w)) for w in "one two three four".split()]
    assert TerminalUi._fill(tokens, 9) == ["one two", "three", "four"]
    assert TerminalUi._fill([], 9) == [""]


def test_frame_state_prefers_focused_input() -> None:
    state = FrameState(focus="b", inputs=["a", "b"])
    assert state.input_target() == "b"
    state.focus = "gone"
    assert state.input_target() == "a"
    assert FrameState().input_target() is None


def test_run_loop_until_exit(plain_theme, capsys) -> None:
    app = KanbanApp()
    host = TerminalHost(app, plain_theme, alt_screen=False,
                        input_fn=_feed(["A", "B", "0>", "exit"]))
    assert host.run() == 0
    assert [(t.text, t.status) for t in app.board.all_tasks()] == [("A", "in-progress"), ("B", "todo")]
    assert "Goodbye." in capsys.readouterr().out


def test_run_loop_help_page_lists_buttons(plain_theme, capsys) -> None:
    app = KanbanApp()
    app.board.add_task("A")
    host = TerminalHost(app, plain_theme, alt_screen=False,
                        input_fn=_feed(["help", "", "exit"]))
    host.run()
    out = capsys.readouterr().out
    assert "0x" in out and "Click" in out


def test_run_loop_ends_cleanly_on_eof(plain_theme, capsys) -> None:
    def _eof(prompt: str) -> str:
        raise EOFError

    host = TerminalHost(TodoApp(), plain_theme, alt_screen=False, input_fn=_eof)
    assert host.run() == 0
    assert "Interrupted. Goodbye." in capsys.readouterr().out


def test_todo_app_in_terminal(plain_theme) -> None:
    host = TerminalHost(TodoApp(), plain_theme, alt_screen=False)
    host.frame(80)
    host.handle_line("milk")
    host.frame(80)
    host.handle_line("bread")
    lines = host.frame(80)
    assert any("milk" in line and "[0x]" in line for line in lines)
    host.handle_line("0x")
    host.frame(80)
    assert [item.text for item in host.app.todos.items()] == ["bread"]
