"""Shared fixtures: a scripted immediate-mode Ui for driving render callbacks."""
from __future__ import annotations

from typing import Dict, List, Optional, Set

import pytest

from frame import TextInputResponse, Ui
from theme import Theme


class ScriptedUi(Ui):
    """Records what a frame drew and answers clicks/submissions from a script."""

    def __init__(self, clicks: Optional[Set[str]] = None, submit: Optional[Dict[str, str]] = None,
                 log: Optional[List[tuple]] = None):
        self.clicks = clicks or set()
        self.submit = submit or {}
        self.log: List[tuple] = [] if log is None else log
        self.focus: Optional[str] = None

    def heading(self, text):
        self.log.append(("heading", text))

    def label(self, text, tone=None):
        self.log.append(("label", text, tone))

    def separator(self):
        self.log.append(("separator",))

    def text_input(self, key, value, hint=""):
        self.log.append(("input", key))
        if key in self.submit:
            return TextInputResponse(self.submit[key], submitted=True)
        return TextInputResponse(value)

    def button(self, key, label, fill=None, min_width=None):
        self.log.append(("button", key, fill))
        return key in self.clicks

    def request_focus(self, key):
        self.focus = key

    def _child(self, kind):
        self.log.append(("open", kind))
        child = ScriptedUi(self.clicks, self.submit, self.log)
        return child

    def _close_child(self, child):
        self.focus = child.focus or self.focus
        self.log.append(("close",))

    # ---- helpers for assertions ----
    @property
    def buttons(self) -> List[str]:
        return [entry[1] for entry in self.log if entry[0] == "button"]

    @property
    def labels(self) -> List[str]:
        return [entry[1] for entry in self.log if entry[0] == "label"]


@pytest.fixture
def scripted_ui():
    """Factory fixture: scripted_ui(clicks={...}, submit={key: text})."""
    return ScriptedUi


@pytest.fixture
def plain_theme(tmp_path) -> Theme:
    """Theme with colors disabled and no .env file."""
    return Theme.from_env({}, isatty=False, env_file=tmp_path / ".env")
