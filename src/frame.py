"""Immediate-mode widget protocol shared by the Qt and terminal hosts.

A host calls ``app.update(ui)`` once per frame. Every widget call draws the
widget for this frame only; ``button`` answers whether the button with that
key was clicked since the previous frame, ``text_input`` hands back the
current text and whether Enter submitted it.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional

DANGER = "danger"


class WindowInitError(RuntimeError):
    """The host could not open its window or terminal."""


@dataclass
class TextInputResponse:
    value: str
    submitted: bool = False


class Ui(ABC):
    # ---- static widgets ----
    @abstractmethod
    def heading(self, text: str) -> None: ...

    @abstractmethod
    def label(self, text: str, tone: Optional[str] = None) -> None:
        """Static text; ``tone`` is a status key hosts may color by."""

    @abstractmethod
    def separator(self) -> None: ...

    def add_space(self, amount: float) -> None:
        pass

    # ---- interactive widgets ----
    @abstractmethod
    def text_input(self, key: str, value: str, hint: str = "") -> TextInputResponse: ...

    @abstractmethod
    def button(self, key: str, label: str, fill: Optional[str] = None,
               min_width: Optional[int] = None) -> bool: ...

    def request_focus(self, key: str) -> None:
        pass

    # ---- layout ----
    @abstractmethod
    def _child(self, kind: str) -> "Ui": ...

    @abstractmethod
    def _close_child(self, child: "Ui") -> None: ...

    @contextmanager
    def horizontal(self) -> Iterator["Ui"]:
        child = self._child("horizontal")
        try:
            yield child
        finally:
            self._close_child(child)

    @contextmanager
    def group(self) -> Iterator["Ui"]:
        child = self._child("group")
        try:
            yield child
        finally:
            self._close_child(child)

    @contextmanager
    def scroll(self) -> Iterator["Ui"]:
        child = self._child("scroll")
        try:
            yield child
        finally:
            self._close_child(child)

    @contextmanager
    def columns(self, count: int) -> Iterator[List["Ui"]]:
        """Split the width into ``count`` equal regions."""
        row = self._child("columns")
        cols = [row._child("column") for _ in range(count)]
        try:
            yield cols
        finally:
            for col in cols:
                row._close_child(col)
            self._close_child(row)
