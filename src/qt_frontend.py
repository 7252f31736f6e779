"""PyQt6 host for the immediate-mode render callbacks.

Qt widgets are retained, so the host throws the whole widget tree away and
asks the callback to build it again after every click or Enter press. Clicks
and typed text are stored on the host until that rebuild reads them.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Mapping, Optional

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QApplication,
    QBoxLayout,
    QFrame,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from frame import DANGER, TextInputResponse, Ui, WindowInitError
from theme import PALETTE_DEFAULTS

logger = logging.getLogger(__name__)

TONE_KEYS = {"todo": "KANBAN_TODO", "in-progress": "KANBAN_INPROGRESS", "done": "KANBAN_DONE"}


class QtUi(Ui):
    def __init__(self, host: "QtHost", layout: QBoxLayout, kind: str = "root"):
        self.host = host
        self.layout = layout
        self.kind = kind
        self._expanding = False

    # ---- static widgets ----
    def heading(self, text: str) -> None:
        label = QLabel(text)
        font = label.font()
        font.setPointSize(font.pointSize() + 4)
        font.setWeight(QFont.Weight.DemiBold)
        label.setFont(font)
        self.layout.addWidget(label)

    def label(self, text: str, tone: Optional[str] = None) -> None:
        label = QLabel(text)
        label.setWordWrap(True)
        if tone in TONE_KEYS:
            label.setStyleSheet(f"border-left: 4px solid {self.host.palette[TONE_KEYS[tone]]}; padding-left: 6px;")
        self.layout.addWidget(label)

    def separator(self) -> None:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFrameShadow(QFrame.Shadow.Sunken)
        self.layout.addWidget(line)

    def add_space(self, amount: float) -> None:
        self.layout.addSpacing(int(amount))

    # ---- interactive widgets ----
    def text_input(self, key: str, value: str, hint: str = "") -> TextInputResponse:
        current = self.host.texts.get(key, value)
        edit = QLineEdit(current)
        edit.setObjectName(key)
        if hint:
            edit.setPlaceholderText(hint)
        edit.textEdited.connect(lambda text, k=key: self.host.on_text_edited(k, text))
        edit.returnPressed.connect(lambda k=key: self.host.on_submit(k))
        self.layout.addWidget(edit)
        self.host.inputs[key] = edit
        self._expanding = True
        return TextInputResponse(current, submitted=self.host.submitted == key)

    def button(self, key: str, label: str, fill: Optional[str] = None,
               min_width: Optional[int] = None) -> bool:
        button = QPushButton(label)
        button.setObjectName(key)
        if fill == DANGER:
            button.setStyleSheet(f"background-color: {self.host.palette['KANBAN_DANGER']}; color: #ffffff;")
        if min_width:
            button.setMinimumWidth(min_width)
        button.clicked.connect(lambda _checked=False, k=key: self.host.on_click(k))
        self.layout.addWidget(button)
        return self.host.click == key

    def request_focus(self, key: str) -> None:
        self.host.focus = key

    # ---- layout ----
    def _child(self, kind: str) -> "QtUi":
        if kind in ("horizontal", "columns"):
            layout = QHBoxLayout()
            self.layout.addLayout(layout)
        elif kind == "column":
            region = QWidget()
            # ignore size hints so every column gets the same share
            region.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Preferred)
            layout = QVBoxLayout(region)
            layout.setContentsMargins(0, 0, 0, 0)
            self.layout.addWidget(region, 1)
        elif kind == "group":
            box = QGroupBox()
            layout = QVBoxLayout(box)
            self.layout.addWidget(box)
        elif kind == "scroll":
            area = QScrollArea()
            area.setWidgetResizable(True)
            content = QWidget()
            layout = QVBoxLayout(content)
            area.setWidget(content)
            self.layout.addWidget(area, 1)
        else:
            raise ValueError(f"Unknown layout kind: {kind}")
        return QtUi(self.host, layout, kind)

    def _close_child(self, child: Ui) -> None:
        assert isinstance(child, QtUi)
        if child.kind in ("column", "scroll"):
            child.layout.addStretch(1)
        elif child.kind == "horizontal" and not child._expanding:
            child.layout.addStretch(1)


class QtHost:
    """Owns the window and re-runs ``app.update`` after each user event."""

    def __init__(self, app, palette: Optional[Mapping[str, str]] = None):
        self.app = app
        self.palette: Dict[str, str] = dict(palette or PALETTE_DEFAULTS)
        self.texts: Dict[str, str] = {}
        self.inputs: Dict[str, QLineEdit] = {}
        self.click: Optional[str] = None
        self.submitted: Optional[str] = None
        self.focus: Optional[str] = None
        self.window = QMainWindow()
        self.window.setWindowTitle(app.title)
        if app.window_size:
            self.window.resize(*app.window_size)

    # ---- events ----
    def on_text_edited(self, key: str, text: str) -> None:
        self.texts[key] = text

    def on_click(self, key: str) -> None:
        self.click = key
        self._schedule()

    def on_submit(self, key: str) -> None:
        self.submitted = key
        self._schedule()

    def _schedule(self) -> None:
        # rebuild outside the signal handler of a widget about to be replaced
        QTimer.singleShot(0, self.refresh)

    # ---- frames ----
    def _pass(self) -> None:
        container = QWidget()
        layout = QVBoxLayout(container)
        self.inputs = {}
        try:
            self.app.update(QtUi(self, layout))
        finally:
            self.click = None
            self.submitted = None
            self.texts.clear()
        layout.addStretch(1)
        self.window.setCentralWidget(container)

    def refresh(self) -> None:
        had_input = self.click is not None or self.submitted is not None
        self._pass()
        if had_input:
            # the pass that consumed the event drew the pre-action state
            self._pass()
        if self.focus in self.inputs:
            self.inputs[self.focus].setFocus()
            self.focus = None


def _has_display() -> bool:
    if not sys.platform.startswith("linux"):
        return True
    return any(os.environ.get(name) for name in ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM"))


def run_native(app, palette: Optional[Mapping[str, str]] = None) -> int:
    """Open the app's window and block until it is closed."""
    if not _has_display():
        raise WindowInitError("No display available (DISPLAY / WAYLAND_DISPLAY unset)")
    qt_app = QApplication.instance() or QApplication(sys.argv[:1])
    host = QtHost(app, palette)
    host.refresh()
    host.window.show()
    logger.info("Opened %s window", app.title)
    return qt_app.exec()
