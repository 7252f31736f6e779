"""Data models for the Kanban and To-Do apps.

Internal status keys are "todo", "in-progress" and "done". The user-facing
header for "todo" renders as "TO DO" while the key itself stays unhyphenated.
Actions are plain tagged values so the reconcile step can be read and tested
without any widgets around.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple, Union

STATUSES: Tuple[str, ...] = ("todo", "in-progress", "done")
HEADER_TITLES: Dict[str, str] = {"todo": "TO DO", "in-progress": "IN-PROGRESS", "done": "DONE"}

# status -> ((direction, target), ...); no todo <-> done jump
TRANSITIONS: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "todo": (("forward", "in-progress"),),
    "in-progress": (("back", "todo"), ("forward", "done")),
    "done": (("back", "in-progress"),),
}


def can_move(current: str, new_status: str) -> bool:
    return any(target == new_status for _, target in TRANSITIONS.get(current, ()))


@dataclass
class Task:
    """A single Kanban task.

    Fields:
        id: Sequential integer id, never reused after deletion.
        text: Single-line description typed by the user.
        status: One of: "todo", "in-progress", "done".
    """
    id: int
    text: str
    status: str = "todo"

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, text={self.text}, status={self.status})"


@dataclass
class TodoItem:
    id: int
    text: str


@dataclass(frozen=True)
class Delete:
    id: int


@dataclass(frozen=True)
class ChangeStatus:
    id: int
    status: str


Action = Union[Delete, ChangeStatus]
