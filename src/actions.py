"""Action buffer and reconciler.

Widgets are drawn from the store while clicks are only recorded here. Once
every column is drawn nothing is reading the store any more and the recorded
actions are applied in the order they were clicked.
"""
import logging
from typing import Iterable, List
from models import Action, ChangeStatus, Delete

logger = logging.getLogger(__name__)


class ActionBuffer:
    def __init__(self) -> None:
        self._actions: List[Action] = []

    def record(self, action: Action) -> None:
        self._actions.append(action)

    def delete(self, task_id: int) -> None:
        self.record(Delete(task_id))

    def change_status(self, task_id: int, status: str) -> None:
        self.record(ChangeStatus(task_id, status))

    def drain(self) -> List[Action]:
        """Return the recorded actions and leave the buffer empty."""
        actions, self._actions = self._actions, []
        return actions

    def __len__(self) -> int:
        return len(self._actions)

    def __bool__(self) -> bool:
        return bool(self._actions)


def apply_actions(store, actions: Iterable[Action]) -> int:
    """Apply actions to a Board or TodoList; returns how many changed it.

    Actions naming an id that is already gone (deleted earlier in the same
    batch) do nothing.
    """
    applied = 0
    for action in actions:
        if isinstance(action, Delete):
            changed = store.remove_task_by_id(action.id)
        elif isinstance(action, ChangeStatus):
            move = getattr(store, 'move_task_by_id', None)
            if move is None:
                logger.warning("%s has no statuses, %r skipped", type(store).__name__, action)
                continue
            changed = move(action.id, action.status)
        else:
            raise TypeError(f'Unknown action: {action!r}')
        if changed:
            applied += 1
    return applied
