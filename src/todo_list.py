"""Store for the single-list To-Do app.

Items carry a stable id like Kanban tasks do; removal by id is what the app
uses. Removal by position is kept for callers that address rows by index and
is unsafe once rows have shifted.
"""
import logging
from typing import List, Optional
from models import TodoItem

logger = logging.getLogger(__name__)


class TodoList:
    def __init__(self) -> None:
        self._items: List[TodoItem] = []
        self._next_id: int = 0

    @property
    def next_id(self) -> int:
        return self._next_id

    def items(self) -> List[TodoItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, text: str) -> Optional[int]:
        if not text.strip():
            return None
        item = TodoItem(id=self._next_id, text=text)
        self._next_id += 1
        self._items.append(item)
        logger.debug("Item %d added: %r", item.id, item.text)
        return item.id

    def remove_item_by_id(self, item_id: int) -> bool:
        for idx, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[idx]
                return True
        logger.debug("Item id %d not found, delete skipped", item_id)
        return False

    def remove_item_by_index(self, index: int) -> bool:
        if index < 0 or index >= len(self._items):
            return False
        del self._items[index]
        return True

    # Reconciler entry point; To-Do items have no status to change.
    remove_task_by_id = remove_item_by_id
