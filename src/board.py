"""Board logic: holds the task list, ID management and task mutation.

Tasks live in one list in creation order. Columns are views filtered by
status at render time, so moving a task never reorders the list.
"""
import logging
from typing import Iterator, List, Optional
from models import Task, STATUSES, can_move

logger = logging.getLogger(__name__)


class Board:
    def __init__(self) -> None:
        self.tasks: List[Task] = []
        self._next_id: int = 0

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    @property
    def next_id(self) -> int:
        return self._next_id

    # -------------------- queries --------------------
    def all_tasks(self) -> List[Task]:
        return list(self.tasks)

    def tasks_by_status(self, status: str) -> Iterator[Task]:
        """Lazy view of the tasks in one column, in creation order."""
        return (t for t in self.tasks if t.status == status)

    def find(self, task_id: int) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self.tasks)

    # -------------------- task operations --------------------
    def add_task(self, text: str) -> Optional[int]:
        if not text.strip():
            return None
        task = Task(id=self._allocate_id(), text=text, status='todo')
        self.tasks.append(task)
        logger.debug("Task %d added: %r", task.id, task.text)
        return task.id

    def move_task_by_id(self, task_id: int, new_status: str) -> bool:
        if new_status not in STATUSES:
            logger.debug("Invalid status %r for task %d", new_status, task_id)
            return False
        task = self.find(task_id)
        if task is None:
            logger.debug("Task id %d not found, move to %r skipped", task_id, new_status)
            return False
        return self._move_found_task(task, new_status)

    def _move_found_task(self, task: Task, new_status: str) -> bool:
        if task.status == new_status:
            return False
        if not can_move(task.status, new_status):
            logger.debug("Task %d: %s -> %s is not a legal move", task.id, task.status, new_status)
            return False
        task.status = new_status
        return True

    def remove_task_by_id(self, task_id: int) -> bool:
        for idx, task in enumerate(self.tasks):
            if task.id == task_id:
                del self.tasks[idx]
                logger.debug("Task %d removed", task_id)
                return True
        logger.debug("Task id %d not found, delete skipped", task_id)
        return False

    def __str__(self) -> str:
        return ', '.join(
            f'{status}: {sum(1 for _ in self.tasks_by_status(status))} tasks' for status in STATUSES
        )
