"""Ordered, capacity-bounded task list."""

import logging
from typing import Iterator, List, Optional, Tuple

from .messages import MSG_MATCHES_HEADER, format_list_item
from .task import Task

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


class TaskBotError(Exception):
    """Base exception for taskbot."""


class TaskListFullError(TaskBotError):
    """Raised when adding to a list that is already at capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Task list is full ({capacity} tasks)")


class TaskList:
    """Tasks in insertion order.

    Positions are 0-based for ``get`` and ``remove`` and 1-based for
    ``mark_complete``, matching the numbers shown to the user.
    """

    def __init__(self, tasks: Optional[List[Task]] = None,
                 capacity: int = DEFAULT_CAPACITY,
                 case_sensitive: bool = True):
        self._tasks: List[Task] = list(tasks or [])
        self.capacity = capacity
        self.case_sensitive = case_sensitive

    def size(self) -> int:
        return len(self._tasks)

    def is_full(self) -> bool:
        return len(self._tasks) >= self.capacity

    def get(self, index: int) -> Task:
        """Return the task at a 0-based position."""
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"No task at position {index}")
        return self._tasks[index]

    def add(self, task: Task):
        if self.is_full():
            raise TaskListFullError(self.capacity)
        self._tasks.append(task)
        logger.debug(f"Added task {task.render()!r} ({len(self._tasks)} total)")

    def remove(self, index: int) -> Task:
        """Remove and return the task at a 0-based position."""
        task = self.get(index)
        del self._tasks[index]
        logger.debug(f"Removed task {task.render()!r} ({len(self._tasks)} left)")
        return task

    def mark_complete(self, number: int):
        """Mark the task with the given 1-based number as complete."""
        self.get(number - 1).mark_complete()

    def matches(self, query: str) -> Iterator[Tuple[int, Task]]:
        """Yield ``(number, task)`` for every task whose name contains query."""
        needle = query if self.case_sensitive else query.lower()
        for number, task in enumerate(self._tasks, start=1):
            name = task.name if self.case_sensitive else task.name.lower()
            if needle in name:
                yield number, task

    def get_matches(self, query: str) -> str:
        """Render the tasks matching ``query``.

        Each match keeps its list number, so it can be passed straight to
        ``done`` or ``delete``. Returns an empty string when nothing matches.
        """
        lines = [format_list_item(number, task.render())
                 for number, task in self.matches(query)]
        if not lines:
            return ""
        return "\n".join([MSG_MATCHES_HEADER] + lines)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList(size={len(self._tasks)}, capacity={self.capacity})"
