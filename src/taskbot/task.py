"""Task data model for taskbot.

Tasks come in three variants (todo, deadline and event). The variants are
independent dataclasses sharing the same small surface rather than
subclasses of a common base; ``Task`` is the union of the three.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class TaskKind(Enum):
    """Task variants, valued by their display tag."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def _render_base(kind: TaskKind, name: str, complete: bool) -> str:
    marker = "X" if complete else " "
    return f"[{kind.value}][{marker}] {name}"


@dataclass
class Todo:
    """A plain task with nothing but a name."""

    kind: ClassVar[TaskKind] = TaskKind.TODO

    name: str
    complete: bool = False

    def is_complete(self) -> bool:
        return self.complete

    def mark_complete(self):
        self.complete = True

    def get_name(self) -> str:
        return self.name

    def render(self) -> str:
        return _render_base(self.kind, self.name, self.complete)

    def __str__(self) -> str:
        return self.render()


@dataclass
class Deadline:
    """A task that has to be done by a given (free text) date."""

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    name: str
    due_date: str
    complete: bool = False

    def is_complete(self) -> bool:
        return self.complete

    def mark_complete(self):
        self.complete = True

    def get_name(self) -> str:
        return self.name

    def render(self) -> str:
        return f"{_render_base(self.kind, self.name, self.complete)} (by: {self.due_date})"

    def __str__(self) -> str:
        return self.render()


@dataclass
class Event:
    """A task that happens at a given (free text) time."""

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    name: str
    at: str
    complete: bool = False

    def is_complete(self) -> bool:
        return self.complete

    def mark_complete(self):
        self.complete = True

    def get_name(self) -> str:
        return self.name

    def render(self) -> str:
        return f"{_render_base(self.kind, self.name, self.complete)} (at: {self.at})"

    def __str__(self) -> str:
        return self.render()


Task = Union[Todo, Deadline, Event]


def make_task(kind: TaskKind, name: str, extra: Optional[str] = None) -> Task:
    """Build a task of the given kind.

    Args:
        kind: Which variant to build.
        name: Task name. Not validated here; callers reject empty names.
        extra: The ``/by`` date for deadlines or the ``/at`` time for events.

    Raises:
        ValueError: If ``extra`` is missing for a deadline or an event.
    """
    if kind is TaskKind.TODO:
        return Todo(name)
    if extra is None:
        raise ValueError(f"{kind.name.lower()} tasks need a date or time")
    if kind is TaskKind.DEADLINE:
        return Deadline(name, extra)
    return Event(name, extra)
