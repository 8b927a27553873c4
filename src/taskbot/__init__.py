"""Taskbot - a line-oriented assistant for todos, deadlines and events."""

__version__ = "0.1.0"

from .task import Todo, Deadline, Event, Task, TaskKind, make_task
from .task_list import TaskList, TaskBotError, TaskListFullError
from .interpreter import Interpreter

__all__ = [
    "Todo",
    "Deadline",
    "Event",
    "Task",
    "TaskKind",
    "make_task",
    "TaskList",
    "TaskBotError",
    "TaskListFullError",
    "Interpreter",
    "__version__",
]
