"""Command interpreter for taskbot.

Turns one raw input line into a change on a :class:`TaskList` and a
message for the user. Every failure is reported through the returned
message; nothing is raised to the caller.
"""

import logging
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Tuple

from . import messages
from .task import Task, TaskKind, make_task
from .task_list import TaskList

logger = logging.getLogger(__name__)

CommandHandler = Callable[[str, TaskList], str]

DEADLINE_SEPARATOR = " /by "
EVENT_SEPARATOR = " /at "


def split_command(line: str) -> Tuple[str, str]:
    """Split a line on its first space into ``(command, args)``."""
    command, _, args = line.partition(" ")
    return command, args


def _parse_number(args: str) -> Optional[int]:
    try:
        return int(args)
    except ValueError:
        return None


def _indented(task: Task) -> str:
    return f"{messages.TASK_INDENT}{task.render()}"


class Interpreter:
    """Dispatches commands against a fixed keyword table.

    The table is built once per interpreter and is read-only. The
    interpreter keeps no state between calls; the task list is owned by
    the caller and passed in on every :meth:`execute`.
    """

    def __init__(self):
        handlers: Dict[str, CommandHandler] = {
            "list": self.list_tasks,
            "done": self.complete_task,
            "todo": self.add_todo,
            "deadline": self.add_deadline,
            "event": self.add_event,
            "delete": self.delete_task,
            "find": self.find_tasks,
        }
        self._commands: Mapping[str, CommandHandler] = MappingProxyType(handlers)

    @property
    def commands(self) -> Mapping[str, CommandHandler]:
        return self._commands

    def execute(self, line: str, tasks: TaskList) -> str:
        """Run one command line against ``tasks`` and return the reply."""
        command, args = split_command(line)
        handler = self._commands.get(command)
        if handler is None:
            logger.debug(f"Unrecognized command: {command!r}")
            return messages.ERR_NOT_FOUND
        logger.debug(f"Dispatching {command!r} with args {args!r}")
        return handler(args, tasks)

    # Adding tasks

    def _add(self, task: Task, tasks: TaskList) -> str:
        tasks.add(task)
        logger.info(f"Added {task.kind.name.lower()}: {task.name}")
        return "\n".join([
            messages.MSG_TASK_ADDED,
            _indented(task),
            messages.format_task_count(tasks.size()),
        ])

    def add_todo(self, args: str, tasks: TaskList) -> str:
        if tasks.is_full():
            return messages.ERR_MAX_TASKS
        if args == "":
            return messages.ERR_TODO_FORMAT
        return self._add(make_task(TaskKind.TODO, args), tasks)

    def _add_timed(self, kind: TaskKind, separator: str, usage: str,
                   args: str, tasks: TaskList) -> str:
        if tasks.is_full():
            return messages.ERR_MAX_TASKS
        if separator not in args:
            return usage
        name, extra = args.split(separator, 1)
        if name == "":
            return usage
        return self._add(make_task(kind, name, extra), tasks)

    def add_deadline(self, args: str, tasks: TaskList) -> str:
        return self._add_timed(TaskKind.DEADLINE, DEADLINE_SEPARATOR,
                               messages.ERR_DEADLINE_FORMAT, args, tasks)

    def add_event(self, args: str, tasks: TaskList) -> str:
        return self._add_timed(TaskKind.EVENT, EVENT_SEPARATOR,
                               messages.ERR_EVENT_FORMAT, args, tasks)

    # Querying

    def list_tasks(self, args: str, tasks: TaskList) -> str:
        if tasks.size() == 0:
            return messages.ERR_NO_TASKS
        lines = [messages.MSG_LIST_HEADER]
        lines.extend(
            messages.format_list_item(number, task.render())
            for number, task in enumerate(tasks, start=1)
        )
        return "\n".join(lines)

    def find_tasks(self, args: str, tasks: TaskList) -> str:
        if tasks.size() == 0:
            return messages.ERR_NO_TASKS
        if args == "":
            return messages.ERR_FIND_FORMAT
        matching = tasks.get_matches(args)
        if matching == "":
            return messages.ERR_NO_MATCHES
        return matching

    # Changing existing tasks

    def _check_number(self, number: int, tasks: TaskList) -> Optional[str]:
        """Return an error message if ``number`` does not name a task."""
        if tasks.size() == 0:
            return messages.ERR_NO_TASKS
        if number < 1 or number > tasks.size():
            return messages.ERR_OUT_OF_BOUNDS.format(size=tasks.size())
        return None

    def complete_task(self, args: str, tasks: TaskList) -> str:
        number = _parse_number(args)
        if number is None:
            return messages.ERR_DONE_FORMAT
        error = self._check_number(number, tasks)
        if error:
            return error

        task = tasks.get(number - 1)
        if task.is_complete():
            return messages.ERR_TASK_COMPLETE.format(name=task.get_name())
        tasks.mark_complete(number)
        logger.info(f"Completed task {number}: {task.name}")
        return "\n".join([messages.MSG_TASK_COMPLETE, _indented(task)])

    def delete_task(self, args: str, tasks: TaskList) -> str:
        number = _parse_number(args)
        if number is None:
            return messages.ERR_DELETE_FORMAT
        error = self._check_number(number, tasks)
        if error:
            return error

        removed = tasks.remove(number - 1)
        logger.info(f"Deleted task {number}: {removed.name}")
        return "\n".join([
            messages.MSG_TASK_DELETED,
            _indented(removed),
            messages.format_task_count(tasks.size()),
        ])
