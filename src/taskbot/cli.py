"""Command-line interface for taskbot."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import get_config, load_config
from .interpreter import Interpreter
from .task_list import TaskList
from .ui import Ui

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_session(ui: Ui, interpreter: Interpreter, tasks: TaskList, stream,
                exit_command: str = "bye") -> int:
    """Feed lines from ``stream`` to the interpreter until exit or EOF.

    Returns the number of commands executed.
    """
    executed = 0
    ui.show_welcome()
    for raw in stream:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        if line.strip() == exit_command:
            break
        ui.show_message(interpreter.execute(line, tasks))
        executed += 1
    ui.show_farewell()
    logger.debug(f"Session ended after {executed} commands, {tasks.size()} tasks")
    return executed


@click.command()
@click.option("--config", "config_path",
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--max-tasks", type=click.IntRange(min=1),
              help="Maximum number of tasks in the list")
def main(config_path: Optional[Path], verbose: bool, max_tasks: Optional[int]):
    """Taskbot - keep track of todos, deadlines and events."""
    config = load_config(config_path) if config_path else get_config()
    setup_logging("DEBUG" if verbose else config.log_level)

    tasks = TaskList(
        capacity=max_tasks or config.max_tasks,
        case_sensitive=config.case_sensitive_search,
    )
    run_session(
        Ui(config),
        Interpreter(),
        tasks,
        sys.stdin,
        exit_command=config.exit_command,
    )


if __name__ == "__main__":
    main()
