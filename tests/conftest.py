"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskbot.config import Config, ConfigModel  # noqa: E402
from taskbot.interpreter import Interpreter  # noqa: E402
from taskbot.task import Deadline, Event, Todo  # noqa: E402
from taskbot.task_list import TaskList  # noqa: E402


@pytest.fixture(autouse=True)
def default_config(tmp_path):
    """Keep tests away from the user's real config file."""
    config = ConfigModel(data_dir=str(tmp_path / "taskbot"))
    Config._instance = config
    yield config
    Config._instance = None


@pytest.fixture
def interpreter():
    return Interpreter()


@pytest.fixture
def tasks():
    return TaskList()


@pytest.fixture
def populated():
    """A list with one task of each kind, the deadline already done."""
    return TaskList([
        Todo("read book"),
        Deadline("return book", "June 6th", complete=True),
        Event("project meeting", "Aug 6th 2-4pm"),
    ])
