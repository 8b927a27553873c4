"""Tests for TaskList."""

import pytest

from taskbot.task import Deadline, Event, Todo
from taskbot.task_list import TaskList, TaskListFullError


class TestTaskList:
    """Basic list operations."""

    def test_add_keeps_insertion_order(self):
        """Test tasks stay in the order they were added."""
        tasks = TaskList()
        tasks.add(Todo("a"))
        tasks.add(Todo("b"))
        assert tasks.size() == 2
        assert [t.name for t in tasks] == ["a", "b"]

    def test_duplicates_allowed(self):
        """Test identical tasks can coexist."""
        tasks = TaskList()
        tasks.add(Todo("a"))
        tasks.add(Todo("a"))
        assert len(tasks) == 2

    def test_get_out_of_range(self):
        """Test get rejects positions outside the list."""
        tasks = TaskList([Todo("a")])
        with pytest.raises(IndexError):
            tasks.get(1)
        with pytest.raises(IndexError):
            tasks.get(-1)

    def test_remove_returns_task(self):
        """Test remove hands back the removed task."""
        first = Todo("a")
        tasks = TaskList([first, Todo("b")])
        assert tasks.remove(0) is first
        assert tasks.get(0).name == "b"

    def test_mark_complete_is_one_based(self):
        """Test mark_complete takes the number shown to the user."""
        tasks = TaskList([Todo("a"), Todo("b")])
        tasks.mark_complete(2)
        assert not tasks.get(0).is_complete()
        assert tasks.get(1).is_complete()

    def test_capacity(self):
        """Test adding to a full list raises."""
        tasks = TaskList(capacity=2)
        tasks.add(Todo("a"))
        assert not tasks.is_full()
        tasks.add(Todo("b"))
        assert tasks.is_full()
        with pytest.raises(TaskListFullError) as excinfo:
            tasks.add(Todo("c"))
        assert excinfo.value.capacity == 2
        assert tasks.size() == 2


class TestGetMatches:
    """Substring search over task names."""

    def setup_method(self):
        self.tasks = TaskList([
            Todo("read book"),
            Deadline("return book", "June 6th"),
            Event("project meeting", "Aug 6th"),
        ])

    def test_matches_keep_list_numbers(self):
        """Test matches are numbered by their list position."""
        assert self.tasks.get_matches("book") == (
            "Here are the matching tasks in your list:\n"
            "1.[T][ ] read book\n"
            "2.[D][ ] return book (by: June 6th)"
        )

    def test_only_names_are_searched(self):
        """Test dates and times are not searched."""
        assert self.tasks.get_matches("June") == ""

    def test_no_match_is_empty_string(self):
        """Test no matches gives an empty string."""
        assert self.tasks.get_matches("xyz") == ""

    def test_case_sensitive_by_default(self):
        """Test search is case-sensitive by default."""
        assert self.tasks.get_matches("BOOK") == ""

    def test_case_insensitive_option(self):
        """Test case-insensitive search when configured."""
        tasks = TaskList([Todo("Read Book")], case_sensitive=False)
        assert tasks.get_matches("book") == (
            "Here are the matching tasks in your list:\n1.[T][ ] Read Book"
        )
