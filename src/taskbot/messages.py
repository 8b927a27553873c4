"""User-facing message templates."""

MSG_LIST_HEADER = "Here are the tasks in your list:"
MSG_MATCHES_HEADER = "Here are the matching tasks in your list:"
MSG_LIST_ITEM = "{index}.{rendering}"
MSG_TASK_ADDED = "Got it. I've added this task:"
MSG_TASK_COMPLETE = "Nice! I've marked this task as done:"
MSG_TASK_DELETED = "Noted. I've removed this task:"
MSG_TASK_COUNT = "Now you have {count} tasks in the list."
TASK_INDENT = "   "

ERR_OUT_OF_BOUNDS = "Please enter a number between 1 and {size}!"
ERR_TASK_COMPLETE = "Task {name} is already complete!"
ERR_NOT_FOUND = "Sorry, I do not recognize that command."
ERR_NO_TASKS = "No tasks available!"
ERR_TODO_FORMAT = "Error in command usage. Usage: todo <name>"
ERR_DEADLINE_FORMAT = "Error in command usage. Usage: deadline <name> /by <date>"
ERR_EVENT_FORMAT = "Error in command usage. Usage: event <name> /at <time>"
ERR_DONE_FORMAT = "Please provide a valid number! Usage: done <num>"
ERR_DELETE_FORMAT = "Please provide a valid number! Usage: delete <num>"
ERR_FIND_FORMAT = "Please provide a query! Usage: find <query>"
ERR_MAX_TASKS = "Sorry! You have reached maximum Task capacity."
ERR_NO_MATCHES = "No tasks match given query."

GREETING = "Hello! I'm Taskbot, what can I do for you?"
FAREWELL = "Bye. Hope to see you again soon!"
BORDER = "-" * 51


def format_list_item(index: int, rendering: str) -> str:
    """Format one numbered line of a task listing (1-based index)."""
    return MSG_LIST_ITEM.format(index=index, rendering=rendering)


def format_task_count(count: int) -> str:
    return MSG_TASK_COUNT.format(count=count)
