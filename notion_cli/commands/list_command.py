from rich.console import Console

from ..notion_api.data_models import TaskPriority, TaskStatus
from ..utils.format_utils import filter_tasks, render_task_table, sort_by_due_date, tasks_to_json


def _parse(kind, value):
    if not value or isinstance(value, kind):
        return value or None
    return kind.parse(value)


def handle_list(client, args):
    """
    Lists tasks from the Notion database, optionally filtered by status,
    priority and/or tag, and optionally sorted by due date.

    Filters are validated before the database is queried.
    """
    status = _parse(TaskStatus, getattr(args, "status", None))
    priority = _parse(TaskPriority, getattr(args, "priority", None))

    tasks = client.list_tasks()
    tasks = filter_tasks(tasks, status=status, priority=priority, tag=getattr(args, "tag", None))
    if getattr(args, "sort_by_due", False):
        tasks = sort_by_due_date(tasks)

    if getattr(args, "json", False):
        print(tasks_to_json(tasks))
    elif not tasks:
        print("No tasks found")
    else:
        render_task_table(tasks, Console())
    return tasks
