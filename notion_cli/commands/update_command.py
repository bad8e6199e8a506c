"""
Handlers for the commands that change a single property of a task:
'status' (and its 'progress' / 'check' / 'uncheck' shortcuts), 'priority',
'due-date', 'tags' and 'description'.

Notion echoes the page after each update; the task printed afterwards only
shows the field that was just changed.
"""
from rich.console import Console

from ..notion_api.data_models import TaskPriority, TaskStatus
from ..utils.format_utils import render_task_details

_STATUS_MESSAGES = {
    TaskStatus.NOT_STARTED: "Marked task as not started",
    TaskStatus.IN_PROGRESS: "Marked task as in progress",
    TaskStatus.DONE: "Marked task as completed",
}


def _report(message, task):
    console = Console()
    console.print(message)
    render_task_details(task, console)
    return task


def handle_status(client, args):
    status = args.status if isinstance(args.status, TaskStatus) else TaskStatus.parse(args.status)
    task = client.update_status(args.task_id, status)
    return _report(_STATUS_MESSAGES[status], task)


def handle_priority(client, args):
    priority = args.priority if isinstance(args.priority, TaskPriority) else TaskPriority.parse(args.priority)
    task = client.set_priority(args.task_id, priority)
    return _report(f"Set priority to {priority.value}", task)


def handle_due_date(client, args):
    task = client.set_due_date(args.task_id, args.due_date)
    return _report(f"Set due date to {args.due_date}", task)


def handle_tags(client, args):
    task = client.add_tags(args.task_id, args.tags)
    if task.tags:
        return _report(f"Set tags to {', '.join(task.tags)}", task)
    return _report("Cleared tags", task)


def handle_description(client, args):
    task = client.set_description(args.task_id, args.description)
    return _report("Updated description", task)
