import json
from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..notion_api.data_models import NotionTask, TaskPriority, TaskStatus

STATUS_STYLES = {
    TaskStatus.NOT_STARTED: "red",
    TaskStatus.IN_PROGRESS: "yellow",
    TaskStatus.DONE: "green",
}

PRIORITY_STYLES = {
    TaskPriority.HIGH: "bold red",
    TaskPriority.MEDIUM: "yellow",
    TaskPriority.LOW: "dim",
}


def filter_tasks(
    tasks: Iterable[NotionTask],
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
    tag: Optional[str] = None,
) -> List[NotionTask]:
    """
    Keep the tasks matching every given criterion.

    ``tag`` is a case-insensitive substring match against any of a task's tags.
    """
    result = []
    needle = tag.lower() if tag else None
    for task in tasks:
        if status is not None and task.status != status:
            continue
        if priority is not None and task.priority != priority:
            continue
        if needle and not any(needle in t.lower() for t in task.tags):
            continue
        result.append(task)
    return result


def sort_by_due_date(tasks: Iterable[NotionTask]) -> List[NotionTask]:
    """Earliest due date first; undated tasks keep their order at the end."""
    # ISO dates sort correctly as strings.
    return sorted(tasks, key=lambda t: (t.due_date is None, t.due_date or ""))


def tasks_to_json(tasks: Iterable[NotionTask]) -> str:
    return json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)


def render_task_table(tasks: List[NotionTask], console: Optional[Console] = None) -> None:
    """Print tasks as a rich table."""
    console = console or Console()
    table = Table(show_header=True, header_style="bold")
    table.add_column("", no_wrap=True)
    table.add_column("Task", style="bold")
    table.add_column("Priority")
    table.add_column("Due Date", style="cyan")
    table.add_column("Tags", style="magenta")
    table.add_column("ID", style="dim", overflow="fold")

    for task in tasks:
        status_style = STATUS_STYLES[task.status]
        priority = "-"
        if task.priority:
            priority = f"[{PRIORITY_STYLES[task.priority]}]{task.priority.value}[/]"
        table.add_row(
            f"[{status_style}]{escape('[' + task.status_symbol + ']')}[/]",
            escape(task.title),
            priority,
            task.due_date or "-",
            escape(", ".join(task.tags)) or "-",
            task.id or "",
        )

    console.print(table)
    console.print(f"\n{len(tasks)} task(s)")


def render_task_details(task: NotionTask, console: Optional[Console] = None) -> None:
    """Print a single task, one field per line, skipping empty fields."""
    console = console or Console()
    status_style = STATUS_STYLES[task.status]
    console.print(f"[bold green]{escape(task.title)}[/] (ID: {task.id})")
    console.print(f"  Status:      [{status_style}]{task.status.value}[/]")
    if task.priority:
        console.print(f"  Priority:    [{PRIORITY_STYLES[task.priority]}]{task.priority.value}[/]")
    if task.due_date:
        console.print(f"  Due Date:    {task.due_date}")
    if task.tags:
        console.print(f"  Tags:        {escape(', '.join(task.tags))}")
    if task.description:
        console.print(f"  Description: {escape(task.description)}")
    if task.url:
        console.print(f"  [blue underline]{task.url}[/]")
