#!/usr/bin/env python3
import logging
import re
from datetime import datetime
from types import SimpleNamespace
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .notion_api.client import NotionClient
from .notion_api.data_models import TaskPriority, TaskStatus
from .notion_api.errors import InvalidEnumValue, NotionCLIError
from .utils.config import load_config, load_env_vars
from .utils.logger import set_level

from .commands.add_command import handle_add
from .commands.configure_command import handle_configure
from .commands.delete_command import handle_delete
from .commands.list_command import handle_list
from .commands.update_command import (
    handle_description,
    handle_due_date,
    handle_priority,
    handle_status,
    handle_tags,
)

_DUE_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Create app instance
app = typer.Typer(
    name="notion-cli",
    help="Notion CLI - Manage the tasks of a Notion database from the terminal.",
    no_args_is_help=True,
)


def get_client() -> NotionClient:
    """Build a client from the config file or environment."""
    load_env_vars()
    return NotionClient.from_config(load_config())


def _fail(message: str) -> None:
    Console(stderr=True).print(f"[bold red]Error:[/] {escape(message)}")
    raise typer.Exit(code=1)


def _run(handler, **kwargs):
    """Run a command handler against a fresh client, reporting errors and exiting non-zero."""
    try:
        return handler(get_client(), SimpleNamespace(**kwargs))
    except NotionCLIError as e:
        _fail(str(e))


def _choice(parse, value):
    """Parse a status or priority argument before any client is built."""
    if value is None:
        return None
    try:
        return parse(value)
    except InvalidEnumValue as e:
        _fail(str(e))


def _version_callback(value: bool):
    if value:
        print(f"notion-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests and responses."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """Notion CLI - Manage the tasks of a Notion database from the terminal."""
    if verbose:
        set_level(logging.DEBUG)


@app.command("add")
def add(title: str = typer.Argument(..., help="Task title")):
    """Add a new task to Notion."""
    _run(handle_add, title=title)


@app.command("list")
def list_tasks(
    status: Optional[str] = typer.Option(None, "--status", "-s", help="Only tasks with this status ('Not started', 'In progress', 'Done')."),
    priority: Optional[str] = typer.Option(None, "--priority", "-p", help="Only tasks with this priority (High, Medium, Low)."),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Only tasks with a tag containing this text."),
    sort_by_due: bool = typer.Option(False, "--sort-by-due", help="Sort by due date, undated tasks last."),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """List tasks in the database."""
    _run(
        handle_list,
        status=_choice(TaskStatus.parse, status),
        priority=_choice(TaskPriority.parse, priority),
        tag=tag,
        sort_by_due=sort_by_due,
        json=json_output,
    )


@app.command("status")
def status(
    task_id: str = typer.Argument(..., help="Task ID"),
    value: str = typer.Argument(..., help="'Not started', 'In progress' or 'Done'"),
):
    """Set the status of a task."""
    _run(handle_status, task_id=task_id, status=_choice(TaskStatus.parse, value))


@app.command("progress")
def progress(task_id: str = typer.Argument(..., help="Task ID")):
    """Mark a task as in progress."""
    _run(handle_status, task_id=task_id, status=TaskStatus.IN_PROGRESS)


@app.command("check")
def check(task_id: str = typer.Argument(..., help="Task ID")):
    """Mark a task as completed."""
    _run(handle_status, task_id=task_id, status=TaskStatus.DONE)


@app.command("uncheck")
def uncheck(task_id: str = typer.Argument(..., help="Task ID")):
    """Mark a task as not started."""
    _run(handle_status, task_id=task_id, status=TaskStatus.NOT_STARTED)


@app.command("priority")
def priority(
    task_id: str = typer.Argument(..., help="Task ID"),
    value: str = typer.Argument(..., help="High, Medium or Low"),
):
    """Set the priority of a task."""
    _run(handle_priority, task_id=task_id, priority=_choice(TaskPriority.parse, value))


@app.command("due-date")
def due_date(
    task_id: str = typer.Argument(..., help="Task ID"),
    date: str = typer.Argument(..., help="Due date (YYYY-MM-DD)"),
):
    """Set the due date of a task."""
    try:
        if not _DUE_DATE_RE.match(date):
            raise ValueError(date)
        datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        _fail(f"invalid due date '{date}', expected YYYY-MM-DD")
    _run(handle_due_date, task_id=task_id, due_date=date)


@app.command("tags")
def tags(
    task_id: str = typer.Argument(..., help="Task ID"),
    value: str = typer.Argument(..., help="Comma-separated tags; replaces the current tags"),
):
    """Set the tags of a task."""
    _run(handle_tags, task_id=task_id, tags=value)


@app.command("description")
def description(
    task_id: str = typer.Argument(..., help="Task ID"),
    text: str = typer.Argument(..., help="Description text"),
):
    """Set the description of a task."""
    _run(handle_description, task_id=task_id, description=text)


@app.command("delete")
def delete(task_id: str = typer.Argument(..., help="Task ID")):
    """Delete (archive) a task."""
    _run(handle_delete, task_id=task_id)


@app.command("configure")
def configure(
    token: str = typer.Option(..., "--token", prompt=True, hide_input=True, help="Notion integration token."),
    database_id: str = typer.Option(..., "--database-id", prompt=True, help="ID of the task database."),
):
    """Save the Notion token and database id to the config file."""
    handle_configure(SimpleNamespace(token=token, database_id=database_id))


if __name__ == "__main__":
    app()
