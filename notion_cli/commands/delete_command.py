"""
Handles the 'delete' command: archives a task page in Notion.
"""
from rich.console import Console


def handle_delete(client, args):
    """Archives the task; Notion keeps archived pages in its trash."""
    client.delete_task(args.task_id)
    Console().print(f"Deleted task {args.task_id}")
