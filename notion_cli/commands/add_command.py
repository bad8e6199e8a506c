from rich.console import Console
from rich.markup import escape


def handle_add(client, args):
    """
    Creates a new task in the Notion database.
    """
    task = client.create_task(args.title)

    console = Console()
    console.print(f"Added task: [green]{escape(task.title)}[/] (ID: {task.id})")
    if task.url:
        console.print(f"View in Notion: [blue underline]{task.url}[/]")
    return task
