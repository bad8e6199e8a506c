from rich.console import Console

from ..utils.config import NotionConfig, save_config


def handle_configure(args):
    """Stores the Notion token and database id in the config file."""
    path = save_config(NotionConfig(notion_token=args.token, database_id=args.database_id))
    Console().print(f"Configuration saved to {path}")
    return path
