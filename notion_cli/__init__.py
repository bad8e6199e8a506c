"""
Notion CLI: Command-line interface for managing tasks stored in a Notion database.

Tasks are pages of a Notion database with Name, Status, Priority, Due Date,
Tags and Description properties; every command maps onto one Notion API call.
"""

__version__ = "1.0.0"

# Import the main CLI app for entry point
from .cli import app

__all__ = ["app", "__version__"]
