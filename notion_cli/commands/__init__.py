"""
Command handlers for notion-cli.

Each module defines the handler(s) for one family of CLI commands.  Handlers
receive a ready :class:`~notion_cli.notion_api.client.NotionClient` and the
parsed arguments, print their result and let errors propagate to the CLI.
"""
