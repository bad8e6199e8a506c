"""Error types raised by the Notion API layer.

Every error derives from :class:`NotionCLIError` so the CLI can report any of
them the same way.  Nothing in this package retries: an error always ends the
current operation.
"""
from __future__ import annotations

from typing import Iterable, Optional


class NotionCLIError(Exception):
    """Base class for all notion-cli errors."""


class ConfigurationError(NotionCLIError):
    """Raised when the token or database id is missing or unusable."""


class TransportError(NotionCLIError):
    """Raised when a request never produced a response (DNS, connection, timeout)."""


class RemoteRequestError(NotionCLIError):
    """Raised when Notion answers with a non-2xx status."""

    def __init__(self, status: int, body: str, action: Optional[str] = None):
        self.status = status
        self.body = body
        self.action = action
        prefix = f"Failed to {action}." if action else "Request failed."
        super().__init__(f"{prefix} Status: {status}, Error: {body}")


class RemoteSchemaError(NotionCLIError):
    """Raised when a 2xx response lacks the fields an operation needs."""


class InvalidEnumValue(NotionCLIError, ValueError):
    """Raised when a status or priority string matches none of the known names."""

    def __init__(self, kind: str, value: str, allowed: Iterable[str]):
        self.kind = kind
        self.value = value
        self.allowed = list(allowed)
        choices = ", ".join(f"'{name}'" for name in self.allowed)
        super().__init__(f"Invalid {kind} '{value}'. Expected one of: {choices}")
