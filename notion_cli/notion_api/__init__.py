"""
Notion API layer package.
Maps task operations onto Notion pages over the REST API.
"""

from .client import DEFAULT_BASE_URL, NOTION_API_VERSION, NotionClient
from .data_models import NotionTask, TaskPriority, TaskStatus
from .errors import (
    ConfigurationError,
    InvalidEnumValue,
    NotionCLIError,
    RemoteRequestError,
    RemoteSchemaError,
    TransportError,
)

__all__ = [
    'NotionClient',
    'NotionTask',
    'TaskStatus',
    'TaskPriority',
    'NotionCLIError',
    'ConfigurationError',
    'TransportError',
    'RemoteRequestError',
    'RemoteSchemaError',
    'InvalidEnumValue',
    'DEFAULT_BASE_URL',
    'NOTION_API_VERSION',
]
