"""Builders for the JSON bodies sent to the Notion API.

Property names match the columns of the task database:

    Name (title), Status (status), Priority (select), Due Date (date),
    Tags (multi_select), Description (rich_text)

Update payloads always name exactly one property so that a setter never
touches columns it was not asked to change.
"""
from __future__ import annotations

from typing import Any, Dict, List

from .data_models import TaskPriority, TaskStatus

NAME_PROPERTY = "Name"
STATUS_PROPERTY = "Status"
PRIORITY_PROPERTY = "Priority"
DUE_DATE_PROPERTY = "Due Date"
TAGS_PROPERTY = "Tags"
DESCRIPTION_PROPERTY = "Description"


def _text_item(content: str) -> Dict[str, Any]:
    return {"type": "text", "text": {"content": content, "link": None}}


def title_value(text: str) -> Dict[str, Any]:
    return {"title": [_text_item(text)]}


def rich_text_value(text: str) -> Dict[str, Any]:
    return {"rich_text": [_text_item(text)]}


def status_value(status: TaskStatus) -> Dict[str, Any]:
    return {"status": {"name": status.value}}


def select_value(priority: TaskPriority) -> Dict[str, Any]:
    return {"select": {"name": priority.value}}


def date_value(start: str) -> Dict[str, Any]:
    return {"date": {"start": start}}


def multi_select_value(names: List[str]) -> Dict[str, Any]:
    return {"multi_select": [{"name": name} for name in names]}


def split_tags(tags_csv: str) -> List[str]:
    """Split a comma-separated tag string.

    Whitespace around each tag is trimmed, order and duplicates are kept and
    pieces left empty after trimming are dropped (Notion rejects empty option
    names).  An empty string therefore yields ``[]``, which clears the tags.
    """
    if not tags_csv:
        return []
    return [tag.strip() for tag in tags_csv.split(",") if tag.strip()]


def create_page_payload(database_id: str, title: str) -> Dict[str, Any]:
    """Body for ``POST /v1/pages``: a new task in ``database_id``, not started."""
    return {
        "parent": {"database_id": database_id},
        "properties": {
            NAME_PROPERTY: title_value(title),
            STATUS_PROPERTY: status_value(TaskStatus.NOT_STARTED),
        },
    }


def update_property_payload(name: str, value: Dict[str, Any]) -> Dict[str, Any]:
    """Body for ``PATCH /v1/pages/{id}`` changing the single property ``name``."""
    return {"properties": {name: value}}


def archive_payload() -> Dict[str, Any]:
    return {"archived": True}


def query_payload() -> Dict[str, Any]:
    # Unfiltered, unsorted: filtering happens client-side.
    return {}
