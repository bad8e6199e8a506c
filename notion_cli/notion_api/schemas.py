"""Typed models for the JSON returned by the Notion API.

Only the parts of a page this tool reads are modelled; everything else in a
response is ignored.  The page ``id`` is the one required field: a page
without it raises :class:`RemoteSchemaError`.  Every task property is
optional, and a property whose shape does not match is treated as absent.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .data_models import NotionTask, TaskPriority, TaskStatus
from .errors import RemoteSchemaError


class _ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TextContent(_ResponseModel):
    content: str = ""


class RichTextItem(_ResponseModel):
    type: Optional[str] = None
    text: Optional[TextContent] = None
    plain_text: Optional[str] = None

    @property
    def content(self) -> str:
        if self.text is not None:
            return self.text.content
        return self.plain_text or ""


class SelectOption(_ResponseModel):
    name: Optional[str] = None


class DateRange(_ResponseModel):
    start: Optional[str] = None
    end: Optional[str] = None
    time_zone: Optional[str] = None


class TitleProperty(_ResponseModel):
    title: List[RichTextItem] = []


class StatusProperty(_ResponseModel):
    status: Optional[SelectOption] = None


class SelectProperty(_ResponseModel):
    select: Optional[SelectOption] = None


class DateProperty(_ResponseModel):
    date: Optional[DateRange] = None


class MultiSelectProperty(_ResponseModel):
    multi_select: List[SelectOption] = []


class RichTextProperty(_ResponseModel):
    rich_text: List[RichTextItem] = []


def _first_text(items: List[RichTextItem]) -> Optional[str]:
    return items[0].content if items else None


class TaskProperties(_ResponseModel):
    name: Optional[TitleProperty] = Field(None, alias="Name")
    status: Optional[StatusProperty] = Field(None, alias="Status")
    priority: Optional[SelectProperty] = Field(None, alias="Priority")
    due_date: Optional[DateProperty] = Field(None, alias="Due Date")
    tags: Optional[MultiSelectProperty] = Field(None, alias="Tags")
    description: Optional[RichTextProperty] = Field(None, alias="Description")

    @field_validator("*", mode="wrap")
    @classmethod
    def _malformed_is_absent(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def title_text(self) -> Optional[str]:
        return _first_text(self.name.title) if self.name else None

    @property
    def status_name(self) -> Optional[str]:
        if self.status and self.status.status:
            return self.status.status.name
        return None

    @property
    def priority_name(self) -> Optional[str]:
        if self.priority and self.priority.select:
            return self.priority.select.name
        return None

    @property
    def due_start(self) -> Optional[str]:
        if self.due_date and self.due_date.date:
            return self.due_date.date.start
        return None

    @property
    def tag_names(self) -> List[str]:
        if not self.tags:
            return []
        return [option.name for option in self.tags.multi_select if option.name is not None]

    @property
    def description_text(self) -> Optional[str]:
        return _first_text(self.description.rich_text) if self.description else None


class PageResponse(_ResponseModel):
    id: str = Field(..., min_length=1)
    url: Optional[str] = None
    properties: TaskProperties = Field(default_factory=TaskProperties)

    @field_validator("url", "properties", mode="wrap")
    @classmethod
    def _malformed_is_empty(cls, value, handler, info):
        try:
            return handler(value)
        except ValidationError:
            return TaskProperties() if info.field_name == "properties" else None


class QueryResponse(_ResponseModel):
    results: List[Any]
    next_cursor: Optional[str] = None
    has_more: bool = False


def parse_page(data: Any) -> PageResponse:
    """Validate a page object, raising :class:`RemoteSchemaError` if it has no id."""
    try:
        return PageResponse.model_validate(data)
    except ValidationError as e:
        raise RemoteSchemaError(f"Malformed page in response: {e}") from e


def parse_query(data: Any) -> QueryResponse:
    try:
        return QueryResponse.model_validate(data)
    except ValidationError as e:
        raise RemoteSchemaError(f"Malformed query response: {e}") from e


def page_to_task(page: PageResponse) -> NotionTask:
    """Map every known property of ``page`` onto a :class:`NotionTask`."""
    props = page.properties
    return NotionTask(
        id=page.id,
        title=props.title_text or "",
        status=TaskStatus.from_remote(props.status_name),
        priority=TaskPriority.from_remote(props.priority_name),
        due_date=props.due_start,
        tags=props.tag_names,
        description=props.description_text,
        url=page.url,
    )


def result_has_id(item: Any) -> bool:
    return isinstance(item, dict) and bool(item.get("id"))
