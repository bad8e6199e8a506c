"""
Data models representing Notion task pages and their enumerated properties.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import InvalidEnumValue


class TaskStatus(str, Enum):
    """Value of the ``Status`` property; the enum value is Notion's option name."""

    NOT_STARTED = "Not started"
    IN_PROGRESS = "In progress"
    DONE = "Done"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text: str) -> "TaskStatus":
        """Strict, case-insensitive parse of user input."""
        wanted = (text or "").strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise InvalidEnumValue("status", text, [m.value for m in cls])

    @classmethod
    def from_remote(cls, name: Optional[str]) -> "TaskStatus":
        """Lenient parse of a status read back from Notion: unknown means not started."""
        if name is None:
            return cls.NOT_STARTED
        try:
            return cls.parse(name)
        except InvalidEnumValue:
            return cls.NOT_STARTED


class TaskPriority(str, Enum):
    """Value of the ``Priority`` select property."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text: str) -> "TaskPriority":
        wanted = (text or "").strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise InvalidEnumValue("priority", text, [m.value for m in cls])

    @classmethod
    def from_remote(cls, name: Optional[str]) -> Optional["TaskPriority"]:
        # Unknown priorities are dropped rather than defaulted.
        if name is None:
            return None
        try:
            return cls.parse(name)
        except InvalidEnumValue:
            return None


_STATUS_SYMBOLS = {
    TaskStatus.NOT_STARTED: " ",
    TaskStatus.IN_PROGRESS: "⏳",
    TaskStatus.DONE: "✓",
}


@dataclass
class NotionTask:
    title: str
    id: Optional[str] = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    priority: Optional[TaskPriority] = None
    due_date: Optional[str] = None  # ISO YYYY-MM-DD, passed through untouched
    tags: List[str] = field(default_factory=list)
    description: Optional[str] = None
    url: Optional[str] = None

    @property
    def status_symbol(self) -> str:
        return _STATUS_SYMBOLS[self.status]

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status.value,
            "priority": self.priority.value if self.priority else None,
            "due_date": self.due_date,
            "tags": list(self.tags),
            "description": self.description,
            "url": self.url,
        }
