"""Notion REST client for the task database.

:class:`NotionClient` is the single gateway between the CLI and Notion.  It
owns the request headers, exposes one method per task action, builds the JSON
body for that action and maps the JSON response back onto a
:class:`~notion_cli.notion_api.data_models.NotionTask`.

Each method performs exactly one HTTP round trip and nothing is retried:

* ``requests`` failing before a response    -> :class:`TransportError`
* a response with a non-2xx status           -> :class:`RemoteRequestError`
* a 2xx response without the required fields -> :class:`RemoteSchemaError`

The client keeps no state besides its configuration and uses a fresh
``requests.request`` call each time, so one instance may be shared freely.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import requests
from requests.exceptions import InvalidHeader
from requests.utils import check_header_validity

from ..utils.logger import get_logger
from . import properties
from .data_models import NotionTask, TaskPriority, TaskStatus
from .errors import ConfigurationError, RemoteRequestError, RemoteSchemaError, TransportError
from .schemas import PageResponse, page_to_task, parse_page, parse_query, result_has_id

NOTION_API_VERSION = "2022-06-28"
DEFAULT_BASE_URL = "https://api.notion.com"
DEFAULT_TIMEOUT = 30

log = get_logger(__name__)


def _build_headers(token: str) -> Dict[str, str]:
    authorization = f"Bearer {token}"
    try:
        authorization.encode("latin-1")
        check_header_validity(("Authorization", authorization))
    except (UnicodeEncodeError, InvalidHeader) as e:
        raise ConfigurationError(f"Failed to create authorization header: {e}") from e
    return {
        "Authorization": authorization,
        "Notion-Version": NOTION_API_VERSION,
        "Content-Type": "application/json",
    }


class NotionClient:
    """Maps task operations onto pages of one Notion database."""

    def __init__(
        self,
        token: str,
        database_id: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        self._headers = _build_headers(token)
        self.database_id = database_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config, base_url: str = DEFAULT_BASE_URL) -> "NotionClient":
        return cls(config.notion_token, config.database_id, base_url=base_url)

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    # ------------------------------------------------------------------
    # transport
    # ------------------------------------------------------------------
    def _send(self, method: str, path: str, payload: Dict[str, Any], action: str) -> requests.Response:
        url = f"{self.base_url}{path}"
        log.debug("%s %s (%s)", method, path, action)
        try:
            response = requests.request(
                method, url, headers=self._headers, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"Failed to send {action} request: {e}") from e

        log.debug("%s %s -> %s", method, path, response.status_code)
        if not 200 <= response.status_code < 300:
            raise RemoteRequestError(response.status_code, response.text, action=action)
        return response

    @staticmethod
    def _json(response: requests.Response, action: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RemoteSchemaError(f"Failed to parse {action} response: {e}") from e

    def _patch_page(self, task_id: str, payload: Dict[str, Any], action: str) -> PageResponse:
        response = self._send("PATCH", f"/v1/pages/{task_id}", payload, action)
        return parse_page(self._json(response, action))

    @staticmethod
    def _echo_task(page: PageResponse) -> NotionTask:
        """Record holding only id, title and status from a partial-update echo."""
        props = page.properties
        return NotionTask(
            id=page.id,
            title=props.title_text or "",
            status=TaskStatus.from_remote(props.status_name),
        )

    # ------------------------------------------------------------------
    # task operations
    # ------------------------------------------------------------------
    def create_task(self, title: str) -> NotionTask:
        """Create a not-started task named ``title`` in the configured database."""
        payload = properties.create_page_payload(self.database_id, title)
        response = self._send("POST", "/v1/pages", payload, "create task")
        page = parse_page(self._json(response, "create task"))
        return NotionTask(id=page.id, title=title, status=TaskStatus.NOT_STARTED, url=page.url)

    def list_tasks(self) -> List[NotionTask]:
        """Return the tasks of the first result page, in the order Notion sent them."""
        path = f"/v1/databases/{self.database_id}/query"
        response = self._send("POST", path, properties.query_payload(), "list tasks")
        query = parse_query(self._json(response, "list tasks"))

        if query.has_more:
            log.warning(
                "Notion reported more results (cursor %s); only the first page is listed",
                query.next_cursor,
            )

        tasks = []
        for item in query.results:
            if not result_has_id(item):
                log.warning("Skipping query result without an id")
                continue
            tasks.append(page_to_task(parse_page(item)))
        return tasks

    def update_status(self, task_id: str, status: Union[TaskStatus, str]) -> NotionTask:
        if not isinstance(status, TaskStatus):
            status = TaskStatus.parse(status)
        payload = properties.update_property_payload(
            properties.STATUS_PROPERTY, properties.status_value(status)
        )
        page = self._patch_page(task_id, payload, "update task")
        task = self._echo_task(page)
        if page.properties.status_name is None:
            task.status = status
        return task

    def set_priority(self, task_id: str, priority: Union[TaskPriority, str]) -> NotionTask:
        if not isinstance(priority, TaskPriority):
            priority = TaskPriority.parse(priority)
        payload = properties.update_property_payload(
            properties.PRIORITY_PROPERTY, properties.select_value(priority)
        )
        page = self._patch_page(task_id, payload, "set task priority")
        task = self._echo_task(page)
        echoed = page.properties.priority_name
        task.priority = TaskPriority.from_remote(echoed) if echoed is not None else priority
        return task

    def set_due_date(self, task_id: str, due_date: str) -> NotionTask:
        payload = properties.update_property_payload(
            properties.DUE_DATE_PROPERTY, properties.date_value(due_date)
        )
        page = self._patch_page(task_id, payload, "set task due date")
        task = self._echo_task(page)
        task.due_date = page.properties.due_start or due_date
        return task

    def set_description(self, task_id: str, description: str) -> NotionTask:
        payload = properties.update_property_payload(
            properties.DESCRIPTION_PROPERTY, properties.rich_text_value(description)
        )
        page = self._patch_page(task_id, payload, "set task description")
        task = self._echo_task(page)
        echoed = page.properties.description_text
        task.description = echoed if echoed is not None else description
        return task

    def add_tags(self, task_id: str, tags_csv: str) -> NotionTask:
        """Replace the task's tags with the comma-separated ``tags_csv``."""
        tags = properties.split_tags(tags_csv)
        payload = properties.update_property_payload(
            properties.TAGS_PROPERTY, properties.multi_select_value(tags)
        )
        page = self._patch_page(task_id, payload, "set task tags")
        task = self._echo_task(page)
        task.tags = page.properties.tag_names if page.properties.tags else tags
        return task

    def delete_task(self, task_id: str) -> bool:
        """Archive the page; Notion keeps it in the trash."""
        self._send("PATCH", f"/v1/pages/{task_id}", properties.archive_payload(), "delete task")
        return True
