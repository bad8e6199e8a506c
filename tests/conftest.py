import json

import pytest
import requests

from notion_cli.notion_api.client import NotionClient

BASE_URL = "http://notion.test"


def make_response(status_code=200, body=None, text=None):
    """Build a real ``requests.Response`` carrying ``body`` as JSON (or raw ``text``)."""
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body if body is not None else {})
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


def notion_page(
    page_id="task-id",
    title=None,
    status=None,
    priority=None,
    due_date=None,
    tags=None,
    description=None,
    url=None,
):
    """A Notion page object holding only the properties that were given."""
    properties = {}
    if title is not None:
        properties["Name"] = {
            "id": "title",
            "type": "title",
            "title": [{"type": "text", "text": {"content": title, "link": None}, "plain_text": title}],
        }
    if status is not None:
        properties["Status"] = {"id": "status", "type": "status", "status": {"id": "s", "name": status, "color": "default"}}
    if priority is not None:
        properties["Priority"] = {"id": "priority", "type": "select", "select": {"id": "p", "name": priority, "color": "red"}}
    if due_date is not None:
        properties["Due Date"] = {"id": "due", "type": "date", "date": {"start": due_date, "end": None, "time_zone": None}}
    if tags is not None:
        properties["Tags"] = {
            "id": "tags",
            "type": "multi_select",
            "multi_select": [{"id": f"{t}-id", "name": t, "color": "blue"} for t in tags],
        }
    if description is not None:
        properties["Description"] = {
            "id": "description",
            "type": "rich_text",
            "rich_text": [{"type": "text", "text": {"content": description, "link": None}, "plain_text": description}],
        }
    page = {
        "object": "page",
        "id": page_id,
        "created_time": "2024-01-20T12:00:00.000Z",
        "last_edited_time": "2024-01-20T12:00:00.000Z",
        "archived": False,
        "properties": properties,
    }
    if url is not None:
        page["url"] = url
    return page


@pytest.fixture
def client():
    return NotionClient("test-token", "database-id", base_url=BASE_URL)


@pytest.fixture
def fake_request(mocker):
    """Patch the HTTP call made by the client; set ``return_value``/``side_effect`` per test."""
    return mocker.patch("notion_cli.notion_api.client.requests.request")


@pytest.fixture
def respond(fake_request):
    def _respond(status_code=200, body=None, text=None):
        fake_request.return_value = make_response(status_code, body, text)
        return fake_request

    return _respond


@pytest.fixture
def page():
    return notion_page
