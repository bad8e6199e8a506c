"""
Test suite for the main CLI interface.
"""

import json

import pytest
from typer.testing import CliRunner

from notion_cli import __version__
from notion_cli.cli import app
from notion_cli.notion_api.data_models import NotionTask, TaskPriority, TaskStatus
from notion_cli.notion_api.errors import ConfigurationError, RemoteRequestError

runner = CliRunner()


@pytest.fixture
def fake_client(mocker):
    client = mocker.MagicMock()
    mocker.patch("notion_cli.cli.get_client", return_value=client)
    return client


class TestCLI:
    """Test cases for the main CLI application."""

    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Notion CLI" in result.output

    def test_cli_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    @pytest.mark.parametrize(
        "command",
        ["add", "list", "status", "progress", "check", "uncheck", "priority",
         "due-date", "tags", "description", "delete", "configure"],
    )
    def test_command_exists(self, command):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0

    def test_verbose_enables_debug_logging(self, fake_client, mocker):
        set_level = mocker.patch("notion_cli.cli.set_level")
        fake_client.list_tasks.return_value = []
        result = runner.invoke(app, ["--verbose", "list"])
        assert result.exit_code == 0
        set_level.assert_called_once()


class TestTaskCommands:
    def test_add(self, fake_client):
        fake_client.create_task.return_value = NotionTask(
            id="task-id", title="Buy milk", url="https://notion.so/task-id"
        )

        result = runner.invoke(app, ["add", "Buy milk"])

        assert result.exit_code == 0
        fake_client.create_task.assert_called_once_with("Buy milk")
        assert "Added task: Buy milk" in result.output
        assert "https://notion.so/task-id" in result.output

    def test_list_table(self, fake_client):
        fake_client.list_tasks.return_value = [
            NotionTask(id="a", title="Task 1", status=TaskStatus.DONE),
            NotionTask(id="b", title="Task 2"),
        ]

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Task 1" in result.output
        assert "Task 2" in result.output

    def test_list_empty(self, fake_client):
        fake_client.list_tasks.return_value = []
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "No tasks found" in result.output

    def test_list_filters_and_sorts(self, fake_client):
        fake_client.list_tasks.return_value = [
            NotionTask(id="a", title="Later", priority=TaskPriority.HIGH, due_date="2024-05-01", tags=["Work"]),
            NotionTask(id="b", title="Undated", priority=TaskPriority.HIGH, tags=["work"]),
            NotionTask(id="c", title="Sooner", priority=TaskPriority.HIGH, due_date="2024-01-01", tags=["homework"]),
            NotionTask(id="d", title="Low", priority=TaskPriority.LOW, tags=["work"]),
            NotionTask(id="e", title="Done", status=TaskStatus.DONE, priority=TaskPriority.HIGH, tags=["work"]),
        ]

        result = runner.invoke(
            app,
            ["list", "--status", "not started", "--priority", "high", "--tag", "WORK", "--sort-by-due", "--json"],
        )

        assert result.exit_code == 0
        assert [t["id"] for t in json.loads(result.stdout)] == ["c", "a", "b"]

    def test_list_invalid_status_fails_before_fetch(self, fake_client):
        result = runner.invoke(app, ["list", "--status", "finished"])
        assert result.exit_code == 1
        assert "finished" in result.output
        fake_client.list_tasks.assert_not_called()

    @pytest.mark.parametrize(
        "argv,expected",
        [
            (["status", "task-id", "in progress"], TaskStatus.IN_PROGRESS),
            (["progress", "task-id"], TaskStatus.IN_PROGRESS),
            (["check", "task-id"], TaskStatus.DONE),
            (["uncheck", "task-id"], TaskStatus.NOT_STARTED),
        ],
    )
    def test_status_commands(self, fake_client, argv, expected):
        fake_client.update_status.return_value = NotionTask(id="task-id", title="", status=expected)

        result = runner.invoke(app, argv)

        assert result.exit_code == 0
        fake_client.update_status.assert_called_once_with("task-id", expected)

    def test_status_rejects_unknown_value(self, fake_client):
        result = runner.invoke(app, ["status", "task-id", "finished"])
        assert result.exit_code == 1
        fake_client.update_status.assert_not_called()

    def test_priority(self, fake_client):
        fake_client.set_priority.return_value = NotionTask(id="task-id", title="t", priority=TaskPriority.HIGH)

        result = runner.invoke(app, ["priority", "task-id", "HIGH"])

        assert result.exit_code == 0
        fake_client.set_priority.assert_called_once_with("task-id", TaskPriority.HIGH)
        assert "High" in result.output

    def test_due_date(self, fake_client):
        fake_client.set_due_date.return_value = NotionTask(id="task-id", title="t", due_date="2024-01-20")

        result = runner.invoke(app, ["due-date", "task-id", "2024-01-20"])

        assert result.exit_code == 0
        fake_client.set_due_date.assert_called_once_with("task-id", "2024-01-20")

    @pytest.mark.parametrize("value", ["tomorrow", "2024-13-01", "2024-1-5", "2024-02-30"])
    def test_due_date_rejects_bad_dates(self, fake_client, value):
        result = runner.invoke(app, ["due-date", "task-id", value])
        assert result.exit_code == 1
        assert "invalid due date" in result.output
        assert value in result.output
        fake_client.set_due_date.assert_not_called()

    def test_tags(self, fake_client):
        fake_client.add_tags.return_value = NotionTask(id="task-id", title="t", tags=["a", "b", "c"])

        result = runner.invoke(app, ["tags", "task-id", "a, b ,c"])

        assert result.exit_code == 0
        fake_client.add_tags.assert_called_once_with("task-id", "a, b ,c")
        assert "a, b, c" in result.output

    def test_description(self, fake_client):
        fake_client.set_description.return_value = NotionTask(id="task-id", title="t", description="Some notes")

        result = runner.invoke(app, ["description", "task-id", "Some notes"])

        assert result.exit_code == 0
        fake_client.set_description.assert_called_once_with("task-id", "Some notes")

    def test_delete(self, fake_client):
        fake_client.delete_task.return_value = True
        result = runner.invoke(app, ["delete", "task-id"])
        assert result.exit_code == 0
        fake_client.delete_task.assert_called_once_with("task-id")
        assert "Deleted task" in result.output


class TestCLIErrors:
    """Test error handling in CLI commands."""

    def test_invalid_command(self):
        result = runner.invoke(app, ["nonexistent-command"])
        assert result.exit_code != 0

    def test_remote_error_is_reported(self, fake_client):
        fake_client.delete_task.side_effect = RemoteRequestError(404, "object_not_found", action="delete task")

        result = runner.invoke(app, ["delete", "task-id"])

        assert result.exit_code == 1
        assert "404" in result.output
        assert "object_not_found" in result.output

    def test_missing_configuration(self, mocker):
        mocker.patch("notion_cli.cli.load_env_vars")
        mocker.patch("notion_cli.cli.load_config", side_effect=ConfigurationError("NOTION_TOKEN environment variable not set"))

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "NOTION_TOKEN" in result.output

    @pytest.mark.parametrize(
        "argv,expected",
        [
            (["status", "task-id", "bogus"], "Invalid status"),
            (["priority", "task-id", "bogus"], "Invalid priority"),
            (["list", "--priority", "bogus"], "Invalid priority"),
        ],
    )
    def test_bad_choice_reported_before_configuration(self, mocker, argv, expected):
        mocker.patch("notion_cli.cli.load_env_vars")
        load_config = mocker.patch(
            "notion_cli.cli.load_config", side_effect=ConfigurationError("NOTION_TOKEN environment variable not set")
        )

        result = runner.invoke(app, argv)

        assert result.exit_code == 1
        assert expected in result.output
        assert "bogus" in result.output
        assert "NOTION_TOKEN" not in result.output
        load_config.assert_not_called()


def test_configure_writes_config(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setenv("NOTION_CLI_CONFIG", str(path))

    result = runner.invoke(app, ["configure", "--token", "secret", "--database-id", "db-1"])

    assert result.exit_code == 0
    assert json.loads(path.read_text()) == {"notion_token": "secret", "database_id": "db-1"}
