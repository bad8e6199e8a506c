"""
Configuration utilities for notion-cli.

Two values are needed: the Notion integration token and the id of the task
database.  They come from the JSON config file when it exists, otherwise from
the ``NOTION_TOKEN`` / ``NOTION_DATABASE_ID`` environment variables (which may
be set in a ``.env`` file).
"""

import json
import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from ..notion_api.errors import ConfigurationError
from .logger import get_logger

APP_NAME = "notion-cli"
ENV_FILE_NAME = ".notion-cli.env"
TOKEN_ENV = "NOTION_TOKEN"
DATABASE_ENV = "NOTION_DATABASE_ID"
CONFIG_PATH_ENV = "NOTION_CLI_CONFIG"

log = get_logger(__name__)


class NotionConfig(BaseModel):
    notion_token: str
    database_id: str


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .env in the current directory
    2. .notion-cli.env in the current directory
    3. .notion-cli.env in the user's home directory
    Variables already present in the environment are never overridden.
    """
    for candidate in (Path(".env"), Path(ENV_FILE_NAME), Path.home() / ENV_FILE_NAME):
        if candidate.exists():
            load_dotenv(candidate)


def config_path() -> Path:
    """Location of config.json in the platform's config directory."""
    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        return Path(override)
    return Path(typer.get_app_dir(APP_NAME)) / "config.json"


def config_from_env() -> NotionConfig:
    token = os.getenv(TOKEN_ENV)
    if not token:
        raise ConfigurationError(f"{TOKEN_ENV} environment variable not set")
    database_id = os.getenv(DATABASE_ENV)
    if not database_id:
        raise ConfigurationError(f"{DATABASE_ENV} environment variable not set")
    return NotionConfig(notion_token=token, database_id=database_id)


def load_config() -> NotionConfig:
    """Read the config file if present, else fall back to the environment."""
    path = config_path()
    if not path.exists():
        return config_from_env()

    log.debug("Reading configuration from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as cf:
            return NotionConfig.model_validate(json.load(cf))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e


def save_config(config: NotionConfig) -> Path:
    """Write ``config`` to the config file and return its path."""
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as cf:
        json.dump(config.model_dump(), cf, indent=2)
    return path
