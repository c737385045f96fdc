"""
Configuration management for the Trello MCP Server.
Resolves Trello credentials from host settings or the environment.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


CONFIG_DIR = Path.home() / ".config" / "trello-mcp"
CONFIG_FILE = CONFIG_DIR / "config.json"

# field -> environment variable fallback
ENV_VARS = {
    "api_key": "TRELLO_API_KEY",
    "api_token": "TRELLO_API_TOKEN",
    "board_id": "TRELLO_BOARD_ID",
    "default_list_id": "TRELLO_DEFAULT_LIST_ID",
}

REQUIRED_FIELDS = ("api_key", "api_token", "board_id")


class TrelloError(Exception):
    """Base class for every error a Trello tool reports back to the host."""


class ConfigError(TrelloError):
    """Required Trello settings are missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        names = ", ".join(ENV_VARS[field] for field in missing)
        super().__init__(
            f"Trello configuration incomplete. Missing: {names}. "
            f"Run trello_setup for setup instructions."
        )


@dataclass(frozen=True)
class TrelloConfig:
    api_key: str
    api_token: str
    board_id: str
    default_list_id: str | None = None


def _config_file() -> Path:
    override = os.environ.get("TRELLO_MCP_CONFIG")
    return Path(override).expanduser() if override else CONFIG_FILE


def _load_config() -> dict:
    """Load config from file, or return empty dict if not found."""
    path = _config_file()
    if path.exists():
        try:
            with open(path, 'r') as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError):
            return {}
    return {}


def load_settings() -> dict:
    """Get the trello section from the settings file, or empty dict."""
    section = _load_config().get("trello", {})
    return section if isinstance(section, dict) else {}


def resolve_config(settings: Mapping | None = None, environ: Mapping | None = None) -> TrelloConfig:
    """
    Build a TrelloConfig from host settings, falling back to the environment.

    Args:
        settings: Host-provided settings (keys: api_key, api_token, board_id,
            default_list_id). Takes priority over the environment.
        environ: Environment mapping, defaults to os.environ.

    Raises:
        ConfigError: If api_key, api_token or board_id cannot be resolved.
    """
    settings = settings or {}
    environ = os.environ if environ is None else environ

    values = {}
    for field, env_var in ENV_VARS.items():
        values[field] = settings.get(field) or environ.get(env_var) or None

    missing = [field for field in REQUIRED_FIELDS if not values[field]]
    if missing:
        raise ConfigError(missing)

    return TrelloConfig(**values)
