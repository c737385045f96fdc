"""
trello://info resource - Server information and configuration status.
"""

from mcp.types import Resource

from config import ConfigError, load_settings, resolve_config


RESOURCE = Resource(
    uri="trello://info",
    name="Trello Server Info",
    mimeType="text/plain",
    description="Information about this Trello MCP server and its current configuration"
)

VERSION = "0.1.0"


def _config_status() -> str:
    try:
        config = resolve_config(load_settings())
    except ConfigError as e:
        return f"Status: not configured\n{e}"

    return (
        f"Status: configured\n"
        f"API key: {config.api_key[:8]}...\n"
        f"Board ID: {config.board_id}\n"
        f"Default list ID: {config.default_list_id or 'not set'}"
    )


def read() -> str:
    """Read the info resource."""
    return f"""Trello MCP Server v{VERSION}

A Model Context Protocol server for working with Trello boards, lists and cards.

Tools:
- trello_list, trello_add, trello_update, trello_delete, trello_done
- trello_boards, trello_lists
- trello_setup

{_config_status()}
"""
