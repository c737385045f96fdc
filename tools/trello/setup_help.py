"""
Trello setup instructions — static text, no API calls.
"""

import logging

from mcp.types import Tool, TextContent

from config import CONFIG_FILE, ENV_VARS
from tools.trello.context import ToolContext

TOOL = Tool(
    name="trello_setup",
    description="Show Trello setup instructions: where to get an API key, token and board ID, and how to configure them.",
    inputSchema={
        "type": "object",
        "properties": {},
        "additionalProperties": False
    }
)

SETUP_TEXT = f"""🎯 TRELLO SETUP
========================

1. GET API KEY: https://trello.com/app-key
2. GET API TOKEN: https://trello.com/1/authorize?expiration=never&scope=read,write&response_type=token&name=TrelloMCP&key=YOUR_API_KEY
3. GET BOARD ID: From Trello URL (trello.com/b/BOARD_ID/...), or run trello_boards once key and token are set

Set environment variables for the server:
  {ENV_VARS['api_key']}=...
  {ENV_VARS['api_token']}=...
  {ENV_VARS['board_id']}=...
  {ENV_VARS['default_list_id']}=...   (optional, used by trello_add)

Or add a "trello" section to {CONFIG_FILE}:
{{
  "trello": {{
    "api_key": "...",
    "api_token": "...",
    "board_id": "...",
    "default_list_id": "..."
  }}
}}
"""


async def handle(arguments: dict, ctx: ToolContext) -> list[TextContent]:
    """Handle trello_setup tool call."""
    return ctx.reply(logging.INFO, SETUP_TEXT)
