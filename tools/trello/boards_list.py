"""
Trello board listing — every board the token's member can see.
"""

import logging

from mcp.types import Tool, TextContent

from tools.trello.client import trello_request
from tools.trello.context import ToolContext
from tools.trello.formatting import format_board, format_many

TOOL = Tool(
    name="trello_boards",
    description="List all your Trello boards, with the IDs to use for TRELLO_BOARD_ID.",
    inputSchema={
        "type": "object",
        "properties": {},
        "additionalProperties": False
    }
)


async def handle(arguments: dict, ctx: ToolContext) -> list[TextContent]:
    """Handle trello_boards tool call."""
    try:
        config = ctx.config()
        boards = await trello_request(
            config, "GET", "/members/me/boards",
            params={"fields": "name,url"},
            transport=ctx.transport,
        )
        if not boards:
            return ctx.reply(logging.INFO, "📭 No boards found.")
        text = f"📋 Found {len(boards)} board(s):\n\n{format_many(boards, format_board)}"
    except Exception as e:
        return ctx.reply(logging.ERROR, f"❌ Failed to list boards: {e}")

    return ctx.reply(logging.INFO, text)
