"""
Trello list listing — the columns of the configured board.
"""

import logging

from mcp.types import Tool, TextContent

from tools.trello.client import trello_request
from tools.trello.context import ToolContext
from tools.trello.formatting import format_list, format_many

TOOL = Tool(
    name="trello_lists",
    description="List all lists on your current board, with the IDs to use for list_id.",
    inputSchema={
        "type": "object",
        "properties": {},
        "additionalProperties": False
    }
)


async def handle(arguments: dict, ctx: ToolContext) -> list[TextContent]:
    """Handle trello_lists tool call."""
    try:
        config = ctx.config()
        lists = await trello_request(
            config, "GET", f"/boards/{config.board_id}/lists",
            params={"fields": "name,closed,pos"},
            transport=ctx.transport,
        )
        if not lists:
            return ctx.reply(logging.INFO, "📭 No lists found.")
        text = f"📋 Found {len(lists)} list(s):\n\n{format_many(lists, format_list)}"
    except Exception as e:
        return ctx.reply(logging.ERROR, f"❌ Failed to list lists: {e}")

    return ctx.reply(logging.INFO, text)
