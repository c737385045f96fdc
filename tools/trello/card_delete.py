"""
Trello card deletion — permanent, unlike archiving with trello_done.
"""

import logging

from mcp.types import Tool, TextContent

from tools.trello.client import trello_request
from tools.trello.context import ToolContext

TOOL = Tool(
    name="trello_delete",
    description="Delete a Trello card permanently. To keep the card but hide it, use trello_done instead.",
    inputSchema={
        "type": "object",
        "properties": {
            "card_id": {
                "type": "string",
                "description": "The Trello card ID (or short link)"
            }
        },
        "required": ["card_id"],
        "additionalProperties": False
    }
)


async def handle(arguments: dict, ctx: ToolContext) -> list[TextContent]:
    """Handle trello_delete tool call."""
    card_id = arguments["card_id"]

    try:
        config = ctx.config()
        await trello_request(config, "DELETE", f"/cards/{card_id}", transport=ctx.transport)
    except Exception as e:
        return ctx.reply(logging.ERROR, f"❌ Failed to delete card: {e}")

    return ctx.reply(logging.INFO, f"🗑️ Permanently deleted card: {card_id}")
