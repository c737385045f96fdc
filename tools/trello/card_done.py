"""
Mark a Trello card as done by archiving it.
"""

import logging

from mcp.types import Tool, TextContent

from tools.trello.client import trello_request
from tools.trello.context import ToolContext

TOOL = Tool(
    name="trello_done",
    description="Mark a card as done (archive it). Archived cards can be reopened with trello_update closed=false.",
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
    """Handle trello_done tool call."""
    card_id = arguments["card_id"]

    try:
        config = ctx.config()
        await trello_request(
            config, "PUT", f"/cards/{card_id}",
            json={"closed": True},
            transport=ctx.transport,
        )
    except Exception as e:
        return ctx.reply(logging.ERROR, f"❌ Failed to mark card as done: {e}")

    return ctx.reply(logging.INFO, f"✅ Marked card as done: {card_id}")
