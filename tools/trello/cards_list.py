"""
Trello card listing — all cards on the configured board, or the cards of one list.
"""

import logging

from mcp.types import Tool, TextContent

from tools.trello.client import trello_request
from tools.trello.context import ToolContext
from tools.trello.formatting import format_card, format_many

CARD_FIELDS = "name,desc,url,shortLink,idList,closed,due,labels"

TOOL = Tool(
    name="trello_list",
    description=(
        "List all cards on your Trello board. "
        "Pass list_id to show only the cards of one list (see trello_lists for IDs)."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "list_id": {
                "type": "string",
                "description": "Only list cards in this Trello list. If omitted, shows the whole board."
            }
        },
        "required": [],
        "additionalProperties": False
    }
)


async def handle(arguments: dict, ctx: ToolContext) -> list[TextContent]:
    """Handle trello_list tool call."""
    list_id = arguments.get("list_id")

    try:
        config = ctx.config()
        path = f"/lists/{list_id}/cards" if list_id else f"/boards/{config.board_id}/cards"
        cards = await trello_request(
            config, "GET", path,
            params={"fields": CARD_FIELDS},
            transport=ctx.transport,
        )
        if not cards:
            return ctx.reply(logging.INFO, "📭 No cards found.")
        text = f"📋 Found {len(cards)} card(s):\n\n{format_many(cards, format_card)}"
    except Exception as e:
        return ctx.reply(logging.ERROR, f"❌ Failed to list cards: {e}")

    return ctx.reply(logging.INFO, text)
