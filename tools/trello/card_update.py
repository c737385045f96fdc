"""
Trello card update — partial update of name, description, due date, list or closed flag.
"""

import logging

from mcp.types import Tool, TextContent

from tools.trello.client import trello_request
from tools.trello.context import ToolContext

# argument name -> Trello card field
UPDATABLE_FIELDS = {
    "name": "name",
    "desc": "desc",
    "closed": "closed",
    "list_id": "idList",
    "due": "due",
}

TOOL = Tool(
    name="trello_update",
    description=(
        "Update a Trello card. Only the fields you pass are changed. "
        "Set closed=true to archive the card, or list_id to move it."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "card_id": {
                "type": "string",
                "description": "The Trello card ID (or short link)"
            },
            "name": {
                "type": "string",
                "description": "New card name"
            },
            "desc": {
                "type": "string",
                "description": "New card description"
            },
            "closed": {
                "type": "boolean",
                "description": "Archive (true) or reopen (false) the card"
            },
            "list_id": {
                "type": "string",
                "description": "Move the card to this list"
            },
            "due": {
                "type": "string",
                "description": "New due date (ISO 8601)"
            }
        },
        "required": ["card_id"],
        "additionalProperties": False
    }
)


async def handle(arguments: dict, ctx: ToolContext) -> list[TextContent]:
    """Handle trello_update tool call."""
    card_id = arguments["card_id"]

    changes = {
        field: arguments[arg]
        for arg, field in UPDATABLE_FIELDS.items()
        if arguments.get(arg) is not None
    }

    try:
        config = ctx.config()
        if not changes:
            return ctx.reply(
                logging.WARNING,
                f"⚠️ No changes specified for card {card_id}. Provide at least one field to update."
            )
        await trello_request(config, "PUT", f"/cards/{card_id}", json=changes, transport=ctx.transport)
    except Exception as e:
        return ctx.reply(logging.ERROR, f"❌ Failed to update card: {e}")

    return ctx.reply(logging.INFO, f"✅ Updated card {card_id}")
