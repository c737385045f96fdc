"""
Trello card creation — create a card in a list, falling back to the configured default list.
"""

import logging

from mcp.types import Tool, TextContent

from tools.trello.client import trello_request
from tools.trello.context import ToolContext

TOOL = Tool(
    name="trello_add",
    description=(
        "Add a new card to Trello. The card goes into list_id, or into the "
        "configured default list (TRELLO_DEFAULT_LIST_ID) when list_id is omitted."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Card title"
            },
            "desc": {
                "type": "string",
                "description": "Card description (Markdown supported)"
            },
            "list_id": {
                "type": "string",
                "description": "List to place the card in"
            },
            "due": {
                "type": "string",
                "description": "Due date in ISO 8601 format (e.g. '2025-03-01')"
            },
            "labels": {
                "type": "string",
                "description": "Comma-separated Trello label IDs to apply"
            }
        },
        "required": ["name"],
        "additionalProperties": False
    }
)


async def handle(arguments: dict, ctx: ToolContext) -> list[TextContent]:
    """Handle trello_add tool call."""
    try:
        config = ctx.config()
    except Exception as e:
        return ctx.reply(logging.ERROR, f"❌ Failed to create card: {e}")

    list_id = arguments.get("list_id") or config.default_list_id
    if not list_id:
        return ctx.reply(logging.WARNING, "⚠️ No list ID provided and no default list configured.")

    body = {"idList": list_id, "name": arguments["name"]}
    if arguments.get("desc"):
        body["desc"] = arguments["desc"]
    if arguments.get("due"):
        body["due"] = arguments["due"]
    if arguments.get("labels"):
        body["idLabels"] = [l.strip() for l in arguments["labels"].split(",") if l.strip()]

    try:
        card = await trello_request(config, "POST", "/cards", json=body, transport=ctx.transport)
        text = f"✅ Created card: {card.get('name')} ({card.get('shortLink')})"
    except Exception as e:
        return ctx.reply(logging.ERROR, f"❌ Failed to create card: {e}")

    return ctx.reply(logging.INFO, text)
