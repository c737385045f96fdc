"""
Trello MCP Tools - Tool definitions and dispatcher.
"""

import logging

from jsonschema import Draft202012Validator
from mcp.types import Tool, TextContent

from tools import trello
from tools.trello.context import ToolContext, default_context


# Collect all tools
TOOLS: list[Tool] = [
    *trello.TOOLS,
]

# Map tool names to handlers
_HANDLERS = {
    **trello.HANDLERS,
}

_VALIDATORS = {tool.name: Draft202012Validator(tool.inputSchema) for tool in TOOLS}


async def call_tool(name: str, arguments: dict | None, context: ToolContext | None = None) -> list[TextContent]:
    """Validate arguments against the tool's schema, then dispatch to its handler."""
    handler = _HANDLERS.get(name)
    if handler is None:
        raise ValueError(f"Unknown tool: {name}")

    ctx = context or default_context()
    arguments = arguments or {}

    error = next(iter(_VALIDATORS[name].iter_errors(arguments)), None)
    if error is not None:
        return ctx.reply(logging.WARNING, f"❌ Invalid arguments for {name}: {error.message}")

    return await handler(arguments, ctx)
