#!/usr/bin/env python3
"""
Trello MCP Server
A Model Context Protocol server for managing Trello boards, lists and cards.
"""

import asyncio
import logging
import os

from mcp.server import Server
from mcp.types import Tool, TextContent, Resource
from mcp.server.stdio import stdio_server

import tools
import resources
from config import ConfigError, load_settings, resolve_config

# stdout carries the stdio transport, so logs go to stderr
DEBUG = os.environ.get("TRELLO_MCP_DEBUG", "0").lower() in {"1", "true", "yes"}
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("trello_mcp")

# Initialize the MCP server
app = Server("trello-mcp")


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available Trello tools."""
    return tools.TOOLS


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    return await tools.call_tool(name, arguments)


@app.list_resources()
async def list_resources() -> list[Resource]:
    """List available resources."""
    return resources.RESOURCES


@app.read_resource()
async def read_resource(uri) -> str:
    """Read a resource by URI."""
    return resources.read_resource(uri)


def check_config() -> bool:
    """Log whether the Trello configuration is usable; never raises."""
    try:
        config = resolve_config(load_settings())
    except ConfigError as e:
        logger.warning("⚠️  Trello tools: %s", e)
        return False
    logger.info("✅ Trello tools loaded. Board ID: %s", config.board_id)
    return True


async def main():
    """Run the MCP server."""
    check_config()
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
