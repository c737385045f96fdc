"""
Tool context — what the host hands every Trello tool: settings to read and a place to log.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

import httpx
from mcp.types import TextContent

from config import TrelloConfig, load_settings, resolve_config


@dataclass
class ToolContext:
    settings: Mapping = field(default_factory=dict)
    environ: Mapping = field(default_factory=lambda: os.environ)
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("trello_mcp"))
    # Tests swap in httpx.MockTransport here
    transport: httpx.AsyncBaseTransport | None = None

    def config(self) -> TrelloConfig:
        """Resolve the Trello configuration for this invocation."""
        return resolve_config(self.settings, self.environ)

    def emit(self, level: int, message: str) -> None:
        self.logger.log(level, message)

    def reply(self, level: int, text: str) -> list[TextContent]:
        """Emit `text` at `level` and wrap it as the tool result."""
        self.emit(level, text)
        return [TextContent(type="text", text=text)]


def default_context() -> ToolContext:
    """Context for a live tool call: settings file plus process environment."""
    return ToolContext(settings=load_settings())
