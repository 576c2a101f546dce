"""MCP server exposing the `deliberatethinking` tool over stdio.

Tools:
- deliberatethinking: record a thinking step (plain, revision or branch)

stdout carries the protocol; logs go to stderr.

Argument checking is left to the core validator so that a rejected step
names the offending field. Errors raised from `call_tool` reach the caller as
a tool result with `isError` set and the error message as its text.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from core import DeliberateThinking, __version__
from core.api import TOOL_DESCRIPTION, TOOL_NAME
from core.errors import DeliberateThinkingError
from core.models import ThoughtRequest

logger = logging.getLogger(__name__)


class DeliberateThinkingMCPServer:
    """Binds one DeliberateThinking instance to an MCP low-level server."""

    def __init__(self, system: Optional[DeliberateThinking] = None, name: str = "deliberate-thinking") -> None:
        self.system = system if system is not None else DeliberateThinking()
        self.server = Server(name, version=__version__)
        self.server.list_tools()(self.list_tools)
        self.server.call_tool(validate_input=False)(self.call_tool)

    async def list_tools(self) -> list[Tool]:
        """List all available tools."""
        return [
            Tool(
                name=TOOL_NAME,
                description=TOOL_DESCRIPTION,
                inputSchema=ThoughtRequest.model_json_schema(by_alias=True),
            )
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Route a tool call to the ledger and return the JSON response."""
        if name != TOOL_NAME:
            raise ValueError(f"Unknown tool: {name}")

        request = ThoughtRequest.model_validate(arguments)
        try:
            payload = await self.system.submit_json(request)
        except DeliberateThinkingError as e:
            logger.warning(f"Error in tool {name}: {e.message}")
            raise

        return [TextContent(type="text", text=payload)]

    async def serve_stdio(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream, self.server.create_initialization_options())

    def run(self) -> None:
        """Run the MCP server until stdin closes."""
        logger.info("Starting Deliberate Thinking MCP Server")
        asyncio.run(self.serve_stdio())
