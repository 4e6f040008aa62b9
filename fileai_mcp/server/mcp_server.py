"""MCP stdio server exposing the File.ai tools."""

from typing import Any

import anyio.to_thread
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from fileai_mcp.tools.definitions import TOOL_DEFINITIONS, ToolDefinition
from fileai_mcp.tools.dispatcher import ToolDispatcher

SERVER_NAME = "fileai-mcp-server"
SERVER_VERSION = "1.0.0"


class ToolCallFailed(Exception):
    """Carries a failed tool report so the SDK returns it with isError set."""


def to_mcp_tool(definition: ToolDefinition) -> types.Tool:
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema,
    )


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Register list_tools and call_tool handlers backed by the dispatcher."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [to_mcp_tool(definition) for definition in TOOL_DEFINITIONS]

    @server.call_tool()
    async def handle_call_tool(
        name: str,
        arguments: dict[str, Any] | None,
    ) -> list[types.TextContent]:
        # Uploads block for minutes while polling; keep the stdio loop responsive.
        report = await anyio.to_thread.run_sync(dispatcher.call, name, arguments)
        if report.is_error:
            raise ToolCallFailed(report.text)
        return [types.TextContent(type="text", text=report.text)]

    return server


async def serve_stdio(server: Server) -> None:
    """Serve MCP requests over stdin/stdout until the host disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
