from typing import Any
from unittest.mock import MagicMock

import anyio
import mcp.types as types

from fileai_mcp.server.mcp_server import SERVER_NAME, build_server, to_mcp_tool
from fileai_mcp.tools.definitions import TOOL_DEFINITIONS
from fileai_mcp.tools.dispatcher import ToolDispatcher, ToolReport


def _make_dispatcher(report: ToolReport) -> MagicMock:
    dispatcher = MagicMock(spec=ToolDispatcher)
    dispatcher.call.return_value = report
    return dispatcher


def _call_tool(
    dispatcher: MagicMock, name: str, arguments: dict[str, Any]
) -> types.CallToolResult:
    """Drive the registered call_tool handler the way the SDK does for a request."""
    server = build_server(dispatcher)
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = anyio.run(handler, request)
    return result.root


class TestToolDeclarations:
    def test_declares_three_tools(self) -> None:
        names = [definition.name for definition in TOOL_DEFINITIONS]
        assert names == ["upload_and_process", "list_files", "get_file_details"]

    def test_converts_to_mcp_tool(self) -> None:
        tool = to_mcp_tool(TOOL_DEFINITIONS[0])
        assert isinstance(tool, types.Tool)
        assert tool.name == "upload_and_process"
        assert tool.inputSchema["required"] == ["filePath"]

    def test_list_files_takes_no_arguments(self) -> None:
        tool = to_mcp_tool(TOOL_DEFINITIONS[1])
        assert tool.inputSchema == {"type": "object", "properties": {}}


class TestBuildServer:
    def test_registers_list_and_call_handlers(self) -> None:
        server = build_server(MagicMock(spec=ToolDispatcher))
        assert server.name == SERVER_NAME
        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers


class TestCallTool:
    def test_success_report_becomes_text_content(self) -> None:
        dispatcher = _make_dispatcher(ToolReport(text="📂 No files found in your File.ai account."))

        result = _call_tool(dispatcher, "list_files", {})

        assert result.isError is False
        assert [content.text for content in result.content] == [
            "📂 No files found in your File.ai account."
        ]

    def test_forwards_name_and_arguments_to_dispatcher(self) -> None:
        dispatcher = _make_dispatcher(ToolReport(text="details"))

        _call_tool(dispatcher, "get_file_details", {"fileName": "invoice"})

        dispatcher.call.assert_called_once_with("get_file_details", {"fileName": "invoice"})

    def test_error_report_is_flagged_as_tool_error(self) -> None:
        dispatcher = _make_dispatcher(
            ToolReport(text="❌ Error: File not found: report", is_error=True)
        )

        result = _call_tool(dispatcher, "get_file_details", {"fileName": "report"})

        assert result.isError is True
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text.startswith("❌ Error:")
        assert "File not found: report" in result.content[0].text
