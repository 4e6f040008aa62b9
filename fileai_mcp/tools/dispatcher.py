from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from fileai_mcp.config.settings import Settings
from fileai_mcp.logging.logger import Log
from fileai_mcp.matching.matcher import find_artifact_by_name
from fileai_mcp.remote.base import BaseFileAIClient
from fileai_mcp.tools.definitions import GET_FILE_DETAILS, LIST_FILES, UPLOAD_AND_PROCESS
from fileai_mcp.tools.exceptions import MissingArgumentError, NotFoundError, UnknownToolError
from fileai_mcp.tools.formatter import ReportFormatter
from fileai_mcp.upload.orchestrator import UploadOrchestrator, build_orchestrator


@dataclass(frozen=True)
class ToolReport:
    """Text returned to the host; is_error marks a failed call."""

    text: str
    is_error: bool = False


class ToolDispatcher:
    """Routes a tool call to its handler and turns every failure into a report."""

    def __init__(
        self,
        orchestrator: UploadOrchestrator,
        client: BaseFileAIClient,
        formatter: ReportFormatter,
    ) -> None:
        self._orchestrator = orchestrator
        self._client = client
        self._formatter = formatter
        self._handlers: dict[str, Callable[[Mapping[str, Any]], str]] = {
            UPLOAD_AND_PROCESS: self._upload_and_process,
            LIST_FILES: self._list_files,
            GET_FILE_DETAILS: self._get_file_details,
        }

    def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolReport:
        """Execute one tool call. Never raises for business-logic errors."""
        Log.info(f"Tool call: {name}")
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(f"Unknown tool: {name}")
            return ToolReport(text=handler(arguments or {}))
        except Exception as exc:
            Log.exception(f"Tool call failed: {exc}", tool=name)
            return ToolReport(text=self._formatter.error(exc), is_error=True)

    def _upload_and_process(self, arguments: Mapping[str, Any]) -> str:
        file_path = _require_str(arguments, "filePath")
        result = self._orchestrator.upload_and_process(file_path)
        return self._formatter.operation_result(result)

    def _list_files(self, arguments: Mapping[str, Any]) -> str:
        records = self._client.list_artifacts()
        Log.info(f"Listed {len(records)} files")
        return self._formatter.file_list(records)

    def _get_file_details(self, arguments: Mapping[str, Any]) -> str:
        file_name = _require_str(arguments, "fileName")
        record = find_artifact_by_name(self._client.list_artifacts(), file_name)
        if record is None:
            raise NotFoundError(f"File not found: {file_name}")
        return self._formatter.file_details(record)


def _require_str(arguments: Mapping[str, Any], key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value:
        raise MissingArgumentError(f"'{key}' must be a non-empty string")
    return value


def build_dispatcher(settings: Settings, client: BaseFileAIClient) -> ToolDispatcher:
    """Build a ToolDispatcher with all required collaborators."""
    return ToolDispatcher(
        orchestrator=build_orchestrator(settings, client),
        client=client,
        formatter=ReportFormatter(settings.summary_preview_chars),
    )
