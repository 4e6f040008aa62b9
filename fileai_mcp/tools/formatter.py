"""Text reports returned to the agent host."""

from collections.abc import Sequence

from fileai_mcp.remote.models import ArtifactRecord
from fileai_mcp.upload.models import OperationResult, PendingResult

UNKNOWN = "Unknown"
NO_SUMMARY = "No summary available"


class ReportFormatter:
    """Renders operation results and artifact records as markdown-ish text."""

    def __init__(self, summary_preview_chars: int = 150) -> None:
        self._summary_preview_chars = summary_preview_chars

    def operation_result(self, result: OperationResult) -> str:
        if isinstance(result, PendingResult):
            return self.pending(result.upload_id)
        return self.resolved(result.upload_id, result.record)

    def resolved(self, upload_id: str, record: ArtifactRecord) -> str:
        return (
            "🎉 File processed successfully!\n"
            "\n"
            f"📄 **File:** {record.file_name}\n"
            f"📊 **Classification:** {_or_unknown(record.file_class)}\n"
            f"🏢 **Organization:** {_or_unknown(record.owner_organization_name)}\n"
            "📝 **AI Summary:**\n"
            f"{record.summary or NO_SUMMARY}\n"
            "\n"
            "⚙️ **Technical Details:**\n"
            f"- Upload ID: {upload_id}\n"
            f"- File ID: {_or_unknown(record.file_id)}\n"
            f"- File Size: {_size(record.file_size_bytes)}\n"
            f"- Processing Status: {record.display_status}\n"
            f"- Created: {_or_unknown(record.created_at)}"
        )

    def pending(self, upload_id: str) -> str:
        return (
            f"✅ File uploaded successfully! (Upload ID: {upload_id})\n"
            "⏳ File is still processing. Use 'list_files' to check status later."
        )

    def file_list(self, records: Sequence[ArtifactRecord]) -> str:
        if not records:
            return "📂 No files found in your File.ai account."
        entries = "\n\n".join(
            self._list_entry(index, record) for index, record in enumerate(records, start=1)
        )
        return f"📁 **Your File.ai Documents ({len(records)} total):**\n\n{entries}"

    def file_details(self, record: ArtifactRecord) -> str:
        return (
            f"📄 **File Details: {record.file_name}**\n"
            "\n"
            f"📊 **Classification:** {_or_unknown(record.file_class)}\n"
            f"🏢 **Organization:** {_or_unknown(record.owner_organization_name)}\n"
            f"📈 **Status:** {record.display_status}\n"
            f"📦 **Size:** {_size(record.file_size_bytes)}\n"
            f"🆔 **File ID:** {_or_unknown(record.file_id)}\n"
            f"📅 **Created:** {_or_unknown(record.created_at)}\n"
            f"🔄 **Updated:** {_or_unknown(record.updated_at)}\n"
            "\n"
            "📝 **AI-Generated Summary:**\n"
            f"{record.summary or NO_SUMMARY}\n"
            "\n"
            "🔧 **Technical Metadata:**\n"
            f"- Upload ID: {_or_unknown(record.upload_id)}\n"
            f"- Schema ID: {_or_unknown(record.schema_id)}\n"
            f"- Reference ID: {_or_unknown(record.reference_id)}\n"
            f"- Is Duplicate: {_or_unknown(record.is_duplicate)}\n"
            f"- File Hash: {_or_unknown(record.content_hash)}\n"
            f"- Storage Path: {_or_unknown(record.storage_path)}"
        )

    def error(self, exc: BaseException) -> str:
        return f"❌ Error: {exc}"

    def summary_preview(self, summary: str | None) -> str:
        if not summary:
            return NO_SUMMARY
        if len(summary) > self._summary_preview_chars:
            return f"{summary[: self._summary_preview_chars]}..."
        return summary

    def _list_entry(self, index: int, record: ArtifactRecord) -> str:
        status = "✅" if record.is_processed else "⏳"
        return (
            f"{index}. {status} **{record.file_name}**\n"
            f"   📊 {record.file_class or 'Unknown type'}\n"
            f"   📝 {self.summary_preview(record.summary)}\n"
            f"   📅 {_or_unknown(record.created_at)}"
        )


def _or_unknown(value: object) -> str:
    return UNKNOWN if value is None or value == "" else str(value)


def _size(size_bytes: int | None) -> str:
    return UNKNOWN if size_bytes is None else f"{size_bytes} bytes"
