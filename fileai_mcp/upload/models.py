from dataclasses import dataclass

from fileai_mcp.remote.models import ArtifactRecord


@dataclass(frozen=True)
class ResolvedResult:
    """The uploaded file was matched and processed by the backend."""

    upload_id: str
    record: ArtifactRecord


@dataclass(frozen=True)
class PendingResult:
    """The upload succeeded but processing had not finished within the poll budget."""

    upload_id: str


OperationResult = ResolvedResult | PendingResult
