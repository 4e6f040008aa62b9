from dataclasses import dataclass
from enum import Enum


class ArtifactStatus(str, Enum):
    """Backend processing status of an artifact."""

    PENDING = "pending"
    PROCESSED = "processed"


@dataclass(frozen=True)
class UploadRequest:
    """Metadata sent when registering an upload."""

    local_file_name: str
    content_type: str
    split_pages: bool = True
    lock_schema: bool = True


@dataclass(frozen=True)
class UploadTicket:
    """Registration response: correlation id and pre-signed transfer target."""

    upload_id: str
    transfer_url: str


@dataclass(frozen=True)
class ArtifactRecord:
    """The backend's view of one uploaded document and its processing outcome."""

    file_id: str | None
    upload_id: str | None
    file_name: str
    status: ArtifactStatus
    file_class: str | None = None
    owner_organization_name: str | None = None
    summary: str | None = None
    file_size_bytes: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    schema_id: str | None = None
    reference_id: str | None = None
    is_duplicate: bool | None = None
    content_hash: str | None = None
    storage_path: str | None = None
    status_label: str | None = None

    @property
    def is_processed(self) -> bool:
        return self.status is ArtifactStatus.PROCESSED

    @property
    def display_status(self) -> str:
        """Status as the backend reported it, falling back to the normalized value."""
        return self.status_label or self.status.value
