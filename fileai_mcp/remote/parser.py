"""Builds typed records from raw File.ai JSON payloads."""

from typing import Any

from fileai_mcp.logging.logger import Log
from fileai_mcp.remote.exceptions import RemotePayloadError
from fileai_mcp.remote.models import ArtifactRecord, ArtifactStatus, UploadTicket


def parse_upload_ticket(data: Any) -> UploadTicket:
    """Build an UploadTicket from the registration response.

    Raises:
        RemotePayloadError: if uploadId or presignedUploadURL is missing.
    """
    if not isinstance(data, dict):
        raise RemotePayloadError("Upload response must be an object")
    upload_id = data.get("uploadId")
    transfer_url = data.get("presignedUploadURL")
    if upload_id is None or upload_id == "":
        raise RemotePayloadError("Upload response is missing 'uploadId'")
    if not transfer_url or not isinstance(transfer_url, str):
        raise RemotePayloadError("Upload response is missing 'presignedUploadURL'")
    return UploadTicket(upload_id=str(upload_id), transfer_url=transfer_url)


def parse_artifact_listing(data: Any) -> list[ArtifactRecord]:
    """Build records from the listing response; a missing file list means no files."""
    if not isinstance(data, dict):
        raise RemotePayloadError("Listing response must be an object")
    raw_files = data.get("files")
    if raw_files is None:
        return []
    if not isinstance(raw_files, list):
        raise RemotePayloadError("'files' must be a list")
    return [parse_artifact_record(item, i) for i, item in enumerate(raw_files)]


def parse_artifact_record(raw: Any, index: int = 0) -> ArtifactRecord:
    if not isinstance(raw, dict):
        raise RemotePayloadError(f"File at index {index} must be an object")
    file_name = raw.get("fileName")
    if not isinstance(file_name, str):
        raise RemotePayloadError(f"File at index {index}: 'fileName' must be a string")
    return ArtifactRecord(
        file_id=_optional_str(raw, "fileId", index),
        upload_id=_optional_str(raw, "uploadId", index),
        file_name=file_name,
        status=_parse_status(raw.get("status")),
        file_class=_optional_str(raw, "fileClass", index),
        owner_organization_name=_optional_str(raw, "fileContactName", index),
        summary=_optional_str(raw, "summary", index),
        file_size_bytes=_optional_int(raw, "fileSize", index),
        created_at=_optional_str(raw, "createdAt", index),
        updated_at=_optional_str(raw, "updatedAt", index),
        schema_id=_optional_str(raw, "schemaId", index),
        reference_id=_optional_str(raw, "referenceId", index),
        is_duplicate=_optional_bool(raw, "isDuplicate", index),
        content_hash=_optional_str(raw, "fileHash", index),
        storage_path=_optional_str(raw, "fileStoragePath", index),
        status_label=_status_label(raw.get("status")),
    )


def _parse_status(raw: Any) -> ArtifactStatus:
    if raw == ArtifactStatus.PROCESSED.value:
        return ArtifactStatus.PROCESSED
    return ArtifactStatus.PENDING


def _status_label(raw: Any) -> str | None:
    return raw if isinstance(raw, str) and raw else None


def _optional_str(raw: dict[str, Any], key: str, index: int) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    # Ids come back as numbers from some endpoints.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        return _discard(key, index, value)
    return value


def _optional_int(raw: dict[str, Any], key: str, index: int) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return _discard(key, index, value)
    try:
        # Sizes sometimes arrive as numeric strings ("2048").
        return int(float(value)) if isinstance(value, str) else int(value)
    except (ValueError, OverflowError):
        return _discard(key, index, value)


def _optional_bool(raw: dict[str, Any], key: str, index: int) -> bool | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    return _discard(key, index, value)


def _discard(key: str, index: int, value: Any) -> None:
    # Bad optional fields degrade to None; only fileName is required.
    Log.warning(
        f"File at index {index}: ignoring unexpected '{key}' value",
        value_type=type(value).__name__,
    )
    return None
