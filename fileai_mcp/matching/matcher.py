"""Resolves uploaded files against the eventually-consistent artifact listing."""

from collections.abc import Sequence
from pathlib import PurePath

from fileai_mcp.remote.models import ArtifactRecord, UploadTicket


def strip_extension(file_name: str) -> str:
    """Base name without its last extension: 'invoice.v2.pdf' -> 'invoice.v2'."""
    return PurePath(file_name).stem


def match_artifact(
    records: Sequence[ArtifactRecord],
    uploaded_file_name: str,
    ticket: UploadTicket,
) -> ArtifactRecord | None:
    """Find the listing entry for a freshly uploaded file.

    Name containment is tried first because the backend may suffix or rename
    the stored file; the upload id is the fallback for records whose name was
    changed beyond recognition. Within each rule, listing order wins.
    """
    stem = strip_extension(uploaded_file_name)
    if stem:
        for record in records:
            if stem in record.file_name:
                return record
    for record in records:
        if record.upload_id is not None and record.upload_id == ticket.upload_id:
            return record
    return None


def find_artifact_by_name(
    records: Sequence[ArtifactRecord],
    query: str,
) -> ArtifactRecord | None:
    """First record whose name contains query, ignoring case."""
    needle = query.lower()
    for record in records:
        if needle in record.file_name.lower():
            return record
    return None
