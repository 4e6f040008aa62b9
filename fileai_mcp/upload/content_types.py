from pathlib import PurePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".csv": "text/csv",
}


def derive_content_type(file_name: str) -> str:
    """Map a file name's extension (any case) to the MIME type sent to File.ai."""
    return CONTENT_TYPES.get(PurePath(file_name).suffix.lower(), DEFAULT_CONTENT_TYPE)
