from fileai_mcp.remote.base import BaseFileAIClient
from fileai_mcp.remote.httpx_client import FileAIHttpClient
from fileai_mcp.remote.models import ArtifactRecord, ArtifactStatus, UploadRequest, UploadTicket

__all__ = [
    "ArtifactRecord",
    "ArtifactStatus",
    "BaseFileAIClient",
    "FileAIHttpClient",
    "UploadRequest",
    "UploadTicket",
]
