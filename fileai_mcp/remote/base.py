from abc import ABC, abstractmethod

from fileai_mcp.remote.models import ArtifactRecord, UploadRequest, UploadTicket


class BaseFileAIClient(ABC):
    """Contract for File.ai backend adapters."""

    @abstractmethod
    def register_upload(self, request: UploadRequest) -> UploadTicket:
        """Register upload metadata and obtain a transfer target.

        Raises:
            RegistrationError: on a non-success status, with status and body.
        """

    @abstractmethod
    def transfer_binary(
        self,
        ticket: UploadTicket,
        content: bytes,
        content_type: str,
    ) -> None:
        """PUT the file content to the ticket's pre-signed target.

        Raises:
            TransferError: on a non-success status.
        """

    @abstractmethod
    def list_artifacts(self) -> list[ArtifactRecord]:
        """Fetch the full current listing. Never returns None.

        Raises:
            ListError: on a non-success status.
        """
