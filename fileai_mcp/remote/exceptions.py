class RemoteError(Exception):
    """Base exception for all File.ai backend errors."""


class RegistrationError(RemoteError):
    """Raised when the upload registration call returns a non-success status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Upload request failed: {status} - {body}")
        self.status = status
        self.body = body


class TransferError(RemoteError):
    """Raised when the PUT to the pre-signed target returns a non-success status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"File upload failed: {status}")
        self.status = status


class ListError(RemoteError):
    """Raised when the artifact listing returns a non-success status."""

    def __init__(self, status: int, status_text: str) -> None:
        super().__init__(f"Failed to get files: {status} {status_text}")
        self.status = status
        self.status_text = status_text


class RemotePayloadError(RemoteError):
    """Raised when a success response body does not have the expected shape."""


class RemoteNetworkError(RemoteError):
    """Raised when the backend cannot be reached (connection failure, timeout)."""
