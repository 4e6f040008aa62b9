import json
from typing import Any

import httpx

from fileai_mcp.remote.base import BaseFileAIClient
from fileai_mcp.remote.exceptions import (
    ListError,
    RegistrationError,
    RemoteNetworkError,
    RemotePayloadError,
    TransferError,
)
from fileai_mcp.remote.models import ArtifactRecord, UploadRequest, UploadTicket
from fileai_mcp.remote.parser import parse_artifact_listing, parse_upload_ticket


class FileAIHttpClient(BaseFileAIClient):
    """File.ai backend adapter built on a synchronous httpx client."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def __enter__(self) -> "FileAIHttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def register_upload(self, request: UploadRequest) -> UploadTicket:
        response = self._send(
            "POST",
            f"{self._base_url}/files/upload",
            headers=self._api_headers(),
            json={
                "fileName": request.local_file_name,
                "fileType": request.content_type,
                "isSplit": request.split_pages,
                "schemaLocking": request.lock_schema,
            },
        )
        if not response.is_success:
            raise RegistrationError(response.status_code, response.text)
        return parse_upload_ticket(self._json(response))

    def transfer_binary(
        self,
        ticket: UploadTicket,
        content: bytes,
        content_type: str,
    ) -> None:
        # The pre-signed target authorizes the request itself; no API key.
        response = self._send(
            "PUT",
            ticket.transfer_url,
            headers={"Content-Type": content_type},
            content=content,
        )
        if not response.is_success:
            raise TransferError(response.status_code)

    def list_artifacts(self) -> list[ArtifactRecord]:
        response = self._send(
            "GET",
            f"{self._base_url}/files",
            headers=self._api_headers(),
        )
        if not response.is_success:
            raise ListError(response.status_code, response.reason_phrase)
        return parse_artifact_listing(self._json(response))

    def _api_headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        if self._api_key:
            headers["x-api-key"] = self._api_key
        return headers

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._client.request(method, url, **kwargs)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise RemoteNetworkError(f"File.ai network error: {exc}") from exc
        except httpx.TransportError as exc:
            raise RemoteNetworkError(f"File.ai transport error: {exc}") from exc

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise RemotePayloadError(f"Invalid JSON response: {exc}") from exc
