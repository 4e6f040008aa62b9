from pathlib import Path

from fileai_mcp.config.settings import Settings
from fileai_mcp.logging.logger import Log
from fileai_mcp.polling.poll_loop import PollLoop
from fileai_mcp.remote.base import BaseFileAIClient
from fileai_mcp.remote.models import UploadRequest
from fileai_mcp.upload.content_types import derive_content_type
from fileai_mcp.upload.file_loader import FileLoader
from fileai_mcp.upload.models import OperationResult, PendingResult, ResolvedResult


class UploadOrchestrator:
    """Sequences one upload: validate -> register -> transfer -> poll.

    Remote and local errors propagate to the caller unchanged; only the poll
    budget running out is turned into a (pending) result.
    """

    def __init__(
        self,
        client: BaseFileAIClient,
        poll_loop: PollLoop,
        file_loader: FileLoader,
        *,
        split_pages: bool = True,
        lock_schema: bool = True,
    ) -> None:
        self._client = client
        self._poll_loop = poll_loop
        self._file_loader = file_loader
        self._split_pages = split_pages
        self._lock_schema = lock_schema

    def upload_and_process(self, local_file_path: str | Path) -> OperationResult:
        """Upload a local file and wait for the backend to process it."""
        # Step 1: Validate local file
        path = self._file_loader.resolve(local_file_path)
        request = UploadRequest(
            local_file_name=path.name,
            content_type=derive_content_type(path.name),
            split_pages=self._split_pages,
            lock_schema=self._lock_schema,
        )
        Log.info(f"Uploading {request.local_file_name} as {request.content_type}")

        # Step 2: Register upload
        ticket = self._client.register_upload(request)
        Log.info(f"Registered {request.local_file_name}", upload_id=ticket.upload_id)

        # Step 3: Transfer bytes
        content = self._file_loader.load(path)
        self._client.transfer_binary(ticket, content, request.content_type)
        Log.info(f"Transferred {len(content)} bytes", upload_id=ticket.upload_id)

        # Step 4: Reconcile against the listing
        poll_result = self._poll_loop.run(request.local_file_name, ticket)
        if poll_result.is_processed and poll_result.record is not None:
            Log.info(
                f"Resolved after {poll_result.attempts_made} attempts",
                upload_id=ticket.upload_id,
                file_id=poll_result.record.file_id,
            )
            return ResolvedResult(upload_id=ticket.upload_id, record=poll_result.record)

        Log.info("Still processing", upload_id=ticket.upload_id)
        return PendingResult(upload_id=ticket.upload_id)


def build_orchestrator(
    settings: Settings,
    client: BaseFileAIClient,
) -> UploadOrchestrator:
    """Build an UploadOrchestrator with the configured poll budget."""
    poll_loop = PollLoop(
        client.list_artifacts,
        max_attempts=settings.poll_max_attempts,
        interval_seconds=settings.poll_interval_seconds,
    )
    return UploadOrchestrator(
        client=client,
        poll_loop=poll_loop,
        file_loader=FileLoader(),
        split_pages=settings.upload_split_pages,
        lock_schema=settings.upload_lock_schema,
    )
