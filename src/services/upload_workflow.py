"""
Upload Workflow.
Turns a user-selected file into either parsed transactions or error messages
through one round trip to the upload backend.
"""
import asyncio
from typing import Optional, Sequence
from src.core import config
from src.core.logger import setup_logger
from src.models.selected_file import SelectedFile
from src.models.upload_state import UploadState, UploadWorkflowState
from src.models.dto.upload_dto import UploadWorkflowResponse
from src.repositories.upload_api_repository import UploadApiRepository
from src.services.file_service import FileService

logger = setup_logger(__name__)


class UploadWorkflow:
    """
    State machine for a single upload form.

    idle -> uploading on submit with a stored file, uploading -> success or
    error, and success/error -> uploading on the next submit. A submit while
    already uploading is ignored.
    """

    def __init__(
        self,
        upload_repository: UploadApiRepository = None,
        file_service: FileService = None,
        max_file_size_bytes: Optional[int] = None
    ):
        self.upload_repository = upload_repository or UploadApiRepository()
        self.file_service = file_service or FileService()
        if max_file_size_bytes is None:
            max_file_size_bytes = config.settings.max_file_size_bytes
        self.max_file_size_bytes = max_file_size_bytes
        self.state = UploadWorkflowState()

    @property
    def size_limit_message(self) -> str:
        megabytes = self.max_file_size_bytes / (1024 * 1024)
        label = f"{int(megabytes)}MB" if megabytes.is_integer() else f"{megabytes:.2f}MB"
        return f"File size exceeds the allowed limit of {label}"

    def drag_over(self) -> None:
        self.state.dragging = True

    def drag_leave(self) -> None:
        self.state.dragging = False

    def drop(self, files: Sequence[SelectedFile]) -> bool:
        """Handle a drag-and-drop. Only the first file is considered."""
        self.state.dragging = False
        return self._select_first(files)

    def choose(self, files: Sequence[SelectedFile]) -> bool:
        """Handle a file picker selection. Only the first file is considered."""
        return self._select_first(files)

    def _select_first(self, files: Sequence[SelectedFile]) -> bool:
        if not files:
            return False
        return self.select(files[0])

    def select(self, selected_file: SelectedFile) -> bool:
        """
        Validate and store a file.

        Args:
            selected_file: Candidate file

        Returns:
            True if the file was stored, False if it was rejected
        """
        if selected_file.size > self.max_file_size_bytes:
            logger.info(
                f"Rejected {selected_file.name}: {selected_file.size} bytes "
                f"exceeds {self.max_file_size_bytes}"
            )
            self.state.errors = [self.size_limit_message]
            return False

        self.state.selected_file = selected_file
        self.state.errors = []
        return True

    async def submit(self) -> UploadState:
        """
        Encode the stored file, send it to the backend and record the outcome.

        Returns:
            The upload state after the submission attempt
        """
        selected_file = self.state.selected_file
        if selected_file is None:
            return self.state.upload_state

        if self.state.upload_state == UploadState.UPLOADING:
            logger.warning(f"Ignoring submit of {selected_file.name}: an upload is already in progress")
            return self.state.upload_state

        self.state.upload_state = UploadState.UPLOADING
        self.state.errors = []
        self.state.transactions = []

        try:
            encoded = await self.file_service.encode_base64(selected_file)
            outcome = await self.upload_repository.upload(encoded, selected_file.name)
        except asyncio.CancelledError:
            self.state.upload_state = UploadState.ERROR
            raise
        except Exception as e:
            # Error messages already on screen are left as they are
            logger.error(f"Upload of {selected_file.name} failed: {e}", exc_info=True)
            self.state.upload_state = UploadState.ERROR
            return self.state.upload_state

        if not outcome.ok:
            logger.info(f"Upload of {selected_file.name} rejected with status {outcome.status_code}")
            self.state.errors = outcome.errors
            self.state.upload_state = UploadState.ERROR
            return self.state.upload_state

        logger.info(f"Upload of {selected_file.name} returned {len(outcome.transactions)} transactions")
        self.state.transactions = outcome.transactions
        self.state.upload_state = UploadState.SUCCESS
        return self.state.upload_state

    def snapshot(self) -> UploadWorkflowResponse:
        """Current state as a response DTO for renderers."""
        selected_file = self.state.selected_file
        return UploadWorkflowResponse(
            state=self.state.upload_state.value,
            file_name=selected_file.name if selected_file else None,
            errors=list(self.state.errors),
            transactions=list(self.state.transactions)
        )
