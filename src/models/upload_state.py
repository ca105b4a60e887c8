"""
Upload workflow state.
Represents the lifecycle marker and the per-instance state record.
"""
from enum import Enum
from typing import List, Optional
from src.models.selected_file import SelectedFile
from src.models.dto.upload_dto import TransactionDTO


class UploadState(str, Enum):
    """Upload lifecycle marker."""
    IDLE = "idle"
    UPLOADING = "uploading"
    SUCCESS = "success"
    ERROR = "error"


class UploadWorkflowState:
    """Mutable state owned by a single UploadWorkflow instance."""

    def __init__(self):
        self.dragging: bool = False
        self.selected_file: Optional[SelectedFile] = None
        self.upload_state: UploadState = UploadState.IDLE
        self.errors: List[str] = []
        self.transactions: List[TransactionDTO] = []

    def __repr__(self):
        return (
            f"UploadWorkflowState(upload_state={self.upload_state.value}, "
            f"selected_file={self.selected_file}, errors={len(self.errors)}, "
            f"transactions={len(self.transactions)})"
        )
