"""
Upload API routes.
Handles the browser upload form: file selection, submission and outcome.
"""
import os
from typing import List
from fastapi import APIRouter, Depends, UploadFile, File, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from src.core.dependencies import get_upload_workflow
from src.core.exceptions import FileTooLargeException, ValidationException
from src.models.dto.upload_dto import UploadWorkflowResponse
from src.models.selected_file import SelectedFile
from src.models.upload_state import UploadState
from src.services.upload_workflow import UploadWorkflow

router = APIRouter(prefix="/v1/api")


def _to_selected_file(upload: UploadFile) -> SelectedFile:
    size = upload.size
    if size is None:
        upload.file.seek(0, os.SEEK_END)
        size = upload.file.tell()
        upload.file.seek(0)
    return SelectedFile.from_stream(
        name=upload.filename or "upload",
        stream=upload.file,
        size=size,
        content_type=upload.content_type
    )


@router.post("/uploads", tags=["Uploads"], response_model=UploadWorkflowResponse, status_code=status.HTTP_200_OK)
async def upload_transactions_file(
    files: List[UploadFile] = File(..., description="File to parse. Only the first file is used."),
    workflow: UploadWorkflow = Depends(get_upload_workflow)
):
    """
    Upload a file to the transaction parser.

    The file is size checked, Base64 encoded and forwarded to the backend.
    Returns the parsed transactions, or the backend's error messages.
    """
    if not files:
        raise ValidationException("No file was provided")

    if not workflow.choose([_to_selected_file(upload) for upload in files[:1]]):
        raise FileTooLargeException(workflow.state.errors[0])

    final_state = await workflow.submit()
    snapshot = workflow.snapshot()

    if final_state == UploadState.ERROR:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(snapshot, by_alias=True)
        )

    return snapshot
