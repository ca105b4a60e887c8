"""
Global exception handler for the Transaction Upload API.
Provides centralized error handling for all API exceptions.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from .exceptions import (
    ValidationException,
    FileTooLargeException,
    FileEncodingException,
    UploadTransportException,
    UserFetchException
)
from .logger import setup_logger

logger = setup_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""

    @app.exception_handler(FileTooLargeException)
    async def handle_file_too_large(request: Request, exc: FileTooLargeException):
        return JSONResponse(
            status_code=413,
            content={"error": "File Too Large", "message": exc.message, "errors": [exc.message]}
        )

    @app.exception_handler(ValidationException)
    async def handle_validation_error(request: Request, exc: ValidationException):
        return JSONResponse(
            status_code=400,
            content={"error": "Validation Error", "message": exc.message}
        )

    @app.exception_handler(FileEncodingException)
    async def handle_encoding_error(request: Request, exc: FileEncodingException):
        return JSONResponse(
            status_code=400,
            content={"error": "File Encoding Failed", "message": exc.message}
        )

    @app.exception_handler(UploadTransportException)
    async def handle_transport_error(request: Request, exc: UploadTransportException):
        return JSONResponse(
            status_code=502,
            content={"error": "Upload Backend Unavailable", "message": exc.message}
        )

    @app.exception_handler(UserFetchException)
    async def handle_user_fetch_error(request: Request, exc: UserFetchException):
        return JSONResponse(
            status_code=502,
            content={"error": "User Fetch Failed", "message": exc.message}
        )

    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "message": "An unexpected error occurred"}
        )
