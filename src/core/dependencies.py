"""
Dependency injection container for FastAPI.
Provides singleton-like behavior for services and repositories.
"""
from functools import lru_cache
from src.repositories.upload_api_repository import UploadApiRepository
from src.services.file_service import FileService
from src.services.upload_workflow import UploadWorkflow
from src.services.user_service import UserService


@lru_cache()
def get_upload_api_repository() -> UploadApiRepository:
    """Get UploadApiRepository singleton instance."""
    return UploadApiRepository()


@lru_cache()
def get_file_service() -> FileService:
    """Get FileService singleton instance."""
    return FileService()


@lru_cache()
def get_user_service() -> UserService:
    """Get UserService singleton instance with injected dependencies."""
    return UserService(upload_repository=get_upload_api_repository())


def get_upload_workflow() -> UploadWorkflow:
    """Get a fresh UploadWorkflow per request. Workflow state is never shared."""
    return UploadWorkflow(
        upload_repository=get_upload_api_repository(),
        file_service=get_file_service()
    )
