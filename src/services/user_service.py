"""
User Service.
Lists users from the upload backend.
"""
from src.models.dto.user_dto import UserListResponse
from src.repositories.upload_api_repository import UploadApiRepository


class UserService:
    """Service for user listing operations."""

    def __init__(self, upload_repository: UploadApiRepository = None):
        self.upload_repository = upload_repository or UploadApiRepository()

    async def list_users(self) -> UserListResponse:
        """
        Fetch the current user list. Never served from a cache.

        Raises:
            UserFetchException: If the backend request fails
        """
        users = await self.upload_repository.fetch_users()
        return UserListResponse(users=users, count=len(users))
