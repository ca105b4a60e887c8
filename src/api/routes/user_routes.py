"""
User API routes.
"""
from fastapi import APIRouter, Depends, Response
from src.core.dependencies import get_user_service
from src.models.dto.user_dto import UserListResponse
from src.services.user_service import UserService

router = APIRouter(prefix="/v1/api", tags=["Users"])


@router.get("/users", response_model=UserListResponse)
async def list_users(
    response: Response,
    user_service: UserService = Depends(get_user_service)
):
    """
    List users from the backend. Always fetched fresh.
    """
    response.headers["Cache-Control"] = "no-store"
    return await user_service.list_users()
