"""
Data Transfer Objects for the user listing endpoint.
"""
from typing import Any, Dict, List
from pydantic import BaseModel


class UserListResponse(BaseModel):
    """Response schema for listing users."""
    users: List[Dict[str, Any]]
    count: int
