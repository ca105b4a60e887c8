"""
Data Transfer Objects for the upload backend and the Upload API.
Field names follow the backend's camelCase wire format.
"""
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field, field_validator


class TransactionDTO(BaseModel):
    """
    A transaction record parsed by the backend from an uploaded file.

    Records are passed through as sent: missing fields stay None and
    unknown fields are kept.
    """
    id: Optional[str] = Field(default=None, description="Unique transaction identifier")
    type: Optional[int] = Field(default=None, description="Transaction type code")
    date: Optional[str] = Field(default=None, description="Transaction date as sent by the backend")
    product_description: Optional[str] = Field(default=None, alias="productDescription")
    value: Optional[Union[int, float]] = Field(default=None, description="Transaction amount")
    transaction_owner_name: Optional[str] = Field(default=None, alias="transactionOwnerName")

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    class Config:
        populate_by_name = True
        extra = "allow"


class UploadRequest(BaseModel):
    """JSON body sent to POST /api/upload."""
    file: str = Field(..., description="Base64 encoded file content")
    file_name: str = Field(..., alias="fileName")

    class Config:
        populate_by_name = True


class UploadSuccessBody(BaseModel):
    """Success body returned by the backend."""
    transactions: List[TransactionDTO] = Field(default_factory=list)

    @field_validator('transactions', mode='before')
    @classmethod
    def default_when_null(cls, v: Any) -> Any:
        return v or []


class UploadErrorBody(BaseModel):
    """Failure body returned by the backend. errors is optional."""
    errors: Optional[List[str]] = None


class UploadWorkflowResponse(BaseModel):
    """Snapshot of an upload workflow after submission."""
    state: str = Field(..., description="idle, uploading, success or error")
    file_name: Optional[str] = Field(default=None, alias="fileName")
    errors: List[str] = Field(default_factory=list)
    transactions: List[TransactionDTO] = Field(default_factory=list)

    class Config:
        populate_by_name = True
