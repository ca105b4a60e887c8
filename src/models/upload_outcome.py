"""
Result of a single call to the upload backend.
"""
from typing import List, Optional
from src.models.dto.upload_dto import TransactionDTO

GENERIC_UPLOAD_ERROR = "Upload failed"


class UploadOutcome:
    """Interpreted response from POST /api/upload."""

    def __init__(
        self,
        ok: bool,
        status_code: int,
        transactions: Optional[List[TransactionDTO]] = None,
        errors: Optional[List[str]] = None
    ):
        self.ok = ok
        self.status_code = status_code
        self.transactions = transactions or []
        self.errors = errors or []

    @classmethod
    def success(cls, status_code: int, transactions: List[TransactionDTO]) -> "UploadOutcome":
        return cls(ok=True, status_code=status_code, transactions=transactions)

    @classmethod
    def failure(cls, status_code: int, errors: Optional[List[str]]) -> "UploadOutcome":
        # Missing or empty errors fall back to the generic message
        return cls(ok=False, status_code=status_code, errors=list(errors or [GENERIC_UPLOAD_ERROR]))

    def __repr__(self):
        return f"UploadOutcome(ok={self.ok}, status_code={self.status_code})"
