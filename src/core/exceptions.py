"""
Custom exceptions for the Transaction Upload API.
Provides specific error types for different failure scenarios.
"""


class TransactionUploadException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(TransactionUploadException):
    """Raised when request data validation fails."""
    pass


class FileTooLargeException(ValidationException):
    """Raised when a selected file exceeds the configured size limit."""
    pass


class FileEncodingException(TransactionUploadException):
    """Raised when file content cannot be read or encoded."""
    pass


class UploadTransportException(TransactionUploadException):
    """Raised when the upload backend cannot be reached or returns an unreadable body."""
    pass


class UserFetchException(TransactionUploadException):
    """Raised when the user list cannot be fetched from the backend."""
    pass
