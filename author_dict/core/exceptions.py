"""
Custom exceptions for the Author's Dictionary backend.

Error bodies are plain strings; the status code travels with the exception.
"""


class AuthorDictException(Exception):
    """Base exception for the Author's Dictionary backend."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidQueryError(AuthorDictException):
    """Raised when a search is submitted without a word."""

    def __init__(self, message: str = "Missing word query parameter"):
        super().__init__(message=message, status_code=400)


class InvalidPayloadError(AuthorDictException):
    """Raised when an ingestion body is not an array of records."""

    def __init__(self, message: str = "Expected an array."):
        super().__init__(message=message, status_code=400)


class PayloadTooLargeError(AuthorDictException):
    """Raised when a request body exceeds the configured ceiling."""

    def __init__(self, size_bytes: int, max_size_bytes: int):
        super().__init__(
            message=f"Request body of {size_bytes} bytes exceeds the {max_size_bytes} byte limit",
            status_code=413
        )
        self.size_bytes = size_bytes
        self.max_size_bytes = max_size_bytes


class StorageError(AuthorDictException):
    """Raised when the sentence store cannot complete an operation."""

    def __init__(self, message: str = "Database error"):
        super().__init__(message=message, status_code=500)
