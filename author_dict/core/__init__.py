"""
Core infrastructure: database wiring, exceptions, error handlers, logging
and dependency injection.
"""

from .exceptions import (
    AuthorDictException,
    InvalidQueryError,
    InvalidPayloadError,
    PayloadTooLargeError,
    StorageError,
)

__all__ = [
    "AuthorDictException",
    "InvalidQueryError",
    "InvalidPayloadError",
    "PayloadTooLargeError",
    "StorageError",
]
