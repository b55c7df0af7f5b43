"""
Middleware package for FastAPI application.
"""

from .body_limit import BodySizeLimitMiddleware
from .request_context import RequestContextMiddleware

__all__ = ["BodySizeLimitMiddleware", "RequestContextMiddleware"]
