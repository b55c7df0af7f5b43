"""
Error handlers for the FastAPI application.

Every error leaves the service as a plain-text body with the matching status
code. Upstream dictionary failures never get here; they are folded into the
search payload by the dictionary service.
"""

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time
from typing import Dict, Any

from author_dict.core.exceptions import AuthorDictException

logger = logging.getLogger(__name__)


class ErrorHandler:
    """
    Turns exceptions into plain-text responses and keeps simple counters
    that the health endpoint reports.
    """

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.last_error_time: Dict[str, float] = {}

    async def handle_author_dict_exception(
        self,
        request: Request,
        exc: AuthorDictException
    ) -> PlainTextResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{type(exc).__name__} in request {request_id}: {exc.message}",
            extra={
                'request_id': request_id,
                'status_code': exc.status_code,
                'request_path': request.url.path,
                'request_method': request.method,
            }
        )

        self._track_error(type(exc).__name__)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    async def handle_http_exception(
        self,
        request: Request,
        exc: StarletteHTTPException
    ) -> PlainTextResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.warning(
            f"HTTP exception in request {request_id}: {exc.status_code} - {exc.detail}",
            extra={
                'request_id': request_id,
                'status_code': exc.status_code,
                'request_path': request.url.path
            }
        )

        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, 'headers', None)
        )

    async def handle_generic_exception(
        self,
        request: Request,
        exc: Exception
    ) -> PlainTextResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.error(
            f"Unhandled exception in request {request_id}: {type(exc).__name__}: {exc}",
            exc_info=True,
            extra={
                'request_id': request_id,
                'request_path': request.url.path,
                'request_method': request.method,
            }
        )

        self._track_error('InternalServerError')
        return PlainTextResponse("Internal server error", status_code=500)

    def _track_error(self, error_name: str) -> None:
        self.error_counts[error_name] = self.error_counts.get(error_name, 0) + 1
        self.last_error_time[error_name] = time.time()

        if self.error_counts[error_name] % 10 == 0:
            logger.warning(
                f"High frequency error detected: {error_name} occurred {self.error_counts[error_name]} times"
            )

    def get_error_statistics(self) -> Dict[str, Any]:
        current_time = time.time()

        return {
            'error_counts': dict(self.error_counts),
            'recent_errors': {
                name: count for name, count in self.error_counts.items()
                if current_time - self.last_error_time.get(name, 0) < 3600  # Last hour
            },
            'total_errors': sum(self.error_counts.values())
        }


def setup_error_handlers(app) -> ErrorHandler:
    """
    Register the error handlers on ``app`` and expose the handler instance
    as ``app.state.error_handler``.
    """
    error_handler = ErrorHandler()
    app.state.error_handler = error_handler

    @app.exception_handler(AuthorDictException)
    async def author_dict_exception_handler(request: Request, exc: AuthorDictException):
        return await error_handler.handle_author_dict_exception(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return await error_handler.handle_http_exception(request, exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        return await error_handler.handle_generic_exception(request, exc)

    return error_handler
