"""
Health check endpoint: liveness plus sentence store reachability.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from author_dict.core.dependencies import get_sentence_store
from author_dict.services.sentence_store import SentenceStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    request: Request,
    store: SentenceStore = Depends(get_sentence_store),
) -> Dict[str, Any]:
    """Report overall status, storage status and error counters."""
    db_ok = await run_in_threadpool(store.ping)
    error_handler = getattr(request.app.state, "error_handler", None)

    return {
        "status": "healthy" if db_ok else "unhealthy",
        "version": request.app.version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "details": {
            "database": {"status": "healthy" if db_ok else "unhealthy"},
        },
        "error_statistics": error_handler.get_error_statistics() if error_handler else {},
    }
