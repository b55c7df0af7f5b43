"""
Ingestion API endpoint - bulk insert of sentence records
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from author_dict.core.dependencies import get_sentence_store
from author_dict.core.exceptions import InvalidPayloadError
from author_dict.services.sentence_store import SentenceStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ingestion"])


@router.post("/data", response_class=PlainTextResponse)
async def ingest_sentences(
    request: Request,
    store: SentenceStore = Depends(get_sentence_store),
):
    """
    Store a batch of `{sentence, author, book}` records

    Elements without string `sentence`, `author` and `book` fields are
    dropped. The reply counts the submitted elements, including dropped ones.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if not isinstance(payload, list):
        raise InvalidPayloadError()

    submitted = await run_in_threadpool(store.insert_many, payload)
    return PlainTextResponse(f"Stored {submitted} sentences.")
