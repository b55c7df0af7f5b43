"""
Search API endpoint - sentence matches plus a dictionary entry for one word
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from author_dict.core.dependencies import get_search_service
from author_dict.schemas.search import SearchResponse
from author_dict.services.search_service import SearchService

router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
async def search(
    word: Optional[str] = Query(default=None, description="Word to look up"),
    service: SearchService = Depends(get_search_service),
):
    """
    Find stored sentences containing a word and fetch its dictionary entry

    - **word**: matched as a case-insensitive substring of each sentence

    A failed dictionary lookup is reported in `dictionary.error`; the
    sentence matches are returned regardless.
    """
    return await service.search(word)
