"""
Search coordinator - merges sentence matches with a dictionary lookup.
"""

import asyncio
import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from author_dict.core.exceptions import InvalidQueryError
from author_dict.schemas.search import SearchResponse
from author_dict.schemas.sentence import SentenceRead
from author_dict.services.dictionary_service import DictionaryService
from author_dict.services.sentence_store import SentenceStore

logger = logging.getLogger(__name__)


class SearchService:
    """Runs the store scan and the dictionary lookup for one word"""

    def __init__(self, store: SentenceStore, dictionary: DictionaryService):
        self.store = store
        self.dictionary = dictionary

    async def search(self, word: Optional[str]) -> SearchResponse:
        """
        Search the store and the dictionary for ``word``.

        The lookup runs while the store is scanned. A dictionary failure is
        carried inline in the result; a store failure propagates and the
        pending lookup is cancelled.

        Raises:
            InvalidQueryError: if ``word`` is missing or empty
            StorageError: if the store scan fails
        """
        if not word:
            raise InvalidQueryError()

        lookup = asyncio.ensure_future(self.dictionary.lookup(word))
        try:
            records = await run_in_threadpool(self.store.search, word)
        except BaseException:
            lookup.cancel()
            raise

        dictionary = await lookup
        logger.info(f"Search for '{word}' matched {len(records)} sentences")

        return SearchResponse(
            matches=[SentenceRead.model_validate(record) for record in records],
            dictionary=dictionary,
        )
