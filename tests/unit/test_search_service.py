"""
Unit tests for the search coordinator
"""
import asyncio
import time

import pytest

from author_dict.core.exceptions import InvalidQueryError, StorageError
from author_dict.schemas.dictionary import DictionaryEntry, DictionaryError
from author_dict.services.dictionary_service import FETCH_FAILED_MESSAGE
from author_dict.services.search_service import SearchService

from tests.conftest import FailingSentenceStore, FakeDictionary


@pytest.mark.asyncio
@pytest.mark.parametrize("word", [None, ""])
async def test_missing_word_rejected(memory_store, fake_dictionary, word):
    service = SearchService(memory_store, fake_dictionary)

    with pytest.raises(InvalidQueryError) as exc_info:
        await service.search(word)

    assert exc_info.value.status_code == 400
    assert fake_dictionary.calls == []


@pytest.mark.asyncio
async def test_merges_matches_and_entry(memory_store, fake_dictionary):
    service = SearchService(memory_store, fake_dictionary)

    result = await service.search("love")

    assert [m.author for m in result.matches] == ["Shakespeare", "Shakespeare", "Jane Austen"]
    assert isinstance(result.dictionary, DictionaryEntry)
    assert fake_dictionary.calls == ["love"]


@pytest.mark.asyncio
async def test_dictionary_failure_keeps_matches(memory_store, failed_lookup):
    service = SearchService(memory_store, FakeDictionary(failed_lookup))

    result = await service.search("love")

    assert len(result.matches) == 3
    assert result.dictionary == DictionaryError(error=FETCH_FAILED_MESSAGE)


@pytest.mark.asyncio
async def test_unreachable_api_keeps_matches(memory_store, unreachable_dictionary):
    service = SearchService(memory_store, unreachable_dictionary)

    result = await service.search("love")

    assert len(result.matches) == 3
    assert result.dictionary.error == FETCH_FAILED_MESSAGE


@pytest.mark.asyncio
async def test_store_failure_propagates(fake_dictionary):
    service = SearchService(FailingSentenceStore(), fake_dictionary)

    with pytest.raises(StorageError):
        await service.search("love")


@pytest.mark.asyncio
async def test_store_failure_cancels_pending_lookup():
    started = asyncio.Event()
    cancelled = asyncio.Event()

    class SlowDictionary:
        async def lookup(self, word):
            started.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise

    class SlowFailingStore(FailingSentenceStore):
        def search(self, word):
            time.sleep(0.05)
            raise StorageError()

    service = SearchService(SlowFailingStore(), SlowDictionary())

    with pytest.raises(StorageError):
        await service.search("love")

    await asyncio.wait_for(cancelled.wait(), timeout=1)
    assert started.is_set()
