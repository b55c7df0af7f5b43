"""
Dictionary proxy - looks a word up in the public lexical API and reshapes
the first entry into a ``DictionaryEntry``.

Lookups never raise. A missing word and a failed call both come back as a
``DictionaryError`` so the sentence matches can still be served.
"""

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from author_dict.config.settings import DictionarySettings
from author_dict.schemas.dictionary import (
    Definition,
    DictionaryEntry,
    DictionaryError,
    DictionaryResult,
    Meaning,
    Phonetic,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Word not found"
FETCH_FAILED_MESSAGE = "Failed to fetch dictionary info"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _objects(value: Any) -> List[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def normalize_entry(entry: dict, word: str) -> DictionaryEntry:
    """
    Reshape one raw API entry. Missing optional fields become empty strings
    or lists; the queried word stands in for a missing headword.
    """
    return DictionaryEntry(
        word=_text(entry.get("word")) or word,
        phonetic=_text(entry.get("phonetic")),
        phonetics=[
            Phonetic(text=_text(p.get("text")), audio=_text(p.get("audio")))
            for p in _objects(entry.get("phonetics"))
        ],
        origin=_text(entry.get("origin")),
        meanings=[
            Meaning(
                part_of_speech=_text(m.get("partOfSpeech")),
                definitions=[
                    Definition(
                        definition=_text(d.get("definition")),
                        example=_text(d.get("example")),
                        synonyms=_strings(d.get("synonyms")),
                        antonyms=_strings(d.get("antonyms")),
                    )
                    for d in _objects(m.get("definitions"))
                ],
            )
            for m in _objects(entry.get("meanings"))
        ],
    )


def normalize_response(data: Any, word: str) -> DictionaryResult:
    """Normalize a decoded API body: the first entry of a non-empty array, or not found."""
    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        return DictionaryError(error=NOT_FOUND_MESSAGE)
    return normalize_entry(data[0], word)


class DictionaryService:
    """Client for the external lexical API."""

    def __init__(
        self,
        api_url: str,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: DictionarySettings) -> "DictionaryService":
        return cls(api_url=settings.api_url, timeout_seconds=settings.timeout_seconds)

    def entry_url(self, word: str) -> str:
        return f"{self.api_url}/{quote(word, safe='')}"

    async def lookup(self, word: str) -> DictionaryResult:
        """
        Look ``word`` up.

        Returns:
            DictionaryEntry on success, DictionaryError with
            NOT_FOUND_MESSAGE when the API has no entry, or with
            FETCH_FAILED_MESSAGE when the call or decoding fails
        """
        url = self.entry_url(word)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
            data = response.json()
        except httpx.TimeoutException:
            logger.warning(f"Timeout fetching dictionary entry for '{word}'")
            return DictionaryError(error=FETCH_FAILED_MESSAGE)
        except httpx.HTTPError as e:
            logger.warning(f"Error fetching dictionary entry for '{word}': {e}")
            return DictionaryError(error=FETCH_FAILED_MESSAGE)
        except ValueError as e:
            logger.warning(f"Undecodable dictionary response for '{word}': {e}")
            return DictionaryError(error=FETCH_FAILED_MESSAGE)

        result = normalize_response(data, word)
        if isinstance(result, DictionaryError):
            logger.info(f"No dictionary entry for '{word}' (HTTP {response.status_code})")
        return result
