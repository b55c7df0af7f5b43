"""Request and response schemas."""

from .sentence import SentenceRead
from .dictionary import (
    Phonetic,
    Definition,
    Meaning,
    DictionaryEntry,
    DictionaryError,
    DictionaryResult,
)
from .search import SearchResponse

__all__ = [
    "SentenceRead",
    "Phonetic",
    "Definition",
    "Meaning",
    "DictionaryEntry",
    "DictionaryError",
    "DictionaryResult",
    "SearchResponse",
]
