# Business logic services

from .sentence_store import (
    SentenceRecord,
    SentenceStore,
    SqlSentenceStore,
    InMemorySentenceStore,
    is_valid_record,
)
from .dictionary_service import (
    DictionaryService,
    NOT_FOUND_MESSAGE,
    FETCH_FAILED_MESSAGE,
)
from .search_service import SearchService

__all__ = [
    "SentenceRecord",
    "SentenceStore",
    "SqlSentenceStore",
    "InMemorySentenceStore",
    "is_valid_record",
    "DictionaryService",
    "NOT_FOUND_MESSAGE",
    "FETCH_FAILED_MESSAGE",
    "SearchService",
]
