"""
Sentence store: append-only quotations scanned by substring.

``SentenceStore`` is the storage interface the search and ingestion paths
depend on. ``SqlSentenceStore`` backs it with SQLAlchemy;
``InMemorySentenceStore`` keeps rows in a list and is what tests inject.
"""

import itertools
import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from author_dict.core.db import db_session
from author_dict.core.exceptions import StorageError
from author_dict.models.sentence import Sentence

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("sentence", "author", "book")


@dataclass(frozen=True)
class SentenceRecord:
    """A stored quotation."""
    text: str
    author: str
    book: str
    id: Optional[int] = None


def is_valid_record(item: Any) -> bool:
    """True when ``item`` carries non-empty string sentence, author and book."""
    if not isinstance(item, Mapping):
        return False
    return all(isinstance(item.get(field), str) and item.get(field) for field in RECORD_FIELDS)


def valid_records(records: Iterable[Any]) -> List[SentenceRecord]:
    """Map well-formed ingestion items to records, dropping the rest."""
    return [
        SentenceRecord(text=item["sentence"], author=item["author"], book=item["book"])
        for item in records
        if is_valid_record(item)
    ]


class SentenceStore(ABC):
    """Storage interface for sentence records."""

    @abstractmethod
    def insert_many(self, records: Sequence[Any]) -> int:
        """
        Persist every well-formed candidate in ``records``.

        Malformed candidates are skipped without being reported. The return
        value is the number of candidates submitted, not the number stored.

        Raises:
            StorageError: if the backend rejects the batch
        """

    @abstractmethod
    def search(self, word: str) -> List[SentenceRecord]:
        """
        Return every record whose text contains ``word``, ignoring case,
        in insertion order.

        Raises:
            StorageError: if the backend cannot be scanned
        """

    @abstractmethod
    def ping(self) -> bool:
        """Return True when the backend is reachable."""


class SqlSentenceStore(SentenceStore):
    """Sentence store over a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def insert_many(self, records: Sequence[Any]) -> int:
        rows = [
            Sentence(text=record.text, author=record.author, book=record.book)
            for record in valid_records(records)
        ]
        try:
            with db_session(self._session_factory) as session:
                session.add_all(rows)
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert {len(rows)} sentences: {e}")
            raise StorageError("Error inserting data.") from e

        logger.info(f"Stored {len(rows)} of {len(records)} submitted sentences")
        return len(records)

    def search(self, word: str) -> List[SentenceRecord]:
        stmt = (
            select(Sentence)
            .where(Sentence.text.icontains(word, autoescape=True))
            .order_by(Sentence.id)
        )
        try:
            with db_session(self._session_factory) as session:
                return [
                    SentenceRecord(text=row.text, author=row.author, book=row.book, id=row.id)
                    for row in session.execute(stmt).scalars()
                ]
        except SQLAlchemyError as e:
            logger.error(f"Sentence search for '{word}' failed: {e}")
            raise StorageError() from e

    def ping(self) -> bool:
        try:
            with db_session(self._session_factory) as session:
                session.execute(select(1))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Sentence store health check failed: {e}")
            return False


class InMemorySentenceStore(SentenceStore):
    """List-backed sentence store."""

    def __init__(self, records: Iterable[SentenceRecord] = ()):
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._records: List[SentenceRecord] = []
        for record in records:
            self._append(record)

    def _append(self, record: SentenceRecord) -> None:
        with self._lock:
            self._records.append(
                SentenceRecord(text=record.text, author=record.author, book=record.book, id=next(self._ids))
            )

    def insert_many(self, records: Sequence[Any]) -> int:
        for record in valid_records(records):
            self._append(record)
        return len(records)

    def search(self, word: str) -> List[SentenceRecord]:
        needle = word.lower()
        with self._lock:
            return [r for r in self._records if needle in r.text.lower()]

    def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._records)
