"""
Shared fixtures: storage fakes, a stubbed lexical API and test clients.
"""
from typing import Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from author_dict.config.settings import Settings
from author_dict.core.db import create_db_engine, create_session_factory, init_db
from author_dict.core.dependencies import ServiceContainer
from author_dict.core.exceptions import StorageError
from author_dict.main import create_app
from author_dict.schemas.dictionary import DictionaryError, DictionaryResult
from author_dict.services.dictionary_service import (
    FETCH_FAILED_MESSAGE,
    normalize_response,
    DictionaryService,
)
from author_dict.services.sentence_store import (
    InMemorySentenceStore,
    SentenceRecord,
    SqlSentenceStore,
)

API_URL = "https://dictionary.test/api/v2/entries/en"

LOVE_ENTRY = [
    {
        "word": "love",
        "phonetic": "/lʌv/",
        "phonetics": [
            {"text": "/lʌv/", "audio": "https://audio.test/love-uk.mp3"},
            {"text": "/lʌv/"},
        ],
        "origin": "Old English lufu.",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": "An intense feeling of deep affection.",
                        "example": "babies fill parents with feelings of love",
                        "synonyms": ["affection", "fondness"],
                        "antonyms": ["hatred"],
                    },
                    {"definition": "A great interest and pleasure in something."},
                ],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [{"definition": "Feel deep affection for."}],
            },
        ],
    },
    {"word": "love", "meanings": []},
]

NOT_FOUND_BODY = {
    "title": "No Definitions Found",
    "message": "Sorry pal, we couldn't find definitions for the word you were looking for.",
    "resolution": "You can try the search again at later time or head to the web instead.",
}

SAMPLE_SENTENCES = [
    SentenceRecord(text="Love looks not with the eyes, but with the mind.", author="Shakespeare", book="A Midsummer Night's Dream"),
    SentenceRecord(text="The course of true love never did run smooth.", author="Shakespeare", book="A Midsummer Night's Dream"),
    SentenceRecord(text="It is a truth universally acknowledged.", author="Jane Austen", book="Pride and Prejudice"),
    SentenceRecord(text="Whatever our souls are made of, his and mine are the same.", author="Emily Bronte", book="Wuthering Heights"),
    SentenceRecord(text="You must allow me to tell you how ardently I admire and LOVE you.", author="Jane Austen", book="Pride and Prejudice"),
]


class FakeDictionary:
    """Stands in for DictionaryService; returns a canned result."""

    def __init__(self, result: Optional[DictionaryResult] = None):
        self.result = result if result is not None else normalize_response(LOVE_ENTRY, "love")
        self.calls: List[str] = []

    async def lookup(self, word: str) -> DictionaryResult:
        self.calls.append(word)
        return self.result


class FailingSentenceStore(InMemorySentenceStore):
    """Store whose backend is unavailable."""

    def insert_many(self, records):
        raise StorageError("Error inserting data.")

    def search(self, word):
        raise StorageError()

    def ping(self):
        return False


def mock_dictionary(handler: Callable[[httpx.Request], httpx.Response]) -> DictionaryService:
    return DictionaryService(API_URL, timeout_seconds=1.0, transport=httpx.MockTransport(handler))


def make_client(store, dictionary, **overrides) -> TestClient:
    settings = Settings(environment="testing", **overrides)
    container = ServiceContainer(store=store, dictionary=dictionary)
    return TestClient(create_app(settings=settings, service_container=container))


@pytest.fixture
def sample_sentences() -> List[SentenceRecord]:
    return list(SAMPLE_SENTENCES)


@pytest.fixture
def memory_store(sample_sentences) -> InMemorySentenceStore:
    return InMemorySentenceStore(sample_sentences)


@pytest.fixture
def fake_dictionary() -> FakeDictionary:
    return FakeDictionary()


@pytest.fixture
def sql_engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(sql_engine) -> SqlSentenceStore:
    return SqlSentenceStore(create_session_factory(sql_engine))


@pytest.fixture
def client(memory_store, fake_dictionary):
    with make_client(memory_store, fake_dictionary) as test_client:
        yield test_client


@pytest.fixture
def unreachable_dictionary() -> DictionaryService:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return mock_dictionary(handler)


@pytest.fixture
def failed_lookup() -> DictionaryError:
    return DictionaryError(error=FETCH_FAILED_MESSAGE)
