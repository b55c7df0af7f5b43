"""
Dependency injection setup for FastAPI.

The service container owns the storage handle and the dictionary client.
Routes reach them through the providers below, so tests can hand the
application a container built around fakes.
"""

from fastapi import Depends, Request
from typing import Optional
import asyncio
import logging

from sqlalchemy.engine import Engine
from starlette.concurrency import run_in_threadpool

from author_dict.config.settings import Settings
from author_dict.core.db import create_db_engine, create_session_factory, init_db
from author_dict.services import (
    DictionaryService,
    SearchService,
    SentenceStore,
    SqlSentenceStore,
)

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for the application's services with lifecycle management.
    """

    def __init__(
        self,
        store: SentenceStore,
        dictionary: DictionaryService,
        engine: Optional[Engine] = None,
    ):
        self._store = store
        self._dictionary = dictionary
        self._engine = engine
        self._search_service = SearchService(store, dictionary)
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceContainer":
        """Build a SQL-backed container. No connection is opened until startup."""
        engine = create_db_engine(settings.database.url, echo=settings.database.echo)
        return cls(
            store=SqlSentenceStore(create_session_factory(engine)),
            dictionary=DictionaryService.from_settings(settings.dictionary),
            engine=engine,
        )

    async def initialize_services(self) -> None:
        """Create the sentence table if the store is SQL-backed."""
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing service container")
            if self._engine is not None:
                await run_in_threadpool(init_db, self._engine)
                logger.info(f"Sentence store ready at {self._engine.url.render_as_string(hide_password=True)}")

            self._initialized = True

    async def cleanup_services(self) -> None:
        logger.info("Cleaning up service container")
        if self._engine is not None:
            self._engine.dispose()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def get_sentence_store(self) -> SentenceStore:
        return self._store

    def get_dictionary_service(self) -> DictionaryService:
        return self._dictionary

    def get_search_service(self) -> SearchService:
        return self._search_service


def get_service_container(request: Request) -> ServiceContainer:
    return request.app.state.service_container


def get_sentence_store(
    container: ServiceContainer = Depends(get_service_container)
) -> SentenceStore:
    return container.get_sentence_store()


def get_search_service(
    container: ServiceContainer = Depends(get_service_container)
) -> SearchService:
    return container.get_search_service()
