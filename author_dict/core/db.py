from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from typing import Generator

# SQLAlchemy declarative base for models
Base = declarative_base()

_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:"}


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_unicode_lower(dbapi_connection, connection_record):
    # SQLite's builtin lower() only folds ASCII
    dbapi_connection.create_function("lower", 1, _unicode_lower)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Build an engine for the sentence store."""
    kwargs = {"echo": echo, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        # Requests are served from a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in _MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _register_unicode_lower)
        return engine
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    from author_dict import models  # noqa: F401  registers mappers on Base

    Base.metadata.create_all(bind=engine)


@contextmanager
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
