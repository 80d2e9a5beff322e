from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ..models_catering import Base
from ..obs.queries import add_query_logger


def create_session_factory(url: str = "sqlite://") -> tuple[sessionmaker, Engine]:
    """Return a session factory and engine for ``url`` with tables created.

    In-memory SQLite URLs use a static pool so that every connection shares
    the same data.
    """

    kwargs: dict = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in {"sqlite://", "sqlite:///:memory:"}:
            kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    add_query_logger(engine)
    Base.metadata.create_all(bind=engine)
    session_factory = sessionmaker(
        bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
    )
    return session_factory, engine


__all__ = ["create_session_factory"]
