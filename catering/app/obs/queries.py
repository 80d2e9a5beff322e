"""SQL timing for the persisted catering store."""

from __future__ import annotations

import logging
import os
import time

from sqlalchemy import event
from sqlalchemy.engine import Engine

SLOW_QUERY_MS = int(os.getenv("DB_SLOW_QUERY_MS", "200"))
MAX_SQL_CHARS = 200

logger = logging.getLogger("catering.sql")


def _shorten(statement: str) -> str:
    sql = " ".join(statement.split())
    if len(sql) > MAX_SQL_CHARS:
        return sql[: MAX_SQL_CHARS - 3] + "..."
    return sql


def add_query_logger(engine: Engine, slow_ms: int | None = None) -> None:
    """Time every statement on ``engine``.

    Statements slower than ``slow_ms`` (default ``DB_SLOW_QUERY_MS``) are
    logged at WARNING and the rest at DEBUG. Bound parameters are never
    logged since they hold client details.
    """

    threshold = SLOW_QUERY_MS if slow_ms is None else slow_ms

    @event.listens_for(engine, "before_cursor_execute")
    def _start(conn, cursor, statement, parameters, context, executemany):  # type: ignore[no-untyped-def]
        conn.info.setdefault("query_started", []).append(time.perf_counter())

    @event.listens_for(engine, "after_cursor_execute")
    def _finish(conn, cursor, statement, parameters, context, executemany):  # type: ignore[no-untyped-def]
        elapsed_ms = int((time.perf_counter() - conn.info["query_started"].pop()) * 1000)
        if elapsed_ms > threshold:
            logger.warning("slow query %dms sql=%s", elapsed_ms, _shorten(statement))
        else:
            logger.debug("query %dms sql=%s", elapsed_ms, _shorten(statement))
