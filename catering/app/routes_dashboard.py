"""Dashboard, catering team board and health routes."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from .deps.catering import get_repo
from .repos.catering_repo import CateringRepo
from .services.dashboard_service import quote_stats, recent_quotes
from .services.quote_service import catering_board
from .utils.responses import ok

router = APIRouter(prefix="/api")


@router.get("/health")
def health() -> dict:
    return ok({"status": "ok"})


@router.get("/dashboard")
def dashboard(repo: CateringRepo = Depends(get_repo)) -> dict:
    """Return quote counts and the most recent quotes."""

    quotes = repo.list_quotes()
    return ok(
        {
            "stats": quote_stats(quotes),
            "recent": [asdict(q) for q in recent_quotes(quotes)],
        }
    )


@router.get("/catering/quotes")
def catering_quotes(repo: CateringRepo = Depends(get_repo)) -> dict:
    """Return approved, in-progress and completed quotes by status."""

    board = catering_board(repo.list_quotes())
    return ok(
        {status.value: [asdict(q) for q in quotes] for status, quotes in board.items()}
    )
