"""Summary figures for the back-office dashboard."""

from __future__ import annotations

from typing import Sequence

from ..domain.models import Quote
from ..domain.quote_status import QuoteStatus

RECENT_LIMIT = 5


def quote_stats(quotes: Sequence[Quote]) -> dict[str, int]:
    """Return quote counts for the dashboard cards."""

    def count(status: QuoteStatus) -> int:
        return sum(1 for q in quotes if q.status == status)

    return {
        "total": len(quotes),
        "pending": count(QuoteStatus.PENDING),
        "approved": count(QuoteStatus.APPROVED),
        "in_progress": count(QuoteStatus.IN_PROGRESS),
    }


def recent_quotes(quotes: Sequence[Quote], limit: int = RECENT_LIMIT) -> list[Quote]:
    return list(quotes[:limit])
