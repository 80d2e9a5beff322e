"""Quote status enumeration and allowed transitions."""

from __future__ import annotations

from enum import Enum


class QuoteStatus(str, Enum):
    """Enumerate the lifecycle states for a quote."""

    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


TRANSITIONS: dict[QuoteStatus, list[QuoteStatus]] = {
    QuoteStatus.DRAFT: [QuoteStatus.PENDING],
    QuoteStatus.PENDING: [QuoteStatus.APPROVED, QuoteStatus.REJECTED],
    QuoteStatus.APPROVED: [QuoteStatus.IN_PROGRESS],
    QuoteStatus.IN_PROGRESS: [QuoteStatus.COMPLETED],
    QuoteStatus.REJECTED: [],
    QuoteStatus.COMPLETED: [],
}

# Content edits are only accepted while a quote is still being negotiated.
EDITABLE_STATUSES = frozenset(
    {QuoteStatus.DRAFT, QuoteStatus.PENDING, QuoteStatus.REJECTED}
)

# Statuses the catering team works from.
CATERING_STATUSES = (
    QuoteStatus.APPROVED,
    QuoteStatus.IN_PROGRESS,
    QuoteStatus.COMPLETED,
)


def can_transition(src: QuoteStatus, dst: QuoteStatus) -> bool:
    """Return ``True`` if a quote can move from ``src`` to ``dst``."""

    return dst in TRANSITIONS.get(src, [])


def is_editable(status: QuoteStatus) -> bool:
    """Return ``True`` if quotes in ``status`` accept content edits."""

    return status in EDITABLE_STATUSES
