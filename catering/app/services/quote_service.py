"""Quote generation, editing and status lifecycle.

The lifecycle is forward-only: draft -> pending -> approved -> in-progress
-> completed, with pending -> rejected as the only branch.

Content edits are accepted only in ``draft``, ``pending`` and ``rejected``.
Every change goes through :meth:`CateringRepo.update_quote`, which stamps
``updated_at``.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping

from ..domain.errors import (
    InvalidTransitionError,
    QuoteNotEditableError,
    QuoteNotFoundError,
    QuoteValidationError,
)
from ..domain.models import (
    CLIENT_FIELDS,
    PERCENT_MAX,
    PERCENT_MIN,
    Customer,
    Quote,
    QuoteItem,
    utcnow,
)
from ..domain.quote_status import (
    CATERING_STATUSES,
    QuoteStatus,
    can_transition,
    is_editable,
)
from ..repos.catering_repo import CateringRepo

logger = logging.getLogger(__name__)

# Stamped by the store or by transitions, never by callers.
_PROTECTED_FIELDS = {"id", "created_at", "updated_at", "approved_at", "approved_by"}
_INITIAL_STATUSES = {QuoteStatus.DRAFT, QuoteStatus.PENDING}


def validate_quote_fields(fields: Mapping[str, Any]) -> None:
    """Run the pre-submission checks of the quote form.

    Raises :class:`QuoteValidationError` for the first problem found.
    """

    items = list(fields.get("items") or [])
    if not items:
        raise QuoteValidationError(
            "NO_ITEMS",
            "Please select at least one food item",
            hint="Add a menu item to the quote",
        )
    seen: set[str] = set()
    for item in items:
        quantity = item.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise QuoteValidationError(
                "BAD_QUANTITY",
                f"Quantity for {item.food_item_id} must be a positive integer",
            )
        if item.food_item_id in seen:
            raise QuoteValidationError(
                "DUPLICATE_ITEM",
                f"Food item {item.food_item_id} is selected more than once",
                hint="Change the vendor or quantity of the existing line instead",
            )
        seen.add(item.food_item_id)

    for name in CLIENT_FIELDS:
        value = fields.get(name)
        if value is None or not str(value).strip():
            raise QuoteValidationError(
                "MISSING_CLIENT_FIELD", f"{name.replace('_', ' ')} is required"
            )
    guest_count = fields.get("guest_count")
    if isinstance(guest_count, bool) or not isinstance(guest_count, int) or guest_count < 1:
        raise QuoteValidationError("BAD_GUEST_COUNT", "guest count must be at least 1")

    for name in ("gst", "discount"):
        value = fields.get(name)
        if value is not None and not PERCENT_MIN <= Decimal(str(value)) <= PERCENT_MAX:
            raise QuoteValidationError(
                "BAD_PERCENT", f"{name} must be between 0 and 100"
            )


def set_item_quantity(
    items: Iterable[QuoteItem], food_item_id: str, vendor_id: str, quantity: int
) -> list[QuoteItem]:
    """Return ``items`` with the line for ``food_item_id`` set to ``quantity``.

    Lines are keyed by food item: an existing line is replaced (vendor
    included) and a quantity of zero or less removes it.
    """

    result: list[QuoteItem] = []
    replaced = False
    for item in items:
        if item.food_item_id != food_item_id:
            result.append(item)
            continue
        replaced = True
        if quantity > 0:
            result.append(QuoteItem(food_item_id, vendor_id, quantity))
    if not replaced and quantity > 0:
        result.append(QuoteItem(food_item_id, vendor_id, quantity))
    return result


def change_item_vendor(
    items: Iterable[QuoteItem], food_item_id: str, vendor_id: str
) -> list[QuoteItem]:
    """Switch the vendor of an existing line, keeping its quantity."""

    return [
        QuoteItem(i.food_item_id, vendor_id, i.quantity)
        if i.food_item_id == food_item_id
        else i
        for i in items
    ]


def match_customer(quote: Quote, customers: Iterable[Customer]) -> Customer | None:
    """Return the customer whose name, email and phone all match the quote."""

    for customer in customers:
        if (
            customer.name == quote.client_name
            and customer.email == quote.client_email
            and customer.phone == quote.client_phone
        ):
            return customer
    return None


def prefill_from_customer(customer: Customer) -> dict[str, str]:
    """Return the quote client fields taken from ``customer``."""

    return {
        "client_name": customer.name,
        "client_email": customer.email,
        "client_phone": customer.phone,
        "venue_address": customer.address or "",
    }


def filter_quotes(
    quotes: Iterable[Quote],
    status: QuoteStatus | None = None,
    search: str | None = None,
) -> list[Quote]:
    """Filter quotes by status and a free-text search.

    The search matches client name and event type case-insensitively and the
    client phone as a plain substring.
    """

    term = search or ""
    lowered = term.lower()
    result = []
    for quote in quotes:
        if status is not None and quote.status != status:
            continue
        if term and not (
            lowered in quote.client_name.lower()
            or term in quote.client_phone
            or lowered in quote.event_type.lower()
        ):
            continue
        result.append(quote)
    return result


def catering_board(quotes: Iterable[Quote]) -> dict[QuoteStatus, list[Quote]]:
    """Group the quotes the catering team works on by status."""

    board: dict[QuoteStatus, list[Quote]] = {s: [] for s in CATERING_STATUSES}
    for quote in quotes:
        if quote.status in board:
            board[quote.status].append(quote)
    return board


class QuoteLifecycle:
    """Create quotes and move them through their statuses."""

    def __init__(
        self,
        repo: CateringRepo,
        *,
        initial_status: QuoteStatus = QuoteStatus.DRAFT,
        default_approver: str = "Admin",
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        if initial_status not in _INITIAL_STATUSES:
            raise ValueError(f"Unsupported initial status: {initial_status}")
        self.repo = repo
        self.initial_status = initial_status
        self.default_approver = default_approver
        self._clock = clock

    def _get(self, quote_id: str) -> Quote:
        quote = self.repo.get_quote(quote_id)
        if quote is None:
            raise QuoteNotFoundError(quote_id)
        return quote

    def create_quote(self, fields: Mapping[str, Any]) -> Quote:
        """Validate and store a newly generated quote.

        The status defaults to the configured initial status; callers may
        ask for ``pending`` to skip the draft step.
        """

        data = {k: v for k, v in fields.items() if k not in _PROTECTED_FIELDS}
        status = QuoteStatus(data.pop("status", None) or self.initial_status)
        if status not in _INITIAL_STATUSES:
            raise QuoteValidationError(
                "BAD_STATUS", f"New quotes cannot start as {status.value}"
            )
        validate_quote_fields(data)
        quote = self.repo.add_quote({**data, "status": status})
        logger.info("quote %s created as %s", quote.id, status.value)
        return quote

    def edit_quote(self, quote_id: str, changes: Mapping[str, Any]) -> Quote:
        """Replace content fields of an editable quote.

        The status is left alone unless ``changes`` names a different one, in
        which case that move must be a legal transition.
        """

        quote = self._get(quote_id)
        if not is_editable(quote.status):
            raise QuoteNotEditableError(
                "NOT_EDITABLE",
                f"Quote {quote_id} is {quote.status.value} and can no longer be edited",
            )
        data = {k: v for k, v in changes.items() if k not in _PROTECTED_FIELDS}
        target = data.pop("status", None)
        merged = {
            **{f.name: getattr(quote, f.name) for f in dataclasses.fields(quote)},
            **data,
        }
        validate_quote_fields(merged)
        if target is not None and QuoteStatus(target) != quote.status:
            data.update(self._transition_changes(quote, QuoteStatus(target)))
        updated = self.repo.update_quote(quote_id, data)
        if updated is None:
            raise QuoteNotFoundError(quote_id)
        logger.info("quote %s edited", quote_id)
        return updated

    def _transition_changes(self, quote: Quote, dst: QuoteStatus, **extra: Any) -> dict[str, Any]:
        if not can_transition(quote.status, dst):
            raise InvalidTransitionError(
                "INVALID_TRANSITION",
                f"Cannot move quote {quote.id} from {quote.status.value} to {dst.value}",
            )
        changes: dict[str, Any] = {"status": dst}
        if dst is QuoteStatus.APPROVED:
            changes["approved_at"] = self._clock()
            changes["approved_by"] = extra.get("approved_by") or self.default_approver
        return changes

    def transition(self, quote_id: str, dst: QuoteStatus, **extra: Any) -> Quote:
        """Move a quote to ``dst`` applying that status's side effects."""

        quote = self._get(quote_id)
        changes = self._transition_changes(quote, QuoteStatus(dst), **extra)
        updated = self.repo.update_quote(quote_id, changes)
        if updated is None:
            raise QuoteNotFoundError(quote_id)
        logger.info(
            "quote %s moved %s -> %s", quote_id, quote.status.value, updated.status.value
        )
        return updated

    def submit(self, quote_id: str) -> Quote:
        return self.transition(quote_id, QuoteStatus.PENDING)

    def approve(self, quote_id: str, approved_by: str | None = None) -> Quote:
        return self.transition(quote_id, QuoteStatus.APPROVED, approved_by=approved_by)

    def reject(self, quote_id: str) -> Quote:
        return self.transition(quote_id, QuoteStatus.REJECTED)

    def start(self, quote_id: str) -> Quote:
        """Catering team starts preparing an approved quote."""
        return self.transition(quote_id, QuoteStatus.IN_PROGRESS)

    def complete(self, quote_id: str) -> Quote:
        """Catering team finishes an in-progress quote."""
        return self.transition(quote_id, QuoteStatus.COMPLETED)
