"""Quote routes: generation, editing, lifecycle actions and pricing views.

The working view (``/menu``) and the print view (``/print``) share one
grouping function so both always list the same lines.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from config import get_settings

from .deps.catering import get_lifecycle, get_repo, get_role
from .domain.models import Quote, UserRole
from .domain.quote_status import QuoteStatus
from .repos.catering_repo import CateringRepo
from .schemas import ApproveIn, QuoteIn, QuoteLineIn, QuotePatch
from .services.menu_service import CategoryGroup, group_quote_items_by_category
from .services.pricing_service import (
    calculate_quote_totals,
    expense_lines,
    totals_view,
)
from .services.quote_service import (
    QuoteLifecycle,
    filter_quotes,
    match_customer,
    prefill_from_customer,
    set_item_quantity,
)
from .utils.responses import ok

router = APIRouter(prefix="/api/quotes")


def _quote(repo: CateringRepo, quote_id: str) -> Quote:
    quote = repo.get_quote(quote_id)
    if quote is None:
        raise HTTPException(status_code=404, detail="quote not found")
    return quote


def _groups(groups: list[CategoryGroup]) -> list[dict]:
    return [
        {
            "category": asdict(group.category),
            "entries": [
                {
                    "food_item": asdict(entry.food_item),
                    "quantity": entry.quantity,
                    "vendor_name": entry.vendor_name,
                }
                for entry in group.entries
            ],
        }
        for group in groups
    ]


def _totals(repo: CateringRepo, quote: Quote, role: UserRole) -> dict:
    totals = calculate_quote_totals(quote, repo.list_food_items(), repo.list_vendors())
    return totals_view(totals, role, get_settings().currency_symbol)


@router.get("")
def list_quotes(
    status: Optional[QuoteStatus] = None,
    search: Optional[str] = None,
    repo: CateringRepo = Depends(get_repo),
) -> dict:
    """List quotes filtered by status and a client/event search term."""

    quotes = filter_quotes(repo.list_quotes(), status=status, search=search)
    return ok([asdict(q) for q in quotes])


@router.post("", status_code=201)
def create_quote(
    payload: QuoteIn, lifecycle: QuoteLifecycle = Depends(get_lifecycle)
) -> dict:
    """Store a quote from the generation form.

    GST and discount fall back to the configured form defaults when the
    client did not send them.
    """

    settings = get_settings()
    fields = payload.to_fields()
    if "gst" not in payload.model_fields_set:
        fields["gst"] = settings.default_gst_percent
    if "discount" not in payload.model_fields_set:
        fields["discount"] = settings.default_discount_percent
    return ok(asdict(lifecycle.create_quote(fields)))


@router.post("/prefill/{customer_id}")
def prefill_quote(customer_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    """Return quote client fields copied from a customer record."""

    customer = repo.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="customer not found")
    return ok(prefill_from_customer(customer))


@router.get("/{quote_id}")
def get_quote(quote_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    return ok(asdict(_quote(repo, quote_id)))


@router.patch("/{quote_id}")
def edit_quote(
    quote_id: str,
    payload: QuotePatch,
    lifecycle: QuoteLifecycle = Depends(get_lifecycle),
) -> dict:
    """Edit a draft, pending or rejected quote."""

    return ok(asdict(lifecycle.edit_quote(quote_id, payload.to_changes())))


@router.put("/{quote_id}/items/{food_item_id}")
def set_quote_line(
    quote_id: str,
    food_item_id: str,
    payload: QuoteLineIn,
    repo: CateringRepo = Depends(get_repo),
    lifecycle: QuoteLifecycle = Depends(get_lifecycle),
) -> dict:
    """Set the vendor and quantity for one food item on a quote.

    An existing line for the food item is replaced; quantity 0 removes it.
    """

    quote = _quote(repo, quote_id)
    items = set_item_quantity(quote.items, food_item_id, payload.vendor_id, payload.quantity)
    return ok(asdict(lifecycle.edit_quote(quote_id, {"items": items})))


@router.delete("/{quote_id}")
def delete_quote(quote_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    if not repo.delete_quote(quote_id):
        raise HTTPException(status_code=404, detail="quote not found")
    return ok({"deleted": True})


@router.post("/{quote_id}/submit")
def submit_quote(quote_id: str, lifecycle: QuoteLifecycle = Depends(get_lifecycle)) -> dict:
    """Send a draft for approval."""
    return ok(asdict(lifecycle.submit(quote_id)))


@router.post("/{quote_id}/approve")
def approve_quote(
    quote_id: str,
    payload: Optional[ApproveIn] = None,
    lifecycle: QuoteLifecycle = Depends(get_lifecycle),
) -> dict:
    approved_by = payload.approved_by if payload else None
    return ok(asdict(lifecycle.approve(quote_id, approved_by)))


@router.post("/{quote_id}/reject")
def reject_quote(quote_id: str, lifecycle: QuoteLifecycle = Depends(get_lifecycle)) -> dict:
    return ok(asdict(lifecycle.reject(quote_id)))


@router.post("/{quote_id}/start")
def start_quote(quote_id: str, lifecycle: QuoteLifecycle = Depends(get_lifecycle)) -> dict:
    """Catering team starts preparing the order."""
    return ok(asdict(lifecycle.start(quote_id)))


@router.post("/{quote_id}/complete")
def complete_quote(quote_id: str, lifecycle: QuoteLifecycle = Depends(get_lifecycle)) -> dict:
    return ok(asdict(lifecycle.complete(quote_id)))


@router.get("/{quote_id}/totals")
def quote_totals(
    quote_id: str,
    repo: CateringRepo = Depends(get_repo),
    role: UserRole = Depends(get_role),
) -> dict:
    """Return the figures the requesting role may see."""

    quote = _quote(repo, quote_id)
    return ok({"role": role.value, "totals": _totals(repo, quote, role)})


@router.get("/{quote_id}/menu")
def quote_menu(quote_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    quote = _quote(repo, quote_id)
    groups = group_quote_items_by_category(
        quote, repo.list_food_items(), repo.list_categories(), repo.list_vendors()
    )
    return ok(_groups(groups))


@router.get("/{quote_id}/print")
def quote_print(
    quote_id: str,
    repo: CateringRepo = Depends(get_repo),
    role: UserRole = Depends(get_role),
) -> dict:
    """Return everything the printable quote renders."""

    quote = _quote(repo, quote_id)
    groups = group_quote_items_by_category(
        quote, repo.list_food_items(), repo.list_categories(), repo.list_vendors()
    )
    return ok(
        {
            "quote": asdict(quote),
            "groups": _groups(groups),
            "misc_expenses": expense_lines(quote.miscellaneous_expenses),
            "totals": _totals(repo, quote, role),
            "currency_symbol": get_settings().currency_symbol,
        }
    )


@router.get("/{quote_id}/customer")
def quote_customer(quote_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    """Return the customer matching the quote's client details, if any."""

    customer = match_customer(_quote(repo, quote_id), repo.list_customers())
    return ok(asdict(customer) if customer else None)
