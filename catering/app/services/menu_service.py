"""Resolve quote line items against the menu catalogue.

Every lookup here returns ``None`` instead of raising when a reference is
missing. Callers skip such lines, so totals and groupings stay computable
after a food item, vendor or category has been deleted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..domain.errors import QuoteValidationError
from ..domain.models import Category, FoodItem, Quote, QuoteItem, Vendor, VendorPrice

logger = logging.getLogger(__name__)

UNKNOWN_VENDOR = "Unknown"


@dataclass(frozen=True)
class ResolvedLine:
    """A quote line whose food item and vendor price were both found."""

    quote_item: QuoteItem
    food_item: FoodItem
    vendor_price: VendorPrice


@dataclass(frozen=True)
class MenuEntry:
    food_item: FoodItem
    quantity: int
    vendor_name: str


@dataclass(frozen=True)
class CategoryGroup:
    category: Category
    entries: tuple[MenuEntry, ...]


def resolve_vendor_price(food_item: FoodItem, vendor_id: str) -> VendorPrice | None:
    """Return the price ``vendor_id`` charges for ``food_item`` if any."""

    for vendor_price in food_item.vendor_prices:
        if vendor_price.vendor_id == vendor_id:
            return vendor_price
    return None


def vendor_name(vendors: Iterable[Vendor], vendor_id: str) -> str:
    """Return the vendor's name or ``UNKNOWN_VENDOR`` for dangling ids."""

    for vendor in vendors:
        if vendor.id == vendor_id:
            return vendor.name
    return UNKNOWN_VENDOR


def _index(records: Iterable) -> dict:
    # first record wins when ids repeat, matching a linear search
    index: dict = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


def resolve_lines(
    items: Iterable[QuoteItem],
    food_items: Iterable[FoodItem],
    vendors: Iterable[Vendor] | None = None,
) -> list[ResolvedLine]:
    """Resolve each line to its food item and vendor price.

    Lines whose food item is missing, whose vendor never priced the item, or
    (when ``vendors`` is given) whose vendor no longer exists are skipped.
    """

    foods = _index(food_items)
    known_vendors = None if vendors is None else set(_index(vendors))
    resolved: list[ResolvedLine] = []
    for item in items:
        food = foods.get(item.food_item_id)
        if food is None:
            logger.debug("skipping line: food item %s missing", item.food_item_id)
            continue
        if known_vendors is not None and item.vendor_id not in known_vendors:
            logger.debug("skipping line: vendor %s missing", item.vendor_id)
            continue
        price = resolve_vendor_price(food, item.vendor_id)
        if price is None:
            logger.debug(
                "skipping line: vendor %s has no price for %s",
                item.vendor_id,
                item.food_item_id,
            )
            continue
        resolved.append(ResolvedLine(item, food, price))
    return resolved


def group_quote_items_by_category(
    quote: Quote,
    food_items: Sequence[FoodItem],
    categories: Sequence[Category],
    vendors: Sequence[Vendor] = (),
) -> list[CategoryGroup]:
    """Group a quote's lines by menu category for the working and print views.

    Groups follow the order of ``categories``; entries inside a group follow
    the order of ``quote.items``. Lines pointing at a missing food item, or at
    a food item whose category is missing, are dropped. A missing vendor only
    shows up as ``UNKNOWN_VENDOR``.
    """

    foods = _index(food_items)
    known_categories = _index(categories)
    buckets: dict[str, list[MenuEntry]] = {}
    for item in quote.items:
        food = foods.get(item.food_item_id)
        if food is None or food.category_id not in known_categories:
            continue
        buckets.setdefault(food.category_id, []).append(
            MenuEntry(
                food_item=food,
                quantity=item.quantity,
                vendor_name=vendor_name(vendors, item.vendor_id),
            )
        )

    groups: list[CategoryGroup] = []
    for category in categories:
        entries = buckets.pop(category.id, None)
        if entries:
            groups.append(CategoryGroup(category, tuple(entries)))
    return groups


def filter_food_items(
    food_items: Iterable[FoodItem],
    category_id: str | None = None,
    search: str | None = None,
) -> list[FoodItem]:
    """Return food items in ``category_id`` matching ``search``.

    ``search`` is a case-insensitive substring match over name and description.
    """

    items = list(food_items)
    if category_id:
        items = [i for i in items if i.category_id == category_id]
    term = (search or "").strip().lower()
    if term:
        items = [
            i
            for i in items
            if term in i.name.lower() or term in i.description.lower()
        ]
    return items


def ensure_priced(vendor_prices: Sequence[VendorPrice] | None) -> None:
    """Reject food item payloads that no vendor prices."""

    if not vendor_prices:
        raise QuoteValidationError(
            "NO_VENDOR_PRICE",
            "Please add at least one vendor with pricing",
            hint="Add a vendor price before saving the food item",
        )
