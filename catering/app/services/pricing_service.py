from __future__ import annotations

"""Quote pricing: discount, then GST, then flat miscellaneous expenses."""

from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping

from ..domain.misc_expenses import MISC_EXPENSE_SLOTS
from ..domain.models import FoodItem, MiscExpenseItem, Quote, QuoteItem, UserRole, Vendor
from .menu_service import resolve_lines

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


def _dec(value: object) -> Decimal:
    """Convert ``value`` to :class:`Decimal`, treating ``None`` as zero."""

    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class QuoteTotals:
    """Full-precision financial breakdown of a quote."""

    total_cost: Decimal = ZERO
    total_retail: Decimal = ZERO
    discount_amount: Decimal = ZERO
    after_discount: Decimal = ZERO
    gst_amount: Decimal = ZERO
    misc_total: Decimal = ZERO
    final_total: Decimal = ZERO

    @property
    def subtotal(self) -> Decimal:
        return self.total_retail

    @property
    def profit_margin(self) -> Decimal:
        """Vendor markup: pre-discount retail minus cost."""

        return self.total_retail - self.total_cost


def misc_expenses_total(
    expenses: Mapping[str, MiscExpenseItem | Mapping[str, object] | None] | None,
) -> Decimal:
    """Sum ``quantity * price`` over the known expense slots.

    Absent slots and absent sub-fields count as zero. Keys that are not
    expense slots are ignored.
    """

    if not expenses:
        return ZERO
    total = ZERO
    for slot in MISC_EXPENSE_SLOTS:
        entry = expenses.get(slot.key)
        if entry is None:
            continue
        if isinstance(entry, Mapping):
            quantity, price = entry.get("quantity"), entry.get("price")
        else:
            quantity, price = entry.quantity, entry.price
        total += _dec(quantity) * _dec(price)
    return total


def expense_lines(
    expenses: Mapping[str, MiscExpenseItem | None] | None,
) -> list[dict[str, object]]:
    """Return labelled rows for the expense slots that add a charge."""

    rows: list[dict[str, object]] = []
    for slot in MISC_EXPENSE_SLOTS:
        entry = (expenses or {}).get(slot.key)
        if entry is None:
            continue
        total = _dec(entry.quantity) * _dec(entry.price)
        if total:
            rows.append(
                {
                    "key": slot.key,
                    "label": slot.label,
                    "quantity": _dec(entry.quantity),
                    "price": _dec(entry.price),
                    "total": total,
                }
            )
    return rows


def calculate_totals(
    items: Iterable[QuoteItem],
    food_items: Iterable[FoodItem],
    vendors: Iterable[Vendor] | None = None,
    *,
    discount: Decimal | float | None = None,
    gst: Decimal | float | None = None,
    miscellaneous_expenses: Mapping[str, MiscExpenseItem] | None = None,
) -> QuoteTotals:
    """Compute totals for a selection of quote lines.

    Lines that cannot be resolved to a food item and vendor price contribute
    nothing. An empty selection yields all-zero totals apart from the
    miscellaneous expenses. ``discount`` and ``gst`` are percentages and
    default to ``0``.

    Examples
    --------
    With one line of 10 at retail 20 / cost 12, 10% discount, 5% GST and a
    transport charge of 30 the breakdown is ``total_retail=200``,
    ``discount_amount=20``, ``after_discount=180``, ``gst_amount=9``,
    ``misc_total=30`` and ``final_total=219``.
    """

    total_cost = ZERO
    total_retail = ZERO
    for line in resolve_lines(items, food_items, vendors):
        quantity = _dec(line.quote_item.quantity)
        total_cost += _dec(line.vendor_price.cost_price) * quantity
        total_retail += _dec(line.vendor_price.retail_price) * quantity

    discount_amount = total_retail * _dec(discount) / HUNDRED
    after_discount = total_retail - discount_amount
    gst_amount = after_discount * _dec(gst) / HUNDRED
    misc_total = misc_expenses_total(miscellaneous_expenses)

    return QuoteTotals(
        total_cost=total_cost,
        total_retail=total_retail,
        discount_amount=discount_amount,
        after_discount=after_discount,
        gst_amount=gst_amount,
        misc_total=misc_total,
        final_total=after_discount + gst_amount + misc_total,
    )


def calculate_quote_totals(
    quote: Quote,
    food_items: Iterable[FoodItem],
    vendors: Iterable[Vendor],
) -> QuoteTotals:
    """Compute totals for a stored quote.

    Lines whose vendor is not in ``vendors`` contribute nothing.
    """

    return calculate_totals(
        quote.items,
        food_items,
        vendors,
        discount=quote.discount,
        gst=quote.gst,
        miscellaneous_expenses=quote.miscellaneous_expenses,
    )


def round_money(amount: Decimal) -> Decimal:
    """Round ``amount`` half-up to two decimal places for display."""

    return _dec(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal, symbol: str = "₹") -> str:
    return f"{symbol}{round_money(amount)}"


# Figures each role sees; cost and margin are admin-only.
ROLE_FIELDS: dict[UserRole, tuple[str, ...]] = {
    UserRole.ADMIN: (
        "total_cost",
        "total_retail",
        "discount_amount",
        "after_discount",
        "gst_amount",
        "misc_total",
        "final_total",
        "profit_margin",
    ),
    UserRole.STAFF: (
        "total_retail",
        "discount_amount",
        "after_discount",
        "gst_amount",
        "misc_total",
        "final_total",
    ),
    UserRole.CATERING: (),
}


def totals_view(
    totals: QuoteTotals, role: UserRole, symbol: str = "₹"
) -> dict[str, dict[str, object]]:
    """Return the figures ``role`` may see, rounded and formatted.

    Each figure maps to ``{"amount": Decimal, "display": str}``.
    """

    figures = {**asdict(totals), "profit_margin": totals.profit_margin}
    return {
        name: {
            "amount": round_money(figures[name]),
            "display": format_money(figures[name], symbol),
        }
        for name in ROLE_FIELDS[role]
    }
