"""Plain records for the catering back office.

Amounts are kept as :class:`~decimal.Decimal` so totals can be accumulated at
full precision and rounded only when presented.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from .quote_status import QuoteStatus

PERCENT_MIN = Decimal("0")
PERCENT_MAX = Decimal("100")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Diet(str, Enum):
    VEG = "veg"
    NON_VEG = "non-veg"


class UserRole(str, Enum):
    """Who is driving the UI.

    The role only decides which figures a view renders; it is not an
    access-control boundary.
    """

    ADMIN = "admin"
    STAFF = "staff"
    CATERING = "catering"


@dataclass
class Category:
    id: str
    name: str
    description: str = ""
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Vendor:
    id: str
    name: str
    contact_person: str = ""
    phone: str = ""
    email: str = ""
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Customer:
    id: str
    name: str
    email: str = ""
    phone: str = ""
    address: str | None = None
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class VendorPrice:
    vendor_id: str
    cost_price: Decimal
    retail_price: Decimal


@dataclass
class FoodItem:
    """A dish on the menu, priced independently by each supplying vendor.

    ``retail_price`` may be lower than ``cost_price``; a negative margin is
    allowed.
    """

    id: str
    name: str
    category_id: str
    description: str = ""
    diet: Diet = Diet.VEG
    vendor_prices: list[VendorPrice] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class QuoteItem:
    food_item_id: str
    vendor_id: str
    quantity: int


@dataclass
class MiscExpenseItem:
    quantity: Decimal | None = None
    price: Decimal | None = None


@dataclass
class Quote:
    id: str
    client_name: str
    client_email: str
    client_phone: str
    event_date: str
    event_type: str
    venue_address: str
    guest_count: int
    items: list[QuoteItem] = field(default_factory=list)
    status: QuoteStatus = QuoteStatus.DRAFT
    notes: str = ""
    gst: Decimal | None = None
    discount: Decimal | None = None
    miscellaneous_expenses: dict[str, MiscExpenseItem] = field(default_factory=dict)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    approved_at: datetime | None = None
    approved_by: str | None = None


CLIENT_FIELDS = (
    "client_name",
    "client_email",
    "client_phone",
    "event_date",
    "event_type",
    "venue_address",
)
