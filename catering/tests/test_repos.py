from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from catering.app.db import create_session_factory
from catering.app.domain.models import (
    Diet,
    MiscExpenseItem,
    QuoteItem,
    VendorPrice,
)
from catering.app.domain.quote_status import QuoteStatus
from catering.app.repos_memory import CateringRepoMemory
from catering.app.repos_sqlalchemy import CateringRepoSQL


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 12, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def tick(self):
        self.now += timedelta(minutes=5)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(params=["memory", "sql"])
def store(request, clock):
    if request.param == "memory":
        return CateringRepoMemory(clock=clock)
    session_factory, engine = create_session_factory("sqlite://")
    request.addfinalizer(engine.dispose)
    return CateringRepoSQL(session_factory, clock=clock)


def _quote_fields(**overrides):
    fields = {
        "client_name": "Jane Smith",
        "client_email": "jane@example.com",
        "client_phone": "555-0456",
        "event_date": "2024-12-20",
        "event_type": "Wedding",
        "venue_address": "456 Garden Palace",
        "guest_count": 150,
        "items": [QuoteItem("f1", "v1", 150)],
        "status": QuoteStatus.PENDING,
        "gst": Decimal("5"),
        "miscellaneous_expenses": {
            "transport": MiscExpenseItem(Decimal("2"), Decimal("50")),
            "ice": MiscExpenseItem(quantity=Decimal("3")),
        },
    }
    fields.update(overrides)
    return fields


def test_add_assigns_unique_ids_and_timestamps(store, clock):
    first = store.add_category({"name": "Soups", "id": "forced"})
    second = store.add_category({"name": "Egg Items"})
    assert first.id != second.id
    assert first.id != "forced"
    assert first.created_at == clock.now
    assert [c.name for c in store.list_categories()] == ["Soups", "Egg Items"]


def test_update_merges_fields(store):
    vendor = store.add_vendor({"name": "Vendor A", "phone": "555-4000"})
    updated = store.update_vendor(vendor.id, {"phone": "555-4001"})
    assert updated.name == "Vendor A"
    assert updated.phone == "555-4001"
    assert updated.id == vendor.id


def test_missing_ids_are_signalled_not_raised(store):
    assert store.update_category("missing", {"name": "x"}) is None
    assert store.update_quote("missing", {"notes": "x"}) is None
    assert store.delete_vendor("missing") is False
    assert store.get_quote("missing") is None
    assert store.get_customer("missing") is None


def test_delete_does_not_cascade(store):
    category = store.add_category({"name": "Soups"})
    vendor = store.add_vendor({"name": "Vendor C"})
    food = store.add_food_item(
        {
            "name": "Tomato Soup",
            "category_id": category.id,
            "vendor_prices": [VendorPrice(vendor.id, Decimal("4.20"), Decimal("6"))],
        }
    )
    assert store.delete_category(category.id) is True
    assert store.delete_vendor(vendor.id) is True
    (kept,) = store.list_food_items()
    assert kept.id == food.id
    assert kept.category_id == category.id
    assert kept.vendor_prices[0].vendor_id == vendor.id


def test_food_item_round_trip(store):
    food = store.add_food_item(
        {
            "name": "Chicken 65",
            "category_id": "c1",
            "diet": Diet.NON_VEG,
            "description": "Spicy fried chicken appetizer",
            "vendor_prices": [
                VendorPrice("v1", Decimal("9.80"), Decimal("14.00")),
                VendorPrice("v2", Decimal("9.10"), Decimal("13.00")),
            ],
        }
    )
    (stored,) = store.list_food_items()
    assert stored == food
    assert stored.diet is Diet.NON_VEG
    assert stored.vendor_prices[1].cost_price == Decimal("9.10")


def test_bulk_add_food_items(store):
    rows = [
        {"name": "Gulab Jamun", "category_id": "c1"},
        {"name": "Rasgulla", "category_id": "c1"},
    ]
    added = store.bulk_add_food_items(rows)
    assert [f.name for f in added] == ["Gulab Jamun", "Rasgulla"]
    assert len({f.id for f in added}) == 2
    assert store.list_food_items() == added


def test_quote_round_trip(store, clock):
    quote = store.add_quote(_quote_fields())
    fetched = store.get_quote(quote.id)
    assert fetched == quote
    assert fetched.status is QuoteStatus.PENDING
    assert fetched.gst == Decimal("5")
    assert fetched.discount is None
    assert fetched.miscellaneous_expenses["ice"].price is None
    assert fetched.created_at == fetched.updated_at == clock.now


def test_quote_percentages_keep_full_precision(store):
    quote = store.add_quote(_quote_fields(gst=Decimal("12.345"), discount=Decimal("3.333")))
    fetched = store.get_quote(quote.id)
    assert fetched.gst == Decimal("12.345")
    assert fetched.discount == Decimal("3.333")

    store.update_quote(quote.id, {"gst": Decimal("18.125"), "discount": None})
    fetched = store.get_quote(quote.id)
    assert fetched.gst == Decimal("18.125")
    assert fetched.discount is None


def test_quote_update_always_stamps_updated_at(store, clock):
    quote = store.add_quote(_quote_fields())
    clock.tick()
    updated = store.update_quote(quote.id, {})
    assert updated.updated_at == clock.now
    assert updated.created_at == quote.created_at
    assert updated.notes == quote.notes


def test_customer_crud(store):
    customer = store.add_customer(
        {"name": "Rajesh Kumar", "email": "rajesh.kumar@example.com", "phone": "9876543210"}
    )
    assert store.get_customer(customer.id).address is None
    store.update_customer(customer.id, {"address": "123 Main Street, Mumbai"})
    assert store.get_customer(customer.id).address == "123 Main Street, Mumbai"
    assert store.delete_customer(customer.id) is True
    assert store.list_customers() == []


def test_memory_reads_are_copies():
    repo = CateringRepoMemory()
    quote = repo.add_quote(_quote_fields())
    quote.items.append(QuoteItem("f2", "v1", 1))
    listed = repo.list_quotes()
    listed[0].items.clear()
    listed.clear()
    assert repo.get_quote(quote.id).items == [QuoteItem("f1", "v1", 150)]
    assert len(repo.list_quotes()) == 1


def test_memory_add_copies_caller_fields():
    repo = CateringRepoMemory()
    prices = [VendorPrice("v1", Decimal("1"), Decimal("2"))]
    food = repo.add_food_item({"name": "Roti", "category_id": "c1", "vendor_prices": prices})
    prices.append(VendorPrice("v2", Decimal("1"), Decimal("2")))
    assert len(repo.list_food_items()[0].vendor_prices) == 1
    assert food.vendor_prices == prices[:1]
