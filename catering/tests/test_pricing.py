from decimal import Decimal

import pytest

from catering.app.domain.models import (
    FoodItem,
    MiscExpenseItem,
    Quote,
    QuoteItem,
    UserRole,
    Vendor,
    VendorPrice,
)
from catering.app.services.pricing_service import (
    QuoteTotals,
    calculate_quote_totals,
    calculate_totals,
    expense_lines,
    format_money,
    misc_expenses_total,
    round_money,
    totals_view,
)

NAAN = FoodItem(
    id="f1",
    name="Plain Naan",
    category_id="c1",
    vendor_prices=[VendorPrice("v1", Decimal("12"), Decimal("20"))],
)
SALAD = FoodItem(
    id="f2",
    name="Garden Salad",
    category_id="c2",
    vendor_prices=[VendorPrice("v2", Decimal("5.95"), Decimal("8.50"))],
)
VENDORS = [Vendor(id="v1", name="Vendor A"), Vendor(id="v2", name="Vendor B")]


def test_end_to_end_breakdown():
    totals = calculate_totals(
        [QuoteItem("f1", "v1", 10)],
        [NAAN],
        VENDORS,
        discount=Decimal("10"),
        gst=Decimal("5"),
        miscellaneous_expenses={"transport": MiscExpenseItem(Decimal("1"), Decimal("30"))},
    )
    assert totals.total_retail == 200
    assert totals.subtotal == 200
    assert totals.discount_amount == 20
    assert totals.after_discount == 180
    assert totals.gst_amount == 9
    assert totals.misc_total == 30
    assert totals.final_total == 219
    assert totals.total_cost == 120
    assert totals.profit_margin == 80


def test_gst_applies_after_discount():
    food = FoodItem(
        id="f9",
        name="Tea",
        category_id="c1",
        vendor_prices=[VendorPrice("v1", Decimal("50"), Decimal("100"))],
    )
    totals = calculate_totals(
        [QuoteItem("f9", "v1", 1)], [food], discount=10, gst=5
    )
    assert totals.after_discount == 90
    assert totals.gst_amount == Decimal("4.5")


def test_missing_percentages_count_as_zero():
    totals = calculate_totals([QuoteItem("f1", "v1", 2)], [NAAN])
    assert totals.discount_amount == 0
    assert totals.gst_amount == 0
    assert totals.final_total == 40


def test_empty_selection_is_all_zero():
    assert calculate_totals([], [NAAN], VENDORS, discount=10, gst=5) == QuoteTotals()


def test_empty_selection_keeps_misc_expenses():
    totals = calculate_totals(
        [],
        [],
        miscellaneous_expenses={"gas": MiscExpenseItem(Decimal("2"), Decimal("15"))},
    )
    assert totals.total_retail == 0
    assert totals.final_total == 30


def test_missing_food_item_is_skipped():
    items = [QuoteItem("gone", "v1", 5), QuoteItem("f2", "v2", 2)]
    totals = calculate_totals(items, [NAAN, SALAD], VENDORS)
    assert totals.total_retail == Decimal("17.00")
    assert totals.total_cost == Decimal("11.90")


def test_unpriced_vendor_is_skipped():
    totals = calculate_totals([QuoteItem("f1", "v2", 5)], [NAAN], VENDORS)
    assert totals == QuoteTotals()


def test_deleted_vendor_contributes_nothing():
    items = [QuoteItem("f1", "v1", 10), QuoteItem("f2", "v2", 2)]
    before = calculate_totals(items, [NAAN, SALAD], VENDORS)
    after = calculate_totals(items, [NAAN, SALAD], [VENDORS[1]])
    assert before.total_retail - after.total_retail == 200
    assert before.total_cost - after.total_cost == 120
    assert after.total_retail == Decimal("17.00")


def test_quote_totals_need_the_vendor_list():
    quote = Quote(
        id="q1",
        client_name="Jane Smith",
        client_email="jane@example.com",
        client_phone="555-0456",
        event_date="2024-12-20",
        event_type="Wedding",
        venue_address="456 Garden Palace",
        guest_count=10,
        items=[QuoteItem("f1", "v1", 10), QuoteItem("f2", "v2", 2)],
        gst=Decimal("5"),
    )
    totals = calculate_quote_totals(quote, [NAAN, SALAD], [VENDORS[1]])
    assert totals.total_retail == Decimal("17.00")
    assert totals.gst_amount == Decimal("0.85")
    with pytest.raises(TypeError):
        calculate_quote_totals(quote, [NAAN, SALAD])


def test_misc_expense_aggregation():
    expenses = {
        "transport": MiscExpenseItem(Decimal("2"), Decimal("50")),
        "waiters": MiscExpenseItem(Decimal("3"), Decimal("20")),
    }
    assert misc_expenses_total(expenses) == 160


def test_misc_expense_partial_entries_count_as_zero():
    expenses = {
        "tables": MiscExpenseItem(quantity=Decimal("4")),
        "ice": {"price": "10"},
        "kamlaka": {"quantity": 2, "price": "7.5"},
        "unknown": {"quantity": 1, "price": 1000},
    }
    assert misc_expenses_total(expenses) == 15
    assert misc_expenses_total(None) == 0


def test_expense_lines_lists_charged_slots_in_slot_order():
    expenses = {
        "crockery_cutlery": MiscExpenseItem(Decimal("1"), Decimal("25")),
        "transport": MiscExpenseItem(Decimal("2"), Decimal("50")),
        "ice": MiscExpenseItem(Decimal("3"), None),
    }
    rows = expense_lines(expenses)
    assert [r["label"] for r in rows] == ["Transport", "Crockery / Cutlery"]
    assert rows[0]["total"] == 100


def test_full_precision_until_presentation():
    food = FoodItem(
        id="f3",
        name="Mint",
        category_id="c1",
        vendor_prices=[VendorPrice("v1", Decimal("0.01"), Decimal("0.333"))],
    )
    totals = calculate_totals([QuoteItem("f3", "v1", 3)], [food], gst=5)
    assert totals.total_retail == Decimal("0.999")
    assert round_money(totals.final_total) == Decimal("1.05")
    assert format_money(Decimal("2.005")) == "₹2.01"
    assert format_money(Decimal("10"), "$") == "$10.00"


def test_negative_margin_is_allowed():
    food = FoodItem(
        id="f4",
        name="Loss Leader",
        category_id="c1",
        vendor_prices=[VendorPrice("v1", Decimal("10"), Decimal("8"))],
    )
    totals = calculate_totals([QuoteItem("f4", "v1", 1)], [food])
    assert totals.profit_margin == -2


def test_totals_view_filters_by_role():
    totals = calculate_totals(
        [QuoteItem("f1", "v1", 10)], [NAAN], VENDORS, discount=10, gst=5
    )
    admin = totals_view(totals, UserRole.ADMIN)
    staff = totals_view(totals, UserRole.STAFF)
    catering = totals_view(totals, UserRole.CATERING)

    assert admin["profit_margin"] == {"amount": Decimal("80.00"), "display": "₹80.00"}
    assert admin["total_cost"]["amount"] == Decimal("120.00")
    assert "total_cost" not in staff and "profit_margin" not in staff
    assert staff["final_total"]["display"] == "₹189.00"
    assert catering == {}
