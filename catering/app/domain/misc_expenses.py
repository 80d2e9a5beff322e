"""Miscellaneous flat expenses that can be added to a quote.

Slots are data: adding a new kind of expense means adding a row to
:data:`MISC_EXPENSE_SLOTS`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExpenseSlot:
    key: str
    label: str


MISC_EXPENSE_SLOTS: tuple[ExpenseSlot, ...] = (
    ExpenseSlot("transport", "Transport"),
    ExpenseSlot("waiters", "Waiters"),
    ExpenseSlot("tables", "Tables"),
    ExpenseSlot("kitchen_staff", "Kitchen Staff"),
    ExpenseSlot("kamlaka", "Kamlaka"),
    ExpenseSlot("ice", "Ice"),
    ExpenseSlot("gas", "Gas"),
    ExpenseSlot("crockery_cutlery", "Crockery / Cutlery"),
)

SLOT_KEYS = frozenset(slot.key for slot in MISC_EXPENSE_SLOTS)


def slot_label(key: str) -> str | None:
    """Return the display label for ``key`` or ``None`` if it is not a slot."""

    for slot in MISC_EXPENSE_SLOTS:
        if slot.key == key:
            return slot.label
    return None
