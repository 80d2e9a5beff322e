"""Domain models and helpers."""

from .errors import (
    CateringError,
    InvalidTransitionError,
    QuoteNotEditableError,
    QuoteNotFoundError,
    QuoteValidationError,
)
from .misc_expenses import MISC_EXPENSE_SLOTS, SLOT_KEYS, ExpenseSlot
from .models import (
    Category,
    Customer,
    Diet,
    FoodItem,
    MiscExpenseItem,
    Quote,
    QuoteItem,
    UserRole,
    Vendor,
    VendorPrice,
)
from .quote_status import (
    EDITABLE_STATUSES,
    TRANSITIONS,
    QuoteStatus,
    can_transition,
    is_editable,
)

__all__ = [
    "CateringError",
    "InvalidTransitionError",
    "QuoteNotEditableError",
    "QuoteNotFoundError",
    "QuoteValidationError",
    "MISC_EXPENSE_SLOTS",
    "SLOT_KEYS",
    "ExpenseSlot",
    "Category",
    "Customer",
    "Diet",
    "FoodItem",
    "MiscExpenseItem",
    "Quote",
    "QuoteItem",
    "UserRole",
    "Vendor",
    "VendorPrice",
    "EDITABLE_STATUSES",
    "TRANSITIONS",
    "QuoteStatus",
    "can_transition",
    "is_editable",
]
