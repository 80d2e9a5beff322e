# schemas.py

"""Pydantic models for API payloads.

Payloads are converted to domain records with ``to_fields`` (create) and
``to_changes`` (partial update, only the fields the client sent).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.misc_expenses import SLOT_KEYS
from .domain.models import Diet, MiscExpenseItem, QuoteItem, VendorPrice
from .domain.quote_status import QuoteStatus


class _Payload(BaseModel):
    def to_fields(self) -> dict[str, Any]:
        return self._convert(self.model_dump())

    def to_changes(self) -> dict[str, Any]:
        return self._convert(self.model_dump(exclude_unset=True))

    def _convert(self, data: dict[str, Any]) -> dict[str, Any]:
        return data


class _Patch(_Payload):
    """Partial update. A field left out is unchanged; only the fields named in
    ``nullable`` may be cleared by sending ``null``.
    """

    nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            cleared = sorted(
                key
                for key, value in data.items()
                if value is None and key in cls.model_fields and key not in cls.nullable
            )
            if cleared:
                raise ValueError(f"{', '.join(cleared)} may not be null")
        return data


class CategoryIn(_Payload):
    """Input schema for creating a category."""

    name: str = Field(..., min_length=1)
    description: str = ""


class CategoryPatch(_Patch):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None


class VendorIn(_Payload):
    name: str = Field(..., min_length=1)
    contact_person: str = ""
    phone: str = ""
    email: str = ""


class VendorPatch(_Patch):
    name: Optional[str] = Field(None, min_length=1)
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class CustomerIn(_Payload):
    name: str = Field(..., min_length=1)
    email: str = ""
    phone: str = ""
    address: Optional[str] = None


class CustomerPatch(_Patch):
    nullable = frozenset({"address"})

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class VendorPriceIn(BaseModel):
    """Price a vendor charges for a food item.

    No ordering between cost and retail price is enforced.
    """

    vendor_id: str
    cost_price: Decimal = Field(..., ge=0)
    retail_price: Decimal = Field(..., ge=0)


def _vendor_prices(data: dict[str, Any]) -> dict[str, Any]:
    if data.get("vendor_prices") is not None:
        data["vendor_prices"] = [VendorPrice(**vp) for vp in data["vendor_prices"]]
    if data.get("diet") is not None:
        data["diet"] = Diet(data["diet"])
    return data


class FoodItemIn(_Payload):
    """Input schema for creating a food item."""

    name: str = Field(..., min_length=1)
    description: str = ""
    category_id: str
    diet: Diet = Diet.VEG
    vendor_prices: list[VendorPriceIn] = Field(default_factory=list)

    def _convert(self, data: dict[str, Any]) -> dict[str, Any]:
        return _vendor_prices(data)


class FoodItemPatch(_Patch):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category_id: Optional[str] = None
    diet: Optional[Diet] = None
    vendor_prices: Optional[list[VendorPriceIn]] = None

    def _convert(self, data: dict[str, Any]) -> dict[str, Any]:
        return _vendor_prices(data)


class QuoteItemIn(BaseModel):
    food_item_id: str
    vendor_id: str
    quantity: int = Field(..., ge=1)


class MiscExpenseIn(BaseModel):
    quantity: Optional[Decimal] = Field(None, ge=0)
    price: Optional[Decimal] = Field(None, ge=0)


def _check_slots(value: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if value is None:
        return value
    unknown = sorted(set(value) - SLOT_KEYS)
    if unknown:
        raise ValueError(f"unknown expense slot(s): {', '.join(unknown)}")
    return value


def _quote_values(data: dict[str, Any]) -> dict[str, Any]:
    if data.get("items") is not None:
        data["items"] = [QuoteItem(**i) for i in data["items"]]
    if data.get("miscellaneous_expenses") is not None:
        data["miscellaneous_expenses"] = {
            key: MiscExpenseItem(**entry)
            for key, entry in data["miscellaneous_expenses"].items()
            if entry is not None
        }
    if data.get("status") is not None:
        data["status"] = QuoteStatus(data["status"])
    return data


class QuoteIn(_Payload):
    """Input schema for the quote generation form.

    ``gst`` is left unset here; the route fills in the configured default.
    """

    client_name: str
    client_email: str
    client_phone: str
    event_date: str
    event_type: str
    venue_address: str
    guest_count: int = Field(..., ge=1)
    items: list[QuoteItemIn] = Field(default_factory=list)
    notes: str = ""
    status: Optional[QuoteStatus] = None
    gst: Optional[Decimal] = Field(None, ge=0, le=100)
    discount: Optional[Decimal] = Field(None, ge=0, le=100)
    miscellaneous_expenses: dict[str, Optional[MiscExpenseIn]] = Field(default_factory=dict)

    @field_validator("miscellaneous_expenses")
    @classmethod
    def known_slots(cls, value):
        return _check_slots(value)

    def _convert(self, data: dict[str, Any]) -> dict[str, Any]:
        return _quote_values(data)


class QuotePatch(_Patch):
    # null clears a percentage or leaves the status alone
    nullable = frozenset({"gst", "discount", "status"})

    client_name: Optional[str] = None
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    event_date: Optional[str] = None
    event_type: Optional[str] = None
    venue_address: Optional[str] = None
    guest_count: Optional[int] = Field(None, ge=1)
    items: Optional[list[QuoteItemIn]] = None
    notes: Optional[str] = None
    status: Optional[QuoteStatus] = None
    gst: Optional[Decimal] = Field(None, ge=0, le=100)
    discount: Optional[Decimal] = Field(None, ge=0, le=100)
    miscellaneous_expenses: Optional[dict[str, Optional[MiscExpenseIn]]] = None

    @field_validator("miscellaneous_expenses")
    @classmethod
    def known_slots(cls, value):
        return _check_slots(value)

    def _convert(self, data: dict[str, Any]) -> dict[str, Any]:
        return _quote_values(data)


class QuoteLineIn(BaseModel):
    """Set one line of a quote; a quantity of 0 removes the line."""

    vendor_id: str
    quantity: int = Field(..., ge=0)


class ApproveIn(BaseModel):
    approved_by: Optional[str] = None
