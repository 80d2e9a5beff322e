"""In-memory implementation of the catering repository."""

from __future__ import annotations

import copy
import dataclasses
import logging
import threading
import uuid
from datetime import datetime
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

from ..domain.models import (
    Category,
    Customer,
    FoodItem,
    Quote,
    Vendor,
    utcnow,
)
from ..repos.catering_repo import CateringRepo

logger = logging.getLogger(__name__)

T = TypeVar("T")


def new_id() -> str:
    return uuid.uuid4().hex


class _Table(Generic[T]):
    """Ordered collection of records keyed by their ``id`` attribute."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._rows: list[T] = []

    def all(self) -> list[T]:
        return copy.deepcopy(self._rows)

    def get(self, record_id: str) -> T | None:
        for row in self._rows:
            if row.id == record_id:  # type: ignore[attr-defined]
                return copy.deepcopy(row)
        return None

    def add(self, record: T) -> T:
        self._rows.append(record)
        return copy.deepcopy(record)

    def update(self, record_id: str, changes: Mapping[str, Any]) -> T | None:
        for index, row in enumerate(self._rows):
            if row.id == record_id:  # type: ignore[attr-defined]
                # identity is fixed once created
                fields = {k: v for k, v in changes.items() if k != "id"}
                self._rows[index] = dataclasses.replace(row, **copy.deepcopy(fields))
                return copy.deepcopy(self._rows[index])
        logger.debug("%s %s not found for update", self.name, record_id)
        return None

    def delete(self, record_id: str) -> bool:
        for index, row in enumerate(self._rows):
            if row.id == record_id:  # type: ignore[attr-defined]
                del self._rows[index]
                return True
        return False


class CateringRepoMemory(CateringRepo):
    """Concrete CateringRepo keeping records in process memory.

    A re-entrant lock keeps each call atomic. Two callers editing the same
    quote can still overwrite each other's changes.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self._categories: _Table[Category] = _Table("category")
        self._vendors: _Table[Vendor] = _Table("vendor")
        self._customers: _Table[Customer] = _Table("customer")
        self._food_items: _Table[FoodItem] = _Table("food_item")
        self._quotes: _Table[Quote] = _Table("quote")

    def _create(
        self,
        table: _Table[T],
        factory: type[T],
        fields: Mapping[str, Any],
        *,
        stamp_updated: bool = False,
    ) -> T:
        data = {
            k: copy.deepcopy(v)
            for k, v in fields.items()
            if k not in {"id", "created_at", "updated_at"}
        }
        with self._lock:
            now = self._clock()
            if stamp_updated:
                data["updated_at"] = now
            record = factory(id=new_id(), created_at=now, **data)
            return table.add(record)

    # Categories

    def list_categories(self) -> list[Category]:
        with self._lock:
            return self._categories.all()

    def add_category(self, fields: Mapping[str, Any]) -> Category:
        return self._create(self._categories, Category, fields)

    def update_category(self, category_id: str, changes: Mapping[str, Any]) -> Category | None:
        with self._lock:
            return self._categories.update(category_id, changes)

    def delete_category(self, category_id: str) -> bool:
        with self._lock:
            return self._categories.delete(category_id)

    # Vendors

    def list_vendors(self) -> list[Vendor]:
        with self._lock:
            return self._vendors.all()

    def add_vendor(self, fields: Mapping[str, Any]) -> Vendor:
        return self._create(self._vendors, Vendor, fields)

    def update_vendor(self, vendor_id: str, changes: Mapping[str, Any]) -> Vendor | None:
        with self._lock:
            return self._vendors.update(vendor_id, changes)

    def delete_vendor(self, vendor_id: str) -> bool:
        with self._lock:
            return self._vendors.delete(vendor_id)

    # Customers

    def list_customers(self) -> list[Customer]:
        with self._lock:
            return self._customers.all()

    def get_customer(self, customer_id: str) -> Customer | None:
        with self._lock:
            return self._customers.get(customer_id)

    def add_customer(self, fields: Mapping[str, Any]) -> Customer:
        return self._create(self._customers, Customer, fields)

    def update_customer(self, customer_id: str, changes: Mapping[str, Any]) -> Customer | None:
        with self._lock:
            return self._customers.update(customer_id, changes)

    def delete_customer(self, customer_id: str) -> bool:
        with self._lock:
            return self._customers.delete(customer_id)

    # Food items

    def list_food_items(self) -> list[FoodItem]:
        with self._lock:
            return self._food_items.all()

    def add_food_item(self, fields: Mapping[str, Any]) -> FoodItem:
        return self._create(self._food_items, FoodItem, fields)

    def bulk_add_food_items(self, items: Iterable[Mapping[str, Any]]) -> list[FoodItem]:
        with self._lock:
            return [self.add_food_item(fields) for fields in items]

    def update_food_item(self, food_item_id: str, changes: Mapping[str, Any]) -> FoodItem | None:
        with self._lock:
            return self._food_items.update(food_item_id, changes)

    def delete_food_item(self, food_item_id: str) -> bool:
        with self._lock:
            return self._food_items.delete(food_item_id)

    # Quotes

    def list_quotes(self) -> list[Quote]:
        with self._lock:
            return self._quotes.all()

    def get_quote(self, quote_id: str) -> Quote | None:
        with self._lock:
            return self._quotes.get(quote_id)

    def add_quote(self, fields: Mapping[str, Any]) -> Quote:
        return self._create(self._quotes, Quote, fields, stamp_updated=True)

    def update_quote(self, quote_id: str, changes: Mapping[str, Any]) -> Quote | None:
        with self._lock:
            return self._quotes.update(
                quote_id, {**changes, "updated_at": self._clock()}
            )

    def delete_quote(self, quote_id: str) -> bool:
        with self._lock:
            return self._quotes.delete(quote_id)
