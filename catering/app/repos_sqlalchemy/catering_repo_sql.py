"""SQLAlchemy implementation of the catering repository."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from ..domain.models import (
    Category,
    Customer,
    Diet,
    FoodItem,
    MiscExpenseItem,
    Quote,
    QuoteItem,
    Vendor,
    VendorPrice,
    utcnow,
)
from ..domain.quote_status import QuoteStatus
from ..models_catering import CategoryRow, CustomerRow, FoodItemRow, QuoteRow, VendorRow
from ..repos.catering_repo import CateringRepo

logger = logging.getLogger(__name__)


def _aware(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _amount(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


def _decimal(value: str | None) -> Decimal | None:
    return None if value is None else Decimal(value)


# Row -> record


def _to_category(row: CategoryRow) -> Category:
    return Category(
        id=row.id,
        name=row.name,
        description=row.description,
        created_at=_aware(row.created_at),
    )


def _to_vendor(row: VendorRow) -> Vendor:
    return Vendor(
        id=row.id,
        name=row.name,
        contact_person=row.contact_person,
        phone=row.phone,
        email=row.email,
        created_at=_aware(row.created_at),
    )


def _to_customer(row: CustomerRow) -> Customer:
    return Customer(
        id=row.id,
        name=row.name,
        email=row.email,
        phone=row.phone,
        address=row.address,
        created_at=_aware(row.created_at),
    )


def _to_food_item(row: FoodItemRow) -> FoodItem:
    return FoodItem(
        id=row.id,
        name=row.name,
        description=row.description,
        category_id=row.category_id,
        diet=Diet(row.diet),
        vendor_prices=[
            VendorPrice(
                vendor_id=vp["vendor_id"],
                cost_price=Decimal(vp["cost_price"]),
                retail_price=Decimal(vp["retail_price"]),
            )
            for vp in row.vendor_prices or []
        ],
        created_at=_aware(row.created_at),
    )


def _to_quote(row: QuoteRow) -> Quote:
    return Quote(
        id=row.id,
        client_name=row.client_name,
        client_email=row.client_email,
        client_phone=row.client_phone,
        event_date=row.event_date,
        event_type=row.event_type,
        venue_address=row.venue_address,
        guest_count=row.guest_count,
        items=[
            QuoteItem(i["food_item_id"], i["vendor_id"], int(i["quantity"]))
            for i in row.items or []
        ],
        status=QuoteStatus(row.status),
        notes=row.notes,
        gst=_decimal(row.gst),
        discount=_decimal(row.discount),
        miscellaneous_expenses={
            key: MiscExpenseItem(_decimal(v.get("quantity")), _decimal(v.get("price")))
            for key, v in (row.miscellaneous_expenses or {}).items()
        },
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
        approved_at=_aware(row.approved_at),
        approved_by=row.approved_by,
    )


# Record fields -> columns; only keys present in ``fields`` are converted


def _plain_columns(fields: Mapping[str, Any]) -> dict[str, Any]:
    return dict(fields)


def _food_item_columns(fields: Mapping[str, Any]) -> dict[str, Any]:
    columns = dict(fields)
    if "diet" in columns:
        columns["diet"] = Diet(columns["diet"]).value
    if "vendor_prices" in columns:
        columns["vendor_prices"] = [
            {
                "vendor_id": vp.vendor_id,
                "cost_price": str(vp.cost_price),
                "retail_price": str(vp.retail_price),
            }
            for vp in columns["vendor_prices"] or []
        ]
    return columns


def _quote_columns(fields: Mapping[str, Any]) -> dict[str, Any]:
    columns = dict(fields)
    if "status" in columns:
        columns["status"] = QuoteStatus(columns["status"]).value
    if "items" in columns:
        columns["items"] = [
            {
                "food_item_id": i.food_item_id,
                "vendor_id": i.vendor_id,
                "quantity": i.quantity,
            }
            for i in columns["items"] or []
        ]
    if "miscellaneous_expenses" in columns:
        columns["miscellaneous_expenses"] = {
            key: {"quantity": _amount(item.quantity), "price": _amount(item.price)}
            for key, item in (columns["miscellaneous_expenses"] or {}).items()
        }
    for name in ("gst", "discount"):
        if name in columns:
            columns[name] = _amount(columns[name])
    return columns


class CateringRepoSQL(CateringRepo):
    """Concrete CateringRepo using SQLAlchemy with a synchronous Session."""

    def __init__(
        self, session_factory: sessionmaker, clock: Callable[[], datetime] = utcnow
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock

    def _list(self, model, to_record) -> list:
        with self._session_factory() as session:
            rows = session.scalars(select(model).order_by(model.seq)).all()
            return [to_record(row) for row in rows]

    def _get(self, model, to_record, record_id: str):
        with self._session_factory() as session:
            row = session.scalars(select(model).where(model.id == record_id)).first()
            return None if row is None else to_record(row)

    def _add(
        self,
        model,
        to_record,
        to_columns,
        fields: Mapping[str, Any],
        *,
        stamp_updated: bool = False,
    ):
        data = {
            k: v
            for k, v in fields.items()
            if k not in {"id", "created_at", "updated_at"}
        }
        now = self._clock()
        if stamp_updated:
            data["updated_at"] = now
        with self._session_factory() as session:
            row = model(id=uuid.uuid4().hex, created_at=now, **to_columns(data))
            session.add(row)
            session.commit()
            return to_record(row)

    def _update(self, model, to_record, to_columns, record_id: str, changes: Mapping[str, Any]):
        with self._session_factory() as session:
            row = session.scalars(select(model).where(model.id == record_id)).first()
            if row is None:
                logger.debug("%s %s not found for update", model.__tablename__, record_id)
                return None
            for key, value in to_columns(changes).items():
                if key in {"id", "seq"}:
                    continue
                setattr(row, key, value)
            session.commit()
            return to_record(row)

    def _delete(self, model, record_id: str) -> bool:
        with self._session_factory() as session:
            row = session.scalars(select(model).where(model.id == record_id)).first()
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True

    # Categories

    def list_categories(self) -> list[Category]:
        return self._list(CategoryRow, _to_category)

    def add_category(self, fields: Mapping[str, Any]) -> Category:
        return self._add(CategoryRow, _to_category, _plain_columns, fields)

    def update_category(self, category_id: str, changes: Mapping[str, Any]) -> Category | None:
        return self._update(CategoryRow, _to_category, _plain_columns, category_id, changes)

    def delete_category(self, category_id: str) -> bool:
        return self._delete(CategoryRow, category_id)

    # Vendors

    def list_vendors(self) -> list[Vendor]:
        return self._list(VendorRow, _to_vendor)

    def add_vendor(self, fields: Mapping[str, Any]) -> Vendor:
        return self._add(VendorRow, _to_vendor, _plain_columns, fields)

    def update_vendor(self, vendor_id: str, changes: Mapping[str, Any]) -> Vendor | None:
        return self._update(VendorRow, _to_vendor, _plain_columns, vendor_id, changes)

    def delete_vendor(self, vendor_id: str) -> bool:
        return self._delete(VendorRow, vendor_id)

    # Customers

    def list_customers(self) -> list[Customer]:
        return self._list(CustomerRow, _to_customer)

    def get_customer(self, customer_id: str) -> Customer | None:
        return self._get(CustomerRow, _to_customer, customer_id)

    def add_customer(self, fields: Mapping[str, Any]) -> Customer:
        return self._add(CustomerRow, _to_customer, _plain_columns, fields)

    def update_customer(self, customer_id: str, changes: Mapping[str, Any]) -> Customer | None:
        return self._update(CustomerRow, _to_customer, _plain_columns, customer_id, changes)

    def delete_customer(self, customer_id: str) -> bool:
        return self._delete(CustomerRow, customer_id)

    # Food items

    def list_food_items(self) -> list[FoodItem]:
        return self._list(FoodItemRow, _to_food_item)

    def add_food_item(self, fields: Mapping[str, Any]) -> FoodItem:
        return self._add(FoodItemRow, _to_food_item, _food_item_columns, fields)

    def bulk_add_food_items(self, items: Iterable[Mapping[str, Any]]) -> list[FoodItem]:
        now = self._clock()
        with self._session_factory() as session:
            rows = [
                FoodItemRow(
                    id=uuid.uuid4().hex,
                    created_at=now,
                    **_food_item_columns(
                        {
                            k: v
                            for k, v in fields.items()
                            if k not in {"id", "created_at", "updated_at"}
                        }
                    ),
                )
                for fields in items
            ]
            session.add_all(rows)
            session.commit()
            return [_to_food_item(row) for row in rows]

    def update_food_item(self, food_item_id: str, changes: Mapping[str, Any]) -> FoodItem | None:
        return self._update(FoodItemRow, _to_food_item, _food_item_columns, food_item_id, changes)

    def delete_food_item(self, food_item_id: str) -> bool:
        return self._delete(FoodItemRow, food_item_id)

    # Quotes

    def list_quotes(self) -> list[Quote]:
        return self._list(QuoteRow, _to_quote)

    def get_quote(self, quote_id: str) -> Quote | None:
        return self._get(QuoteRow, _to_quote, quote_id)

    def add_quote(self, fields: Mapping[str, Any]) -> Quote:
        return self._add(QuoteRow, _to_quote, _quote_columns, fields, stamp_updated=True)

    def update_quote(self, quote_id: str, changes: Mapping[str, Any]) -> Quote | None:
        return self._update(
            QuoteRow,
            _to_quote,
            _quote_columns,
            quote_id,
            {**changes, "updated_at": self._clock()},
        )

    def delete_quote(self, quote_id: str) -> bool:
        return self._delete(QuoteRow, quote_id)
