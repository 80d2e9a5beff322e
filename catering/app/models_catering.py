"""Database tables for catering records.

Each table carries an auto-increment ``seq`` column so listings come back in
insertion order, plus the string ``id`` exposed to callers. Nested values
(vendor prices, quote lines, miscellaneous expenses) are stored as JSON with
amounts kept as strings to avoid float rounding.
"""

from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CategoryRow(Base):
    __tablename__ = "categories"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False)


class VendorRow(Base):
    __tablename__ = "vendors"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    contact_person = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False)


class CustomerRow(Base):
    __tablename__ = "customers"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")
    address = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)


class FoodItemRow(Base):
    __tablename__ = "food_items"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    # not a foreign key: categories may be deleted while still referenced
    category_id = Column(String(64), nullable=False)
    diet = Column(String(16), nullable=False, default="veg")
    vendor_prices = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False)


class QuoteRow(Base):
    __tablename__ = "quotes"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    client_name = Column(String, nullable=False)
    client_email = Column(String, nullable=False)
    client_phone = Column(String, nullable=False)
    event_date = Column(String(32), nullable=False)
    event_type = Column(String, nullable=False)
    venue_address = Column(Text, nullable=False)
    guest_count = Column(Integer, nullable=False)
    items = Column(JSON, nullable=False, default=list)
    status = Column(String(16), nullable=False, default="draft")
    notes = Column(Text, nullable=False, default="")
    gst = Column(String(32), nullable=True)
    discount = Column(String(32), nullable=True)
    miscellaneous_expenses = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    approved_by = Column(String, nullable=True)
