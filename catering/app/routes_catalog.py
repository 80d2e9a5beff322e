"""Category, vendor, customer and food item management routes.

Deletes never cascade: food items and quotes may keep pointing at removed
categories or vendors, which then resolve as unknown.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from .deps.catering import get_repo
from .repos.catering_repo import CateringRepo
from .schemas import (
    CategoryIn,
    CategoryPatch,
    CustomerIn,
    CustomerPatch,
    FoodItemIn,
    FoodItemPatch,
    VendorIn,
    VendorPatch,
)
from .services.menu_service import ensure_priced, filter_food_items
from .utils.responses import ok

router = APIRouter(prefix="/api")


def _found(record, kind: str):
    if record is None:
        raise HTTPException(status_code=404, detail=f"{kind} not found")
    return asdict(record)


def _deleted(removed: bool, kind: str) -> dict:
    if not removed:
        raise HTTPException(status_code=404, detail=f"{kind} not found")
    return ok({"deleted": True})


# Categories


@router.get("/categories")
def list_categories(repo: CateringRepo = Depends(get_repo)) -> dict:
    return ok([asdict(c) for c in repo.list_categories()])


@router.post("/categories", status_code=201)
def create_category(payload: CategoryIn, repo: CateringRepo = Depends(get_repo)) -> dict:
    return ok(asdict(repo.add_category(payload.to_fields())))


@router.patch("/categories/{category_id}")
def update_category(
    category_id: str, payload: CategoryPatch, repo: CateringRepo = Depends(get_repo)
) -> dict:
    return ok(_found(repo.update_category(category_id, payload.to_changes()), "category"))


@router.delete("/categories/{category_id}")
def delete_category(category_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    return _deleted(repo.delete_category(category_id), "category")


# Vendors


@router.get("/vendors")
def list_vendors(repo: CateringRepo = Depends(get_repo)) -> dict:
    return ok([asdict(v) for v in repo.list_vendors()])


@router.post("/vendors", status_code=201)
def create_vendor(payload: VendorIn, repo: CateringRepo = Depends(get_repo)) -> dict:
    return ok(asdict(repo.add_vendor(payload.to_fields())))


@router.patch("/vendors/{vendor_id}")
def update_vendor(
    vendor_id: str, payload: VendorPatch, repo: CateringRepo = Depends(get_repo)
) -> dict:
    return ok(_found(repo.update_vendor(vendor_id, payload.to_changes()), "vendor"))


@router.delete("/vendors/{vendor_id}")
def delete_vendor(vendor_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    return _deleted(repo.delete_vendor(vendor_id), "vendor")


# Customers


@router.get("/customers")
def list_customers(repo: CateringRepo = Depends(get_repo)) -> dict:
    return ok([asdict(c) for c in repo.list_customers()])


@router.get("/customers/{customer_id}")
def get_customer(customer_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    return ok(_found(repo.get_customer(customer_id), "customer"))


@router.post("/customers", status_code=201)
def create_customer(payload: CustomerIn, repo: CateringRepo = Depends(get_repo)) -> dict:
    return ok(asdict(repo.add_customer(payload.to_fields())))


@router.patch("/customers/{customer_id}")
def update_customer(
    customer_id: str, payload: CustomerPatch, repo: CateringRepo = Depends(get_repo)
) -> dict:
    return ok(_found(repo.update_customer(customer_id, payload.to_changes()), "customer"))


@router.delete("/customers/{customer_id}")
def delete_customer(customer_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    return _deleted(repo.delete_customer(customer_id), "customer")


# Food items


@router.get("/food-items")
def list_food_items(
    category_id: Optional[str] = None,
    search: Optional[str] = None,
    repo: CateringRepo = Depends(get_repo),
) -> dict:
    """List food items, optionally for one category and matching ``search``."""

    items = filter_food_items(repo.list_food_items(), category_id, search)
    return ok([asdict(i) for i in items])


@router.post("/food-items", status_code=201)
def create_food_item(payload: FoodItemIn, repo: CateringRepo = Depends(get_repo)) -> dict:
    fields = payload.to_fields()
    ensure_priced(fields["vendor_prices"])
    return ok(asdict(repo.add_food_item(fields)))


@router.post("/food-items/bulk", status_code=201)
def bulk_create_food_items(
    payload: list[FoodItemIn], repo: CateringRepo = Depends(get_repo)
) -> dict:
    """Import several food items at once; every one must carry a price."""

    rows = [item.to_fields() for item in payload]
    for fields in rows:
        ensure_priced(fields["vendor_prices"])
    return ok([asdict(i) for i in repo.bulk_add_food_items(rows)])


@router.patch("/food-items/{food_item_id}")
def update_food_item(
    food_item_id: str, payload: FoodItemPatch, repo: CateringRepo = Depends(get_repo)
) -> dict:
    changes = payload.to_changes()
    if "vendor_prices" in changes:
        ensure_priced(changes["vendor_prices"])
    return ok(_found(repo.update_food_item(food_item_id, changes), "food item"))


@router.delete("/food-items/{food_item_id}")
def delete_food_item(food_item_id: str, repo: CateringRepo = Depends(get_repo)) -> dict:
    return _deleted(repo.delete_food_item(food_item_id), "food item")
