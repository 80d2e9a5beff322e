import pathlib
import sys
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

from catering.app.domain.models import Diet, VendorPrice  # noqa: E402
from catering.app.main import create_app  # noqa: E402
from catering.app.repos_memory import CateringRepoMemory  # noqa: E402


@pytest.fixture
def repo():
    return CateringRepoMemory()


@pytest.fixture
def client(repo):
    return TestClient(create_app(repo=repo, seed=False))


@pytest.fixture
def catalogue(repo):
    """One category, two vendors and two priced food items."""

    breads = repo.add_category({"name": "Breads & Basics"})
    vendor_a = repo.add_vendor({"name": "Vendor A", "phone": "555-4000"})
    vendor_b = repo.add_vendor({"name": "Vendor B", "phone": "555-5000"})
    naan = repo.add_food_item(
        {
            "name": "Plain Naan",
            "category_id": breads.id,
            "diet": Diet.VEG,
            "vendor_prices": [
                VendorPrice(vendor_a.id, Decimal("12"), Decimal("20")),
                VendorPrice(vendor_b.id, Decimal("10"), Decimal("18")),
            ],
        }
    )
    roti = repo.add_food_item(
        {
            "name": "Roti",
            "category_id": breads.id,
            "vendor_prices": [VendorPrice(vendor_b.id, Decimal("1.40"), Decimal("2"))],
        }
    )
    return {
        "category": breads,
        "vendor_a": vendor_a,
        "vendor_b": vendor_b,
        "naan": naan,
        "roti": roti,
    }
