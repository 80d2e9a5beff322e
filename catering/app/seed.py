"""Demo records loaded into an empty store on start-up."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from .domain.models import Diet, QuoteItem, VendorPrice
from .domain.quote_status import QuoteStatus
from .repos.catering_repo import CateringRepo

logger = logging.getLogger(__name__)

CATEGORIES = [
    ("Breads & Basics", "Fresh breads and essential accompaniments"),
    ("Salads & Accompaniments", "Fresh salads and side dishes"),
    ("Snacks & Quick Bites", "Light snacks and quick bites"),
    ("Soups", "Hot and comforting soups"),
    ("Starters - Vegetarian", "Vegetarian appetizers and starters"),
    ("Starters - Non-Vegetarian", "Non-vegetarian appetizers and starters"),
    ("Main Course - Chicken", "Chicken main course dishes"),
    ("Main Course - Mutton", "Mutton main course dishes"),
    ("Main Course - Seafood", "Seafood main course dishes"),
    ("Rice & Noodles", "Rice dishes and noodle preparations"),
    ("Arabic Specialties", "Authentic Arabic dishes"),
    ("Egg Items", "Egg-based dishes"),
    ("Desserts & Beverages", "Sweet treats and refreshing drinks"),
]

VENDORS = [
    ("In-House Kitchen", "Chef Ramesh", "555-1000", "kitchen@biryaniking52.com"),
    ("Spice Paradise Suppliers", "Anil Kumar", "555-2000", "anil@spiceparadise.com"),
    ("Fresh Farms Co.", "Priya Sharma", "555-3000", "priya@freshfarms.com"),
    ("Vendor A", "Vendor A Contact", "555-4000", "vendora@example.com"),
    ("Vendor B", "Vendor B Contact", "555-5000", "vendorb@example.com"),
    ("Vendor C", "Vendor C Contact", "555-6000", "vendorc@example.com"),
    ("Vendor D", "Vendor D Contact", "555-7000", "vendord@example.com"),
]

CUSTOMERS = [
    ("Rajesh Kumar", "rajesh.kumar@example.com", "9876543210", "123 Main Street, Mumbai"),
    ("Priya Sharma", "priya.sharma@example.com", "9876543211", "456 Park Avenue, Delhi"),
    ("Amit Patel", "amit.patel@example.com", "9876543212", "789 Business District, Bangalore"),
]

# (category, name, description, diet, vendor, retail price)
FOOD_ITEMS = [
    ("Breads & Basics", "Plain Naan", "Soft, leavened flatbread", "veg", "Vendor A", "2.00"),
    ("Breads & Basics", "Butter Naan", "Naan brushed with butter", "veg", "Vendor A", "3.00"),
    ("Breads & Basics", "Garlic Naan", "Naan with garlic and herbs", "veg", "Vendor A", "4.00"),
    ("Salads & Accompaniments", "Garden Salad", "Fresh mixed greens with vinaigrette", "veg", "Vendor B", "8.50"),
    ("Salads & Accompaniments", "Caesar Salad", "Romaine lettuce with Caesar dressing", "veg", "Vendor B", "10.00"),
    ("Salads & Accompaniments", "Mixed Vegetable Salad", "Fresh vegetables with lemon dressing", "veg", "Vendor B", "7.00"),
    ("Snacks & Quick Bites", "Samosa (Veg)", "Crispy pastry with spiced potato filling", "veg", "Vendor C", "3.00"),
    ("Snacks & Quick Bites", "Samosa (Non-Veg)", "Crispy pastry with spiced meat filling", "non-veg", "Vendor C", "4.00"),
    ("Snacks & Quick Bites", "Pakora", "Mixed vegetable fritters", "veg", "Vendor C", "4.50"),
    ("Soups", "Tomato Soup", "Creamy tomato soup", "veg", "Vendor C", "6.00"),
    ("Soups", "Vegetable Soup", "Mixed vegetable soup", "veg", "Vendor C", "6.50"),
    ("Soups", "Sweet Corn Soup", "Creamy sweet corn soup", "veg", "Vendor C", "6.50"),
    ("Starters - Vegetarian", "Paneer Tikka", "Grilled cottage cheese with spices", "veg", "Vendor C", "12.00"),
    ("Starters - Vegetarian", "Hara Bhara Kebab", "Green vegetable kebabs", "veg", "Vendor C", "10.00"),
    ("Starters - Vegetarian", "Aloo Tikka", "Spiced potato kebabs", "veg", "Vendor C", "9.00"),
    ("Starters - Non-Vegetarian", "Chicken 65", "Spicy fried chicken appetizer", "non-veg", "Vendor C", "14.00"),
    ("Starters - Non-Vegetarian", "Chicken Tikka", "Tandoor-grilled chicken pieces", "non-veg", "Vendor C", "15.00"),
    ("Starters - Non-Vegetarian", "Tandoori Chicken", "Yogurt-marinated grilled chicken", "non-veg", "Vendor C", "16.00"),
    ("Main Course - Chicken", "Butter Chicken", "Creamy tomato-based chicken curry", "non-veg", "Vendor C", "18.00"),
    ("Main Course - Chicken", "Chicken Curry", "Traditional chicken curry", "non-veg", "Vendor C", "16.00"),
    ("Main Course - Chicken", "Chicken Tikka Masala", "Creamy chicken tikka curry", "non-veg", "Vendor C", "19.00"),
    ("Main Course - Mutton", "Mutton Curry", "Traditional mutton curry", "non-veg", "Vendor C", "22.00"),
    ("Main Course - Mutton", "Mutton Biryani", "Premium mutton pieces with fragrant rice", "non-veg", "Vendor C", "25.00"),
    ("Main Course - Mutton", "Mutton Korma", "Mild creamy mutton curry", "non-veg", "Vendor C", "23.00"),
    ("Main Course - Seafood", "Fish Curry", "Traditional fish curry", "non-veg", "Vendor C", "20.00"),
    ("Main Course - Seafood", "Prawn Curry", "Spicy prawn curry", "non-veg", "Vendor C", "22.00"),
    ("Main Course - Seafood", "Fish Fry", "Spiced fried fish", "non-veg", "Vendor C", "19.00"),
    ("Rice & Noodles", "Veg Biryani", "Mixed vegetables in aromatic rice", "veg", "Vendor C", "12.00"),
    ("Rice & Noodles", "Jeera Rice", "Cumin-flavored rice", "veg", "Vendor C", "5.00"),
    ("Rice & Noodles", "Basmati Rice", "Plain basmati rice", "veg", "Vendor C", "4.00"),
    ("Arabic Specialties", "Shawarma", "Spiced meat wrap", "non-veg", "Vendor C", "12.00"),
    ("Arabic Specialties", "Chicken Shawarma", "Chicken shawarma wrap", "non-veg", "Vendor C", "13.00"),
    ("Arabic Specialties", "Lamb Shawarma", "Lamb shawarma wrap", "non-veg", "Vendor C", "15.00"),
    ("Egg Items", "Egg Curry", "Spiced egg curry", "non-veg", "Vendor C", "8.00"),
    ("Egg Items", "Boiled Egg", "Hard-boiled egg", "non-veg", "Vendor C", "2.00"),
    ("Egg Items", "Omelette", "Plain omelette", "non-veg", "Vendor C", "5.00"),
    ("Desserts & Beverages", "Gulab Jamun", "Sweet milk dumplings in syrup", "veg", "Vendor D", "6.00"),
    ("Desserts & Beverages", "Rasgulla", "Soft spongy balls in syrup", "veg", "Vendor D", "5.50"),
    ("Desserts & Beverages", "Kheer", "Rice pudding", "veg", "Vendor D", "7.00"),
]

COST_RATIO = Decimal("0.7")


def cost_price(retail: Decimal) -> Decimal:
    """Demo cost price: 70% of retail, rounded to the cent."""

    return (retail * COST_RATIO).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def seed_demo_data(repo: CateringRepo) -> None:
    """Populate ``repo`` with demo records unless it already holds categories."""

    if repo.list_categories():
        return

    categories = {
        name: repo.add_category({"name": name, "description": description}).id
        for name, description in CATEGORIES
    }
    vendors = {
        name: repo.add_vendor(
            {"name": name, "contact_person": contact, "phone": phone, "email": email}
        ).id
        for name, contact, phone, email in VENDORS
    }
    for name, email, phone, address in CUSTOMERS:
        repo.add_customer({"name": name, "email": email, "phone": phone, "address": address})

    foods = {}
    for category, name, description, diet, vendor, retail in FOOD_ITEMS:
        retail_price = Decimal(retail)
        item = repo.add_food_item(
            {
                "name": name,
                "description": description,
                "category_id": categories[category],
                "diet": Diet(diet),
                "vendor_prices": [
                    VendorPrice(vendors[vendor], cost_price(retail_price), retail_price)
                ],
            }
        )
        foods[name] = item.id

    repo.add_quote(
        {
            "client_name": "John Doe",
            "client_email": "john@example.com",
            "client_phone": "555-0123",
            "event_date": "2024-12-15",
            "event_type": "Corporate Event",
            "venue_address": "123 Business Park, Mumbai",
            "guest_count": 50,
            "items": [
                QuoteItem(foods["Plain Naan"], vendors["Vendor A"], 50),
                QuoteItem(foods["Garlic Naan"], vendors["Vendor A"], 50),
            ],
            "status": QuoteStatus.PENDING,
            "notes": "Please arrange for vegetarian options",
        }
    )
    repo.add_quote(
        {
            "client_name": "Jane Smith",
            "client_email": "jane@example.com",
            "client_phone": "555-0456",
            "event_date": "2024-12-20",
            "event_type": "Wedding",
            "venue_address": "456 Garden Palace, Delhi",
            "guest_count": 150,
            "items": [
                QuoteItem(foods["Butter Naan"], vendors["Vendor A"], 150),
                QuoteItem(foods["Garden Salad"], vendors["Vendor B"], 150),
            ],
            "status": QuoteStatus.APPROVED,
            "notes": "Outdoor venue, need delivery by 4 PM",
            "approved_at": datetime(2024, 11, 3, tzinfo=timezone.utc),
            "approved_by": "Admin",
        }
    )
    logger.info(
        "seeded %d categories, %d vendors, %d food items",
        len(categories),
        len(vendors),
        len(foods),
    )
