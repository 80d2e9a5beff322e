"""Repository interface for catering records."""

from abc import ABC, abstractmethod


class CateringRepo(ABC):
    """Contract for category, vendor, customer, food item and quote storage.

    ``add_*`` methods assign a fresh id and creation timestamp and return the
    stored record. ``update_*`` merges the given fields onto the record and
    returns it, or ``None`` when the id is unknown. ``delete_*`` returns
    whether a record was removed; deletes never cascade. ``list_*`` returns
    copies so callers cannot mutate stored records.
    """

    # Categories

    @abstractmethod
    def list_categories(self):
        """Return all categories in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def add_category(self, fields):
        """Create a category."""
        raise NotImplementedError

    @abstractmethod
    def update_category(self, category_id, changes):
        """Merge ``changes`` onto a category."""
        raise NotImplementedError

    @abstractmethod
    def delete_category(self, category_id):
        """Remove a category."""
        raise NotImplementedError

    # Vendors

    @abstractmethod
    def list_vendors(self):
        """Return all vendors in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def add_vendor(self, fields):
        """Create a vendor."""
        raise NotImplementedError

    @abstractmethod
    def update_vendor(self, vendor_id, changes):
        """Merge ``changes`` onto a vendor."""
        raise NotImplementedError

    @abstractmethod
    def delete_vendor(self, vendor_id):
        """Remove a vendor."""
        raise NotImplementedError

    # Customers

    @abstractmethod
    def list_customers(self):
        """Return all customers in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def get_customer(self, customer_id):
        """Return one customer or ``None``."""
        raise NotImplementedError

    @abstractmethod
    def add_customer(self, fields):
        """Create a customer."""
        raise NotImplementedError

    @abstractmethod
    def update_customer(self, customer_id, changes):
        """Merge ``changes`` onto a customer."""
        raise NotImplementedError

    @abstractmethod
    def delete_customer(self, customer_id):
        """Remove a customer."""
        raise NotImplementedError

    # Food items

    @abstractmethod
    def list_food_items(self):
        """Return all food items in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def add_food_item(self, fields):
        """Create a food item."""
        raise NotImplementedError

    @abstractmethod
    def bulk_add_food_items(self, items):
        """Create several food items, preserving their order."""
        raise NotImplementedError

    @abstractmethod
    def update_food_item(self, food_item_id, changes):
        """Merge ``changes`` onto a food item."""
        raise NotImplementedError

    @abstractmethod
    def delete_food_item(self, food_item_id):
        """Remove a food item."""
        raise NotImplementedError

    # Quotes

    @abstractmethod
    def list_quotes(self):
        """Return all quotes in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def get_quote(self, quote_id):
        """Return one quote or ``None``."""
        raise NotImplementedError

    @abstractmethod
    def add_quote(self, fields):
        """Create a quote with ``created_at`` and ``updated_at`` stamped."""
        raise NotImplementedError

    @abstractmethod
    def update_quote(self, quote_id, changes):
        """Merge ``changes`` onto a quote and always refresh ``updated_at``."""
        raise NotImplementedError

    @abstractmethod
    def delete_quote(self, quote_id):
        """Administratively remove a quote."""
        raise NotImplementedError
