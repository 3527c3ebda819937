"""In-memory relationship store for joining entities."""

from customer_hub.store.financial import CustomerDataStore, relate

__all__ = ["CustomerDataStore", "relate"]
