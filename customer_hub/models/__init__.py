"""Domain models for the customer dashboard."""

from customer_hub.models.base import EntityKind, LoadResult, RawRow, RawValue

__all__ = ["EntityKind", "LoadResult", "RawRow", "RawValue"]
