"""Customer search and list pagination for the presentation layer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from customer_hub.models.financial import CompositeCustomer
from customer_hub.normalizers.coercion import normalize_document

T = TypeVar("T")

SEARCH_TYPES = ("name", "document")


def search_customers(
    customers: Sequence[CompositeCustomer],
    term: str,
    search_type: str = "name",
) -> list[CompositeCustomer]:
    """Filter customers by name or by CPF/CNPJ.

    Name search is a case-insensitive substring match. Document search
    compares digits only, so ``123.456`` finds ``12345678900``.
    A blank term returns every customer.
    """
    if search_type not in SEARCH_TYPES:
        raise ValueError(f"search_type must be one of {SEARCH_TYPES}, got {search_type!r}")

    if not term.strip():
        return list(customers)

    needle = term.strip().lower()
    if search_type == "name":
        return [c for c in customers if needle in c.name.lower()]

    digits = normalize_document(needle)
    return [c for c in customers if digits in normalize_document(c.document)]


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a list."""

    items: list[T]
    page: int
    per_page: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.per_page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(items: Sequence[T], page: int, per_page: int) -> Page[T]:
    """Slice ``items`` into a 1-based page of ``per_page`` entries."""
    if page < 1:
        raise ValueError(f"page must be at least 1, got {page}")
    if per_page < 1:
        raise ValueError(f"per_page must be at least 1, got {per_page}")

    start = (page - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        page=page,
        per_page=per_page,
        total_items=len(items),
    )


def page_size_for_width(width: int, default: int = 10) -> int:
    """Number of customer cards per page for a viewport width in pixels."""
    if width < 640:
        return 4
    if width < 1024:
        return 6
    if width > 1024:
        return 9
    return default
