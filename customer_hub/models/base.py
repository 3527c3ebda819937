"""Base models shared across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Union

if TYPE_CHECKING:
    from customer_hub.models.financial.composite import CompositeCustomer

RawValue = Union[int, float, bool, str, None]
RawRow = dict[str, RawValue]


class EntityKind(str, Enum):
    """Remote sources, one sheet per entity kind."""

    CUSTOMERS = "customers"
    ACCOUNTS = "accounts"
    BRANCHES = "branches"


@dataclass(frozen=True)
class LoadResult:
    """Snapshot handed to the presentation layer.

    Unpacks as ``customers, used_fallback = loader.load_all()``.
    """

    customers: list[CompositeCustomer]
    used_fallback: bool

    def __iter__(self) -> Iterator:
        yield self.customers
        yield self.used_fallback
