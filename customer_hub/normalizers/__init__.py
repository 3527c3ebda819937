"""Normalization of raw sheet rows into typed records."""

from __future__ import annotations

from typing import Iterable

from customer_hub.models.base import EntityKind, RawRow
from customer_hub.normalizers.base import BaseNormalizer
from customer_hub.normalizers.financial import (
    AccountNormalizer,
    BranchNormalizer,
    CustomerNormalizer,
)
from customer_hub.normalizers.ids import IdFactory

NORMALIZERS: dict[EntityKind, type[BaseNormalizer]] = {
    EntityKind.CUSTOMERS: CustomerNormalizer,
    EntityKind.ACCOUNTS: AccountNormalizer,
    EntityKind.BRANCHES: BranchNormalizer,
}


def normalize(
    rows: Iterable[RawRow] | None,
    kind: EntityKind | str,
    ids: IdFactory | None = None,
) -> list:
    """Normalize rows of the given entity kind.

    Parameters
    ----------
    rows : Iterable[RawRow] | None
        Decoded rows.
    kind : EntityKind | str
        ``customers``, ``accounts`` or ``branches``.
    ids : IdFactory | None
        Id source for rows without an id.

    Returns
    -------
    list
        Customers, Accounts or Branches.
    """
    normalizer_cls = NORMALIZERS[EntityKind(kind)]
    return normalizer_cls(ids).normalize(rows)


__all__ = [
    "AccountNormalizer",
    "BaseNormalizer",
    "BranchNormalizer",
    "CustomerNormalizer",
    "IdFactory",
    "normalize",
]
