"""Base normalizer class for all entity normalizers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, Iterable, TypeVar

from customer_hub.models.base import RawRow
from customer_hub.normalizers.coercion import is_blank, to_text
from customer_hub.normalizers.ids import IdFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseNormalizer(ABC, Generic[T]):
    """Base class for turning raw sheet rows into typed records.

    Subclasses name the columns that identify a row and build the record
    from a row that passed the identity filter.

    Parameters
    ----------
    ids : IdFactory | None
        Source of ids for rows without one. Share one factory between the
        normalizers of a single load.
    """

    #: Columns of which at least one must be filled for a row to be kept.
    identity_columns: tuple[str, ...] = ("id",)

    def __init__(self, ids: IdFactory | None = None) -> None:
        self.ids = ids or IdFactory()

    def normalize(self, rows: Iterable[RawRow] | None) -> list[T]:
        """Normalize a collection of raw rows.

        Rows that are not mappings or lack every identity column are
        dropped.
        """
        if rows is None:
            logger.warning("%s received no rows", type(self).__name__)
            return []

        records = [self.build(row) for row in rows if self.has_identity(row)]
        logger.debug("%s produced %d records", type(self).__name__, len(records))
        return records

    def has_identity(self, row: Any) -> bool:
        """Return True if the row carries at least one identity column."""
        if not isinstance(row, Mapping):
            return False
        return any(not is_blank(row.get(column)) for column in self.identity_columns)

    def record_id(self, row: RawRow) -> str:
        """Return the row id, synthesizing one when missing."""
        return to_text(row.get("id")) or self.ids.next()

    @abstractmethod
    def build(self, row: RawRow) -> T:
        """Build a typed record from a row that passed the identity filter."""
