"""Load, normalize and join the dashboard data.

The loader has two outcomes:

- REMOTE: all three sheets were fetched and each decoded to at least one
  row. The snapshot is built from remote data only.
- FALLBACK: any fetch failed or any sheet was empty. The snapshot is built
  from the built-in sample rows only, and ``used_fallback`` is True.

Live and sample data are never mixed in one snapshot.
"""

from __future__ import annotations

import logging
from typing import Mapping

from customer_hub.config import DashboardConfig
from customer_hub.exceptions import DataLoadError, InsufficientDataError, NetworkError
from customer_hub.fallback import fallback_rows
from customer_hub.ingest.decoder import decode
from customer_hub.ingest.fetcher import SheetFetcher
from customer_hub.models.base import EntityKind, LoadResult, RawRow
from customer_hub.models.financial import CompositeCustomer
from customer_hub.normalizers import normalize
from customer_hub.normalizers.ids import IdFactory
from customer_hub.notifications import NotificationCenter
from customer_hub.store.financial import relate

logger = logging.getLogger(__name__)

FALLBACK_NOTICE_TITLE = "Usando dados de exemplo"
FALLBACK_NOTICE_DESCRIPTION = (
    "Não foi possível carregar os dados das planilhas. Os dados exibidos são apenas exemplos."
)


class CustomerDataLoader:
    """Build a fresh customer snapshot on every call to :meth:`load_all`.

    Parameters
    ----------
    config : DashboardConfig | None
        Source URLs and HTTP settings.
    fetcher : SheetFetcher | None
        Fetcher to use; built from ``config.http`` when omitted.
    notifications : NotificationCenter | None
        Receives a notice whenever sample data is served.
    """

    def __init__(
        self,
        config: DashboardConfig | None = None,
        fetcher: SheetFetcher | None = None,
        notifications: NotificationCenter | None = None,
    ) -> None:
        self.config = config or DashboardConfig()
        self.fetcher = fetcher or SheetFetcher(self.config.http)
        self.notifications = notifications

    def load_all(self) -> LoadResult:
        """Load customers joined with their accounts and branch.

        Returns
        -------
        LoadResult
            Composite customers and whether sample data was used.

        Raises
        ------
        DataLoadError
            If even the built-in sample data cannot be processed.
        """
        logger.info("Loading customer data")

        try:
            rows = self.load_remote_rows()
            used_fallback = False
        except (NetworkError, InsufficientDataError) as exc:
            logger.warning(
                "Could not load remote sheets, using sample data: %s",
                exc,
                extra={"url": getattr(exc, "url", None)},
            )
            rows = fallback_rows()
            used_fallback = True

        try:
            customers = self.build(rows)
        except Exception as exc:
            if used_fallback:
                raise DataLoadError("Failed to process sample data") from exc
            logger.exception("Failed to process remote data, using sample data")
            used_fallback = True
            customers = self._build_fallback()

        if used_fallback:
            self._notify_fallback()

        logger.info(
            "Loaded %d customers (fallback=%s)",
            len(customers),
            used_fallback,
            extra={"customer_count": len(customers), "used_fallback": used_fallback},
        )
        return LoadResult(customers=customers, used_fallback=used_fallback)

    def load_remote_rows(self) -> dict[EntityKind, list[RawRow]]:
        """Fetch and decode all three sheets.

        Raises
        ------
        NetworkError
            If any sheet cannot be fetched.
        InsufficientDataError
            If any sheet decodes to zero rows.
        """
        sources = {kind: self._source_url(kind) for kind in EntityKind}
        texts = self.fetcher.fetch_all(sources)

        rows = {kind: decode(texts[kind]) for kind in EntityKind}
        logger.info(
            "Decoded sheets: %s",
            {kind.value: len(kind_rows) for kind, kind_rows in rows.items()},
        )

        empty = [kind.value for kind, kind_rows in rows.items() if not kind_rows]
        if empty:
            raise InsufficientDataError(f"No rows loaded for: {', '.join(empty)}")

        return rows

    def build(self, rows: Mapping[EntityKind, list[RawRow]]) -> list[CompositeCustomer]:
        """Normalize and join one set of raw rows."""
        ids = IdFactory()
        customers = normalize(rows[EntityKind.CUSTOMERS], EntityKind.CUSTOMERS, ids)
        accounts = normalize(rows[EntityKind.ACCOUNTS], EntityKind.ACCOUNTS, ids)
        branches = normalize(rows[EntityKind.BRANCHES], EntityKind.BRANCHES, ids)

        logger.debug(
            "Normalized %d customers, %d accounts, %d branches",
            len(customers),
            len(accounts),
            len(branches),
        )
        return relate(customers, accounts, branches)

    def _build_fallback(self) -> list[CompositeCustomer]:
        try:
            return self.build(fallback_rows())
        except Exception as exc:
            raise DataLoadError("Failed to process sample data") from exc

    def _source_url(self, kind: EntityKind) -> str:
        return self.config.sources.to_dict()[kind.value]

    def _notify_fallback(self) -> None:
        if self.notifications is not None:
            self.notifications.notify(FALLBACK_NOTICE_TITLE, FALLBACK_NOTICE_DESCRIPTION)


def load_all(config: DashboardConfig | None = None) -> LoadResult:
    """Load a snapshot with a one-off loader.

    Parameters
    ----------
    config : DashboardConfig | None
        Defaults to :meth:`DashboardConfig.from_env`.
    """
    return CustomerDataLoader(config or DashboardConfig.from_env()).load_all()
