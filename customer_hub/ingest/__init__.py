"""Remote sheet retrieval and CSV decoding."""

from customer_hub.ingest.decoder import decode
from customer_hub.ingest.fetcher import SheetFetcher

__all__ = ["SheetFetcher", "decode"]
