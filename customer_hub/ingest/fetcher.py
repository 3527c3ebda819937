"""HTTP retrieval of spreadsheet CSV exports."""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Mapping

import requests

from customer_hub.config import HttpConfig
from customer_hub.exceptions import NetworkError

logger = logging.getLogger(__name__)

PREVIEW_LINES = 3


class SheetFetcher:
    """Fetch raw CSV text from remote sheet exports.

    A single failed request is never retried here; the caller decides
    what a failure means for the batch. Every request runs on its own
    session, so concurrent fetches never share one.

    Parameters
    ----------
    http_config : HttpConfig | None
        Timeout and user agent. Defaults to :class:`HttpConfig`.
    session_factory : Callable[[], requests.Session]
        Builds the session for each request.
    """

    def __init__(
        self,
        http_config: HttpConfig | None = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self.http_config = http_config or HttpConfig()
        self._session_factory = session_factory

    def fetch(self, url: str) -> str:
        """Fetch one CSV export.

        Parameters
        ----------
        url : str
            Address of the CSV export.

        Returns
        -------
        str
            Response body.

        Raises
        ------
        NetworkError
            On transport failure, non-success status or an empty body.
        """
        logger.info("Fetching CSV from %s", url, extra={"url": url})

        session = self._session_factory()
        try:
            response = session.get(
                url,
                headers={
                    "Accept": "text/csv,text/plain",
                    "Cache-Control": "no-cache",
                    "User-Agent": self.http_config.user_agent,
                },
                timeout=self.http_config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise NetworkError(f"Request to {url} failed: {exc}", url=url) from exc
        finally:
            session.close()

        if not response.ok:
            raise NetworkError(
                f"Failed to fetch CSV: {response.status_code} {response.reason}",
                url=url,
                status_code=response.status_code,
            )

        text = response.text
        logger.debug("Content-Type: %s", response.headers.get("content-type"))
        logger.debug("CSV preview:\n%s", "\n".join(text.splitlines()[:PREVIEW_LINES]))

        if not text.strip():
            raise NetworkError("CSV body is empty", url=url, status_code=response.status_code)

        return text

    def fetch_all(self, sources: Mapping[str, str]) -> dict[str, str]:
        """Fetch several CSV exports concurrently.

        Fails fast: the first error cancels fetches that have not started
        yet and is raised once the running ones return.

        Parameters
        ----------
        sources : Mapping[str, str]
            Source name to URL.

        Returns
        -------
        dict[str, str]
            Source name to CSV text, in the order of ``sources``.
        """
        if not sources:
            return {}

        with ThreadPoolExecutor(max_workers=len(sources)) as executor:
            futures = {name: executor.submit(self.fetch, url) for name, url in sources.items()}
            done, pending = wait(futures.values(), return_when=FIRST_EXCEPTION)

            for future in pending:
                future.cancel()

            for future in done:
                exc = future.exception()
                if exc is not None:
                    raise exc

            return {name: future.result() for name, future in futures.items()}
