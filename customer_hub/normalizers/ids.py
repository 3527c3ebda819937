"""Identifier synthesis for rows that arrive without an id."""

from __future__ import annotations

import itertools


class IdFactory:
    """Hand out sequential ids for a single load.

    A fresh factory is created per load, so ids are deterministic for a
    given input and never collide within one snapshot.

    Parameters
    ----------
    prefix : str
        Prepended to the counter value (default ``"gen-"``).
    """

    __slots__ = ("_prefix", "_counter")

    def __init__(self, prefix: str = "gen-") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)

    def next(self) -> str:
        """Return the next id, e.g. ``gen-1``."""
        return f"{self._prefix}{next(self._counter)}"
