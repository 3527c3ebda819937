"""Publish/subscribe notification center for user-facing notices.

An explicit object passed to whoever needs it, instead of a module-level
store. Every change produces a new immutable state tuple that is pushed
to the subscribers.
"""

from __future__ import annotations

import dataclasses
import itertools
from dataclasses import dataclass
from typing import Callable

Listener = Callable[[tuple["Notice", ...]], None]


@dataclass(frozen=True)
class Notice:
    """A single notification (toast)."""

    notice_id: str
    title: str
    description: str = ""
    variant: str = "default"  # default | destructive
    open: bool = True


class NotificationCenter:
    """Hold the visible notices and broadcast changes.

    Parameters
    ----------
    limit : int
        Maximum number of notices kept; the newest come first.
    """

    def __init__(self, limit: int = 1) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self.limit = limit
        self._state: tuple[Notice, ...] = ()
        self._listeners: list[Listener] = []
        self._ids = itertools.count(1)

    @property
    def state(self) -> tuple[Notice, ...]:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, title: str, description: str = "", variant: str = "default") -> Notice:
        """Add a notice at the top, dropping the oldest beyond ``limit``."""
        notice = Notice(notice_id=str(next(self._ids)), title=title, description=description, variant=variant)
        self._publish(((notice,) + self._state)[: self.limit])
        return notice

    def update(self, notice_id: str, **changes: object) -> None:
        """Replace fields of an existing notice."""
        self._publish(
            tuple(
                dataclasses.replace(n, **changes) if n.notice_id == notice_id else n
                for n in self._state
            )
        )

    def dismiss(self, notice_id: str | None = None) -> None:
        """Close one notice, or all of them when no id is given."""
        self._publish(
            tuple(
                dataclasses.replace(n, open=False) if notice_id in (None, n.notice_id) else n
                for n in self._state
            )
        )

    def remove(self, notice_id: str | None = None) -> None:
        """Drop one notice, or all of them when no id is given."""
        if notice_id is None:
            self._publish(())
        else:
            self._publish(tuple(n for n in self._state if n.notice_id != notice_id))

    def _publish(self, state: tuple[Notice, ...]) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
