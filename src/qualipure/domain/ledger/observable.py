"""Observable, copy-on-write collection shared by every view.

The ledger never mutates its backing sequence. Each change builds a new
tuple and swaps the reference, then notifies listeners in the order they
subscribed. A view that is iterating an older snapshot keeps seeing that
snapshot, whole.

Execution is single-threaded: mutations run to completion one at a time.
Callers that introduce threads must serialise writes themselves.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

Listener = Callable[[tuple], None]

logger = logging.getLogger(__name__)


class ObservableLedger(Generic[T]):

    def __init__(self, items: tuple[T, ...] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._listeners: list[Listener] = []

    # --- Reads ----------------------------------------------------------------

    @property
    def snapshot(self) -> tuple[T, ...]:
        """The current immutable contents, in insertion order."""
        return self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # --- Subscription ---------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; it is called with each new snapshot.

        Returns a zero-argument callable that unsubscribes it again.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # --- Publication ----------------------------------------------------------

    def _publish(self, items: tuple[T, ...]) -> None:
        self._items = items
        logger.debug(
            "%s now holds %d entries; notifying %d listener(s)",
            type(self).__name__,
            len(items),
            len(self._listeners),
        )
        # Listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(items)
