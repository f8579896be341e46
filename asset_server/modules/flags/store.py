"""Holder for the flag snapshot currently in force."""

from __future__ import annotations

from .models import FlagSnapshot


class FlagStore:
    """Publishes snapshots by swapping a single reference.

    Readers take ``current`` once and keep using that object, so a request never mixes
    values from two different refreshes.
    """

    def __init__(self, initial: FlagSnapshot | None = None) -> None:
        self._current = initial or FlagSnapshot()

    @property
    def current(self) -> FlagSnapshot:
        return self._current

    def publish(self, snapshot: FlagSnapshot) -> FlagSnapshot:
        previous = self._current
        self._current = snapshot
        return previous
