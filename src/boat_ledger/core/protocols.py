"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that infrastructure adapters and UI
front-ends must satisfy.  The dispatcher depends ONLY on these
protocols — never on concrete implementations — so tests can drive it
with in-memory fakes.
"""

from __future__ import annotations

from typing import Protocol

from boat_ledger.core.registry import BoatRegistry, LoadResult


class BoatStore(Protocol):
    """Contract for persisted-storage backends."""

    def load(self) -> LoadResult:
        """Read every record and return a sorted registry.

        Raises
        ------
        StorageError
            When the backing store cannot be opened for reading.
        """
        ...  # pragma: no cover

    def save(self, registry: BoatRegistry) -> int:
        """Overwrite the store with *registry* and return the record count.

        Raises
        ------
        StorageError
            When the backing store cannot be opened for writing.
        """
        ...  # pragma: no cover


class Prompter(Protocol):
    """Contract for reading one line of user input.

    Implementations return ``None`` when the user cancels the prompt
    (Ctrl+C, Esc or end of input).
    """

    def ask(self, message: str) -> str | None:
        ...  # pragma: no cover
