"""Custom exception hierarchy for boat-ledger.

All exceptions that cross layer boundaries must inherit from
:class:`BoatLedgerError`.  Raw ``OSError`` from file access must NEVER
propagate beyond the infrastructure layer — it is caught and re-raised
as :class:`StorageError`.

Hierarchy
---------
BoatLedgerError
├── DecodeError
│   ├── MalformedLineError
│   └── UnknownLocationError
├── CapacityError
├── BoatNotFoundError
├── OverpaymentError
├── StorageError
│   └── StorageNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class BoatLedgerError(Exception):
    """Base exception for all boat-ledger errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI can render a clean message without
    leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Record decoding -------------------------------------------------------

class DecodeError(BoatLedgerError):
    """Raised when a delimited line cannot be turned into a boat."""


class MalformedLineError(DecodeError):
    """Raised when a required field is missing from a record line."""


class UnknownLocationError(DecodeError):
    """Raised when the location keyword is not one of the known kinds."""

    def __init__(self, keyword: str, *, hint: str | None = None) -> None:
        super().__init__(f"Invalid location type: {keyword!r}", hint=hint)
        self.keyword: str = keyword


# --- Registry operations ---------------------------------------------------

class CapacityError(BoatLedgerError):
    """Raised when inserting into a registry that is already full."""


class BoatNotFoundError(BoatLedgerError):
    """Raised when no boat matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No boat with that name: {name!r}")
        self.name: str = name


class OverpaymentError(BoatLedgerError):
    """Raised when a payment exceeds the balance currently owed."""

    def __init__(self, amount: float, balance: float) -> None:
        super().__init__(
            f"Payment of ${amount:.2f} exceeds amount owed, ${balance:.2f}",
        )
        self.amount: float = amount
        self.balance: float = balance


# --- Persistence -----------------------------------------------------------

class StorageError(BoatLedgerError):
    """Raised when the storage file cannot be read or written."""

    def __init__(
        self, message: str, *, path: str, hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.path: str = path


class StorageNotFoundError(StorageError):
    """Raised when the storage file does not exist yet."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(BoatLedgerError):
    """Raised when a required UI dependency is not available."""
