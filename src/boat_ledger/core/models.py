"""Domain models for boat-ledger.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  A boat's location is a tagged variant:
exactly one of :class:`Slip`, :class:`Land`, :class:`Trailer` or
:class:`Storage`, each carrying only the payload that makes sense for it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


# ---------------------------------------------------------------------------
# Location kinds
# ---------------------------------------------------------------------------

class LocationKind(str, Enum):
    """Where a boat is kept.  The value is the on-disk keyword."""

    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailer"
    STORAGE = "storage"


def location_kind_name(kind: object) -> str:
    """Return the human-readable keyword for *kind*, or ``"unknown"``."""
    if isinstance(kind, LocationKind):
        return kind.value
    return "unknown"


# ---------------------------------------------------------------------------
# Location variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Slip:
    """A numbered in-water mooring space."""

    kind: ClassVar[LocationKind] = LocationKind.SLIP

    number: int
    """Slip number, nominally 1–85 (not enforced)."""

    @property
    def payload_text(self) -> str:
        return str(self.number)


@dataclass(frozen=True, slots=True)
class Land:
    """A dry bay for boats under repair."""

    kind: ClassVar[LocationKind] = LocationKind.LAND

    bay: str
    """Single bay letter, nominally A–Z."""

    @property
    def payload_text(self) -> str:
        return self.bay


@dataclass(frozen=True, slots=True)
class Trailer:
    """A boat kept on its own road trailer."""

    kind: ClassVar[LocationKind] = LocationKind.TRAILER

    tag: str
    """Trailer licence plate."""

    @property
    def payload_text(self) -> str:
        return self.tag


@dataclass(frozen=True, slots=True)
class Storage:
    """A numbered general dry storage space."""

    kind: ClassVar[LocationKind] = LocationKind.STORAGE

    space: int
    """Storage space number, nominally 1–50 (not enforced)."""

    @property
    def payload_text(self) -> str:
        return str(self.space)


Location = Union[Slip, Land, Trailer, Storage]


# ---------------------------------------------------------------------------
# Boat record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Boat:
    """One inventory record.

    Boats are never mutated in place; the registry swaps in a replacement
    built with :func:`dataclasses.replace` when the balance changes.
    """

    name: str
    """Case-insensitive key within the registry."""

    length: float
    """Length in feet."""

    location: Location

    amount_owed: float
    """Outstanding balance in dollars."""

    @property
    def sort_key(self) -> str:
        """Case-insensitive ordering key used by the registry."""
        return self.name.lower()

    def matches(self, name: str) -> bool:
        """Return ``True`` when *name* equals this boat's name, ignoring case."""
        return self.name.lower() == name.lower()
