"""In-memory boat registry — sorted, capacity-bounded, single owner.

The registry keeps its boats ordered by name, compared case-insensitively.
Order is re-established after every insert with a stable sort, so boats
sharing a name keep their relative order.  Every mutating operation
either completes or raises before touching any record.

Guarantees
----------
* No I/O and no ``print()`` — file access lives in ``infra``.
* Only :class:`~boat_ledger.exceptions.BoatLedgerError` subclasses escape.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from boat_ledger.core.billing import monthly_charge
from boat_ledger.core.codec import decode_boat, encode_boat
from boat_ledger.core.models import Boat
from boat_ledger.exceptions import (
    BoatNotFoundError,
    CapacityError,
    DecodeError,
    OverpaymentError,
)
from boat_ledger.utils.constants import MAX_BOATS

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"


class BoatRegistry:
    """Ordered collection of :class:`Boat` records.

    Parameters
    ----------
    boats:
        Initial records.  They are sorted on construction.
    capacity:
        Maximum number of records held.
    """

    def __init__(
        self,
        boats: Iterable[Boat] = (),
        *,
        capacity: int = MAX_BOATS,
    ) -> None:
        self._capacity: int = capacity
        self._boats: list[Boat] = list(boats)
        if len(self._boats) > capacity:
            raise CapacityError(
                f"{len(self._boats)} boats exceed the capacity of {capacity}.",
            )
        self._sort()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        return iter(tuple(self._boats))

    @property
    def boats(self) -> tuple[Boat, ...]:
        """Snapshot of the records in registry order."""
        return tuple(self._boats)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._boats) >= self._capacity

    def find_by_name(self, name: str) -> int | None:
        """Return the index of the first boat called *name*, ignoring case."""
        for index, boat in enumerate(self._boats):
            if boat.matches(name):
                return index
        return None

    def get(self, name: str) -> Boat:
        """Return the first boat called *name*.

        Raises
        ------
        BoatNotFoundError
            If no boat has that name.
        """
        return self._boats[self._require_index(name)]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def ensure_capacity(self) -> None:
        """Raise :class:`CapacityError` if no further boat fits."""
        if self.is_full:
            raise CapacityError(
                "Maximum number of boats reached.",
                hint=f"The marina holds at most {self._capacity} boats.",
            )

    def insert(self, boat: Boat) -> None:
        """Add *boat* and restore name order.

        Raises
        ------
        CapacityError
            If the registry already holds its maximum number of boats.
        """
        self.ensure_capacity()
        self._boats.append(boat)
        self._sort()
        logger.debug("Inserted %r (%d boats)", boat.name, len(self._boats))

    def remove_by_name(self, name: str) -> Boat:
        """Remove and return the first boat called *name*.

        Remaining boats keep their relative order.

        Raises
        ------
        BoatNotFoundError
            If no boat has that name.
        """
        removed = self._boats.pop(self._require_index(name))
        logger.debug("Removed %r (%d boats)", removed.name, len(self._boats))
        return removed

    def apply_monthly_charges(self) -> float:
        """Add one month's charge to every boat and return the total billed."""
        total = 0.0
        for index, boat in enumerate(self._boats):
            charge = monthly_charge(boat)
            self._boats[index] = dataclasses.replace(
                boat, amount_owed=boat.amount_owed + charge,
            )
            total += charge
        logger.debug("Billed %.2f across %d boats", total, len(self._boats))
        return total

    def apply_payment(self, name: str, amount: float) -> Boat:
        """Deduct *amount* from the balance of the boat called *name*.

        Zero and negative amounts are not rejected.

        Returns
        -------
        Boat
            The updated record.

        Raises
        ------
        BoatNotFoundError
            If no boat has that name.
        OverpaymentError
            If *amount* exceeds the balance owed.  Nothing is changed.
        """
        index = self._require_index(name)
        boat = self._boats[index]
        if amount > boat.amount_owed:
            raise OverpaymentError(amount, boat.amount_owed)
        if amount <= 0:
            logger.warning(
                "Accepted non-positive payment of %.2f for %r", amount, boat.name,
            )
        updated = dataclasses.replace(boat, amount_owed=boat.amount_owed - amount)
        self._boats[index] = updated
        return updated

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _sort(self) -> None:
        self._boats.sort(key=lambda boat: boat.sort_key)

    def _require_index(self, name: str) -> int:
        index = self.find_by_name(name)
        if index is None:
            raise BoatNotFoundError(name)
        return index


# ---------------------------------------------------------------------------
# Bulk load / dump
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of :func:`load_registry`."""

    registry: BoatRegistry

    skipped: int
    """Non-blank lines that failed to decode."""

    dropped: int
    """Valid lines ignored because the registry was already full."""


def load_registry(
    lines: Iterable[str | bytes],
    *,
    capacity: int = MAX_BOATS,
) -> LoadResult:
    """Decode *lines* into a sorted registry.

    Byte lines are decoded as UTF-8 one at a time.  Blank lines are
    ignored; lines that are not valid UTF-8 or fail to decode as a record
    are skipped and counted.  Once *capacity* boats are held, further
    valid lines are counted as dropped.  Never raises.
    """
    boats: list[Boat] = []
    skipped = 0
    dropped = 0
    for number, raw in enumerate(lines, start=1):
        try:
            line = raw.decode(_ENCODING) if isinstance(raw, bytes) else raw
        except UnicodeDecodeError as exc:
            logger.debug("Skipping line %d: %s", number, exc)
            skipped += 1
            continue
        if not line.strip():
            continue
        try:
            boat = decode_boat(line)
        except DecodeError as exc:
            logger.debug("Skipping line %d: %s", number, exc)
            skipped += 1
            continue
        if len(boats) >= capacity:
            dropped += 1
            continue
        boats.append(boat)

    if skipped:
        logger.info("Skipped %d malformed line(s)", skipped)
    if dropped:
        logger.info("Dropped %d boat(s) beyond capacity %d", dropped, capacity)

    return LoadResult(
        registry=BoatRegistry(boats, capacity=capacity),
        skipped=skipped,
        dropped=dropped,
    )


def dump_registry(registry: BoatRegistry) -> list[str]:
    """Encode every boat in registry order, one line each (no terminator)."""
    return [encode_boat(boat) for boat in registry]
