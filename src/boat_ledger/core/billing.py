"""Monthly billing — per-foot rates by location kind."""

from __future__ import annotations

from boat_ledger.core.models import Boat, LocationKind
from boat_ledger.utils.constants import (
    LAND_RATE,
    SLIP_RATE,
    STORAGE_RATE,
    TRAILER_RATE,
)

MONTHLY_RATES: dict[LocationKind, float] = {
    LocationKind.SLIP: SLIP_RATE,
    LocationKind.LAND: LAND_RATE,
    LocationKind.TRAILER: TRAILER_RATE,
    LocationKind.STORAGE: STORAGE_RATE,
}


def monthly_rate(kind: LocationKind) -> float:
    """Return the charge per foot per month for *kind*."""
    return MONTHLY_RATES[kind]


def monthly_charge(boat: Boat) -> float:
    """Return one month's charge for *boat*: length times the location rate."""
    return boat.length * monthly_rate(boat.location.kind)
