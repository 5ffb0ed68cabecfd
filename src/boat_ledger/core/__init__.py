"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from boat_ledger.core.billing import monthly_charge, monthly_rate
from boat_ledger.core.codec import decode_boat, encode_boat
from boat_ledger.core.models import (
    Boat,
    Land,
    Location,
    LocationKind,
    Slip,
    Storage,
    Trailer,
    location_kind_name,
)
from boat_ledger.core.protocols import BoatStore, Prompter
from boat_ledger.core.registry import (
    BoatRegistry,
    LoadResult,
    dump_registry,
    load_registry,
)

__all__: list[str] = [
    "Boat",
    "BoatRegistry",
    "BoatStore",
    "Land",
    "LoadResult",
    "Location",
    "LocationKind",
    "Prompter",
    "Slip",
    "Storage",
    "Trailer",
    "decode_boat",
    "dump_registry",
    "encode_boat",
    "load_registry",
    "location_kind_name",
    "monthly_charge",
    "monthly_rate",
]
