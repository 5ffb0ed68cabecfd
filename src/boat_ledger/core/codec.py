"""Line codec — converts between persisted record lines and :class:`Boat`.

Record layout (one boat per line, no header, no escaping)::

    name,length,kind,payload,amount_owed

* ``length`` is written with zero decimals, so lengths persist as whole feet.
* ``kind`` is one of ``slip``, ``land``, ``trailer``, ``storage``.
* ``payload`` is the slip number, bay letter, trailer tag or storage space.
* ``amount_owed`` is written with exactly two decimals.

Decoding collapses empty fields and ignores anything after the fifth
field.  Numeric fields are parsed leniently: the longest numeric prefix
wins and a field with no numeric prefix reads as ``0``.  Names containing
the delimiter cannot round-trip; that is a limitation of the format.

Every function here is pure — no I/O, no ``print()``.
"""

from __future__ import annotations

import math
import re

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
from boat_ledger.exceptions import MalformedLineError, UnknownLocationError
from boat_ledger.utils.constants import (
    FIELD_COUNT,
    FIELD_DELIMITER,
    MAX_NAME_LENGTH,
    MAX_TRAILER_TAG_LENGTH,
)

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

# Older files spell the trailer keyword "trailor".
_KEYWORDS: dict[str, LocationKind] = {
    "slip": LocationKind.SLIP,
    "land": LocationKind.LAND,
    "trailer": LocationKind.TRAILER,
    "trailor": LocationKind.TRAILER,
    "storage": LocationKind.STORAGE,
}

_FIELD_NAMES: tuple[str, ...] = (
    "name",
    "length",
    "location type",
    "location detail",
    "amount owed",
)


# ---------------------------------------------------------------------------
# Lenient numeric parsing
# ---------------------------------------------------------------------------

def parse_float(text: str) -> float:
    """Parse the leading decimal number in *text*, or return ``0.0``.

    Values too large to be finite (``1e999``) also read as ``0.0``.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    value = float(match.group(1))
    if not math.isfinite(value):
        return 0.0
    return value


def parse_int(text: str) -> int:
    """Parse the leading integer in *text*, or return ``0``."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs beyond the interpreter's int conversion limit.
        return 0


# ---------------------------------------------------------------------------
# Location keyword / payload
# ---------------------------------------------------------------------------

def parse_location_kind(keyword: str) -> LocationKind:
    """Match *keyword* case-insensitively against the known location kinds.

    Raises
    ------
    UnknownLocationError
        If *keyword* names no known kind.
    """
    kind = _KEYWORDS.get(keyword.lower())
    if kind is None:
        raise UnknownLocationError(
            keyword,
            hint="Use one of: slip, land, trailer, storage.",
        )
    return kind


def _build_location(kind: LocationKind, payload: str) -> Location:
    if kind is LocationKind.SLIP:
        return Slip(number=parse_int(payload))
    if kind is LocationKind.LAND:
        return Land(bay=payload[0])
    if kind is LocationKind.TRAILER:
        return Trailer(tag=payload[:MAX_TRAILER_TAG_LENGTH])
    return Storage(space=parse_int(payload))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def split_fields(line: str) -> list[str]:
    """Split *line* into its non-empty delimited tokens."""
    stripped = line.rstrip("\r\n")
    return [token for token in stripped.split(FIELD_DELIMITER) if token]


def decode_boat(line: str) -> Boat:
    """Parse one record line into a :class:`Boat`.

    Raises
    ------
    MalformedLineError
        If fewer than five fields are present.
    UnknownLocationError
        If the location keyword is not recognised.
    """
    fields = split_fields(line)

    if len(fields) < FIELD_COUNT:
        # A bad keyword is reported as such even on a short line.
        if len(fields) > 2:
            parse_location_kind(fields[2])
        missing = _FIELD_NAMES[len(fields)]
        raise MalformedLineError(
            f"Invalid boat data format: missing {missing}",
            hint="Expected: name,length,type,detail,amount_owed",
        )

    name, length, keyword, payload, owed = fields[:FIELD_COUNT]
    kind = parse_location_kind(keyword)
    return Boat(
        name=name[:MAX_NAME_LENGTH],
        length=parse_float(length),
        location=_build_location(kind, payload),
        amount_owed=parse_float(owed),
    )


def encode_boat(boat: Boat) -> str:
    """Render *boat* as a single record line (without line terminator)."""
    return FIELD_DELIMITER.join(
        (
            boat.name,
            f"{boat.length:.0f}",
            location_kind_name(boat.location.kind),
            boat.location.payload_text,
            f"{boat.amount_owed:.2f}",
        )
    )
