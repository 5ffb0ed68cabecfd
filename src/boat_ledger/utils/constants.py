"""Fixed limits, rates, and on-disk format constants."""

from __future__ import annotations

MAX_BOATS: int = 120
"""Maximum number of records the registry will hold."""

MAX_NAME_LENGTH: int = 127
"""Longest boat name kept on decode; longer names are truncated."""

MAX_TRAILER_TAG_LENGTH: int = 9
"""Longest trailer licence tag kept on decode."""

FIELD_DELIMITER: str = ","
"""Separator between fields of a persisted record."""

FIELD_COUNT: int = 5
"""name, length, location kind, location payload, amount owed."""

# Monthly charge per foot of boat length, keyed by location keyword.
SLIP_RATE: float = 12.50
LAND_RATE: float = 14.00
TRAILER_RATE: float = 25.00
STORAGE_RATE: float = 11.20
