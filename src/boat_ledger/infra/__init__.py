"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem.  Every raw
``OSError`` must be caught here and re-raised as a
:class:`~boat_ledger.exceptions.StorageError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from boat_ledger.infra.csv_store import CsvBoatStore

__all__: list[str] = ["CsvBoatStore"]
