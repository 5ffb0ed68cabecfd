"""Infrastructure: flat-file storage for the boat registry.

Each open is a single scoped read or write; the handle is always
released, including on error paths.

Rules
-----
* Only :class:`~boat_ledger.exceptions.StorageError` escapes.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from boat_ledger.core.registry import (
    BoatRegistry,
    LoadResult,
    dump_registry,
    load_registry,
)
from boat_ledger.exceptions import StorageError, StorageNotFoundError

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"


class CsvBoatStore:
    """Reads and writes boat records in the comma-delimited line format.

    Parameters
    ----------
    path:
        Location of the storage file.  It need not exist yet.
    """

    def __init__(self, path: str | Path) -> None:
        self._path: Path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        """Read the storage file into a sorted registry.

        Raises
        ------
        StorageNotFoundError
            If the file does not exist.
        StorageError
            If the file exists but cannot be opened or read.
        """
        try:
            # Binary mode so one undecodable line is skipped on its own.
            with self._path.open("rb") as handle:
                result = load_registry(handle)
        except FileNotFoundError as exc:
            raise StorageNotFoundError(
                f"Could not open file {self._path} for reading.",
                path=str(self._path),
                hint="Starting with an empty inventory; the file is created on exit.",
            ) from exc
        except OSError as exc:
            raise StorageError(
                f"Could not open file {self._path} for reading: {exc}",
                path=str(self._path),
                hint="The file is left untouched on exit.",
            ) from exc

        logger.info(
            "Loaded %d boat(s) from %s", len(result.registry), self._path,
        )
        return result

    def save(self, registry: BoatRegistry) -> int:
        """Overwrite the storage file with every boat in *registry*.

        Returns
        -------
        int
            Number of records written.

        Raises
        ------
        StorageError
            If the file cannot be opened or written.
        """
        lines = dump_registry(registry)
        try:
            # Encoded before opening so a bad name cannot truncate the file.
            content = "".join(f"{line}\n" for line in lines).encode(_ENCODING)
            with self._path.open("wb") as handle:
                handle.write(content)
        except (OSError, UnicodeEncodeError) as exc:
            raise StorageError(
                f"Could not open file {self._path} for writing: {exc}",
                path=str(self._path),
                hint="Your changes from this session were not saved.",
            ) from exc

        logger.info("Saved %d boat(s) to %s", len(lines), self._path)
        return len(lines)
