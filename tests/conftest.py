"""Shared pytest fixtures and configuration for the boat-ledger test suite.

Guidelines
----------
* No real terminal interaction — prompts are scripted.
* File tests use ``tmp_path`` only.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator

import pytest
from rich.console import Console

from boat_ledger.core.models import Boat, Land, Location, Slip, Storage, Trailer


def make_boat(
    name: str = "Alice",
    length: float = 40.0,
    location: Location | None = None,
    amount_owed: float = 0.0,
) -> Boat:
    """Factory with sensible defaults for concise tests."""
    return Boat(
        name=name,
        length=length,
        location=location if location is not None else Slip(number=12),
        amount_owed=amount_owed,
    )


class ScriptedPrompter:
    """Prompter that replays canned answers and records the questions."""

    def __init__(self, answers: Iterable[str | None]) -> None:
        self._answers: Iterator[str | None] = iter(answers)
        self.questions: list[str] = []

    def ask(self, message: str) -> str | None:
        self.questions.append(message)
        return next(self._answers, None)


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def console(output: io.StringIO) -> Console:
    """Rich console writing plain text into ``output``."""
    return Console(file=output, width=120, color_system=None, highlight=False)


@pytest.fixture()
def every_kind() -> list[Boat]:
    return [
        make_boat("Alice", 40.0, Slip(number=12), 0.0),
        make_boat("bob", 20.0, Land(bay="C"), 15.5),
        make_boat("Carol", 25.0, Trailer(tag="ABC123"), 100.0),
        make_boat("dave", 30.0, Storage(space=7), 42.42),
    ]


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo any handler installed by ``configure_logging``."""
    yield
    logger = logging.getLogger("boat_ledger")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
