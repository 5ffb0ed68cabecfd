"""Inventory rendering for the CLI layer.

Renders the registry as a Rich table.  All display-related logic lives
here — no business logic, no parsing, no file access.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from boat_ledger.cli.console import escape_markup
from boat_ledger.core.models import Boat, Land, Trailer, location_kind_name
from boat_ledger.exceptions import EnvironmentError


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for inventory rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_length(length: float) -> str:
    """Render a length in whole feet, e.g. ``40'``."""
    return f"{length:.0f}'"


def format_location_detail(boat: Boat) -> str:
    """Render the location payload: ``# 12`` for numbered spaces."""
    location = boat.location
    if isinstance(location, (Land, Trailer)):
        return location.payload_text
    return f"# {location.payload_text}"


def format_amount(amount: float) -> str:
    """Render a balance as ``$500.00``."""
    return f"${amount:.2f}"


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def render_inventory(console: Any, boats: Iterable[Boat]) -> int:
    """Print every boat in *boats* as one table row; return the row count."""
    rows = list(boats)
    if not rows:
        console.print("[dim]No boats in inventory.[/dim]")
        console.print()
        return 0

    table_class = _import_rich_table()
    table = table_class(
        title="Inventory",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Name", justify="left", min_width=20)
    table.add_column("Length", justify="right", min_width=6)
    table.add_column("Location", justify="left", min_width=8)
    table.add_column("Detail", justify="right", min_width=6)
    table.add_column("Owes", justify="right", min_width=10)

    for boat in rows:
        table.add_row(
            escape_markup(boat.name),
            format_length(boat.length),
            location_kind_name(boat.location.kind),
            escape_markup(format_location_detail(boat)),
            format_amount(boat.amount_owed),
        )

    console.print(table)
    console.print()
    return len(rows)
