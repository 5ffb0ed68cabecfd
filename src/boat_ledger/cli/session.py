"""Interactive command loop and load/save lifecycle.

The dispatcher reads one command letter per iteration and routes it to
a registry operation:

====  ==========================================================
I     Inventory — list every boat.
A     Add — decode one raw CSV line and insert it.
R     Remove — delete a boat by name.
P     Payment — deduct a payment from a boat's balance.
M     Month — bill every boat for one month.
X     Exit — leave the loop.
====  ==========================================================

Failures of individual commands are reported and the loop carries on;
the registry is left exactly as it was before the failed command.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from boat_ledger.cli.console import escape_markup
from boat_ledger.cli.inventory_view import render_inventory
from boat_ledger.core.codec import decode_boat, parse_float
from boat_ledger.core.protocols import BoatStore, Prompter
from boat_ledger.core.registry import BoatRegistry
from boat_ledger.exceptions import (
    BoatLedgerError,
    BoatNotFoundError,
    OverpaymentError,
    StorageError,
    StorageNotFoundError,
)

MENU_PROMPT = "(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it :"
ADD_PROMPT = "Please enter the boat data in CSV format :"
NAME_PROMPT = "Please enter the boat name :"
AMOUNT_PROMPT = "Please enter the amount to be paid :"

EXIT_COMMAND = "X"


class CommandDispatcher:
    """Maps single-letter commands to operations on one registry.

    Parameters
    ----------
    registry:
        The registry every command reads and mutates.
    prompter:
        Source of user input; ``None`` from it means "cancelled".
    console:
        Rich console used for all output.
    """

    def __init__(
        self,
        registry: BoatRegistry,
        prompter: Prompter,
        console: Any,
    ) -> None:
        self._registry = registry
        self._prompter = prompter
        self._console = console
        self._handlers: dict[str, Callable[[], None]] = {
            "I": self.show_inventory,
            "A": self.add_boat,
            "R": self.remove_boat,
            "P": self.accept_payment,
            "M": self.apply_monthly_charges,
        }

    @property
    def registry(self) -> BoatRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Process commands until exit or a cancelled command prompt."""
        while True:
            raw = self._prompter.ask(MENU_PROMPT)
            if raw is None:
                return
            choice = raw.strip()[:1].upper()
            if choice == EXIT_COMMAND:
                return
            self.dispatch(choice)

    def dispatch(self, choice: str) -> bool:
        """Run the handler for *choice*; return ``False`` if none exists."""
        handler = self._handlers.get(choice.upper())
        if handler is None:
            self._console.print(
                f"[yellow]Invalid option {escape_markup(choice)}[/yellow]",
            )
            self._console.print()
            return False
        handler()
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def show_inventory(self) -> None:
        render_inventory(self._console, self._registry)

    def add_boat(self) -> None:
        line = self._prompter.ask(ADD_PROMPT)
        if line is None:
            return
        try:
            self._registry.ensure_capacity()
            boat = decode_boat(line)
            self._registry.insert(boat)
        except BoatLedgerError as exc:
            self._report(exc)
            return
        self._console.print(f"Added [bold]{escape_markup(boat.name)}[/bold].")
        self._console.print()

    def remove_boat(self) -> None:
        name = self._prompter.ask(NAME_PROMPT)
        if name is None:
            return
        try:
            removed = self._registry.remove_by_name(name)
        except BoatNotFoundError:
            self._no_such_boat()
            return
        self._console.print(f"Removed [bold]{escape_markup(removed.name)}[/bold].")
        self._console.print()

    def accept_payment(self) -> None:
        name = self._prompter.ask(NAME_PROMPT)
        if name is None:
            return
        if self._registry.find_by_name(name) is None:
            self._no_such_boat()
            return

        raw_amount = self._prompter.ask(AMOUNT_PROMPT)
        if raw_amount is None:
            return
        amount = parse_float(raw_amount)
        try:
            updated = self._registry.apply_payment(name, amount)
        except OverpaymentError as exc:
            self._console.print(
                "[red]That is more than the amount owed, "
                f"${exc.balance:.2f}[/red]",
            )
            self._console.print()
            return
        self._console.print(
            f"[bold]{escape_markup(updated.name)}[/bold] now owes "
            f"${updated.amount_owed:.2f}.",
        )
        self._console.print()

    def apply_monthly_charges(self) -> None:
        total = self._registry.apply_monthly_charges()
        self._console.print(
            f"Monthly charges of ${total:.2f} applied to "
            f"{len(self._registry)} boat(s).",
        )
        self._console.print()

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _no_such_boat(self) -> None:
        self._console.print("[yellow]No boat with that name[/yellow]")
        self._console.print()

    def _report(self, exc: BoatLedgerError) -> None:
        self._console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            self._console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        self._console.print()


# ---------------------------------------------------------------------------
# Session lifecycle
# ---------------------------------------------------------------------------

def load_or_empty(
    store: BoatStore,
    err_console: Any,
) -> tuple[BoatRegistry, bool]:
    """Load the registry from *store*, falling back to an empty one.

    Storage failures and skipped lines are reported as warnings; loading
    never aborts the session.

    Returns
    -------
    tuple[BoatRegistry, bool]
        The registry, and whether saving back to *store* is allowed.  An
        existing store that could not be read must not be overwritten.
    """
    try:
        result = store.load()
    except StorageNotFoundError as exc:
        _warn(err_console, exc)
        return BoatRegistry(), True
    except StorageError as exc:
        _warn(err_console, exc)
        return BoatRegistry(), False

    if result.skipped:
        err_console.print(
            f"[yellow]Warning:[/yellow] skipped {result.skipped} "
            "malformed line(s).",
        )
    if result.dropped:
        err_console.print(
            f"[yellow]Warning:[/yellow] ignored {result.dropped} boat(s) "
            f"beyond the limit of {result.registry.capacity}.",
        )
    return result.registry, True


def save_or_warn(store: BoatStore, registry: BoatRegistry, err_console: Any) -> bool:
    """Save *registry* to *store*; report and return ``False`` on failure."""
    try:
        store.save(registry)
    except StorageError as exc:
        _warn(err_console, exc)
        return False
    return True


def run_session(
    store: BoatStore,
    prompter: Prompter,
    console: Any,
    err_console: Any,
) -> bool:
    """Load, run the command loop, then save.

    Returns
    -------
    bool
        Whether the final save succeeded.  ``False`` without a save
        attempt when the existing store could not be read.
    """
    registry, writable = load_or_empty(store, err_console)

    console.print()
    console.print("[bold]Welcome to the Boat Management System[/bold]")
    console.print("-------------------------------------")
    console.print()

    CommandDispatcher(registry, prompter, console).run()

    if writable:
        saved = save_or_warn(store, registry, err_console)
    else:
        err_console.print(
            "[yellow]Warning:[/yellow] changes were not saved; "
            "the existing file could not be read.",
        )
        saved = False

    console.print()
    console.print("Exiting the Boat Management System")
    return saved


def _warn(err_console: Any, exc: BoatLedgerError) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {escape_markup(str(exc))}")
    if exc.hint:
        err_console.print(f"[dim]{escape_markup(exc.hint)}[/dim]")
