"""CLI application entry point for boat-ledger.

This module is the **sole error boundary** for the entire application.
It catches :class:`~boat_ledger.exceptions.BoatLedgerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  registry, the infra store, and the session dispatcher.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from boat_ledger.cli import exit_codes
from boat_ledger.cli.console import console
from boat_ledger.exceptions import BoatLedgerError
from boat_ledger.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI takes exactly one positional argument:
    * ``boat-ledger <file.csv>`` — manage the inventory stored in that file
    """
    parser = argparse.ArgumentParser(
        prog="boat-ledger",
        description="Interactive boat inventory and billing for a marina.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log what the program is doing to stderr.",
    )
    parser.add_argument(
        "storage",
        metavar="FILE",
        help="Boat records file (read at start, rewritten on exit).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_session(storage: str) -> int:
    """Run one interactive session against *storage*.

    Flow:
    1. Load the registry (warn and start empty if unreadable).
    2. Run the command loop until exit.
    3. Save the registry (warn if unwritable).  An existing file that
       could not be read is left untouched.

    The exit code is SUCCESS whether or not the save succeeded.
    """
    from boat_ledger.cli.console import get_rich_console
    from boat_ledger.cli.prompts import QuestionaryPrompter
    from boat_ledger.cli.session import run_session
    from boat_ledger.infra.csv_store import CsvBoatStore

    run_session(
        CsvBoatStore(storage),
        QuestionaryPrompter(),
        get_rich_console(),
        get_rich_console(stderr=True),
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the boat-ledger CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from boat_ledger.cli.logging_setup import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)
    return _handle_session(args.storage)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BoatLedgerError as exc:
        console.print(f"[bold red]Error:[/bold red] {console.escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {console.escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {console.escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
