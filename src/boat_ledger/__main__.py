"""Allow ``python -m boat_ledger`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m boat_ledger`` behaves identically to the ``boat-ledger``
console script.
"""

from __future__ import annotations

from boat_ledger.cli.app import cli

if __name__ == "__main__":
    cli()
