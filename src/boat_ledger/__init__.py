"""boat-ledger — interactive boat inventory and billing for a marina.

Records live in a flat comma-delimited file that is loaded at start-up and
written back on exit.
"""

from boat_ledger.version import __version__

__all__: list[str] = ["__version__"]
