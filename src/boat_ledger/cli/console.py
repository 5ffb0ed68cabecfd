"""CLI console helpers with lazily imported Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) remain functional even when
it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from boat_ledger.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout (or stderr)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False)


def escape_markup(text: str) -> str:
	"""Escape *text* so user data is never parsed as Rich markup."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Used only by the error boundary, which must be able to report a
	missing Rich installation itself.
	"""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console(stderr=True)
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def escape(self, text: object) -> str:
		"""Escape *text* for Rich markup, or return it as-is without Rich."""
		try:
			return escape_markup(str(text))
		except EnvironmentError:
			return str(text)


console = _ConsoleProxy()
