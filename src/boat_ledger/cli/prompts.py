"""Interactive line prompts backed by questionary.

questionary is imported lazily so ``--help`` and ``--version`` work
without it.  A cancelled prompt (Ctrl+C, Esc, Ctrl+D) is reported to the
caller as ``None`` rather than an exception.
"""

from __future__ import annotations

from typing import Any

from boat_ledger.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Reads one free-form line per call via ``questionary.text``."""

    def __init__(self) -> None:
        self._questionary: Any = _import_questionary()

    def ask(self, message: str) -> str | None:
        try:
            answer: str | None = self._questionary.text(message, qmark="").ask()
        except EOFError:
            return None
        return answer
