"""Standard warning message catalogue for conversion audits."""

from __future__ import annotations

from typing import Final

WARNING_MESSAGES: Final[dict[str, str]] = {
    "ROUND_TRIP_OUT_OF_TOLERANCE": "Round trip through inverse pair exceeds tolerance",
    "CONSTANT_DRIFT_HIGH": "Rounded conversion constant drifts from exact factor",
}


def format_warning(code: str, detail: str | None = None) -> str:
    """Return a formatted warning string with catalogue lookup."""

    base = WARNING_MESSAGES.get(code, code)
    if detail:
        return f"[{code}] {base}: {detail}"
    return f"[{code}] {base}"


__all__ = ["format_warning", "WARNING_MESSAGES"]
