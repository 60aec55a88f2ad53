"""Pressure conversions between bar, PSI and pascal."""

from __future__ import annotations

from typing import Final

PSI_PER_BAR: Final[float] = 14.5038
BAR_PER_PSI: Final[float] = 0.0689476
PASCAL_PER_BAR: Final[float] = 100000.0


def bar_to_psi(bar: float) -> float:
    """Convert bar to PSI (pounds per square inch)."""

    return bar * PSI_PER_BAR


def psi_to_bar(psi: float) -> float:
    """Convert PSI to bar."""

    return psi * BAR_PER_PSI


def pascal_to_bar(pascal: float) -> float:
    """Convert pascal to bar."""

    return pascal / PASCAL_PER_BAR


def bar_to_pascal(bar: float) -> float:
    """Convert bar to pascal."""

    return bar * PASCAL_PER_BAR


__all__ = [
    "PSI_PER_BAR",
    "BAR_PER_PSI",
    "PASCAL_PER_BAR",
    "bar_to_psi",
    "psi_to_bar",
    "pascal_to_bar",
    "bar_to_pascal",
]
