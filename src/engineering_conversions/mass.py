"""Mass conversions between metric and US customary units."""

from __future__ import annotations

from typing import Final

POUNDS_PER_KG: Final[float] = 2.20462
KG_PER_POUND: Final[float] = 0.453592
# Short tons (2000 lb) per metric tonne.
TONS_PER_TONNE: Final[float] = 1.10231
TONNES_PER_TON: Final[float] = 0.907185


def kg_to_pounds(kg: float) -> float:
    """Convert kilograms to pounds."""

    return kg * POUNDS_PER_KG


def pounds_to_kg(pounds: float) -> float:
    """Convert pounds to kilograms."""

    return pounds * KG_PER_POUND


def tonnes_to_tons(tonnes: float) -> float:
    """Convert metric tonnes to short tons."""

    return tonnes * TONS_PER_TONNE


def tons_to_tonnes(tons: float) -> float:
    """Convert short tons to metric tonnes."""

    return tons * TONNES_PER_TON


__all__ = [
    "POUNDS_PER_KG",
    "KG_PER_POUND",
    "TONS_PER_TONNE",
    "TONNES_PER_TON",
    "kg_to_pounds",
    "pounds_to_kg",
    "tonnes_to_tons",
    "tons_to_tonnes",
]
