"""Catalogue of inverse conversion pairs and their round-trip tolerances.

Approximate pairs use independently rounded constants, so a round trip drifts
by the relative deviation of the product of the two constants from one (at
most about 2.8e-6 for the pairs below). Exact pairs share their constant and
only accumulate floating-point rounding.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Sequence, Tuple

from . import length, mass, pressure, temperature
from .utils.warnings import format_warning

logger = logging.getLogger(__name__)

Conversion = Callable[[float], float]

APPROX_ABS_TOL = 1e-4
APPROX_REL_TOL = 5e-6
EXACT_ABS_TOL = 1e-9
EXACT_REL_TOL = 1e-9

DEFAULT_AUDIT_VALUES: Tuple[float, ...] = (0.0, 0.5, 1.0, 2.5, 10.0, 42.195, 100.0, 500.0, 1000.0, 10000.0)


@dataclass(frozen=True)
class ConversionPair:
    """A forward conversion together with its inverse."""

    family: str
    forward: Conversion
    inverse: Conversion
    exact: bool
    reference_units: Tuple[str, str] | None = None

    @property
    def name(self) -> str:
        return f"{self.forward.__name__}/{self.inverse.__name__}"

    @property
    def abs_tol(self) -> float:
        return EXACT_ABS_TOL if self.exact else APPROX_ABS_TOL

    @property
    def rel_tol(self) -> float:
        return EXACT_REL_TOL if self.exact else APPROX_REL_TOL


PAIRS: Tuple[ConversionPair, ...] = (
    ConversionPair("length", length.meters_to_feet, length.feet_to_meters, False, ("meter", "foot")),
    ConversionPair("length", length.km_to_miles, length.miles_to_km, False, ("kilometer", "mile")),
    ConversionPair("temperature", temperature.celsius_to_fahrenheit, temperature.fahrenheit_to_celsius, True),
    ConversionPair("temperature", temperature.celsius_to_kelvin, temperature.kelvin_to_celsius, True),
    ConversionPair("pressure", pressure.bar_to_psi, pressure.psi_to_bar, False, ("bar", "psi")),
    ConversionPair("pressure", pressure.pascal_to_bar, pressure.bar_to_pascal, True, ("pascal", "bar")),
    ConversionPair("mass", mass.kg_to_pounds, mass.pounds_to_kg, False, ("kilogram", "pound")),
    ConversionPair("mass", mass.tonnes_to_tons, mass.tons_to_tonnes, False, ("metric_ton", "short_ton")),
)


def find_pair(name: str) -> ConversionPair:
    """Return the pair whose forward or inverse function is called *name*."""

    for pair in PAIRS:
        if name in (pair.forward.__name__, pair.inverse.__name__):
            return pair
    raise KeyError(f"Unknown conversion '{name}'")


def round_trip_error(pair: ConversionPair, value: float) -> float:
    """Absolute error of ``inverse(forward(value))`` against *value*."""

    return abs(pair.inverse(pair.forward(value)) - value)


def within_tolerance(pair: ConversionPair, value: float) -> bool:
    """Return True when the round trip of *value* stays inside the pair tolerance."""

    return math.isclose(
        pair.inverse(pair.forward(value)),
        value,
        rel_tol=pair.rel_tol,
        abs_tol=pair.abs_tol,
    )


def audit_round_trips(
    pairs: Iterable[ConversionPair] = PAIRS,
    values: Sequence[float] = DEFAULT_AUDIT_VALUES,
) -> list[Dict[str, Any]]:
    """Round-trip every value through every pair and summarise the worst case."""

    records: list[Dict[str, Any]] = []
    for pair in pairs:
        worst_value = 0.0
        worst_error = 0.0
        failures = []
        for value in values:
            error = round_trip_error(pair, value)
            if error > worst_error:
                worst_value, worst_error = value, error
            if not within_tolerance(pair, value):
                failures.append(value)

        record: Dict[str, Any] = {
            "pair": pair.name,
            "family": pair.family,
            "exact": pair.exact,
            "worst_value": worst_value,
            "worst_abs_error": worst_error,
            "passed": not failures,
        }
        if failures:
            record["warning"] = format_warning(
                "ROUND_TRIP_OUT_OF_TOLERANCE",
                f"{pair.name} at {', '.join(f'{value:g}' for value in failures)}",
            )
            logger.warning(record["warning"])
        records.append(record)
    return records


__all__ = [
    "APPROX_ABS_TOL",
    "APPROX_REL_TOL",
    "EXACT_ABS_TOL",
    "EXACT_REL_TOL",
    "DEFAULT_AUDIT_VALUES",
    "ConversionPair",
    "PAIRS",
    "find_pair",
    "round_trip_error",
    "within_tolerance",
    "audit_round_trips",
]
