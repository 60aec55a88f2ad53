"""Exact reference factors backed by Pint."""

from __future__ import annotations

from typing import Any, Dict, Iterable

from ..catalogue import PAIRS, ConversionPair
from .units import ensure_quantity
from .warnings import format_warning

DRIFT_WARN_REL = 1e-5


def reference_factor(from_unit: str, to_unit: str) -> float:
    """Return the exact multiplicative factor from *from_unit* to *to_unit*."""

    return float(ensure_quantity(1.0, from_unit).to(to_unit).magnitude)


def constant_drift(pair: ConversionPair) -> float | None:
    """Relative drift of the pair's forward constant from the Pint factor.

    Affine pairs carry no reference units and return ``None``.
    """

    if pair.reference_units is None:
        return None
    exact = reference_factor(*pair.reference_units)
    return abs(pair.forward(1.0) - exact) / exact


def drift_report(pairs: Iterable[ConversionPair] = PAIRS) -> list[Dict[str, Any]]:
    """Compare every multiplicative pair against its exact factor."""

    records: list[Dict[str, Any]] = []
    for pair in pairs:
        drift = constant_drift(pair)
        if drift is None:
            continue
        from_unit, to_unit = pair.reference_units
        record: Dict[str, Any] = {
            "conversion": pair.forward.__name__,
            "constant": pair.forward(1.0),
            "exact_factor": reference_factor(from_unit, to_unit),
            "relative_drift": drift,
        }
        if drift > DRIFT_WARN_REL:
            record["warning"] = format_warning("CONSTANT_DRIFT_HIGH", f"{pair.forward.__name__} {drift:.2e}")
        records.append(record)
    return records


__all__ = ["DRIFT_WARN_REL", "reference_factor", "constant_drift", "drift_report"]
