"""Pint unit registry shared by the reference-factor helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pint import Quantity, UnitRegistry


@lru_cache(maxsize=1)
def _build_registry() -> UnitRegistry:
    return UnitRegistry()


ureg = _build_registry()
Q_ = ureg.Quantity


def ensure_quantity(value: Any, unit: str) -> Quantity:
    """Return *value* as a quantity expressed in *unit*."""

    if isinstance(value, Quantity):
        return value.to(unit)
    return Q_(float(value), unit)


def magnitude(value: Any, unit: str) -> float:
    """Return the float magnitude of *value* expressed in *unit*."""

    return float(ensure_quantity(value, unit).magnitude)


__all__ = ["ureg", "Q_", "ensure_quantity", "magnitude"]
