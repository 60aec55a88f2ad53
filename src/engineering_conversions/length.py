"""Length conversions between metric and imperial units.

The factors are rounded decimal approximations of the exact definitions
(1 m = 3.280839895 ft, 1 mi = 1.609344 km) and are applied verbatim, so each
pair is an approximate inverse rather than an exact one.
"""

from __future__ import annotations

from typing import Final

FEET_PER_METER: Final[float] = 3.28084
METERS_PER_FOOT: Final[float] = 0.3048
MILES_PER_KM: Final[float] = 0.621371
KM_PER_MILE: Final[float] = 1.60934


def meters_to_feet(meters: float) -> float:
    """Convert a length in meters to feet."""

    return meters * FEET_PER_METER


def feet_to_meters(feet: float) -> float:
    """Convert a length in feet to meters."""

    return feet * METERS_PER_FOOT


def km_to_miles(km: float) -> float:
    """Convert a distance in kilometers to miles."""

    return km * MILES_PER_KM


def miles_to_km(miles: float) -> float:
    """Convert a distance in miles to kilometers."""

    return miles * KM_PER_MILE


__all__ = [
    "FEET_PER_METER",
    "METERS_PER_FOOT",
    "MILES_PER_KM",
    "KM_PER_MILE",
    "meters_to_feet",
    "feet_to_meters",
    "km_to_miles",
    "miles_to_km",
]
