"""Temperature conversions between Celsius, Fahrenheit and Kelvin."""

from __future__ import annotations

from typing import Final

KELVIN_OFFSET: Final[float] = 273.15
FAHRENHEIT_OFFSET: Final[float] = 32.0


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""

    return (celsius * 9.0 / 5.0) + FAHRENHEIT_OFFSET


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""

    return (fahrenheit - FAHRENHEIT_OFFSET) * 5.0 / 9.0


def celsius_to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin."""

    return celsius + KELVIN_OFFSET


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius."""

    return kelvin - KELVIN_OFFSET


__all__ = [
    "KELVIN_OFFSET",
    "FAHRENHEIT_OFFSET",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "celsius_to_kelvin",
    "kelvin_to_celsius",
]
