"""Temperature conversions: fixed points, exact inverses and a Pint cross-check."""

import math

import pytest

from engineering_conversions.temperature import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    kelvin_to_celsius,
)
from engineering_conversions.utils.units import Q_


class TestFixedPoints:
    """Exact values"""

    def test_freezing_point(self) -> None:
        assert celsius_to_fahrenheit(0.0) == 32.0

    def test_boiling_point(self) -> None:
        assert celsius_to_fahrenheit(100.0) == 212.0

    def test_room_temperature(self) -> None:
        assert celsius_to_fahrenheit(25.0) == 77.0

    def test_scales_cross_at_minus_forty(self) -> None:
        assert celsius_to_fahrenheit(-40.0) == -40.0
        assert fahrenheit_to_celsius(-40.0) == -40.0

    def test_fahrenheit_to_celsius_fixed_points(self) -> None:
        assert fahrenheit_to_celsius(32.0) == 0.0
        assert fahrenheit_to_celsius(212.0) == 100.0

    def test_kelvin_offset(self) -> None:
        assert celsius_to_kelvin(0.0) == 273.15
        assert kelvin_to_celsius(273.15) == 0.0

    def test_absolute_zero(self) -> None:
        assert celsius_to_kelvin(-273.15) == 0.0


class TestExactInverses:
    """C <-> F and C <-> K only accumulate floating-point rounding"""

    @pytest.mark.parametrize("value", [-459.67, -40.0, 0.0, 0.1, 37.5, 55.0, 212.0, 10_000.0])
    def test_fahrenheit_round_trip(self, value: float) -> None:
        assert celsius_to_fahrenheit(fahrenheit_to_celsius(value)) == pytest.approx(value, rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("value", [-273.15, -10.0, 0.0, 25.0, 1000.0])
    def test_kelvin_round_trip(self, value: float) -> None:
        assert kelvin_to_celsius(celsius_to_kelvin(value)) == pytest.approx(value, abs=1e-9)


class TestAgainstPint:
    """Same results as Pint's offset units"""

    @pytest.mark.parametrize("celsius", [-40.0, 0.0, 25.0, 55.0, 100.0])
    def test_fahrenheit_matches_pint(self, celsius: float) -> None:
        expected = Q_(celsius, "degC").to("degF").magnitude
        assert celsius_to_fahrenheit(celsius) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("celsius", [-273.15, 0.0, 25.0])
    def test_kelvin_matches_pint(self, celsius: float) -> None:
        expected = Q_(celsius, "degC").to("kelvin").magnitude
        assert celsius_to_kelvin(celsius) == pytest.approx(expected, abs=1e-9)


class TestNonPhysicalInput:
    """Values below absolute zero are not rejected"""

    def test_below_absolute_zero(self) -> None:
        assert celsius_to_kelvin(-300.0) == pytest.approx(-26.85, abs=1e-9)

    def test_nan_propagates(self) -> None:
        assert math.isnan(fahrenheit_to_celsius(float("nan")))
