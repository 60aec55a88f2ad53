"""Demonstration run: defaults, merging and computed sample values."""

import pytest

from engineering_conversions.demo import (
    DEFAULTS_PATH,
    deep_merge,
    load_defaults,
    merge_case_with_defaults,
    run_demo,
)


@pytest.fixture
def defaults() -> dict:
    return load_defaults()


class TestDefaults:
    def test_packaged_defaults_exist(self) -> None:
        assert DEFAULTS_PATH.exists()

    def test_sample_values(self, defaults: dict) -> None:
        assert defaults["length"]["marathon_km"] == 42.195
        assert defaults["facility"]["operating_temp_C"] == 55.0
        assert defaults["mass"]["daily_tonnes"] == 500.0


class TestDeepMerge:
    def test_nested_override(self) -> None:
        base = {"pressure": {"bar": 2.5}, "mass": {"kg": 75.0}}
        merged = deep_merge(base, {"pressure": {"bar": 1.0}})
        assert merged == {"pressure": {"bar": 1.0}, "mass": {"kg": 75.0}}

    def test_inputs_not_mutated(self) -> None:
        base = {"pressure": {"bar": 2.5}}
        override = {"pressure": {"bar": 1.0}}
        deep_merge(base, override)
        assert base == {"pressure": {"bar": 2.5}}
        assert override == {"pressure": {"bar": 1.0}}


class TestRunDemo:
    def test_length_section(self, defaults: dict) -> None:
        result = run_demo(defaults).result
        assert result["length"]["feet"] == pytest.approx(328.084, rel=1e-12)
        assert result["length"]["marathon_miles"] == pytest.approx(26.21875, abs=1e-4)

    def test_temperature_section(self, defaults: dict) -> None:
        temperature = run_demo(defaults).result["temperature"]
        assert temperature["fahrenheit"] == 77.0
        assert temperature["kelvin"] == pytest.approx(298.15, abs=1e-9)
        assert temperature["boiling_F"] == 212.0

    def test_pressure_section(self, defaults: dict) -> None:
        pressure = run_demo(defaults).result["pressure"]
        assert pressure["psi"] == pytest.approx(36.2595, rel=1e-12)
        assert pressure["pascal"] == 250000.0

    def test_mass_section(self, defaults: dict) -> None:
        mass = run_demo(defaults).result["mass"]
        assert mass["pounds"] == pytest.approx(165.3465, rel=1e-12)
        assert mass["daily_tons"] == pytest.approx(551.155, rel=1e-12)

    def test_facility_section(self, defaults: dict) -> None:
        facility = run_demo(defaults).result["facility"]
        assert facility["capacity_tons_per_day"] == pytest.approx(551.155, rel=1e-12)
        assert facility["operating_temp_F"] == 131.0
        assert facility["operating_pressure_psi"] == pytest.approx(21.7557, rel=1e-12)

    def test_no_warnings_for_shipped_constants(self, defaults: dict) -> None:
        artifacts = run_demo(defaults)
        assert artifacts.result["meta"]["warnings"] == []
        assert artifacts.result["meta"]["timestamp_utc"]

    def test_trace_contains_audits(self, defaults: dict) -> None:
        trace = run_demo(defaults).trace
        assert len(trace["round_trips"]) == 8
        assert len(trace["constant_drift"]) == 6

    def test_case_override(self, defaults: dict) -> None:
        merged = merge_case_with_defaults({"pressure": {"bar": 1.0}, "meta": {"input_case": "site.json"}}, defaults)
        artifacts = run_demo(merged)
        assert artifacts.result["pressure"]["psi"] == 14.5038
        assert artifacts.result["length"]["meters"] == 100.0
        assert artifacts.result["meta"]["input_case"] == "site.json"
        assert artifacts.merged_case["pressure"] == {"bar": 1.0}

    def test_missing_sections_fall_back_to_zero(self) -> None:
        result = run_demo({}).result
        assert result["length"]["feet"] == 0.0
        assert result["temperature"]["boiling_F"] == 212.0
