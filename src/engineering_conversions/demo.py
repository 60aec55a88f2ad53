"""Demonstration run over the sample values of an AD facility case."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping

from . import length, mass, pressure, temperature
from .catalogue import audit_round_trips
from .utils.unit_helpers import drift_report

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).resolve().parent / "defaults" / "demo.json"


@dataclass
class DemoArtifacts:
    """Container for demo outputs and audit diagnostics."""

    result: Dict[str, Any]
    trace: Dict[str, Any]
    merged_case: Dict[str, Any]


def load_defaults(defaults_path: Path = DEFAULTS_PATH) -> Dict[str, Any]:
    """Load the default demonstration sample values."""

    with defaults_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries without mutating the inputs."""

    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_case_with_defaults(case_data: Mapping[str, Any], defaults: Mapping[str, Any]) -> Dict[str, Any]:
    """Apply packaged defaults to the provided case data."""

    return deep_merge(defaults, case_data)


def _length_section(spec: Mapping[str, Any]) -> dict[str, float]:
    meters = float(spec.get("meters", 0.0))
    marathon_km = float(spec.get("marathon_km", 0.0))
    return {
        "meters": meters,
        "feet": length.meters_to_feet(meters),
        "marathon_km": marathon_km,
        "marathon_miles": length.km_to_miles(marathon_km),
    }


def _temperature_section(spec: Mapping[str, Any]) -> dict[str, float]:
    celsius = float(spec.get("celsius", 0.0))
    boiling_c = float(spec.get("boiling_C", 100.0))
    return {
        "celsius": celsius,
        "fahrenheit": temperature.celsius_to_fahrenheit(celsius),
        "kelvin": temperature.celsius_to_kelvin(celsius),
        "boiling_C": boiling_c,
        "boiling_F": temperature.celsius_to_fahrenheit(boiling_c),
    }


def _pressure_section(spec: Mapping[str, Any]) -> dict[str, float]:
    bar = float(spec.get("bar", 0.0))
    return {
        "bar": bar,
        "psi": pressure.bar_to_psi(bar),
        "pascal": pressure.bar_to_pascal(bar),
    }


def _mass_section(spec: Mapping[str, Any]) -> dict[str, float]:
    kg = float(spec.get("kg", 0.0))
    daily_tonnes = float(spec.get("daily_tonnes", 0.0))
    return {
        "kg": kg,
        "pounds": mass.kg_to_pounds(kg),
        "daily_tonnes": daily_tonnes,
        "daily_tons": mass.tonnes_to_tons(daily_tonnes),
    }


def _facility_section(spec: Mapping[str, Any]) -> dict[str, float]:
    capacity_tonnes = float(spec.get("capacity_tonnes_per_day", 0.0))
    operating_temp_c = float(spec.get("operating_temp_C", 0.0))
    operating_pressure_bar = float(spec.get("operating_pressure_bar", 0.0))
    return {
        "capacity_tonnes_per_day": capacity_tonnes,
        "capacity_tons_per_day": mass.tonnes_to_tons(capacity_tonnes),
        "operating_temp_C": operating_temp_c,
        "operating_temp_F": temperature.celsius_to_fahrenheit(operating_temp_c),
        "operating_pressure_bar": operating_pressure_bar,
        "operating_pressure_psi": pressure.bar_to_psi(operating_pressure_bar),
    }


def run_demo(case_data: Mapping[str, Any]) -> DemoArtifacts:
    """Convert every sample value of a merged case and audit the pairs used."""

    result: Dict[str, Any] = {
        "length": _length_section(case_data.get("length", {})),
        "temperature": _temperature_section(case_data.get("temperature", {})),
        "pressure": _pressure_section(case_data.get("pressure", {})),
        "mass": _mass_section(case_data.get("mass", {})),
        "facility": _facility_section(case_data.get("facility", {})),
    }
    logger.debug("Sample conversions computed for %d sections", len(result))

    round_trips = audit_round_trips()
    drift = drift_report()
    warnings = [record["warning"] for record in (*round_trips, *drift) if "warning" in record]
    if warnings:
        logger.info("Demo audit produced %d warning(s)", len(warnings))

    result["meta"] = {
        "input_case": case_data.get("meta", {}).get("input_case"),
        "timestamp_utc": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "warnings": warnings,
    }

    trace = {
        "round_trips": round_trips,
        "constant_drift": drift,
    }

    return DemoArtifacts(result=result, trace=trace, merged_case=dict(case_data))


__all__ = [
    "DemoArtifacts",
    "DEFAULTS_PATH",
    "deep_merge",
    "load_defaults",
    "merge_case_with_defaults",
    "run_demo",
]
