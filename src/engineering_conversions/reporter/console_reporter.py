"""Console presentation helpers for the demonstration results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping


def _format_block(title: str, lines: list[str]) -> str:
    return "\n".join([f"{title}:", *(f"  {line}" for line in lines)])


def render_console_view(
    result: Mapping[str, Any],
    show_audit: bool = False,
    trace: Mapping[str, Any] | None = None,
) -> None:
    """Print the sample conversions the way the original demo laid them out."""
    length = result.get("length", {})
    temperature = result.get("temperature", {})
    pressure = result.get("pressure", {})
    mass = result.get("mass", {})
    facility = result.get("facility", {})

    print("=== Engineering Unit Conversion Demo ===")
    print()

    length_lines = [
        f"{length.get('meters', 0):g} meters = {length.get('feet', 0):.2f} feet",
        f"{length.get('marathon_km', 0):g} km (marathon) = {length.get('marathon_miles', 0):.2f} miles",
    ]
    print(_format_block("LENGTH CONVERSIONS", length_lines))

    temperature_lines = [
        f"{temperature.get('celsius', 0):g}°C = {temperature.get('fahrenheit', 0):.2f}°F = {temperature.get('kelvin', 0):.2f}K",
        f"Boiling point: {temperature.get('boiling_C', 0):g}°C = {temperature.get('boiling_F', 0):.2f}°F",
    ]
    print()
    print(_format_block("TEMPERATURE CONVERSIONS", temperature_lines))

    pressure_lines = [
        f"{pressure.get('bar', 0):g} bar = {pressure.get('psi', 0):.2f} PSI = {pressure.get('pascal', 0):.0f} Pa",
    ]
    print()
    print(_format_block("PRESSURE CONVERSIONS", pressure_lines))

    mass_lines = [
        f"{mass.get('kg', 0):g} kg = {mass.get('pounds', 0):.2f} pounds",
        f"{mass.get('daily_tonnes', 0):g} tonnes/day = {mass.get('daily_tons', 0):.2f} tons/day",
    ]
    print()
    print(_format_block("MASS CONVERSIONS", mass_lines))

    facility_lines = [
        f"Capacity: {facility.get('capacity_tonnes_per_day', 0):g} tonnes/day ({facility.get('capacity_tons_per_day', 0):.2f} tons/day)",
        f"Operating Temperature: {facility.get('operating_temp_C', 0):g}°C ({facility.get('operating_temp_F', 0):.2f}°F)",
        f"Operating Pressure: {facility.get('operating_pressure_bar', 0):g} bar ({facility.get('operating_pressure_psi', 0):.2f} PSI)",
    ]
    print()
    print("=== Practical Engineering Example ===")
    print(_format_block("AD Facility Specifications", facility_lines))

    if show_audit and trace is not None:
        audit_lines = [
            f"{record['pair']}: worst error {record['worst_abs_error']:.3e} at {record['worst_value']:g} "
            f"({'ok' if record['passed'] else 'FAILED'})"
            for record in trace.get("round_trips", [])
        ]
        audit_lines.extend(
            f"{record['conversion']}: constant {record['constant']:g} vs exact {record['exact_factor']:.9g} "
            f"(drift {record['relative_drift']:.2e})"
            for record in trace.get("constant_drift", [])
        )
        print()
        print(_format_block("Round-Trip Audit", audit_lines))

    warnings = result.get("meta", {}).get("warnings", [])
    if warnings:
        print()
        print(_format_block("Warnings", list(warnings)))


def export_report(result: Mapping[str, Any], trace: Mapping[str, Any], output_path: Path) -> Path:
    """Persist the demo results and audit trace to disk."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"result": result, "trace": trace}
    output_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return output_path
