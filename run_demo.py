"""CLI entry point for the engineering unit conversion demo."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Ensure the local src directory is available for direct execution without installation.
PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))

from engineering_conversions.demo import (
    DemoArtifacts,
    load_defaults,
    merge_case_with_defaults,
    run_demo,
)
from engineering_conversions.reporter.console_reporter import (
    export_report,
    render_console_view,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line options for the demo runner."""
    parser = argparse.ArgumentParser(description="Print sample engineering unit conversions")
    parser.add_argument("--case", type=Path, help="Optional JSON file overriding the demo sample values")
    parser.add_argument("--out", type=Path, help="Output directory for the JSON report")
    parser.add_argument(
        "--show-audit",
        action="store_true",
        help="Display round-trip and constant drift audit results",
    )
    parser.add_argument(
        "--no-console",
        action="store_true",
        help="Skip console output (useful for scripted runs)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def load_case(case_path: Path) -> dict[str, Any]:
    """Load and parse the JSON case file."""
    with case_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the conversion demo."""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    case_data: dict[str, Any] = {}
    if args.case is not None:
        case_data = load_case(args.case)
        case_data.setdefault("meta", {}).setdefault("input_case", args.case.name)

    merged_case = merge_case_with_defaults(case_data, load_defaults())
    artifacts: DemoArtifacts = run_demo(merged_case)

    if not args.no_console:
        render_console_view(artifacts.result, show_audit=args.show_audit, trace=artifacts.trace)

    if args.out is not None:
        report_path = export_report(artifacts.result, artifacts.trace, args.out / "conversion_demo.json")
        if not args.no_console:
            print()
            print(f"Report saved: {report_path}")


if __name__ == "__main__":
    main()
