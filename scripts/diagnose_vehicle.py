# scripts/diagnose_vehicle.py
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from diagnostics.engine import DiagnosticEngine
from services.config import load_settings
from services.logging_config import setup_logging
from services.vehicle_loader import VehicleLoadError, load_vehicle

EXIT_LOAD_ERROR = 1


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Car diagnostics: check a vehicle file for missing fields and parts")
    parser.add_argument("path", nargs="?", default=settings.vehicle_file,
                        help="vehicle file (.json or .xml); defaults to CARDIAG_VEHICLE_FILE")
    parser.add_argument("--log-level", type=str, default=settings.log_level)
    args = parser.parse_args(argv)

    setup_logging(args.log_level, settings.log_path)

    try:
        vehicle = load_vehicle(args.path)
    except (FileNotFoundError, VehicleLoadError) as e:
        print(f"An error occurred attempting to load {args.path}: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    report = DiagnosticEngine().run_diagnostics(vehicle)
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
