# diagnostics/batch.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple, Union

import pandas as pd

from domain.vehicle import Vehicle
from services.logging_config import get_logger
from services.vehicle_loader import VehicleLoadError, load_vehicle

from .engine import DiagnosticEngine
from .report import DiagnosticReport

logger = get_logger("batch")

SUMMARY_COLUMNS = ["source", "year", "make", "model", "stage", "passed", "findings"]
VEHICLE_SUFFIXES = (".json", ".xml")


def diagnose_many(vehicles: Iterable[Tuple[str, Vehicle]],
                  engine: DiagnosticEngine | None = None) -> List[Tuple[str, Vehicle, DiagnosticReport]]:
    # quiet by default: the table replaces per-finding lines
    engine = engine or DiagnosticEngine(sink=None)
    return [(source, v, engine.run_diagnostics(v)) for source, v in vehicles]


def summarize(results: Iterable[Tuple[str, Vehicle, DiagnosticReport]]) -> pd.DataFrame:
    rows = []
    for source, v, report in results:
        rows.append({
            "source": source,
            "year": v.year,
            "make": v.make,
            "model": v.model,
            "stage": report.stage,
            "passed": report.passed,
            "findings": ", ".join(report.findings()),
        })
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def load_directory(directory: Union[str, Path]) -> List[Tuple[str, Vehicle]]:
    """Load every vehicle file in a directory, sorted by name. Unreadable files are skipped with a warning."""
    d = Path(directory)
    if not d.is_dir():
        raise FileNotFoundError(f"Not a directory: {d}")
    out: List[Tuple[str, Vehicle]] = []
    for p in sorted(d.iterdir()):
        if p.suffix.lower() not in VEHICLE_SUFFIXES:
            continue
        try:
            out.append((p.name, load_vehicle(p)))
        except VehicleLoadError as e:
            logger.warning(f"Skipping {p.name}: {e}")
    return out


def diagnose_directory(directory: Union[str, Path]) -> pd.DataFrame:
    return summarize(diagnose_many(load_directory(directory)))
