# diagnostics/engine.py
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from domain.vehicle import (
    ConditionType,
    PartType,
    Vehicle,
    compute_missing_parts,
    is_in_working_condition,
)
from services.logging_config import get_logger

from .report import DiagnosticReport, FieldsMissing, PartsDamaged, PartsMissing, Success

logger = get_logger("engine")

Sink = Callable[[str], None]

MSG_FIELDS_ABORT = "Yikes! Car is missing fields, cannot proceed with diagnostics."
MSG_PARTS_ABORT = "Yikes! Car has missing parts, cannot proceed with diagnostics."
MSG_DAMAGE_ABORT = "Yikes! Car has damaged parts, cannot proceed with diagnostics."
MSG_SUCCESS = "Success! Car passes all diagnostics."


def _discard(line: str) -> None:
    pass


class DiagnosticEngine:
    """
    Runs the fixed three-stage check over a Vehicle:
    fields -> missing parts -> damaged parts.

    Each stage reports every problem it finds; the first failing stage ends the run.
    Human-readable lines go to ``sink`` (stdout by default), the structured
    outcome is returned.
    """

    def __init__(self, sink: Optional[Sink] = print):
        self.sink = sink or _discard

    def _emit(self, line: str) -> None:
        logger.debug(line)
        self.sink(line)

    def run_diagnostics(self, vehicle: Vehicle) -> DiagnosticReport:
        if vehicle is None:
            logger.error("Diagnostics called without a vehicle")
            raise ValueError("Vehicle must not be null")

        # 1) year / make / model
        missing_fields = self._check_fields(vehicle)
        if missing_fields:
            self._emit(MSG_FIELDS_ABORT)
            return FieldsMissing(tuple(missing_fields))

        # 2) required parts present in required quantities
        missing_parts = self._check_missing_parts(vehicle)
        if missing_parts:
            self._emit(MSG_PARTS_ABORT)
            return PartsMissing(missing_parts)

        # 3) every installed part in working condition
        damaged = self._check_damaged_parts(vehicle)
        if damaged:
            self._emit(MSG_DAMAGE_ABORT)
            return PartsDamaged(tuple(damaged))

        self._emit(MSG_SUCCESS)
        return Success()

    # ---------------- stages ----------------
    def _check_fields(self, vehicle: Vehicle) -> List[str]:
        missing = vehicle.missing_fields()
        if missing:
            self._emit(f"Car is missing field(s): {', '.join(missing)}.")
        return missing

    def _check_missing_parts(self, vehicle: Vehicle) -> Dict[PartType, int]:
        missing = compute_missing_parts(vehicle)
        for part_type, count in missing.items():
            self._report_missing_part(part_type, count)
        return missing

    def _check_damaged_parts(self, vehicle: Vehicle) -> List[Tuple[PartType, ConditionType]]:
        damaged: List[Tuple[PartType, ConditionType]] = []
        for part in vehicle.parts:
            if not is_in_working_condition(part):
                self._report_damaged_part(part.type, part.condition)
                damaged.append((part.type, part.condition))
        return damaged

    # ---------------- output ----------------
    def _report_missing_part(self, part_type: PartType, count: int) -> None:
        if part_type is None:
            raise ValueError("PartType must not be null")
        if count is None or count <= 0:
            raise ValueError("Count must be greater than 0")
        self._emit(f"Missing Part(s) Detected: {part_type} - Count: {count}")

    def _report_damaged_part(self, part_type: PartType, condition: ConditionType) -> None:
        if part_type is None:
            raise ValueError("PartType must not be null")
        if condition is None:
            raise ValueError("ConditionType must not be null")
        self._emit(f"Damaged Part Detected: {part_type} - Condition: {condition}")


def run_diagnostics(vehicle: Vehicle, sink: Optional[Sink] = print) -> DiagnosticReport:
    return DiagnosticEngine(sink).run_diagnostics(vehicle)
