import logging

import pytest

from diagnostics.engine import (
    MSG_DAMAGE_ABORT,
    MSG_FIELDS_ABORT,
    MSG_PARTS_ABORT,
    MSG_SUCCESS,
    DiagnosticEngine,
    run_diagnostics,
)
from diagnostics.report import FieldsMissing, PartsDamaged, PartsMissing, Success
from domain.vehicle import REQUIRED_PARTS, ConditionType, Part, PartType, Vehicle


def _complete_parts():
    out = []
    for part_type, count in REQUIRED_PARTS.items():
        out += [Part(part_type, ConditionType.GOOD)] * count
    return out


def _car(parts=None, **fields):
    base = {"year": 2015, "make": "Honda", "model": "Civic"}
    base.update(fields)
    return Vehicle(parts=tuple(_complete_parts() if parts is None else parts), **base)


class Recorder:
    def __init__(self):
        self.lines = []

    def __call__(self, line):
        self.lines.append(line)


def _run(vehicle):
    rec = Recorder()
    report = DiagnosticEngine(sink=rec).run_diagnostics(vehicle)
    return report, rec.lines


def test_success_path():
    report, lines = _run(_car())
    assert report == Success()
    assert report.passed and report.exit_code == 0
    assert report.findings() == []
    assert lines == [MSG_SUCCESS]


def test_field_check_names_every_missing_field():
    report, lines = _run(_car(year=None, model=None))
    assert isinstance(report, FieldsMissing)
    assert report.fields == ("Year", "Model")
    assert lines == ["Car is missing field(s): Year, Model.", MSG_FIELDS_ABORT]


def test_field_check_precedes_part_checks():
    # no parts at all, and one broken part: still only the field failure is reported
    report, lines = _run(Vehicle(make="Honda", parts=(Part(PartType.TIRE, ConditionType.FLAT),)))
    assert isinstance(report, FieldsMissing)
    assert not isinstance(report, PartsMissing)
    assert not any("Part" in line for line in lines)


def test_missing_parts_reports_every_entry():
    parts = [Part(PartType.TIRE, ConditionType.GOOD)] * 2 + [Part(PartType.ENGINE, ConditionType.BROKEN)]
    report, lines = _run(_car(parts=parts))
    assert isinstance(report, PartsMissing)
    assert dict(report.missing) == {
        PartType.ELECTRICAL: 1,
        PartType.FUEL_FILTER: 1,
        PartType.OIL_FILTER: 1,
        PartType.TIRE: 2,
    }
    assert lines == [
        "Missing Part(s) Detected: ELECTRICAL - Count: 1",
        "Missing Part(s) Detected: FUEL_FILTER - Count: 1",
        "Missing Part(s) Detected: OIL_FILTER - Count: 1",
        "Missing Part(s) Detected: TIRE - Count: 2",
        MSG_PARTS_ABORT,
    ]
    # damaged engine is not looked at once parts are missing
    assert not any("Damaged" in line for line in lines)


def test_all_damaged_parts_reported_in_order():
    parts = _complete_parts()
    parts[1] = Part(PartType.ELECTRICAL, ConditionType.NO_POWER)
    parts[6] = Part(PartType.TIRE, ConditionType.FLAT)
    report, lines = _run(_car(parts=parts))
    assert isinstance(report, PartsDamaged)
    assert report.damaged == (
        (PartType.ELECTRICAL, ConditionType.NO_POWER),
        (PartType.TIRE, ConditionType.FLAT),
    )
    assert report.exit_code == 2
    assert lines == [
        "Damaged Part Detected: ELECTRICAL - Condition: NO_POWER",
        "Damaged Part Detected: TIRE - Condition: FLAT",
        MSG_DAMAGE_ABORT,
    ]


def test_extra_damaged_part_beyond_requirement_is_reported():
    parts = _complete_parts() + [Part(PartType.TIRE, ConditionType.DAMAGED)]
    report, _ = _run(_car(parts=parts))
    assert report == PartsDamaged(((PartType.TIRE, ConditionType.DAMAGED),))


def test_running_twice_gives_same_report():
    car = _car(year=None)
    first, first_lines = _run(car)
    second, second_lines = _run(car)
    assert first == second
    assert first_lines == second_lines

    damaged = _car(parts=_complete_parts()[:-1] + [Part(PartType.TIRE, ConditionType.FLAT)])
    assert _run(damaged)[0] == _run(damaged)[0]


def test_none_vehicle_is_a_precondition_violation(caplog):
    rec = Recorder()
    with caplog.at_level(logging.ERROR, logger="car_diagnostics.engine"):
        with pytest.raises(ValueError):
            DiagnosticEngine(sink=rec).run_diagnostics(None)
    assert rec.lines == []
    assert "without a vehicle" in caplog.text


def test_default_sink_prints_to_stdout(capsys):
    report = run_diagnostics(_car(make=None))
    out = capsys.readouterr().out.splitlines()
    assert isinstance(report, FieldsMissing)
    assert out == ["Car is missing field(s): Make.", MSG_FIELDS_ABORT]


def test_quiet_engine_still_returns_report(capsys):
    report = DiagnosticEngine(sink=None).run_diagnostics(_car())
    assert report == Success()
    assert capsys.readouterr().out == ""


def test_findings_mirrored_to_debug_log(caplog):
    with caplog.at_level(logging.DEBUG, logger="car_diagnostics.engine"):
        _run(_car())
    assert MSG_SUCCESS in caplog.text
