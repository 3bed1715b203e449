# diagnostics/report.py
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Tuple, Union

from domain.vehicle import ConditionType, PartType

EXIT_OK = 0
EXIT_FINDINGS = 2


@dataclass(frozen=True)
class FieldsMissing:
    fields: Tuple[str, ...]

    stage = "fields"
    passed = False
    exit_code = EXIT_FINDINGS

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    def findings(self) -> List[str]:
        return list(self.fields)


@dataclass(frozen=True)
class PartsMissing:
    missing: Mapping[PartType, int] = field(hash=False)

    stage = "parts_missing"
    passed = False
    exit_code = EXIT_FINDINGS

    def __post_init__(self):
        object.__setattr__(self, "missing", MappingProxyType(dict(self.missing)))

    def __eq__(self, other):
        if not isinstance(other, PartsMissing):
            return NotImplemented
        return dict(self.missing) == dict(other.missing)

    def findings(self) -> List[str]:
        return [f"{t} ({n})" for t, n in self.missing.items()]


@dataclass(frozen=True)
class PartsDamaged:
    damaged: Tuple[Tuple[PartType, ConditionType], ...]

    stage = "parts_damaged"
    passed = False
    exit_code = EXIT_FINDINGS

    def __post_init__(self):
        object.__setattr__(self, "damaged", tuple((t, c) for t, c in self.damaged))

    def findings(self) -> List[str]:
        return [f"{t}:{c}" for t, c in self.damaged]


@dataclass(frozen=True)
class Success:
    stage = "success"
    passed = True
    exit_code = EXIT_OK

    def findings(self) -> List[str]:
        return []


DiagnosticReport = Union[FieldsMissing, PartsMissing, PartsDamaged, Success]
