# domain/vehicle.py
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union


class PartType(str, Enum):
    ENGINE = "ENGINE"
    ELECTRICAL = "ELECTRICAL"
    FUEL_FILTER = "FUEL_FILTER"
    OIL_FILTER = "OIL_FILTER"
    TIRE = "TIRE"

    def __str__(self) -> str:
        return self.value


class ConditionType(str, Enum):
    NEW = "NEW"
    GOOD = "GOOD"
    WORN = "WORN"
    DAMAGED = "DAMAGED"
    BROKEN = "BROKEN"
    FLAT = "FLAT"
    CLOGGED = "CLOGGED"
    NO_POWER = "NO_POWER"
    SPARKING = "SPARKING"

    def __str__(self) -> str:
        return self.value


# Everything outside this set counts as damaged.
ACCEPTABLE_CONDITIONS = frozenset({ConditionType.NEW, ConditionType.GOOD, ConditionType.WORN})

# How many units of each type a complete car carries.
REQUIRED_PARTS: Mapping[PartType, int] = MappingProxyType({
    PartType.ENGINE: 1,
    PartType.ELECTRICAL: 1,
    PartType.FUEL_FILTER: 1,
    PartType.OIL_FILTER: 1,
    PartType.TIRE: 4,
})


@dataclass(frozen=True)
class Part:
    type: PartType
    condition: ConditionType

    def __post_init__(self):
        if self.type is None:
            raise ValueError("PartType must not be null")
        if self.condition is None:
            raise ValueError("ConditionType must not be null")

    @property
    def in_working_condition(self) -> bool:
        return is_in_working_condition(self)


@dataclass(frozen=True)
class Vehicle:
    year: Optional[Union[int, str]] = None
    make: Optional[str] = None
    model: Optional[str] = None
    parts: Tuple[Part, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # callers may hand in a list; keep the stored sequence immutable
        object.__setattr__(self, "parts", tuple(self.parts or ()))

    def missing_fields(self) -> List[str]:
        """Field labels that are absent (None or blank), in Year/Make/Model order."""
        labels = [("Year", self.year), ("Make", self.make), ("Model", self.model)]
        return [label for label, value in labels if _is_absent(value)]

    def missing_parts(self, required: Mapping[PartType, int] = REQUIRED_PARTS) -> Dict[PartType, int]:
        return compute_missing_parts(self, required)


def _is_absent(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def is_in_working_condition(part: Part) -> bool:
    return part.condition in ACCEPTABLE_CONDITIONS


def compute_missing_parts(vehicle: Vehicle,
                          required: Mapping[PartType, int] = REQUIRED_PARTS) -> Dict[PartType, int]:
    """
    Shortfall per part type: required count minus installed count.

    Only types listed in ``required`` with a positive requirement are considered,
    and only those still short of it are returned. Order follows ``required``.
    """
    installed = Counter(p.type for p in vehicle.parts)
    missing: Dict[PartType, int] = {}
    for part_type, needed in required.items():
        shortfall = needed - installed.get(part_type, 0)
        if shortfall > 0:
            missing[part_type] = shortfall
    return missing
