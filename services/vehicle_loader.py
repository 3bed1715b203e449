# services/vehicle_loader.py
"""
Builds a Vehicle from a JSON or XML description.

XML follows the SampleCar.xml layout:
    <car>
      <year>2012</year><make>Ford</make><model>Focus</model>
      <parts>
        <part type="ENGINE" condition="GOOD"/>
        <part type="TIRE"><condition>FLAT</condition></part>
      </parts>
    </car>
"""

import json
import xml.etree.ElementTree as ET
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from domain.vehicle import ConditionType, Part, PartType, Vehicle
from services.logging_config import get_logger

logger = get_logger("loader")

E = TypeVar("E", bound=Enum)


class VehicleLoadError(ValueError):
    """The input could not be turned into a Vehicle."""
    pass


def _clean(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _to_year(v: Any) -> Optional[Union[int, str]]:
    s = _clean(v)
    if s is None:
        return None
    try:
        return int(s)
    except ValueError:
        return s


def _to_enum(enum_cls: Type[E], raw: Any, what: str) -> E:
    s = _clean(raw)
    if s is None:
        raise VehicleLoadError(f"Part is missing its {what}")
    try:
        return enum_cls[s.upper()]
    except KeyError:
        raise VehicleLoadError(f"Unknown {what}: {raw!r}") from None


def _map_part(it: Dict[str, Any]) -> Part:
    return Part(
        type=_to_enum(PartType, it.get("type"), "type"),
        condition=_to_enum(ConditionType, it.get("condition"), "condition"),
    )


def vehicle_from_dict(data: Dict[str, Any]) -> Vehicle:
    if not isinstance(data, dict):
        raise VehicleLoadError(f"Expected an object describing a car, got {type(data).__name__}")
    raw_parts = data.get("parts", [])
    if raw_parts is None:
        raw_parts = []
    if not isinstance(raw_parts, list):
        raise VehicleLoadError("'parts' must be a list")
    parts: List[Part] = []
    for i, it in enumerate(raw_parts):
        if not isinstance(it, dict):
            raise VehicleLoadError(f"Part #{i + 1} is not an object")
        parts.append(_map_part(it))
    return Vehicle(
        year=_to_year(data.get("year")),
        make=_clean(data.get("make")),
        model=_clean(data.get("model")),
        parts=tuple(parts),
    )


def vehicle_from_json(text: str) -> Vehicle:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise VehicleLoadError(f"Invalid JSON: {e}") from e
    return vehicle_from_dict(data)


def vehicle_from_xml(text: str) -> Vehicle:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise VehicleLoadError(f"Invalid XML: {e}") from e

    parts = []
    for el in root.iter("part"):
        # condition may be an attribute or a child element
        condition = el.get("condition")
        if condition is None:
            condition = el.findtext("condition")
        parts.append({"type": el.get("type") or el.findtext("type"), "condition": condition})

    return vehicle_from_dict({
        "year": root.findtext("year"),
        "make": root.findtext("make"),
        "model": root.findtext("model"),
        "parts": parts,
    })


def load_vehicle(path: Union[str, Path]) -> Vehicle:
    """Load a vehicle file; format is picked from the extension (.json or .xml)."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Vehicle file not found: {p}")
    if not p.is_file():
        raise VehicleLoadError(f"Not a vehicle file: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise VehicleLoadError(f"Could not read {p}: {e}") from e
    suffix = p.suffix.lower()
    logger.debug(f"Loading vehicle from {p}")
    if suffix == ".json":
        return vehicle_from_json(text)
    if suffix == ".xml":
        return vehicle_from_xml(text)
    raise VehicleLoadError(f"Unsupported vehicle file type: {p.suffix or '(none)'}")
