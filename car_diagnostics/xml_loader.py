from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from enum import Enum
from pathlib import Path
from typing import Optional, Type, TypeVar, Union

from .models import Car, ConditionType, Part, PartType

logger = logging.getLogger(__name__)

RESOURCE_DIR = Path(__file__).resolve().parent / 'resources'
SAMPLE_CAR_NAME = 'SampleCar.xml'

_E = TypeVar('_E', bound=Enum)


class CarLoadError(Exception):
    """Raised when a car document cannot be located, read or understood."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


def sample_car_path() -> Path:
    return RESOURCE_DIR / SAMPLE_CAR_NAME


def _text(elem: ET.Element, tag: str) -> Optional[str]:
    child = elem.find(tag)
    if child is None:
        return None
    return (child.text or '').strip()


def _enum_value(enum_cls: Type[_E], raw: Optional[str], what: str) -> _E:
    if raw is None or not raw.strip():
        raise CarLoadError(f"Part is missing its {what}")
    key = raw.strip().upper().replace('-', '_').replace(' ', '_')
    try:
        return enum_cls[key]
    except KeyError:
        raise CarLoadError(f"Unknown part {what}: {raw.strip()!r}") from None


def _part_field(elem: ET.Element, name: str) -> Optional[str]:
    # Attributes first (<part type=".." condition=".."/>), child elements as fallback.
    value = elem.get(name)
    if value is None:
        value = _text(elem, name)
    return value


def parse_car_xml(text: Union[str, bytes]) -> Car:
    """
    Parse a <car> document into a Car.

    make, model and year are taken as written; a missing or empty element
    leaves the field empty so the diagnostics can report it. Parts must name
    a known type and condition.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise CarLoadError(f"Malformed car document: {exc}") from exc
    if root.tag != 'car':
        raise CarLoadError(f"Expected <car> root element, found <{root.tag}>")

    parts = []
    container = root.find('parts')
    if container is not None:
        for elem in container.findall('part'):
            parts.append(Part(
                type=_enum_value(PartType, _part_field(elem, 'type'), 'type'),
                condition=_enum_value(ConditionType, _part_field(elem, 'condition'), 'condition'),
            ))
    return Car(
        make=_text(root, 'make'),
        model=_text(root, 'model'),
        year=_text(root, 'year'),
        parts=parts,
    )


def load_car(path: Path) -> Car:
    path = Path(path)
    if not path.is_file():
        raise CarLoadError(f"File not found: {path}", path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CarLoadError(f"Unable to read {path}: {exc}", path) from exc
    try:
        # Bytes so the parser applies the document's declared encoding.
        car = parse_car_xml(data)
    except CarLoadError as exc:
        exc.path = path
        raise
    logger.debug("Loaded car %s/%s/%s with %d part(s) from %s",
                 car.make, car.model, car.year, len(car.parts), path)
    return car


class XmlCarSource:
    """Single ingestion point: load() returns a Car or raises CarLoadError."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else sample_car_path()

    def load(self) -> Car:
        return load_car(self.path)
