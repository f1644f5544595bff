from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class PartType(Enum):
    ENGINE = 'ENGINE'
    ELECTRICAL = 'ELECTRICAL'
    FUEL_FILTER = 'FUEL_FILTER'
    OIL_FILTER = 'OIL_FILTER'
    BATTERY = 'BATTERY'

    def __str__(self) -> str:
        return self.value


class ConditionType(Enum):
    NEW = 'NEW'
    GOOD = 'GOOD'
    WORN = 'WORN'
    DAMAGED = 'DAMAGED'
    RUSTY = 'RUSTY'
    BROKEN = 'BROKEN'
    FLAT = 'FLAT'
    SCRAPPED = 'SCRAPPED'

    def __str__(self) -> str:
        return self.value


# Parts a complete car must carry, with the count required of each type.
REQUIRED_PARTS: Dict[PartType, int] = {
    PartType.ENGINE: 1,
    PartType.ELECTRICAL: 1,
    PartType.FUEL_FILTER: 1,
    PartType.OIL_FILTER: 1,
    PartType.BATTERY: 1,
}

WORKING_CONDITIONS = frozenset({ConditionType.NEW, ConditionType.GOOD, ConditionType.WORN})


@dataclass
class Part:
    type: PartType
    condition: ConditionType

    def is_in_working_condition(self) -> bool:
        return self.condition in WORKING_CONDITIONS


@dataclass
class Car:
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[str] = None
    parts: List[Part] = field(default_factory=list)

    def missing_parts_map(self) -> Dict[PartType, int]:
        """
        Return PartType -> shortfall for every required type the car does not
        carry enough of. Types that are fully present are omitted, so the map
        is empty for a complete car. Ordered as REQUIRED_PARTS.
        """
        present: Dict[PartType, int] = {}
        for part in self.parts:
            present[part.type] = present.get(part.type, 0) + 1
        missing: Dict[PartType, int] = {}
        for part_type, required in REQUIRED_PARTS.items():
            shortfall = required - present.get(part_type, 0)
            if shortfall > 0:
                missing[part_type] = shortfall
        return missing
