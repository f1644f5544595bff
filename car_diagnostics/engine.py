from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from .models import Car, ConditionType, Part, PartType

logger = logging.getLogger(__name__)

LineSink = Callable[[str], None]

_REQUIRED_FIELDS = ('make', 'model', 'year')

MISSING_INFO_LINE = "Missing required information, diagnostic ending."
MISSING_PARTS_LINE = "Missing required parts, diagnostic ending."
DAMAGED_PARTS_LINE = "At least one part damaged, diagnostic ending."
SUCCESS_LINE = "All diagnostic steps completed."


class DiagnosticState(Enum):
    NOT_STARTED = 'not_started'
    FIELD_CHECK = 'field_check'
    PARTS_CHECK = 'parts_check'
    CONDITION_CHECK = 'condition_check'
    PASSED = 'passed'
    FAILED_AT_FIELD = 'failed_at_field'
    FAILED_AT_PARTS = 'failed_at_parts'
    FAILED_AT_CONDITION = 'failed_at_condition'


@dataclass
class DiagnosticResult:
    state: DiagnosticState = DiagnosticState.NOT_STARTED
    lines: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.state is DiagnosticState.PASSED


def format_missing_part(part_type: Optional[PartType], count: Optional[int]) -> str:
    if part_type is None:
        raise ValueError("PartType must not be None")
    if count is None or count <= 0:
        raise ValueError("Count must be greater than 0")
    return f"Missing Part(s) Detected: {part_type} - Count: {count}"


def format_damaged_part(part_type: Optional[PartType], condition: Optional[ConditionType]) -> str:
    if part_type is None:
        raise ValueError("PartType must not be None")
    if condition is None:
        raise ValueError("ConditionType must not be None")
    return f"Damaged Part Detected: {part_type} - Condition: {condition}"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class CarDiagnosticEngine:
    """
    Runs the fixed diagnostic sequence over a car and writes findings to a
    line sink (standard output by default).

    The gates run in order: required fields, required parts, part condition.
    Each gate reports everything it finds before the run stops, and the run
    stops at the first gate that fails. The engine keeps no state between
    runs, so one instance can diagnose any number of cars.
    """

    def __init__(self, sink: LineSink = print) -> None:
        self.sink = sink

    def execute_diagnostics(self, car: Car) -> None:
        self.run(car)

    def run(self, car: Car) -> DiagnosticResult:
        result = DiagnosticResult()

        def emit(line: str) -> None:
            result.lines.append(line)
            self.sink(line)

        def advance(state: DiagnosticState) -> None:
            logger.debug("diagnostics %s -> %s", result.state.value, state.value)
            result.state = state

        advance(DiagnosticState.FIELD_CHECK)
        if not self._validate_make_model_info(car, emit):
            advance(DiagnosticState.FAILED_AT_FIELD)
            return result

        advance(DiagnosticState.PARTS_CHECK)
        if not self._validate_missing_parts(car, emit):
            advance(DiagnosticState.FAILED_AT_PARTS)
            return result

        advance(DiagnosticState.CONDITION_CHECK)
        if not self._validate_working_parts(car.parts, emit):
            advance(DiagnosticState.FAILED_AT_CONDITION)
            return result

        advance(DiagnosticState.PASSED)
        emit(SUCCESS_LINE)
        return result

    def _validate_make_model_info(self, car: Car, emit: LineSink) -> bool:
        has_valid_info = True
        for name in _REQUIRED_FIELDS:
            if _is_blank(getattr(car, name)):
                emit(f"Car {name} is required")
                has_valid_info = False
        if not has_valid_info:
            emit(MISSING_INFO_LINE)
        return has_valid_info

    def _validate_missing_parts(self, car: Car, emit: LineSink) -> bool:
        missing = car.missing_parts_map()
        for part_type, count in missing.items():
            emit(format_missing_part(part_type, count))
        if missing:
            emit(MISSING_PARTS_LINE)
        return not missing

    def _validate_working_parts(self, parts: List[Part], emit: LineSink) -> bool:
        parts_working = True
        for part in parts:
            if not part.is_in_working_condition():
                emit(format_damaged_part(part.type, part.condition))
                parts_working = False
        if not parts_working:
            emit(DAMAGED_PARTS_LINE)
        return parts_working
