from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .engine import DiagnosticResult, DiagnosticState
from .models import REQUIRED_PARTS, Car

_STATE_LABELS: Dict[DiagnosticState, str] = {
    DiagnosticState.NOT_STARTED: 'Not started',
    DiagnosticState.FIELD_CHECK: 'Checking required information',
    DiagnosticState.PARTS_CHECK: 'Checking required parts',
    DiagnosticState.CONDITION_CHECK: 'Checking part condition',
    DiagnosticState.PASSED: 'All checks passed',
    DiagnosticState.FAILED_AT_FIELD: 'Stopped: missing required information',
    DiagnosticState.FAILED_AT_PARTS: 'Stopped: missing required parts',
    DiagnosticState.FAILED_AT_CONDITION: 'Stopped: damaged parts',
}


def _icon(ok: bool) -> str:
    return '✔' if ok else '✘'


def _field(value: Optional[str]) -> str:
    return value if value and value.strip() else '(missing)'


def format_report_text(car: Car, result: DiagnosticResult) -> str:
    lines: List[str] = []
    lines.append("Car Diagnostic Report")
    lines.append("")
    lines.append(f"Make: {_field(car.make)}")
    lines.append(f"Model: {_field(car.model)}")
    lines.append(f"Year: {_field(car.year)}")
    lines.append("")
    lines.append("Parts:")
    if car.parts:
        for part in car.parts:
            lines.append(f"- {_icon(part.is_in_working_condition())} {part.type}: {part.condition}")
    else:
        lines.append("- none")
    missing = car.missing_parts_map()
    if missing:
        lines.append("")
        lines.append("Missing Parts:")
        for part_type, count in missing.items():
            lines.append(f"- {part_type} x{count} (required {REQUIRED_PARTS[part_type]})")
    lines.append("")
    lines.append(f"Result: {_STATE_LABELS.get(result.state, result.state.value)}")
    lines.append(f"Overall Status: {'PASS' if result.passed else 'FAIL'}")
    return "\n".join(lines)


def result_to_dict(car: Car, result: DiagnosticResult) -> Dict[str, Any]:
    return {
        'make': car.make,
        'model': car.model,
        'year': car.year,
        'parts': [
            {
                'type': str(p.type),
                'condition': str(p.condition),
                'working': p.is_in_working_condition(),
            }
            for p in car.parts
        ],
        'missing_parts': {str(k): v for k, v in car.missing_parts_map().items()},
        'state': result.state.value,
        'passed': result.passed,
        'lines': list(result.lines),
    }


def format_report_json(car: Car, result: DiagnosticResult) -> str:
    return json.dumps(result_to_dict(car, result), indent=2)
