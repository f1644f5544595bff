#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from car_diagnostics import config
from car_diagnostics.engine import CarDiagnosticEngine
from car_diagnostics.report import format_report_json, format_report_text
from car_diagnostics.xml_loader import CarLoadError, XmlCarSource

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_DIAGNOSTICS_FAILED = 2


def _report_load_error(path: Path, exc: CarLoadError) -> None:
    print(f"An error occurred attempting to load {path.name}: {exc}", file=sys.stderr)


def cmd_diagnose(args: argparse.Namespace) -> int:
    path = Path(args.car) if args.car else config.SAMPLE_CAR_PATH
    try:
        car = XmlCarSource(path).load()
    except CarLoadError as exc:
        _report_load_error(path, exc)
        return EXIT_LOAD_ERROR

    # JSON output carries the diagnostic lines itself; keep stdout parseable.
    engine = CarDiagnosticEngine(sink=(lambda line: None) if args.json else print)
    result = engine.run(car)
    if args.json:
        print(format_report_json(car, result))
    elif args.report:
        print()
        print(format_report_text(car, result))
    if args.strict and not result.passed:
        return EXIT_DIAGNOSTICS_FAILED
    return EXIT_OK


def cmd_diagnose_batch(args: argparse.Namespace) -> int:
    root = Path(args.root)
    if not root.is_dir():
        print(f"Not a directory: {root}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    files = sorted(p for p in root.glob('*.xml') if p.is_file())
    logger.debug("Found %d car document(s) in %s", len(files), root)
    engine = CarDiagnosticEngine()
    passed = failed = load_errors = 0
    for path in files:
        print(f"== {path.name} ==")
        try:
            car = XmlCarSource(path).load()
        except CarLoadError as exc:
            _report_load_error(path, exc)
            load_errors += 1
            continue
        if engine.run(car).passed:
            passed += 1
        else:
            failed += 1
    print(f"Diagnosed {len(files)} car(s): {passed} passed, {failed} failed, {load_errors} could not be loaded")
    if load_errors:
        return EXIT_LOAD_ERROR
    if args.strict and failed:
        return EXIT_DIAGNOSTICS_FAILED
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Car Diagnostic Engine")
    sub = parser.add_subparsers(dest='cmd', required=True)

    p_d = sub.add_parser('diagnose', help='Run diagnostics on a car XML document')
    p_d.add_argument('car', nargs='?', default=None, help='Path to car XML (defaults to the bundled SampleCar.xml)')
    p_d.add_argument('--report', action='store_true', help='Print a summary report after the diagnostic lines')
    p_d.add_argument('--json', action='store_true', help='Print a JSON report instead of the diagnostic lines')
    p_d.add_argument('--strict', action='store_true', help='Exit with status 2 when diagnostics fail')
    p_d.set_defaults(func=cmd_diagnose)

    p_b = sub.add_parser('diagnose-batch', help='Run diagnostics on every car XML in a folder')
    p_b.add_argument('root', help='Folder containing car XML documents')
    p_b.add_argument('--strict', action='store_true', help='Exit with status 2 when any car fails diagnostics')
    p_b.set_defaults(func=cmd_diagnose_batch)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=config.log_level(), format=config.LOG_FORMAT)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == '__main__':
    raise SystemExit(main())
