"""CSV adapter for OperatorRepository and ReportRepository.

Reads the two spreadsheet exports a run is built from. Neither file has a
header row.

Operator file, 7 columns:
    call sign, latitude, longitude, transmitter power (W), antenna type,
    antenna gain (dBi), antenna height (ft)

Report file, 3 columns:
    receiving call sign, heard call sign, category (icon name)

A report with a blank call sign is skipped, not an error.

Unknown numeric values are exported as -100 and an unknown antenna type as an
empty cell; both pass through unchanged.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from domain.geo.value_objects import GeoCoordinate
from domain.reception.errors import InvalidRecordError
from domain.reception.value_objects import Operator, ReceptionReport, normalize_callsign

logger = logging.getLogger(__name__)

OPERATOR_FIELDS = 7
REPORT_FIELDS = 3


def _read_rows(path: Path) -> Iterator[tuple[int, list[str]]]:
    """Yield (line number, fields) for every non-blank CSV row."""
    if not path.exists():
        raise FileNotFoundError(str(path))

    # utf-8-sig: spreadsheet exports frequently start with a BOM
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        try:
            for row in reader:
                if not row or all(not field.strip() for field in row):
                    continue
                yield reader.line_num, row
        except csv.Error as e:
            raise InvalidRecordError(path.name, reader.line_num, str(e)) from e


def _parse_float(value: str, name: str, source: str, line: int) -> float:
    try:
        return float(value.strip())
    except ValueError as e:
        raise InvalidRecordError(source, line, f"can't parse {name}: {value!r}") from e


class CsvReceptionAdapter:
    """Infrastructure adapter for loading operators and reports from CSV."""

    def load_operators(self, file_path: Path | str) -> list[Operator]:
        path = Path(file_path)
        operators: list[Operator] = []

        for line, row in _read_rows(path):
            if len(row) < OPERATOR_FIELDS:
                raise InvalidRecordError(
                    path.name, line, f"expected {OPERATOR_FIELDS} fields, got {len(row)}"
                )
            latitude = _parse_float(row[1], "latitude", path.name, line)
            longitude = _parse_float(row[2], "longitude", path.name, line)
            try:
                operator = Operator(
                    callsign=row[0],
                    location=GeoCoordinate(latitude=latitude, longitude=longitude),
                    transmit_power_w=_parse_float(
                        row[3], "transmitter power", path.name, line
                    ),
                    antenna_type=row[4],
                    antenna_gain_dbi=_parse_float(row[5], "antenna gain", path.name, line),
                    antenna_height_ft=_parse_float(
                        row[6], "antenna height", path.name, line
                    ),
                )
            except ValidationError as e:
                raise InvalidRecordError(path.name, line, str(e)) from e
            operators.append(operator)

        logger.info("Loaded %d operators from %s", len(operators), path.name)
        return operators

    def load_reports(self, file_path: Path | str) -> list[ReceptionReport]:
        path = Path(file_path)
        reports: list[ReceptionReport] = []

        for line, row in _read_rows(path):
            if len(row) < REPORT_FIELDS:
                raise InvalidRecordError(
                    path.name, line, f"expected {REPORT_FIELDS} fields, got {len(row)}"
                )
            if not normalize_callsign(row[0]) or not normalize_callsign(row[1]):
                logger.info("%s:%d: missing call sign, skipping report", path.name, line)
                continue
            try:
                report = ReceptionReport(receiver=row[0], transmitter=row[1], category=row[2])
            except ValidationError as e:
                raise InvalidRecordError(path.name, line, str(e)) from e
            reports.append(report)

        logger.info("Loaded %d reception reports from %s", len(reports), path.name)
        return reports
