# SPDX-License-Identifier: BSD-2-Clause
"""
Export of a pin configuration as a delimiter-separated report.

The report has one row per physical pin, ordered by physical number:

    Pin Name,Physical Number,Type,Configured Function
    PB2,2,gpio,
    PA1,10,gpio,UART_TX

Fields containing the delimiter are wrapped in double quotes. Embedded
double quotes are written as-is.
"""

import functools
import logging
import re

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Mapping, Optional, Protocol, Sequence

from .chip import ChipDefinition, PhysicalPin

logger = logging.getLogger(__name__)

HEADER = ('Pin Name', 'Physical Number', 'Type', 'Configured Function')
DEFAULT_DELIMITER = ','

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


@dataclass(frozen=True)
class PinMuxReport:
    """A rendered report and the name it should be saved under"""
    filename: str
    payload: bytes


class Delivery(Protocol):
    def deliver(self, filename: str, payload: bytes): ...


class DirectoryDelivery:
    """Delivers reports by writing them into a directory."""

    def __init__(self, directory):
        self.directory = Path(directory)

    def deliver(self, filename: str, payload: bytes) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / filename
        path.write_bytes(payload)
        logger.debug(f"Wrote {len(payload)} bytes to {path}")
        return path


def _parse_number(number: str) -> Optional[int]:
    "Leading integer of a physical number, if any"
    m = _LEADING_INT.match(number)
    return int(m.group(1)) if m else None


def _compare_pins(a: PhysicalPin, b: PhysicalPin) -> int:
    num_a = _parse_number(a.number)
    num_b = _parse_number(b.number)
    if num_a is not None and num_b is not None:
        return (num_a > num_b) - (num_a < num_b)
    return (a.number > b.number) - (a.number < b.number)


def sort_physical_pins(pins: Sequence[PhysicalPin]) -> List[PhysicalPin]:
    """
    Return the pins ordered by physical number.

    Numbers are compared as integers when both have a leading integer,
    otherwise as strings. The input sequence is not modified.

    The mixed comparison is not transitive when a number starts with a
    sign: ("+5", "-", "3") comes back unchanged, because "+5" < "-" and
    "-" < "3" as strings even though 3 < 5.
    """
    return sorted(pins, key=functools.cmp_to_key(_compare_pins))


def escape_field(value, delimiter: str = DEFAULT_DELIMITER) -> str:
    s = str(value)
    return f'"{s}"' if delimiter in s else s


def report_rows(chip: ChipDefinition, assignments: Mapping[str, str]) -> List[List[str]]:
    """Header row followed by one row per physical pin"""
    rows = [list(HEADER)]
    for pin in sort_physical_pins(chip.package.pins):
        capability = chip.pins.get(pin.name)
        pin_type = (capability.type if capability else None) or 'unknown'
        rows.append([pin.name, pin.number, pin_type, assignments.get(pin.name) or ''])
    return rows


def render_report(chip: ChipDefinition, assignments: Mapping[str, str],
                  delimiter: str = DEFAULT_DELIMITER) -> bytes:
    lines = [delimiter.join(escape_field(f, delimiter) for f in row)
             for row in report_rows(chip, assignments)]
    return '\n'.join(lines).encode('utf-8')


def report_filename(chip_name: str, now: Optional[datetime] = None) -> str:
    """
    File name for a report, e.g. ``STM32F103_PinMux_2026-10-19T13-21-05.csv``.

    The timestamp is UTC with second precision. Path separators in
    `chip_name` are replaced with underscores.
    """
    chip_name = chip_name.replace("/", "_").replace("\\", "_")
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    timestamp = now.isoformat(timespec='milliseconds')
    timestamp = timestamp.replace(':', '-').replace('.', '-')[:19]
    return f"{chip_name}_PinMux_{timestamp}.csv"


def export_configuration(chip: ChipDefinition, assignments: Mapping[str, str],
                         delivery: Optional[Delivery] = None,
                         now: Optional[datetime] = None,
                         delimiter: str = DEFAULT_DELIMITER) -> PinMuxReport:
    """
    Render the configuration report for `chip` and hand it to `delivery`.

    Args:
        chip: The chip definition the assignments belong to
        assignments: Pin name to configured function
        delivery: Optional collaborator that saves the report
        now: Time used for the file name, defaults to the current time
        delimiter: Field separator

    Returns:
        The rendered report
    """
    snapshot = dict(assignments)
    report = PinMuxReport(filename=report_filename(chip.meta.name, now),
                          payload=render_report(chip, snapshot, delimiter))
    logger.debug(
        f"Exported {len(chip.package.pins)} pins ({len(snapshot)} configured) "
        f"as {report.filename}"
    )
    if delivery is not None:
        delivery.deliver(report.filename, report.payload)
    return report
