"""Line-oriented command file runner."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .errors import CommandParseError, InvalidTimestampError
from .state.facility import Facility
from .state.models import RejectReason, Rejected
from .state.pricing import FeeSchedule

logger = logging.getLogger(__name__)

SKIP_MESSAGE = "Error processing line; skipping"
UNRECOGNIZED_CATEGORY_MESSAGE = "Vehicle type not allowed for this parking garage"

_SEPARATOR = re.compile(r"\W+")
_UNSIGNED = re.compile(r"[0-9]+")


@dataclass
class EnterCommand:
    """``Enter <Category> <VehicleId> <Timestamp>``"""

    category: str
    vehicle_id: str
    timestamp: int


@dataclass
class ExitCommand:
    """``Exit <VehicleId> <Timestamp>``"""

    vehicle_id: str
    timestamp: int


Command = Union[EnterCommand, ExitCommand]


def _split(line: str) -> list[str]:
    return [word for word in _SEPARATOR.split(line.strip()) if word]


def _parse_unsigned(word: str) -> int:
    if not _UNSIGNED.fullmatch(word):
        raise CommandParseError(f"Expected an unsigned integer, got {word!r}")
    return int(word)


def parse_capacities(line: Optional[str]) -> tuple[int, int]:
    """
    Parse the header line holding car and motorcycle capacities.

    Raises:
        CommandParseError: If the line does not hold exactly two unsigned integers
    """
    words = _split(line or "")
    if len(words) != 2:
        raise CommandParseError("First line should have total lots for both vehicles")
    return _parse_unsigned(words[0]), _parse_unsigned(words[1])


def parse_command(line: str) -> Command:
    """
    Parse one Enter or Exit command. The keyword is case-insensitive.

    Raises:
        CommandParseError: If the line is not a well-formed command
    """
    words = _split(line)
    keyword = words[0].casefold() if words else ""

    if keyword == "enter" and len(words) == 4:
        return EnterCommand(
            category=words[1],
            vehicle_id=words[2],
            timestamp=_parse_unsigned(words[3]),
        )
    if keyword == "exit" and len(words) == 3:
        return ExitCommand(vehicle_id=words[1], timestamp=_parse_unsigned(words[2]))

    raise CommandParseError(f"Unrecognized command: {line.strip()!r}")


def run_commands(lines: Iterable[str], facility: Facility) -> Iterator[str]:
    """
    Apply commands to a facility, yielding one output line per outcome.

    Malformed lines and commands the facility refuses are reported with
    SKIP_MESSAGE; processing carries on with the next line. An unknown
    vehicle category prints UNRECOGNIZED_CATEGORY_MESSAGE before the rejection.
    """
    for line in lines:
        if not line.strip():
            continue

        try:
            command = parse_command(line)
            if isinstance(command, EnterCommand):
                outcome = facility.entry(command.category, command.vehicle_id, command.timestamp)
            else:
                outcome = facility.exit(command.vehicle_id, command.timestamp)
        except (CommandParseError, InvalidTimestampError) as e:
            logger.warning(f"Skipping {line.strip()!r}: {e}")
            yield SKIP_MESSAGE
            continue

        if outcome is None:
            continue
        if isinstance(outcome, Rejected) and outcome.reason is RejectReason.UNRECOGNIZED_CATEGORY:
            yield UNRECOGNIZED_CATEGORY_MESSAGE
        yield outcome.render()


def process_file(path: str | Path, schedule: Optional[FeeSchedule] = None) -> Iterator[str]:
    """
    Run a command file: a capacities header followed by commands.

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnicodeDecodeError: If the file is not UTF-8 text
        CommandParseError: If the header line is malformed
    """
    with open(path, encoding="utf-8") as f:
        car_capacity, motorcycle_capacity = parse_capacities(f.readline())
        facility = Facility(car_capacity, motorcycle_capacity, schedule)
        yield from run_commands(f, facility)
