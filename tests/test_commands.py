import pytest

from valet_parking.commands import (
    SKIP_MESSAGE,
    UNRECOGNIZED_CATEGORY_MESSAGE,
    EnterCommand,
    ExitCommand,
    parse_capacities,
    parse_command,
    process_file,
    run_commands,
)
from valet_parking.errors import CommandParseError
from valet_parking.state.facility import Facility
from valet_parking.state.models import Category
from valet_parking.state.pricing import FeeSchedule

SAMPLE = """3 4
Enter motorcycle SGX1234A 1613541902
Enter car SGF9283P 1613541902
Exit SGX1234A 1613545602
Enter car SGP2937F 1613546029
Enter car TAKEN12 1613558029
Enter car LATE123 1613560000
Exit SGF9283P 1613558029
Enter motorcycle SGP2939F 1613558030
"""


@pytest.mark.parametrize("line", ["3 4", "3 4\n", " 3,4 ", "3\t4"])
def test_parse_capacities(line):
    assert parse_capacities(line) == (3, 4)


@pytest.mark.parametrize("line", ["", None, "3", "3 4 5", "three 4"])
def test_parse_capacities_malformed(line):
    with pytest.raises(CommandParseError):
        parse_capacities(line)


def test_parse_enter():
    assert parse_command("Enter car SGX1234A 1613541902") == EnterCommand(
        category="car", vehicle_id="SGX1234A", timestamp=1613541902
    )


def test_parse_exit_case_insensitive():
    assert parse_command("EXIT SGX1234A 10\n") == ExitCommand(vehicle_id="SGX1234A", timestamp=10)


@pytest.mark.parametrize(
    "line",
    [
        "Enter car SGX1234A",
        "Exit SGX1234A",
        "Enter car SGX1234A abc",
        "Leave SGX1234A 10",
        "Exit SGX1234A 10 extra",
        "Enter car SG-X1234A 10",
    ],
)
def test_parse_command_malformed(line):
    with pytest.raises(CommandParseError):
        parse_command(line)


def test_run_commands_sample_session():
    facility = Facility(3, 4)
    lines = SAMPLE.splitlines()[1:]

    assert list(run_commands(lines, facility)) == [
        "Accept MotorcycleLot1",
        "Accept CarLot1",
        "MotorcycleLot1 2",
        "Accept CarLot2",
        "Accept CarLot3",
        "Reject",
        "CarLot1 10",
        "Accept MotorcycleLot1",
    ]


def test_run_commands_skips_bad_lines():
    facility = Facility(1, 1)
    lines = [
        "Enter car A 100",
        "",
        "garbage",
        "Exit A 50",
        "Exit nobody 200",
        "Enter truck B 10",
        "Exit A 200",
    ]

    assert list(run_commands(lines, facility)) == [
        "Accept CarLot1",
        SKIP_MESSAGE,
        SKIP_MESSAGE,
        UNRECOGNIZED_CATEGORY_MESSAGE,
        "Reject",
        "CarLot1 2",
    ]


def test_process_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)

    output = list(process_file(path))

    assert output[0] == "Accept MotorcycleLot1"
    assert len(output) == 8


def test_process_file_custom_schedule(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("1 0\nEnter car A 0\nExit A 3600\n")

    schedule = FeeSchedule({Category.CAR: 7, Category.MOTORCYCLE: 1})

    assert list(process_file(path, schedule)) == ["Accept CarLot1", "CarLot1 7"]


def test_process_file_bad_header(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("3\nEnter car A 0\n")

    with pytest.raises(CommandParseError):
        list(process_file(path))


def test_process_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(process_file(tmp_path / "missing.txt"))


def test_exhaustion_has_no_category_message():
    facility = Facility(0, 0)

    assert list(run_commands(["Enter car A 0", "Enter bus B 0"], facility)) == [
        "Reject",
        UNRECOGNIZED_CATEGORY_MESSAGE,
        "Reject",
    ]


@pytest.mark.parametrize("line", [" 3 4", "3 4 "])
def test_parse_capacities_ignores_surrounding_whitespace(line):
    assert parse_capacities(line) == (3, 4)
