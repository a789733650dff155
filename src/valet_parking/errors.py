"""Exceptions raised by the parking core and its adapters."""


class ValetParkingError(Exception):
    """Base class for all valet parking errors."""


class UnrecognizedCategoryError(ValetParkingError, ValueError):
    """Vehicle category label is neither car nor motorcycle."""

    def __init__(self, label):
        self.label = label
        super().__init__(f"Vehicle type not allowed for this parking garage: {label!r}")


class DuplicateSessionError(ValetParkingError):
    """Vehicle already holds an active session."""

    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle '{vehicle_id}' is already parked")


class SlotReleaseError(ValetParkingError, ValueError):
    """Slot returned to a pool was never allocated from it."""


class InvalidTimestampError(ValetParkingError, ValueError):
    """Timestamp is negative or otherwise unusable."""


class ExitBeforeEntryError(InvalidTimestampError):
    """Exit timestamp is earlier than the session's entry timestamp."""

    def __init__(self, vehicle_id: str, entry_timestamp: int, exit_timestamp: int):
        self.vehicle_id = vehicle_id
        self.entry_timestamp = entry_timestamp
        self.exit_timestamp = exit_timestamp
        super().__init__(
            f"Exit at {exit_timestamp} precedes entry at {entry_timestamp} "
            f"for vehicle '{vehicle_id}'"
        )


class CommandParseError(ValetParkingError, ValueError):
    """Command line could not be parsed."""
