"""Registry of vehicles currently parked."""

from typing import Optional

from ..errors import DuplicateSessionError
from .models import Category, Session


class SessionRegistry:
    """Active sessions keyed by vehicle id."""

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def put(self, session: Session) -> None:
        """
        Add a new active session.

        Raises:
            DuplicateSessionError: If the vehicle is already parked
        """
        if session.vehicle_id in self._sessions:
            raise DuplicateSessionError(session.vehicle_id)
        self._sessions[session.vehicle_id] = session

    def get(self, vehicle_id: str) -> Optional[Session]:
        return self._sessions.get(vehicle_id)

    def take(self, vehicle_id: str) -> Optional[Session]:
        """Remove and return the session for a vehicle, if any."""
        return self._sessions.pop(vehicle_id, None)

    def count(self, category: Optional[Category] = None) -> int:
        """Number of active sessions, optionally for one category."""
        if category is None:
            return len(self._sessions)
        return sum(1 for s in self._sessions.values() if s.category == category)

    def __contains__(self, vehicle_id: str) -> bool:
        return vehicle_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
