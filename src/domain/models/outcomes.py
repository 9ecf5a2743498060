from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeReason(str, Enum):
    OK = "ok"
    VEHICLE_FULL = "vehicle_full"
    ALREADY_BOOKED = "already_booked"
    NOT_BOOKED = "not_booked"
    NO_VEHICLE = "no_vehicle"
    SCHEDULE_LIMIT = "schedule_limit"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class BookingOutcome:
    """Result of a booking or cancellation attempt.

    Truthy iff the operation changed state.
    """

    ok: bool
    reason: OutcomeReason
    passenger_id: str
    passenger_name: str
    vehicle_id: str | None
    booked_count: int = 0
    capacity: int = 0

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True, slots=True)
class ScheduleOutcome:
    """Result of adding or removing a schedule entry at a station."""

    ok: bool
    reason: OutcomeReason
    station_id: str
    vehicle_id: str | None
    time: str | None = None
    is_arrival: bool | None = None
    schedule_count: int = 0

    def __bool__(self) -> bool:
        return self.ok
