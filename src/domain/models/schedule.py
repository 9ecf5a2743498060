from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Schedule:
    """A vehicle arriving at or departing from a station at a time label.

    The vehicle is referenced by id; None marks an unassigned slot.
    """

    vehicle_id: str | None
    time: str
    is_arrival: bool

    @property
    def label(self) -> str:
        return "Arrival" if self.is_arrival else "Departure"
