from __future__ import annotations

from dataclasses import dataclass, field

from .schedule import Schedule
from .vehicle import Vehicle

MAX_SCHEDULES = 10


@dataclass(slots=True, eq=False)
class Station:
    """A bus or train station with a bounded, insertion-ordered timetable.

    No time-conflict checks are made: duplicate times, repeated vehicles and
    unassigned (None) vehicles are accepted while there is room.
    """

    name: str
    location: str
    type: str
    schedules: list[Schedule] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.name

    @property
    def max_schedules(self) -> int:
        return MAX_SCHEDULES

    @property
    def schedule_count(self) -> int:
        return len(self.schedules)

    @property
    def is_full(self) -> bool:
        return self.schedule_count >= self.max_schedules

    def add_schedule(
        self, vehicle: Vehicle | None, time: str, is_arrival: bool
    ) -> bool:
        if self.is_full:
            return False
        self.schedules.append(
            Schedule(
                vehicle_id=vehicle.id if vehicle is not None else None,
                time=time,
                is_arrival=is_arrival,
            )
        )
        if vehicle is not None:
            vehicle.assigned_station_id = self.id
        return True

    def remove_schedule_by_vehicle_id(self, vehicle_id: str) -> bool:
        for i, schedule in enumerate(self.schedules):
            if schedule.vehicle_id is not None and schedule.vehicle_id == vehicle_id:
                del self.schedules[i]
                return True
        return False
