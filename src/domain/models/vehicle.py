from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.domain.algorithms.travel_time import (
    base_travel_time_h,
    express_travel_time_h,
)

from .outcomes import OutcomeReason


class VehicleKind(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"


@dataclass(slots=True, eq=False)
class Vehicle:
    """A bookable vehicle on a route.

    The roster holds passenger ids and never grows past ``capacity``.
    ``assigned_station_id`` is a back-reference set whenever the vehicle is
    scheduled at a station; the most recent station wins.
    """

    id: str
    route: str
    capacity: int
    speed_kmh: float
    kind: VehicleKind = VehicleKind.STANDARD
    stops_count: int | None = None
    on_time: bool = True
    booked_passenger_ids: list[str] = field(default_factory=list)
    assigned_station_id: str | None = None

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError(f"Invalid capacity: {self.capacity}")
        if self.kind is VehicleKind.EXPRESS:
            if self.stops_count is None or self.stops_count < 0:
                raise ValueError(f"Invalid stops count: {self.stops_count}")
        elif self.stops_count is not None:
            raise ValueError("Only express vehicles carry a stops count")

    @classmethod
    def express(
        cls, id: str, route: str, capacity: int, speed_kmh: float, stops_count: int
    ) -> "Vehicle":
        return cls(
            id=id,
            route=route,
            capacity=capacity,
            speed_kmh=speed_kmh,
            kind=VehicleKind.EXPRESS,
            stops_count=stops_count,
        )

    @property
    def is_express(self) -> bool:
        return self.kind is VehicleKind.EXPRESS

    @property
    def booked_count(self) -> int:
        return len(self.booked_passenger_ids)

    @property
    def is_full(self) -> bool:
        return self.booked_count >= self.capacity

    @property
    def status_label(self) -> str:
        return "On-time" if self.on_time else "Delayed"

    def has_passenger(self, passenger_id: str) -> bool:
        return passenger_id in self.booked_passenger_ids

    def calculate_travel_time(self, distance_km: float) -> float:
        """Hours to cover distance_km, or UNDEFINED_TRAVEL_TIME if speed <= 0."""

        if self.is_express:
            return express_travel_time_h(distance_km, self.speed_kmh)
        return base_travel_time_h(distance_km, self.speed_kmh)

    def booking_rejection(self, passenger_id: str) -> OutcomeReason | None:
        # Capacity is checked before duplicates.
        if self.is_full:
            return OutcomeReason.VEHICLE_FULL
        if self.has_passenger(passenger_id):
            return OutcomeReason.ALREADY_BOOKED
        return None

    def add_passenger(self, passenger_id: str) -> bool:
        if self.booking_rejection(passenger_id) is not None:
            return False
        self.booked_passenger_ids.append(passenger_id)
        return True

    def remove_passenger(self, passenger_id: str) -> bool:
        if not self.has_passenger(passenger_id):
            return False
        self.booked_passenger_ids.remove(passenger_id)
        return True

    def set_status(self, on_time: bool) -> None:
        self.on_time = on_time
