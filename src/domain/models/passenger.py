from __future__ import annotations

from dataclasses import dataclass, field

from .vehicle import Vehicle


@dataclass(slots=True, eq=False)
class Passenger:
    """A traveller and the ids of the vehicles they are booked on.

    ``booked_vehicle_ids`` mirrors the rosters of those vehicles; only
    ``book_ride`` and ``cancel_ride`` change either side.
    """

    id: str
    name: str
    booked_vehicle_ids: list[str] = field(default_factory=list)

    def book_ride(self, vehicle: Vehicle | None) -> bool:
        if vehicle is None:
            return False
        if not vehicle.add_passenger(self.id):
            return False
        self.booked_vehicle_ids.append(vehicle.id)
        return True

    def cancel_ride(self, vehicle: Vehicle | None) -> bool:
        if vehicle is None:
            return False
        if not vehicle.remove_passenger(self.id):
            return False
        if vehicle.id in self.booked_vehicle_ids:
            self.booked_vehicle_ids.remove(vehicle.id)
        return True
