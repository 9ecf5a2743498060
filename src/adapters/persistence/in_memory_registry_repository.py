from __future__ import annotations

from dataclasses import dataclass, field

from src.app.ports.output import IRegistryRepository
from src.domain.exceptions.registry import DuplicateEntityError
from src.domain.models import Passenger, Station, Vehicle


@dataclass(slots=True)
class InMemoryRegistryRepository(IRegistryRepository):
    """Process-lifetime registry backed by insertion-ordered dicts."""

    vehicles_by_id: dict[str, Vehicle] = field(default_factory=dict)
    stations_by_id: dict[str, Station] = field(default_factory=dict)
    passengers_by_id: dict[str, Passenger] = field(default_factory=dict)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        if vehicle.id in self.vehicles_by_id:
            raise DuplicateEntityError("Vehicle", vehicle.id)
        self.vehicles_by_id[vehicle.id] = vehicle

    def find_vehicle(self, vehicle_id: str) -> Vehicle | None:
        return self.vehicles_by_id.get(vehicle_id)

    def list_vehicles(self) -> tuple[Vehicle, ...]:
        return tuple(self.vehicles_by_id.values())

    def add_station(self, station: Station) -> None:
        if station.id in self.stations_by_id:
            raise DuplicateEntityError("Station", station.id)
        self.stations_by_id[station.id] = station

    def find_station(self, station_id: str) -> Station | None:
        return self.stations_by_id.get(station_id)

    def list_stations(self) -> tuple[Station, ...]:
        return tuple(self.stations_by_id.values())

    def add_passenger(self, passenger: Passenger) -> None:
        if passenger.id in self.passengers_by_id:
            raise DuplicateEntityError("Passenger", passenger.id)
        self.passengers_by_id[passenger.id] = passenger

    def find_passenger(self, passenger_id: str) -> Passenger | None:
        return self.passengers_by_id.get(passenger_id)

    def list_passengers(self) -> tuple[Passenger, ...]:
        return tuple(self.passengers_by_id.values())
