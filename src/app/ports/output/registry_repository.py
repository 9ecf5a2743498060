from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.exceptions.registry import EntityNotFound
from src.domain.models import Passenger, Station, Vehicle


class IRegistryRepository(ABC):
    """Port for the id-keyed registry of vehicles, stations and passengers.

    ``get_*`` raise EntityNotFound for unknown ids; ``find_*`` return None.
    Listings preserve registration order.
    """

    @abstractmethod
    def add_vehicle(self, vehicle: Vehicle) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_vehicle(self, vehicle_id: str) -> Vehicle | None:
        raise NotImplementedError

    @abstractmethod
    def list_vehicles(self) -> tuple[Vehicle, ...]:
        raise NotImplementedError

    @abstractmethod
    def add_station(self, station: Station) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_station(self, station_id: str) -> Station | None:
        raise NotImplementedError

    @abstractmethod
    def list_stations(self) -> tuple[Station, ...]:
        raise NotImplementedError

    @abstractmethod
    def add_passenger(self, passenger: Passenger) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_passenger(self, passenger_id: str) -> Passenger | None:
        raise NotImplementedError

    @abstractmethod
    def list_passengers(self) -> tuple[Passenger, ...]:
        raise NotImplementedError

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = self.find_vehicle(vehicle_id)
        if vehicle is None:
            raise EntityNotFound("Vehicle", vehicle_id)
        return vehicle

    def get_station(self, station_id: str) -> Station:
        station = self.find_station(station_id)
        if station is None:
            raise EntityNotFound("Station", station_id)
        return station

    def get_passenger(self, passenger_id: str) -> Passenger:
        passenger = self.find_passenger(passenger_id)
        if passenger is None:
            raise EntityNotFound("Passenger", passenger_id)
        return passenger
