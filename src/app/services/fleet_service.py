from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IRegistryRepository
from src.domain.algorithms.travel_time import is_defined
from src.domain.models import Passenger, Station, Vehicle

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FleetService:
    """Registers entities and answers per-vehicle queries."""

    registry: IRegistryRepository

    def register_station(self, *, name: str, location: str, type: str) -> Station:
        station = Station(name=name, location=location, type=type)
        self.registry.add_station(station)
        logger.debug("Registered station %s", name)
        return station

    def register_vehicle(
        self, *, id: str, route: str, capacity: int, speed_kmh: float
    ) -> Vehicle:
        vehicle = Vehicle(id=id, route=route, capacity=capacity, speed_kmh=speed_kmh)
        self.registry.add_vehicle(vehicle)
        logger.debug("Registered vehicle %s", id)
        return vehicle

    def register_express(
        self,
        *,
        id: str,
        route: str,
        capacity: int,
        speed_kmh: float,
        stops_count: int,
    ) -> Vehicle:
        vehicle = Vehicle.express(id, route, capacity, speed_kmh, stops_count)
        self.registry.add_vehicle(vehicle)
        logger.debug("Registered express vehicle %s", id)
        return vehicle

    def register_passenger(self, *, id: str, name: str) -> Passenger:
        passenger = Passenger(id=id, name=name)
        self.registry.add_passenger(passenger)
        logger.debug("Registered passenger %s", id)
        return passenger

    def set_status(self, *, vehicle_id: str, on_time: bool) -> Vehicle:
        vehicle = self.registry.get_vehicle(vehicle_id)
        vehicle.set_status(on_time)
        logger.debug("Vehicle %s status: %s", vehicle_id, vehicle.status_label)
        return vehicle

    def travel_time_h(self, *, vehicle_id: str, distance_km: float) -> float:
        vehicle = self.registry.get_vehicle(vehicle_id)
        hours = vehicle.calculate_travel_time(distance_km)
        if not is_defined(hours):
            logger.warning(
                "Travel time undefined for %s (speed %s km/h)",
                vehicle_id,
                vehicle.speed_kmh,
            )
        return hours
