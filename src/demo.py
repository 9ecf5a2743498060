from __future__ import annotations

import logging
import sys
from collections import Counter
from typing import TextIO

from src.adapters.console.presenter import ConsolePresenter
from src.adapters.persistence import InMemoryRegistryRepository
from src.app.services.booking_service import BookingService
from src.app.services.fleet_service import FleetService
from src.app.services.scheduling_service import SchedulingService
from src.config import DemoConfig
from src.domain.models import MAX_SCHEDULES


def _teardown(
    registry: InMemoryRegistryRepository, out: ConsolePresenter
) -> None:
    """Print release notices in shared-ownership order.

    Stations go in reverse creation order. A vehicle is released once no
    remaining station schedules it: unscheduled vehicles first (newest
    first), the rest right after the last station holding them.
    """

    stations = list(reversed(registry.list_stations()))
    holders: Counter[str] = Counter()
    for station in stations:
        holders.update(
            {s.vehicle_id for s in station.schedules if s.vehicle_id is not None}
        )

    for vehicle in reversed(registry.list_vehicles()):
        if holders[vehicle.id] == 0:
            out.vehicle_destroyed(vehicle)

    for station in stations:
        out.station_destroyed(station)
        # Entries are dropped front to back; a vehicle goes with its last one.
        last_index = {
            s.vehicle_id: i
            for i, s in enumerate(station.schedules)
            if s.vehicle_id is not None
        }
        for vehicle_id in sorted(last_index, key=last_index.__getitem__):
            holders[vehicle_id] -= 1
            if holders[vehicle_id] == 0:
                out.vehicle_destroyed(registry.get_vehicle(vehicle_id))



def run(
    config: DemoConfig, stream: TextIO | None = None
) -> InMemoryRegistryRepository:
    """Run the station management walkthrough and return the final registry."""

    registry = InMemoryRegistryRepository()
    out = ConsolePresenter(
        registry=registry, stream=stream if stream is not None else sys.stdout
    )
    fleet = FleetService(registry=registry)
    bookings = BookingService(registry=registry)
    scheduling = SchedulingService(registry=registry)

    out.banner("Public Transportation Station Management System Demo")
    out.section("Setup")

    bus_station = fleet.register_station(
        name="Downtown Bus Hub", location="12 Main St", type="bus"
    )
    out.station_created(bus_station)
    train_station = fleet.register_station(
        name="Central Train", location="1 Station Rd", type="train"
    )
    out.station_created(train_station)

    # BUS101 has capacity 2 so the third booking is rejected.
    v1 = fleet.register_vehicle(id="BUS101", route="A->B", capacity=2, speed_kmh=45.0)
    out.vehicle_created(v1)
    v2 = fleet.register_vehicle(id="BUS202", route="C->D", capacity=3, speed_kmh=50.0)
    out.vehicle_created(v2)
    exp1 = fleet.register_express(
        id="EXP301", route="X->Y Express", capacity=4, speed_kmh=80.0, stops_count=3
    )
    out.vehicle_created(exp1)

    out.section(f"Scheduling tests (max {MAX_SCHEDULES} per station)")
    for i in range(MAX_SCHEDULES):
        out.schedule_added(
            scheduling.add_schedule(
                station_id=bus_station.id,
                vehicle_id=v1.id,
                time=f"08:{10 + i:02d}",
                is_arrival=False,
            )
        )
    # One past the limit.
    out.schedule_added(
        scheduling.add_schedule(
            station_id=bus_station.id, vehicle_id=v2.id, time="11:30", is_arrival=True
        )
    )

    out.section("Display schedules at busStation")
    out.station_info(bus_station)

    out.section("Booking tests (capacity checks)")
    alice = fleet.register_passenger(id="P100", name="Alice")
    out.passenger_created(alice)
    bob = fleet.register_passenger(id="P101", name="Bob")
    out.passenger_created(bob)
    carol = fleet.register_passenger(id="P102", name="Carol")
    out.passenger_created(carol)

    for passenger in (alice, bob, carol):
        out.booking(bookings.book_ride(passenger_id=passenger.id, vehicle_id=v1.id))

    out.section("Vehicle info after attempted bookings")
    out.vehicle_info(v1)

    out.section("Cancel and retry booking")
    out.cancellation(bookings.cancel_ride(passenger_id=bob.id, vehicle_id=v1.id))
    out.booking(bookings.book_ride(passenger_id=carol.id, vehicle_id=v1.id))
    out.vehicle_info(v1)

    out.section(f"Travel time comparison (distance {config.distance_km:.2f} km)")
    for vehicle in (v2, exp1):
        hours = fleet.travel_time_h(
            vehicle_id=vehicle.id, distance_km=config.distance_km
        )
        out.travel_time(vehicle, hours)

    out.section("Schedule express bus at trainStation")
    out.schedule_added(
        scheduling.add_schedule(
            station_id=train_station.id,
            vehicle_id=exp1.id,
            time="09:45",
            is_arrival=True,
        )
    )
    out.station_info(train_station)

    out.section("Delay express bus")
    out.vehicle_info(fleet.set_status(vehicle_id=exp1.id, on_time=False))

    out.section("Remove schedule example")
    out.schedule_removed(
        scheduling.remove_schedule_by_vehicle_id(
            station_id=bus_station.id, vehicle_id=v1.id
        )
    )
    out.station_info(bus_station)

    out.section("Passenger info")
    for passenger in (alice, bob, carol):
        out.passenger_info(passenger)

    if config.output == "json":
        out.section("Registry snapshot")
        out.snapshot_json()

    out.closing("Demo complete")

    if config.teardown:
        _teardown(registry, out)

    return registry


def main() -> None:
    config = DemoConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    run(config)


if __name__ == "__main__":
    main()
