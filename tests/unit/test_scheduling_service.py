from __future__ import annotations

from src.adapters.persistence import InMemoryRegistryRepository
from src.app.services.fleet_service import FleetService
from src.app.services.scheduling_service import SchedulingService
from src.domain.models import OutcomeReason


def _setup() -> tuple[InMemoryRegistryRepository, SchedulingService]:
    registry = InMemoryRegistryRepository()
    fleet = FleetService(registry=registry)
    fleet.register_station(name="Downtown Bus Hub", location="12 Main St", type="bus")
    fleet.register_station(name="Central Train", location="1 Station Rd", type="train")
    fleet.register_vehicle(id="V1", route="A->B", capacity=2, speed_kmh=45.0)
    fleet.register_vehicle(id="V2", route="C->D", capacity=3, speed_kmh=50.0)
    return registry, SchedulingService(registry=registry)


def test_eleventh_schedule_fails_and_count_stays_ten() -> None:
    registry, svc = _setup()

    for i in range(10):
        out = svc.add_schedule(
            station_id="Downtown Bus Hub",
            vehicle_id="V1",
            time=f"08:{10 + i:02d}",
            is_arrival=False,
        )
        assert out.ok
        assert out.schedule_count == i + 1

    out = svc.add_schedule(
        station_id="Downtown Bus Hub", vehicle_id="V2", time="11:30", is_arrival=True
    )

    assert not out
    assert out.reason is OutcomeReason.SCHEDULE_LIMIT
    assert out.schedule_count == 10
    assert registry.get_station("Downtown Bus Hub").schedule_count == 10


def test_assigned_station_is_last_write_wins() -> None:
    registry, svc = _setup()

    assert svc.get_assigned_station(vehicle_id="V1") is None

    svc.add_schedule(
        station_id="Downtown Bus Hub", vehicle_id="V1", time="08:00", is_arrival=False
    )
    svc.add_schedule(
        station_id="Central Train", vehicle_id="V1", time="09:00", is_arrival=True
    )

    station = svc.get_assigned_station(vehicle_id="V1")
    assert station is not None
    assert station.name == "Central Train"
    # The first station keeps its entry.
    assert registry.get_station("Downtown Bus Hub").schedules[0].vehicle_id == "V1"


def test_null_vehicle_schedule_accepted() -> None:
    registry, svc = _setup()

    out = svc.add_schedule(
        station_id="Central Train", vehicle_id=None, time="10:00", is_arrival=True
    )

    assert out.ok
    assert registry.get_station("Central Train").schedules[0].vehicle_id is None


def test_remove_schedule_outcomes() -> None:
    registry, svc = _setup()
    svc.add_schedule(
        station_id="Central Train", vehicle_id="V1", time="08:00", is_arrival=True
    )
    svc.add_schedule(
        station_id="Central Train", vehicle_id="V1", time="09:00", is_arrival=True
    )

    missing = svc.remove_schedule_by_vehicle_id(
        station_id="Central Train", vehicle_id="V2"
    )
    assert not missing
    assert missing.reason is OutcomeReason.NOT_FOUND
    assert missing.schedule_count == 2

    removed = svc.remove_schedule_by_vehicle_id(
        station_id="Central Train", vehicle_id="V1"
    )
    assert removed.ok
    assert removed.schedule_count == 1
    assert registry.get_station("Central Train").schedules[0].time == "09:00"


def test_removal_keeps_back_reference() -> None:
    registry, svc = _setup()
    svc.add_schedule(
        station_id="Central Train", vehicle_id="V1", time="08:00", is_arrival=True
    )
    svc.remove_schedule_by_vehicle_id(station_id="Central Train", vehicle_id="V1")

    assert registry.get_vehicle("V1").assigned_station_id == "Central Train"
