from __future__ import annotations

from src.domain.models import MAX_SCHEDULES, Station, Vehicle


def _station() -> Station:
    return Station(name="Downtown Bus Hub", location="12 Main St", type="bus")


def _vehicle(vehicle_id: str) -> Vehicle:
    return Vehicle(
        id=vehicle_id, route=f"{vehicle_id}-route", capacity=2, speed_kmh=45.0
    )


def test_eleventh_schedule_is_rejected() -> None:
    station = _station()
    v1 = _vehicle("V1")
    v2 = _vehicle("V2")

    for i in range(MAX_SCHEDULES):
        assert station.add_schedule(v1, f"08:{10 + i:02d}", False)

    assert not station.add_schedule(v2, "11:30", True)
    assert station.schedule_count == 10
    assert all(s.vehicle_id == "V1" for s in station.schedules)
    # The rejected vehicle is not assigned.
    assert v2.assigned_station_id is None


def test_add_schedule_sets_back_reference_and_keeps_order() -> None:
    station = _station()
    v1 = _vehicle("V1")

    station.add_schedule(v1, "09:00", True)
    station.add_schedule(None, "09:00", False)
    station.add_schedule(v1, "09:00", True)

    assert v1.assigned_station_id == "Downtown Bus Hub"
    assert [s.vehicle_id for s in station.schedules] == ["V1", None, "V1"]
    assert [s.label for s in station.schedules] == ["Arrival", "Departure", "Arrival"]


def test_remove_first_matching_schedule_only() -> None:
    station = _station()
    v1 = _vehicle("V1")
    v2 = _vehicle("V2")
    station.add_schedule(v2, "07:00", True)
    station.add_schedule(v1, "08:00", True)
    station.add_schedule(v1, "09:00", False)

    assert station.remove_schedule_by_vehicle_id("V1")
    assert [(s.vehicle_id, s.time) for s in station.schedules] == [
        ("V2", "07:00"),
        ("V1", "09:00"),
    ]


def test_remove_absent_id_leaves_list_unchanged() -> None:
    station = _station()
    station.add_schedule(None, "07:00", True)
    before = list(station.schedules)

    assert not station.remove_schedule_by_vehicle_id("V9")
    assert station.schedules == before


def test_null_vehicle_entries_never_match_removal() -> None:
    station = _station()
    station.add_schedule(None, "07:00", True)

    assert not station.remove_schedule_by_vehicle_id("null")
    assert station.schedule_count == 1


def test_removal_frees_a_slot() -> None:
    station = _station()
    v1 = _vehicle("V1")
    for i in range(MAX_SCHEDULES):
        station.add_schedule(v1, f"08:{i:02d}", False)

    station.remove_schedule_by_vehicle_id("V1")

    assert station.add_schedule(v1, "12:00", True)
    assert station.schedule_count == 10


def test_schedule_limit_is_fixed_at_ten() -> None:
    station = Station(name="S", location="L", type="train")

    for i in range(25):
        station.add_schedule(None, f"{i:02d}:00", True)

    assert station.max_schedules == MAX_SCHEDULES == 10
    assert station.schedule_count == 10
