from __future__ import annotations

from src.domain.models import Passenger, Vehicle


def test_book_ride_records_vehicle_id_on_both_sides() -> None:
    v = Vehicle(id="BUS101", route="A->B", capacity=2, speed_kmh=45.0)
    alice = Passenger(id="P100", name="Alice")

    assert alice.book_ride(v)
    assert alice.booked_vehicle_ids == ["BUS101"]
    assert v.booked_passenger_ids == ["P100"]


def test_failed_booking_leaves_state_unchanged() -> None:
    v = Vehicle(id="BUS101", route="A->B", capacity=1, speed_kmh=45.0)
    alice = Passenger(id="P100", name="Alice")
    bob = Passenger(id="P101", name="Bob")
    alice.book_ride(v)

    assert not bob.book_ride(v)
    assert not alice.book_ride(v)
    assert bob.booked_vehicle_ids == []
    assert alice.booked_vehicle_ids == ["BUS101"]
    assert v.booked_passenger_ids == ["P100"]


def test_null_vehicle_is_rejected() -> None:
    alice = Passenger(id="P100", name="Alice")

    assert not alice.book_ride(None)
    assert not alice.cancel_ride(None)
    assert alice.booked_vehicle_ids == []


def test_cancel_ride() -> None:
    v = Vehicle(id="BUS101", route="A->B", capacity=2, speed_kmh=45.0)
    alice = Passenger(id="P100", name="Alice")
    alice.book_ride(v)

    assert alice.cancel_ride(v)
    assert alice.booked_vehicle_ids == []
    assert v.booked_passenger_ids == []
    assert not alice.cancel_ride(v)
