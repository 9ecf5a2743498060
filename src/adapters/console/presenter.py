from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from src.adapters.console.schemas import (
    PassengerSchema,
    RegistrySnapshotSchema,
    ScheduleEntrySchema,
    StationSchema,
    VehicleSchema,
)
from src.app.ports.output import IRegistryRepository
from src.domain.algorithms.travel_time import is_defined
from src.domain.models import (
    BookingOutcome,
    OutcomeReason,
    Passenger,
    ScheduleOutcome,
    Station,
    Vehicle,
)


def vehicle_to_schema(vehicle: Vehicle) -> VehicleSchema:
    return VehicleSchema(
        id=vehicle.id,
        route=vehicle.route,
        kind=vehicle.kind.value,
        capacity=vehicle.capacity,
        booked=vehicle.booked_count,
        booked_passenger_ids=list(vehicle.booked_passenger_ids),
        speed_kmh=vehicle.speed_kmh,
        on_time=vehicle.on_time,
        stops_count=vehicle.stops_count,
        assigned_station_id=vehicle.assigned_station_id,
    )


def passenger_to_schema(passenger: Passenger) -> PassengerSchema:
    return PassengerSchema(
        id=passenger.id,
        name=passenger.name,
        booked_vehicle_ids=list(passenger.booked_vehicle_ids),
    )


def station_to_schema(
    station: Station, registry: IRegistryRepository
) -> StationSchema:
    entries: list[ScheduleEntrySchema] = []
    for i, schedule in enumerate(station.schedules, start=1):
        vehicle = (
            registry.find_vehicle(schedule.vehicle_id)
            if schedule.vehicle_id is not None
            else None
        )
        entries.append(
            ScheduleEntrySchema(
                index=i,
                kind="arrival" if schedule.is_arrival else "departure",
                vehicle_id=schedule.vehicle_id,
                route=vehicle.route if vehicle is not None else None,
                time=schedule.time,
            )
        )
    return StationSchema(
        name=station.name,
        location=station.location,
        type=station.type,
        max_schedules=station.max_schedules,
        schedules=entries,
    )


def registry_snapshot(registry: IRegistryRepository) -> RegistrySnapshotSchema:
    return RegistrySnapshotSchema(
        stations=[station_to_schema(s, registry) for s in registry.list_stations()],
        vehicles=[vehicle_to_schema(v) for v in registry.list_vehicles()],
        passengers=[passenger_to_schema(p) for p in registry.list_passengers()],
    )


@dataclass(slots=True)
class ConsolePresenter:
    """Renders registry state and operation outcomes as transcript lines.

    Only reported facts (ids, counts, success/failure) are meant to be
    stable; wording may change.
    """

    registry: IRegistryRepository
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def _emit(self, line: str = "") -> None:
        print(line, file=self.stream)

    def banner(self, title: str) -> None:
        self._emit(f"=== {title} ===")

    def section(self, title: str) -> None:
        self._emit()
        self._emit(f"-- {title} --")

    def closing(self, title: str) -> None:
        self._emit()
        self.banner(title)

    # Lifecycle notices.

    def station_created(self, station: Station) -> None:
        self._emit(
            f"[Station created] {station.name} ({station.type}) at {station.location}"
        )

    def vehicle_created(self, vehicle: Vehicle) -> None:
        self._emit(
            f"[Vehicle created] {vehicle.id} | route: {vehicle.route}"
            f" | capacity: {vehicle.capacity}"
        )
        if vehicle.is_express:
            self._emit(f"[Express created] {vehicle.id} | stops: {vehicle.stops_count}")

    def passenger_created(self, passenger: Passenger) -> None:
        self._emit(f"[Passenger created] {passenger.name} ({passenger.id})")

    def station_destroyed(self, station: Station) -> None:
        self._emit(f"[Station destroyed] {station.name}")

    def vehicle_destroyed(self, vehicle: Vehicle) -> None:
        if vehicle.is_express:
            self._emit(f"[Express destroyed] {vehicle.id}")
        self._emit(f"[Vehicle destroyed] {vehicle.id}")

    # Operation outcomes.

    def booking(self, outcome: BookingOutcome) -> None:
        name = outcome.passenger_name
        if outcome.ok:
            self._emit(f"[Booked] {name} booked {outcome.vehicle_id}")
            return

        if outcome.reason is OutcomeReason.NO_VEHICLE:
            self._emit(f"[Booking failed] {name} could not book (no vehicle)")
            return
        if outcome.reason is OutcomeReason.VEHICLE_FULL:
            self._emit(
                f"[Vehicle full] {outcome.vehicle_id} cannot accept passenger {name}"
                f" ({outcome.booked_count}/{outcome.capacity})"
            )
        elif outcome.reason is OutcomeReason.ALREADY_BOOKED:
            self._emit(f"[Already booked] {name} already on {outcome.vehicle_id}")
        self._emit(f"[Booking failed] {name} could not book {outcome.vehicle_id}")

    def cancellation(self, outcome: BookingOutcome) -> None:
        name = outcome.passenger_name
        if outcome.ok:
            self._emit(f"[Cancelled] {name} cancelled {outcome.vehicle_id}")
        elif outcome.reason is OutcomeReason.NO_VEHICLE:
            self._emit(f"[Cancel failed] {name} has no vehicle to cancel")
        else:
            self._emit(f"[Cancel failed] {name} not on {outcome.vehicle_id}")

    def schedule_added(self, outcome: ScheduleOutcome) -> None:
        if not outcome.ok:
            self._emit(
                f"[Schedule limit reached] Station {outcome.station_id}"
                " cannot accept more schedules."
            )
            return
        label = "Arrival" if outcome.is_arrival else "Departure"
        vehicle_id = outcome.vehicle_id if outcome.vehicle_id is not None else "null"
        self._emit(
            f"[Schedule added] {label} | Vehicle: {vehicle_id}"
            f" | Time: {outcome.time} at station {outcome.station_id}"
        )

    def schedule_removed(self, outcome: ScheduleOutcome) -> None:
        if outcome.ok:
            self._emit(
                f"[Schedule removed] Vehicle {outcome.vehicle_id}"
                f" removed from {outcome.station_id}"
            )
        else:
            self._emit(
                f"[Remove schedule] Vehicle {outcome.vehicle_id}"
                f" not found at {outcome.station_id}"
            )

    def travel_time(self, vehicle: Vehicle, hours: float) -> None:
        value = f"{hours:.2f}" if is_defined(hours) else "undefined"
        suffix = " (20% faster)" if vehicle.is_express and is_defined(hours) else ""
        self._emit(f"{vehicle.id} time (hrs): {value}{suffix}")

    # Info blocks.

    def vehicle_info(self, vehicle: Vehicle) -> None:
        view = vehicle_to_schema(vehicle)
        prefix = "Express " if view.kind == "express" else ""
        self._emit(
            f"{prefix}Vehicle ID: {view.id} | Route: {view.route}"
            f" | Capacity: {view.capacity} | Booked: {view.booked}"
            f" | Speed: {view.speed_kmh:g} km/h"
            f" | Status: {'On-time' if view.on_time else 'Delayed'}"
        )
        if view.kind == "express":
            self._emit(f"   (stops: {view.stops_count})")

    def passenger_info(self, passenger: Passenger) -> None:
        view = passenger_to_schema(passenger)
        booked = ", ".join(view.booked_vehicle_ids) or "none"
        self._emit(f"Passenger: {view.name} (ID: {view.id}) | Booked: {booked}")

    def station_info(self, station: Station) -> None:
        view = station_to_schema(station, self.registry)
        self._emit(
            f"Station: {view.name} | Location: {view.location} | Type: {view.type}"
        )
        if not view.schedules:
            self._emit("  No schedules.")
            return
        for entry in view.schedules:
            label = "Arrival" if entry.kind == "arrival" else "Departure"
            vehicle_id = entry.vehicle_id if entry.vehicle_id is not None else "null"
            route = entry.route if entry.route is not None else "N/A"
            self._emit(
                f"  [{entry.index}] {label} | Vehicle: {vehicle_id}"
                f" | Route: {route} | Time: {entry.time}"
            )

    def snapshot_json(self) -> None:
        self._emit(registry_snapshot(self.registry).model_dump_json(indent=2))
