from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ScheduleEntrySchema(BaseModel):
    index: int = Field(..., ge=1)
    kind: Literal["arrival", "departure"]
    vehicle_id: str | None = None
    route: str | None = None
    time: str


class StationSchema(BaseModel):
    name: str
    location: str
    type: str
    max_schedules: int = Field(..., ge=0)
    schedules: list[ScheduleEntrySchema] = []


class VehicleSchema(BaseModel):
    id: str
    route: str
    kind: Literal["standard", "express"]
    capacity: int = Field(..., ge=0)
    booked: int = Field(..., ge=0)
    booked_passenger_ids: list[str] = []
    speed_kmh: float
    on_time: bool = True
    stops_count: int | None = None
    assigned_station_id: str | None = None


class PassengerSchema(BaseModel):
    id: str
    name: str
    booked_vehicle_ids: list[str] = []


class RegistrySnapshotSchema(BaseModel):
    stations: list[StationSchema] = []
    vehicles: list[VehicleSchema] = []
    passengers: list[PassengerSchema] = []
