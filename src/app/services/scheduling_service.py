from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IRegistryRepository
from src.domain.models import OutcomeReason, ScheduleOutcome, Station

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SchedulingService:
    """Maintains station timetables and the vehicle -> station back-reference.

    Scheduling a vehicle at a second station moves its back-reference there
    while the first station keeps its entry (last write wins). Removing an
    entry never clears the back-reference.
    """

    registry: IRegistryRepository

    def add_schedule(
        self,
        *,
        station_id: str,
        vehicle_id: str | None,
        time: str,
        is_arrival: bool,
    ) -> ScheduleOutcome:
        station = self.registry.get_station(station_id)
        vehicle = (
            self.registry.get_vehicle(vehicle_id) if vehicle_id is not None else None
        )

        ok = station.add_schedule(vehicle, time, is_arrival)
        if not ok:
            logger.info(
                "Station %s at schedule limit (%d); rejected %s at %s",
                station_id,
                station.max_schedules,
                vehicle_id,
                time,
            )
        else:
            logger.debug(
                "Scheduled %s at %s (%s %s)",
                vehicle_id,
                station_id,
                "arrival" if is_arrival else "departure",
                time,
            )

        return ScheduleOutcome(
            ok=ok,
            reason=OutcomeReason.OK if ok else OutcomeReason.SCHEDULE_LIMIT,
            station_id=station.id,
            vehicle_id=vehicle_id,
            time=time,
            is_arrival=is_arrival,
            schedule_count=station.schedule_count,
        )

    def remove_schedule_by_vehicle_id(
        self, *, station_id: str, vehicle_id: str
    ) -> ScheduleOutcome:
        station = self.registry.get_station(station_id)
        ok = station.remove_schedule_by_vehicle_id(vehicle_id)
        if not ok:
            logger.info("No schedule for %s at %s", vehicle_id, station_id)
        else:
            logger.debug("Removed schedule for %s at %s", vehicle_id, station_id)

        return ScheduleOutcome(
            ok=ok,
            reason=OutcomeReason.OK if ok else OutcomeReason.NOT_FOUND,
            station_id=station.id,
            vehicle_id=vehicle_id,
            schedule_count=station.schedule_count,
        )

    def get_assigned_station(self, *, vehicle_id: str) -> Station | None:
        vehicle = self.registry.get_vehicle(vehicle_id)
        if vehicle.assigned_station_id is None:
            return None
        return self.registry.find_station(vehicle.assigned_station_id)
