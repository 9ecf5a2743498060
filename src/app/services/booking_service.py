from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IRegistryRepository
from src.domain.models import BookingOutcome, OutcomeReason, Passenger, Vehicle

logger = logging.getLogger(__name__)


def _outcome(
    ok: bool, reason: OutcomeReason, passenger: Passenger, vehicle: Vehicle | None
) -> BookingOutcome:
    return BookingOutcome(
        ok=ok,
        reason=reason,
        passenger_id=passenger.id,
        passenger_name=passenger.name,
        vehicle_id=vehicle.id if vehicle is not None else None,
        booked_count=vehicle.booked_count if vehicle is not None else 0,
        capacity=vehicle.capacity if vehicle is not None else 0,
    )


@dataclass(slots=True)
class BookingService:
    """Books and cancels rides.

    The passenger's booking list and the vehicle's roster are updated
    together; a rejected request leaves both untouched.
    """

    registry: IRegistryRepository

    def book_ride(self, *, passenger_id: str, vehicle_id: str | None) -> BookingOutcome:
        passenger = self.registry.get_passenger(passenger_id)
        if vehicle_id is None:
            logger.warning("Booking for %s rejected: no vehicle", passenger_id)
            return _outcome(False, OutcomeReason.NO_VEHICLE, passenger, None)

        vehicle = self.registry.get_vehicle(vehicle_id)
        rejection = vehicle.booking_rejection(passenger.id)
        if rejection is not None:
            logger.info(
                "Booking %s on %s rejected: %s",
                passenger_id,
                vehicle_id,
                rejection.value,
            )
            return _outcome(False, rejection, passenger, vehicle)

        if not passenger.book_ride(vehicle):
            raise RuntimeError(
                f"Vehicle {vehicle_id} rejected {passenger_id} without a reason"
            )
        logger.debug(
            "Booked %s on %s (%d/%d)",
            passenger_id,
            vehicle_id,
            vehicle.booked_count,
            vehicle.capacity,
        )
        return _outcome(True, OutcomeReason.OK, passenger, vehicle)

    def cancel_ride(
        self, *, passenger_id: str, vehicle_id: str | None
    ) -> BookingOutcome:
        passenger = self.registry.get_passenger(passenger_id)
        if vehicle_id is None:
            logger.warning("Cancellation for %s rejected: no vehicle", passenger_id)
            return _outcome(False, OutcomeReason.NO_VEHICLE, passenger, None)

        vehicle = self.registry.get_vehicle(vehicle_id)
        if not passenger.cancel_ride(vehicle):
            logger.info(
                "Cancellation %s on %s rejected: not booked", passenger_id, vehicle_id
            )
            return _outcome(False, OutcomeReason.NOT_BOOKED, passenger, vehicle)

        logger.debug("Cancelled %s on %s", passenger_id, vehicle_id)
        return _outcome(True, OutcomeReason.OK, passenger, vehicle)
