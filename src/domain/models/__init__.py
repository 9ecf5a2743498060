from .outcomes import BookingOutcome, OutcomeReason, ScheduleOutcome
from .passenger import Passenger
from .schedule import Schedule
from .station import MAX_SCHEDULES, Station
from .vehicle import Vehicle, VehicleKind

__all__ = [
    "BookingOutcome",
    "MAX_SCHEDULES",
    "OutcomeReason",
    "Passenger",
    "Schedule",
    "ScheduleOutcome",
    "Station",
    "Vehicle",
    "VehicleKind",
]
