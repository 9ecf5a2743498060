from __future__ import annotations

UNDEFINED_TRAVEL_TIME = -1.0

# Express vehicles cover the same distance in 80% of the base time.
EXPRESS_TIME_FACTOR = 0.8


def base_travel_time_h(distance_km: float, speed_kmh: float) -> float:
    """Hours needed to cover distance_km at a constant speed_kmh.

    Returns UNDEFINED_TRAVEL_TIME when the speed is not positive.
    """

    if speed_kmh <= 0:
        return UNDEFINED_TRAVEL_TIME
    return distance_km / speed_kmh


def express_travel_time_h(distance_km: float, speed_kmh: float) -> float:
    base = base_travel_time_h(distance_km, speed_kmh)
    if base < 0:
        return UNDEFINED_TRAVEL_TIME
    return base * EXPRESS_TIME_FACTOR


def is_defined(hours: float) -> bool:
    return hours >= 0
