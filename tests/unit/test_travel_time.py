from __future__ import annotations

import pytest

from src.domain.algorithms.travel_time import (
    UNDEFINED_TRAVEL_TIME,
    base_travel_time_h,
    express_travel_time_h,
)
from src.domain.models import Vehicle


def test_base_travel_time_is_distance_over_speed() -> None:
    assert base_travel_time_h(120.0, 50.0) == pytest.approx(2.4)


def test_express_travel_time_is_eighty_percent_of_base() -> None:
    # 120 km at 80 km/h is 1.5 h; express takes 0.8 of that.
    assert express_travel_time_h(120.0, 80.0) == pytest.approx(1.2)
    assert express_travel_time_h(120.0, 80.0) == pytest.approx(
        0.8 * base_travel_time_h(120.0, 80.0)
    )


@pytest.mark.parametrize("speed", [0.0, -10.0])
def test_non_positive_speed_is_undefined_for_both_kinds(speed: float) -> None:
    assert base_travel_time_h(120.0, speed) == UNDEFINED_TRAVEL_TIME
    assert express_travel_time_h(120.0, speed) == UNDEFINED_TRAVEL_TIME


def test_vehicle_dispatches_on_kind() -> None:
    standard = Vehicle(id="BUS202", route="C->D", capacity=3, speed_kmh=50.0)
    express = Vehicle.express("EXP301", "X->Y", 4, 80.0, 3)

    assert f"{standard.calculate_travel_time(120.0):.2f}" == "2.40"
    assert f"{express.calculate_travel_time(120.0):.2f}" == "1.20"


def test_stalled_express_reports_undefined() -> None:
    express = Vehicle.express("EXP301", "X->Y", 4, 0.0, 3)

    assert express.calculate_travel_time(120.0) == UNDEFINED_TRAVEL_TIME
