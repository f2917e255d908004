from datetime import datetime, timedelta

import pytest

from airport_timing.airports import get_airport
from airport_timing.monte_carlo.models import (
    CostPreferences,
    SimulationInputs,
    TravelEstimate,
    TravelMode,
    TripContext,
)

MONDAY, TUESDAY, WEDNESDAY, SATURDAY = 0, 1, 2, 5


def next_weekday_at(weekday: int, hour: int, minute: int = 0) -> datetime:
    """A naive datetime at least two days out, on the given weekday and clock time."""
    base = datetime.now().replace(second=0, microsecond=0) + timedelta(days=2)
    days_ahead = (weekday - base.weekday()) % 7
    return (base + timedelta(days=days_ahead)).replace(hour=hour, minute=minute)


def build_inputs(
    airport_code="SFO",
    flight_time=None,
    mode=TravelMode.DRIVING,
    min_minutes=20,
    max_minutes=40,
    cost_missing=3,
    cost_waiting=3,
    travel_overrides=None,
    **trip_overrides,
) -> SimulationInputs:
    if flight_time is None:
        flight_time = next_weekday_at(WEDNESDAY, 14, 0)
    trip = TripContext(
        airport=get_airport(airport_code),
        flight_time=flight_time,
        **trip_overrides,
    )
    travel = TravelEstimate(
        mode=mode,
        min_minutes=min_minutes,
        max_minutes=max_minutes,
        **(travel_overrides or {}),
    )
    return SimulationInputs(
        trip_context=trip,
        travel_estimate=travel,
        cost_preferences=CostPreferences(cost_missing=cost_missing, cost_waiting=cost_waiting),
    )


@pytest.fixture
def make_inputs():
    return build_inputs


@pytest.fixture
def flight_at():
    return next_weekday_at
