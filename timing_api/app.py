"""
Airport Timing API handlers

Translate request models to engine inputs and engine results to response
models. Framework-free so they can be called from the HTTP server, a CLI or
tests alike.
"""
import logging
from datetime import datetime
from typing import Optional

from airport_timing.airports import format_airport_display, get_airport, search_airports
from airport_timing.monte_carlo.config import NUM_RUNS
from airport_timing.monte_carlo.engine import compute_recommendation
from airport_timing.monte_carlo.models import (
    Airport,
    CostPreferences,
    FlightType,
    SimulationInputs,
    TravelEstimate,
    TravelMode,
    TripContext,
)
from timing_api.tool_models import (
    AirportSearchOutput,
    AirportSummary,
    CalculateInput,
    CalculateOutput,
    LeaveRange,
    TradeoffOutput,
)

logger = logging.getLogger(__name__)


def build_simulation_inputs(payload: CalculateInput) -> SimulationInputs:
    """Map the request onto engine records. Raises AirportNotFoundError."""
    airport = get_airport(payload.airport_code)

    trip = TripContext(
        airport=airport,
        flight_time=payload.flight_time,
        flight_type=FlightType(payload.flight_type),
        has_checked_bag=payload.has_checked_bag,
        has_priority_bag_check=payload.has_checked_bag and payload.has_priority_bag_check,
        has_expedited_security=payload.has_expedited_security,
        has_biometric_security=payload.has_biometric_security,
        boarding_start_min=payload.boarding_start_min,
        door_close_min=payload.door_close_min,
        is_familiar_airport=payload.is_familiar_airport,
    )
    travel = TravelEstimate(
        mode=TravelMode(payload.travel_mode),
        min_minutes=payload.travel_min_minutes,
        max_minutes=payload.travel_max_minutes,
        parking_to_terminal_min=payload.parking_to_terminal_min,
        curb_to_security_min=payload.curb_to_security_min,
        security_to_gate_min=payload.security_to_gate_min,
    )
    costs = CostPreferences(cost_missing=payload.cost_missing, cost_waiting=payload.cost_waiting)
    return SimulationInputs(trip_context=trip, travel_estimate=travel, cost_preferences=costs)


def handle_calculate(
    payload: CalculateInput,
    num_runs: int = NUM_RUNS,
    random_state=None,
    now: Optional[datetime] = None,
) -> CalculateOutput:
    """
    Run the engine for one request.

    Raises:
        AirportNotFoundError: unknown airport code.
        InputValidationError: the engine rejected the inputs.
    """
    inputs = build_simulation_inputs(payload)
    recommendation = compute_recommendation(inputs, num_runs=num_runs, random_state=random_state, now=now)
    serialized = recommendation.to_dict(include_samples=payload.include_samples)

    metrics = recommendation.tradeoff_metrics
    return CalculateOutput(
        airport_code=inputs.trip_context.airport.code,
        flight_time=recommendation.flight_time,
        optimal_leave_time=recommendation.optimal_leave_time,
        recommended_range=LeaveRange(
            earliest=recommendation.recommended_range.earliest,
            latest=recommendation.recommended_range.latest,
        ),
        tradeoff_metrics=TradeoffOutput(
            prob_make_flight=metrics.prob_make_flight,
            wait_before_door_closes=serialized["tradeoff_metrics"]["wait_before_door_closes"],
            arrive_before_boarding_starts=metrics.arrive_before_boarding_starts,
            time_relative_to_boarding_start=serialized["tradeoff_metrics"]["time_relative_to_boarding_start"],
        ),
        summary_narrative=recommendation.summary_narrative,
        debug_info=serialized["debug_info"],
        samples=serialized.get("samples"),
    )


def airport_summary(airport: Airport) -> AirportSummary:
    return AirportSummary(
        code=airport.code,
        name=airport.name,
        city=airport.city,
        size=airport.size,
        has_terminal_train=airport.has_terminal_train,
        display=format_airport_display(airport),
    )


def handle_airport_search(query: str, limit: int = 10) -> AirportSearchOutput:
    airports = search_airports(query, limit=limit)
    return AirportSearchOutput(query=query, airports=[airport_summary(a) for a in airports])


def handle_airport_lookup(code: str) -> AirportSummary:
    """Raises AirportNotFoundError."""
    return airport_summary(get_airport(code))
