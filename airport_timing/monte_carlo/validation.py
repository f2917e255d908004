"""
Input validation for the leave-time engine.

Validation failures are caller-correctable and reported as a list of
human-readable messages. They are never retried.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from airport_timing.monte_carlo.confidence import MAX_COST_LEVEL, MIN_COST_LEVEL
from airport_timing.monte_carlo.models import SimulationInputs, TravelMode


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


class InputValidationError(ValueError):
    """Raised when inputs fail validation; no simulation has been attempted."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _now_like(flight_time: datetime) -> datetime:
    # Compare aware with aware, naive with naive
    return datetime.now(flight_time.tzinfo)


def _is_non_negative(value) -> bool:
    return math.isfinite(value) and value >= 0


def validate_inputs(inputs: SimulationInputs, now: Optional[datetime] = None) -> ValidationResult:
    """
    Check the inputs before any sampling happens.

    Args:
        inputs: The full simulation input record.
        now: Reference time for the "flight in the future" rule. Defaults to
            the current time in the flight time's timezone.

    Returns:
        ValidationResult with valid=False and one message per failed rule.
    """
    errors: List[str] = []
    travel = inputs.travel_estimate
    trip = inputs.trip_context
    costs = inputs.cost_preferences

    if not (math.isfinite(travel.min_minutes) and math.isfinite(travel.max_minutes)):
        errors.append("Travel times must be finite numbers")
    else:
        if travel.min_minutes <= 0:
            errors.append("Minimum travel time must be greater than 0")
        if travel.max_minutes <= travel.min_minutes:
            errors.append("Maximum travel time must be greater than minimum")

    reference = now if now is not None else _now_like(trip.flight_time)
    try:
        in_past = trip.flight_time <= reference
    except TypeError:
        errors.append("Flight time and reference time must both be timezone-aware or both naive")
    else:
        if in_past:
            errors.append("Flight time must be in the future")

    if travel.mode == TravelMode.DRIVING and travel.parking_to_terminal_min is not None:
        if not _is_non_negative(travel.parking_to_terminal_min):
            errors.append("Parking time cannot be negative")

    # Every fixed leg adds to the total, so none may be negative
    optional_legs = (
        ("Curb-to-security time", travel.curb_to_security_min),
        ("Security-to-gate time", travel.security_to_gate_min),
    )
    for label, minutes in optional_legs:
        if minutes is not None and not _is_non_negative(minutes):
            errors.append(f"{label} cannot be negative")
    if not _is_non_negative(trip.boarding_start_min):
        errors.append("Boarding start time cannot be negative")
    if not _is_non_negative(trip.door_close_min):
        errors.append("Door close time cannot be negative")

    airport = trip.airport
    if airport.has_terminal_train and airport.train_headway_min is not None:
        if not (math.isfinite(airport.train_headway_min) and airport.train_headway_min > 0):
            errors.append("Terminal train headway must be greater than 0")

    for label, level in (("Cost of missing", costs.cost_missing), ("Cost of waiting", costs.cost_waiting)):
        if isinstance(level, bool) or not isinstance(level, int) or not MIN_COST_LEVEL <= level <= MAX_COST_LEVEL:
            errors.append(f"{label} must be a level from {MIN_COST_LEVEL} to {MAX_COST_LEVEL}")

    return ValidationResult(valid=not errors, errors=errors)
