"""
PURPOSE: Single entry point of the leave-time engine.

compute_recommendation() validates, maps the cost dials to a confidence level,
runs the simulation and composes the result. Adapters (HTTP, CLI, UI) translate
to and from SimulationInputs / Recommendation and call nothing else.
"""

import logging
from datetime import datetime
from typing import Optional

from airport_timing.monte_carlo.config import NUM_RUNS, RANDOM_SEED
from airport_timing.monte_carlo.confidence import target_confidence
from airport_timing.monte_carlo.models import SimulationInputs
from airport_timing.monte_carlo.outputs import Recommendation, RecommendationComposer
from airport_timing.monte_carlo.sensitivity import SensitivityAnalyzer
from airport_timing.monte_carlo.simulation import MonteCarloSimulation
from airport_timing.monte_carlo.validation import (
    InputValidationError,
    ValidationResult,
    validate_inputs,
)

logger = logging.getLogger(__name__)

__all__ = ["compute_recommendation", "validate_inputs", "ValidationResult", "InputValidationError"]


def compute_recommendation(
    inputs: SimulationInputs,
    num_runs: int = NUM_RUNS,
    random_state=RANDOM_SEED,
    now: Optional[datetime] = None,
) -> Recommendation:
    """
    Recommend when to leave for the airport.

    Args:
        inputs: Trip, travel and cost-preference records.
        num_runs: Number of Monte Carlo draws.
        random_state: int seed, numpy Generator, or None for fresh entropy.
        now: Reference time for validation (defaults to the current time).

    Returns:
        Recommendation

    Raises:
        InputValidationError: If validation fails; nothing is sampled.
    """
    validation = validate_inputs(inputs, now=now)
    if not validation.valid:
        logger.warning("Rejected inputs: %s", "; ".join(validation.errors))
        raise InputValidationError(validation.errors)

    costs = inputs.cost_preferences
    confidence = target_confidence(costs.cost_missing, costs.cost_waiting)

    simulation = MonteCarloSimulation(num_runs=num_runs, random_seed=random_state)
    result = simulation.run(inputs)

    drivers = SensitivityAnalyzer().analyze(result.legs)

    recommendation = RecommendationComposer().compose(
        inputs,
        result.samples,
        confidence,
        rush_hour_window=result.multipliers.window,
        drivers=drivers,
    )
    logger.info(
        "Recommendation for %s flight at %s: leave %s (confidence %.3f, budget %.1f min)",
        inputs.trip_context.airport.code,
        inputs.trip_context.flight_time.isoformat(),
        recommendation.optimal_leave_time.isoformat(),
        confidence,
        recommendation.debug_info.total_time_minutes,
    )
    return recommendation
