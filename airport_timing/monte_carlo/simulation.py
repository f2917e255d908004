"""
PURPOSE: Core Monte Carlo simulation engine for door-to-door airport trip time.

Runs 10,000 independent draws of the total time needed between leaving home
and the gate door closing.

SINGLE RESPONSIBILITY:
- Fit and sample every stochastic leg (travel, security, bag drop, terminal train)
- Apply rush-hour multipliers shared by the travel and security legs
- Add the fixed legs (parking, walking, door-close buffer)
- Return the raw per-draw totals and per-leg arrays (no quantiles, no formatting)

CONSTRAINTS:
- Does NOT validate inputs; callers go through engine.compute_recommendation
- Does NOT modify the inputs; reads only
- Each call draws fresh samples; nothing is cached between calls
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict

import numpy as np

from airport_timing.monte_carlo.config import (
    EVENING_RUSH_HOURS,
    EVENING_RUSH_SECURITY_MULTIPLIER,
    EVENING_RUSH_TRAVEL_MULTIPLIER,
    MORNING_RUSH_HOURS,
    MORNING_RUSH_SECURITY_MULTIPLIER,
    MORNING_RUSH_TRAVEL_MULTIPLIER,
    NUM_RUNS,
    RANDOM_SEED,
    get_bag_check_range,
)
from airport_timing.monte_carlo.distributions import (
    SecurityWaitSampler,
    TravelTimeSampler,
    resolve_rng,
)
from airport_timing.monte_carlo.models import SimulationInputs

logger = logging.getLogger(__name__)

# Leg names, in trip order
LEG_TRAVEL = "travel"
LEG_PARKING = "parking"
LEG_CURB_TO_SECURITY = "curb_to_security"
LEG_BAG_CHECK = "bag_check"
LEG_SECURITY = "security"
LEG_TERMINAL_TRAIN = "terminal_train"
LEG_SECURITY_TO_GATE = "security_to_gate"
LEG_DOOR_CLOSE_BUFFER = "door_close_buffer"

LEG_ORDER = (
    LEG_TRAVEL,
    LEG_PARKING,
    LEG_CURB_TO_SECURITY,
    LEG_BAG_CHECK,
    LEG_SECURITY,
    LEG_TERMINAL_TRAIN,
    LEG_SECURITY_TO_GATE,
    LEG_DOOR_CLOSE_BUFFER,
)


@dataclass(frozen=True)
class RushHourMultipliers:
    """Scale factors applied to the travel and security draws of every run."""
    travel: float = 1.0
    security: float = 1.0
    window: str = "off_peak"


def rush_hour_multipliers(flight_time: datetime) -> RushHourMultipliers:
    """
    Rush-hour scaling for a scheduled departure.

    A single multiplier pair is shared by all draws, so congestion pushes the
    commute and the security queue up together instead of correlating the
    underlying random numbers.

    Args:
        flight_time: Scheduled departure; its own local clock is used.

    Returns:
        RushHourMultipliers for the morning or evening weekday window, or
        neutral multipliers on weekends and off-peak hours.
    """
    if flight_time.weekday() >= 5:
        return RushHourMultipliers(window="weekend")

    hour = flight_time.hour
    morning_start, morning_end = MORNING_RUSH_HOURS
    evening_start, evening_end = EVENING_RUSH_HOURS

    if morning_start <= hour < morning_end:
        return RushHourMultipliers(
            travel=MORNING_RUSH_TRAVEL_MULTIPLIER,
            security=MORNING_RUSH_SECURITY_MULTIPLIER,
            window="morning_rush",
        )
    if evening_start <= hour < evening_end:
        return RushHourMultipliers(
            travel=EVENING_RUSH_TRAVEL_MULTIPLIER,
            security=EVENING_RUSH_SECURITY_MULTIPLIER,
            window="evening_rush",
        )
    return RushHourMultipliers()


@dataclass
class SimulationResult:
    """Raw output of one simulation call.

    Attributes:
        samples: Total minutes per draw, shape (num_runs,).
        legs: Minutes per draw for each leg, keyed by leg name; the legs of a
            draw sum to its total.
        multipliers: Rush-hour scaling that was applied.
    """
    samples: np.ndarray
    legs: Dict[str, np.ndarray]
    multipliers: RushHourMultipliers

    @property
    def num_runs(self) -> int:
        return int(self.samples.size)


class MonteCarloSimulation:
    """
    Monte Carlo simulation engine for total airport trip time.

    Each of the N draws (default 10,000):
    - Samples travel time from a lognormal fitted to the reported min/max
    - Samples security wait from an ex-Gaussian fitted to the lane's priors
    - Samples bag drop time when a checked bag is declared
    - Samples the terminal train wait when the airport has one
    - Adds parking, walking and door-close minutes
    """

    def __init__(self, num_runs=NUM_RUNS, random_seed=RANDOM_SEED):
        """
        Initialize simulation engine.

        Args:
            num_runs: Number of Monte Carlo draws (default 10,000)
            random_seed: int seed, numpy Generator, or None for fresh entropy
        """
        if num_runs < 1:
            raise ValueError(f"num_runs must be at least 1, got {num_runs}")
        self.num_runs = int(num_runs)
        self.rng = resolve_rng(random_seed)

    def run(self, inputs: SimulationInputs) -> SimulationResult:
        """
        Draw num_runs total trip times for the given inputs.

        Args:
            inputs: SimulationInputs; assumed already validated.

        Returns:
            SimulationResult with totals, per-leg arrays and the multipliers used.
        """
        trip = inputs.trip_context
        multipliers = rush_hour_multipliers(trip.flight_time)

        legs = self._sample_legs(inputs, multipliers)
        samples = np.zeros(self.num_runs)
        for leg in LEG_ORDER:
            samples += legs[leg]

        logger.debug(
            "Simulated %s draws for %s (%s, regime=%s): mean=%.1f min",
            self.num_runs,
            trip.airport.code,
            multipliers.window,
            trip.security_regime.value,
            float(np.mean(samples)),
        )
        return SimulationResult(samples=samples, legs=legs, multipliers=multipliers)

    def _sample_legs(self, inputs: SimulationInputs, multipliers: RushHourMultipliers) -> Dict[str, np.ndarray]:
        trip = inputs.trip_context
        travel = inputs.travel_estimate
        n = self.num_runs

        travel_mu, travel_sigma = TravelTimeSampler.fit_from_min_max(
            travel.min_minutes, travel.max_minutes
        )
        travel_draws = TravelTimeSampler.sample(travel_mu, travel_sigma, size=n, rng=self.rng)

        wait = trip.security_wait
        sec_mu, sec_sigma, sec_lam = SecurityWaitSampler.fit_from_moments(wait.mean, wait.std)
        security_draws = SecurityWaitSampler.sample(sec_mu, sec_sigma, sec_lam, size=n, rng=self.rng)

        if trip.has_checked_bag:
            bag_min, bag_max = get_bag_check_range(trip.has_priority_bag_check)
            bag_mu, bag_sigma = TravelTimeSampler.fit_from_min_max(bag_min, bag_max)
            bag_draws = TravelTimeSampler.sample(bag_mu, bag_sigma, size=n, rng=self.rng)
        else:
            bag_draws = np.zeros(n)

        airport = trip.airport
        if airport.has_terminal_train and airport.train_headway_min:
            # From "just caught it" to "just missed it"
            train_draws = self.rng.uniform(0.0, 2.0 * airport.train_headway_min, size=n)
        else:
            train_draws = np.zeros(n)

        return {
            LEG_TRAVEL: travel_draws * multipliers.travel,
            LEG_PARKING: np.full(n, travel.parking_minutes),
            LEG_CURB_TO_SECURITY: np.full(n, travel.curb_to_security_minutes),
            LEG_BAG_CHECK: bag_draws,
            LEG_SECURITY: security_draws * multipliers.security,
            LEG_TERMINAL_TRAIN: train_draws,
            LEG_SECURITY_TO_GATE: np.full(n, travel.security_to_gate_minutes),
            LEG_DOOR_CLOSE_BUFFER: np.full(n, float(trip.door_close_min)),
        }
