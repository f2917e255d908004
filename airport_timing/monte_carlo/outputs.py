"""
PURPOSE: Compose simulated time budgets into a leave-time recommendation.

This module turns the total-time samples into calendar leave times, derives the
trade-off metrics shown to the traveler, and packages a diagnostic breakdown.

Sign convention: leave_time = flight_time - budget. A larger budget (higher
quantile) is an EARLIER clock time, so the higher bracketing quantile yields
the earliest leave time and the lower one yields the latest.

SRP/DRY: Single responsibility = composition and formatting.
         No sampling, no validation. Clean interface to simulation results.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import numpy as np

from airport_timing.monte_carlo.config import (
    ROUND_MINUTES,
    ROUND_PROBABILITY,
    UNFAMILIAR_AIRPORT_PREMIUM_MIN,
    get_bag_check_range,
    get_bracket_settings,
)
from airport_timing.monte_carlo.models import SimulationInputs
from airport_timing.monte_carlo.quantiles import compute_quantile, summarize_samples
from airport_timing.monte_carlo.sensitivity import SensitivityDriver


@dataclass
class RecommendedRange:
    earliest: datetime
    latest: datetime


@dataclass
class TradeoffMetrics:
    """What the traveler gets at the optimal leave time.

    Attributes:
        prob_make_flight (float): The target confidence itself; the optimal
            budget is by construction that quantile of total time.
        wait_before_door_closes (float): Optimal budget minus the median
            total time, floored at zero (minutes).
        arrive_before_boarding_starts (bool): time_relative_to_boarding_start >= 0.
        time_relative_to_boarding_start (float): Minutes before (+) or
            after (-) boarding starts.
    """
    prob_make_flight: float
    wait_before_door_closes: float
    arrive_before_boarding_starts: bool
    time_relative_to_boarding_start: float


@dataclass
class ComponentBreakdown:
    """Mean minutes of each leg, for transparency only (not used in the decision)."""
    travel: float
    parking: float
    curb_to_security: float
    bag_check: float
    security: float
    terminal_train: float
    security_to_gate: float
    door_close_buffer: float

    def to_dict(self) -> Dict[str, float]:
        return {k: round(v, ROUND_MINUTES) for k, v in self.__dict__.items()}


@dataclass
class DebugInfo:
    confidence: float
    earlier_quantile: float
    later_quantile: float
    total_time_minutes: float
    earliest_total_time_minutes: float
    latest_total_time_minutes: float
    robustness_premium_minutes: float
    rush_hour_window: str
    components: ComponentBreakdown
    sample_summary: Dict[str, float]
    drivers: List[SensitivityDriver] = field(default_factory=list)


@dataclass
class Recommendation:
    """Structured output of one leave-time recommendation.

    Attributes:
        optimal_leave_time (datetime): When to leave at the target confidence.
        recommended_range (RecommendedRange): earliest <= optimal <= latest.
        tradeoff_metrics (TradeoffMetrics): Probability and waiting trade-offs.
        samples (np.ndarray): Raw total-time draws for re-slicing by the caller.
        flight_time (datetime): Scheduled departure.
        debug_info (DebugInfo): Quantiles, budgets and component breakdown.
        summary_narrative (str): Plain English summary.
    """
    optimal_leave_time: datetime
    recommended_range: RecommendedRange
    tradeoff_metrics: TradeoffMetrics
    samples: np.ndarray
    flight_time: datetime
    debug_info: DebugInfo
    summary_narrative: str

    def to_dict(self, include_samples: bool = False) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        metrics = self.tradeoff_metrics
        debug = self.debug_info
        result = {
            "optimal_leave_time": self.optimal_leave_time.isoformat(),
            "recommended_range": {
                "earliest": self.recommended_range.earliest.isoformat(),
                "latest": self.recommended_range.latest.isoformat(),
            },
            "tradeoff_metrics": {
                "prob_make_flight": round(metrics.prob_make_flight, ROUND_PROBABILITY),
                "wait_before_door_closes": round(metrics.wait_before_door_closes, ROUND_MINUTES),
                "arrive_before_boarding_starts": metrics.arrive_before_boarding_starts,
                "time_relative_to_boarding_start": round(metrics.time_relative_to_boarding_start, ROUND_MINUTES),
            },
            "flight_time": self.flight_time.isoformat(),
            "debug_info": {
                "confidence": debug.confidence,
                "earlier_quantile": round(debug.earlier_quantile, ROUND_PROBABILITY),
                "later_quantile": round(debug.later_quantile, ROUND_PROBABILITY),
                "total_time_minutes": round(debug.total_time_minutes, ROUND_MINUTES),
                "earliest_total_time_minutes": round(debug.earliest_total_time_minutes, ROUND_MINUTES),
                "latest_total_time_minutes": round(debug.latest_total_time_minutes, ROUND_MINUTES),
                "robustness_premium_minutes": debug.robustness_premium_minutes,
                "rush_hour_window": debug.rush_hour_window,
                "components": debug.components.to_dict(),
                "sample_summary": {k: round(v, 2) for k, v in debug.sample_summary.items()},
                "drivers": [d.to_dict() for d in debug.drivers],
            },
            "summary_narrative": self.summary_narrative,
        }
        if include_samples:
            result["samples"] = [round(float(v), 2) for v in self.samples]
        return result


def bracketing_quantiles(confidence: float) -> tuple:
    """
    Earlier (safer) and later (riskier) quantiles around the target.

    Both are clamped so they never cross the target; without that, a target
    above the earlier cap would put the "earliest" leave time after the optimal one.

    Returns:
        tuple: (earlier_quantile, later_quantile) with earlier >= confidence >= later
    """
    settings = get_bracket_settings()
    earlier = min(settings["earlier_cap"], confidence + settings["earlier_offset"])
    later = max(settings["later_floor"], confidence - settings["later_offset"])
    return max(earlier, confidence), min(later, confidence)


def leave_time_for_budget(flight_time: datetime, budget_minutes: float) -> datetime:
    return flight_time - timedelta(minutes=budget_minutes)


class RecommendationComposer:
    """
    Turns a sample set and a target confidence into a Recommendation.
    """

    def __init__(self, unfamiliar_premium_minutes: float = UNFAMILIAR_AIRPORT_PREMIUM_MIN):
        self.unfamiliar_premium_minutes = unfamiliar_premium_minutes

    def compose(
        self,
        inputs: SimulationInputs,
        samples: np.ndarray,
        confidence: float,
        rush_hour_window: str = "off_peak",
        drivers: Optional[List[SensitivityDriver]] = None,
    ) -> Recommendation:
        """
        Compose the recommendation.

        Args:
            inputs: The validated simulation inputs.
            samples: Total-time draws in minutes.
            confidence: Target quantile from the confidence matrix.
            rush_hour_window: Label of the rush-hour window that was applied.
            drivers: Optional leg sensitivity ranking for diagnostics.

        Returns:
            Recommendation
        """
        trip = inputs.trip_context

        # Epistemic premium on the chosen budgets, not on individual draws
        premium = 0.0 if trip.is_familiar_airport else float(self.unfamiliar_premium_minutes)

        earlier_q, later_q = bracketing_quantiles(confidence)
        optimal_budget = compute_quantile(samples, confidence) + premium
        earliest_budget = compute_quantile(samples, earlier_q) + premium
        latest_budget = compute_quantile(samples, later_q) + premium

        flight_time = trip.flight_time
        optimal_leave = leave_time_for_budget(flight_time, optimal_budget)
        earliest_leave = leave_time_for_budget(flight_time, earliest_budget)
        latest_leave = leave_time_for_budget(flight_time, latest_budget)

        median = compute_quantile(samples, 0.5)
        wait_before_door_closes = max(0.0, optimal_budget - median)
        boarding_window = trip.boarding_start_min - trip.door_close_min
        time_relative_to_boarding = wait_before_door_closes - boarding_window

        metrics = TradeoffMetrics(
            prob_make_flight=confidence,
            wait_before_door_closes=wait_before_door_closes,
            arrive_before_boarding_starts=time_relative_to_boarding >= 0,
            time_relative_to_boarding_start=time_relative_to_boarding,
        )

        debug = DebugInfo(
            confidence=confidence,
            earlier_quantile=earlier_q,
            later_quantile=later_q,
            total_time_minutes=optimal_budget,
            earliest_total_time_minutes=earliest_budget,
            latest_total_time_minutes=latest_budget,
            robustness_premium_minutes=premium,
            rush_hour_window=rush_hour_window,
            components=self.component_breakdown(inputs),
            sample_summary=summarize_samples(samples),
            drivers=list(drivers or []),
        )

        return Recommendation(
            optimal_leave_time=optimal_leave,
            recommended_range=RecommendedRange(earliest=earliest_leave, latest=latest_leave),
            tradeoff_metrics=metrics,
            samples=np.asarray(samples, dtype=float),
            flight_time=flight_time,
            debug_info=debug,
            summary_narrative=self._generate_narrative(
                optimal_leave, earliest_leave, latest_leave, metrics, premium
            ),
        )

    @staticmethod
    def component_breakdown(inputs: SimulationInputs) -> ComponentBreakdown:
        """Mean value of every leg, computed from the inputs rather than the draws."""
        trip = inputs.trip_context
        travel = inputs.travel_estimate

        bag_check = 0.0
        if trip.has_checked_bag:
            bag_min, bag_max = get_bag_check_range(trip.has_priority_bag_check)
            bag_check = (bag_min + bag_max) / 2

        terminal_train = 0.0
        if trip.airport.has_terminal_train and trip.airport.train_headway_min:
            # Mean of uniform [0, 2 * headway]
            terminal_train = float(trip.airport.train_headway_min)

        return ComponentBreakdown(
            travel=travel.midpoint,
            parking=travel.parking_minutes,
            curb_to_security=travel.curb_to_security_minutes,
            bag_check=bag_check,
            security=trip.security_wait.mean,
            terminal_train=terminal_train,
            security_to_gate=travel.security_to_gate_minutes,
            door_close_buffer=float(trip.door_close_min),
        )

    @staticmethod
    def _generate_narrative(
        optimal_leave: datetime,
        earliest_leave: datetime,
        latest_leave: datetime,
        metrics: TradeoffMetrics,
        premium: float,
    ) -> str:
        """
        Generate a plain English summary of the recommendation.
        """
        narrative = f"Leave at {optimal_leave:%H:%M} "
        narrative += f"(between {earliest_leave:%H:%M} and {latest_leave:%H:%M}). "
        narrative += f"Chance of making the flight: {metrics.prob_make_flight * 100:.1f}%. "
        narrative += f"Typical wait before the door closes: {metrics.wait_before_door_closes:.0f} min. "

        if metrics.arrive_before_boarding_starts:
            narrative += (
                f"You will typically reach the gate {metrics.time_relative_to_boarding_start:.0f} min "
                "before boarding starts."
            )
        else:
            narrative += (
                f"You will typically reach the gate {-metrics.time_relative_to_boarding_start:.0f} min "
                "after boarding starts."
            )

        if premium > 0:
            narrative += f" Includes {premium:.0f} min extra for an unfamiliar airport."
        return narrative
