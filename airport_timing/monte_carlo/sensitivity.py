"""
PURPOSE: Rank the legs of an airport trip by how much of the total-time variance they drive.

For an additive total T = sum(L_i), the first-order share of leg i is
cov(L_i, T) / var(T); the shares of all legs sum to one. Fixed legs have zero
variance and never rank above a stochastic leg.

SRP/DRY: Single responsibility = sensitivity analysis only.
         No result formatting, no simulation, no recommendation logic.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np

from airport_timing.monte_carlo.config import TOP_N_DRIVERS


@dataclass
class SensitivityDriver:
    """Represents a single uncertainty driver and its sensitivity score.

    Attributes:
        name (str): Leg name (e.g., "security").
        sensitivity_score (float): Share of total variance, clipped to [0, 1].
        variance_contribution (float): cov(leg, total) in minutes squared.
        rank (int): Rank order (1 = most sensitive).
    """
    name: str
    sensitivity_score: float
    variance_contribution: float
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "sensitivity_score": round(self.sensitivity_score, 4),
            "variance_contribution": round(self.variance_contribution, 4),
            "rank": self.rank,
        }


class SensitivityAnalyzer:
    """
    Computes variance shares of the simulated legs.

    Assumptions:
    - The total is the exact sum of the legs passed in.
    - Enough draws for stable covariance estimates (1000+).
    """

    def __init__(self, top_n: int = TOP_N_DRIVERS):
        self.top_n = top_n

    def analyze(self, legs: Dict[str, np.ndarray]) -> List[SensitivityDriver]:
        """
        Compute variance shares for each leg.

        Args:
            legs: Leg name -> per-draw minutes, all of the same length.

        Returns:
            Up to top_n SensitivityDriver objects, most influential first.

        Raises:
            ValueError: If legs is empty or the arrays differ in length.
        """
        if not legs:
            raise ValueError("legs cannot be empty")

        arrays = {name: np.asarray(values, dtype=float) for name, values in legs.items()}
        lengths = {values.size for values in arrays.values()}
        if len(lengths) != 1:
            raise ValueError("all legs must have the same number of draws")

        total = np.sum(list(arrays.values()), axis=0)
        total_variance = float(np.var(total))

        if total_variance < 1e-10:
            # Deterministic total; nothing drives any spread
            return [
                SensitivityDriver(name=name, sensitivity_score=0.0, variance_contribution=0.0, rank=i + 1)
                for i, name in enumerate(list(arrays)[: self.top_n])
            ]

        contributions = []
        centered_total = total - np.mean(total)
        for name, values in arrays.items():
            covariance = float(np.mean((values - np.mean(values)) * centered_total))
            contributions.append((name, covariance))

        contributions.sort(key=lambda item: item[1], reverse=True)

        results = []
        for rank, (name, covariance) in enumerate(contributions[: self.top_n], 1):
            share = min(1.0, max(0.0, covariance / total_variance))
            results.append(
                SensitivityDriver(
                    name=name,
                    sensitivity_score=share,
                    variance_contribution=covariance,
                    rank=rank,
                )
            )
        return results
