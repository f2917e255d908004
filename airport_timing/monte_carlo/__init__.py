"""
Monte Carlo leave-time engine for airport trips.

PURPOSE:
    Recommend when to leave for a flight by simulating 10,000 door-to-gate
    trips and reading the quantile that matches the traveler's appetite for
    risk versus waiting.

SRP/DRY CHECK:
    Each submodule has a single responsibility:
    - distributions.py: Lognormal and ex-Gaussian fitting and sampling only
    - confidence.py: Cost dials -> target confidence lookup only
    - simulation.py: N-draw aggregation of trip legs only
    - quantiles.py: Empirical quantiles only
    - outputs.py: Leave times, trade-offs and formatting only
    - sensitivity.py: Variance shares of trip legs only
    - validation.py / engine.py: Input checks and the public entry point
"""

from .confidence import ConfidenceMatrix, target_confidence
from .distributions import (
    fit_ex_gaussian,
    fit_lognormal_from_min_max,
    sample_ex_gaussian,
    sample_lognormal,
)
from .engine import compute_recommendation
from .models import (
    Airport,
    CostPreferences,
    FlightType,
    SecurityProfile,
    SecurityRegime,
    SecurityWait,
    SimulationInputs,
    TravelEstimate,
    TravelMode,
    TripContext,
)
from .outputs import Recommendation, RecommendationComposer
from .quantiles import compute_quantile
from .sensitivity import SensitivityAnalyzer, SensitivityDriver
from .simulation import MonteCarloSimulation, SimulationResult
from .validation import InputValidationError, ValidationResult, validate_inputs

__all__ = [
    "Airport",
    "ConfidenceMatrix",
    "CostPreferences",
    "FlightType",
    "InputValidationError",
    "MonteCarloSimulation",
    "Recommendation",
    "RecommendationComposer",
    "SecurityProfile",
    "SecurityRegime",
    "SecurityWait",
    "SensitivityAnalyzer",
    "SensitivityDriver",
    "SimulationInputs",
    "SimulationResult",
    "TravelEstimate",
    "TravelMode",
    "TripContext",
    "ValidationResult",
    "compute_quantile",
    "compute_recommendation",
    "fit_ex_gaussian",
    "fit_lognormal_from_min_max",
    "sample_ex_gaussian",
    "sample_lognormal",
    "target_confidence",
    "validate_inputs",
]
