"""
PURPOSE: Input records for the leave-time engine.

RESPONSIBILITIES:
- Immutable airport reference data (security regimes, terminal train)
- Trip, travel and cost-preference records built once per request
- Resolution of optional fixed legs against configured defaults
- Single responsibility: data shapes only, no sampling or validation
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from airport_timing.monte_carlo.config import (
    DEFAULT_BOARDING_START_MIN,
    DEFAULT_CURB_TO_SECURITY_MIN,
    DEFAULT_DOOR_CLOSE_MIN,
    DEFAULT_PARKING_TO_TERMINAL_MIN,
    DEFAULT_SECURITY_TO_GATE_MIN,
)


class TravelMode(str, Enum):
    DRIVING = "driving"
    RIDESHARE = "rideshare"
    TRANSIT = "transit"


class FlightType(str, Enum):
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


class SecurityRegime(str, Enum):
    STANDARD = "standard"
    EXPEDITED = "expedited"
    BIOMETRIC = "biometric"


@dataclass(frozen=True)
class SecurityWait:
    """Mean and standard deviation of a screening wait, in minutes."""
    mean: float
    std: float


@dataclass(frozen=True)
class SecurityProfile:
    """Security wait priors for the three screening lanes of an airport.

    Attributes:
        standard: No expedited screening.
        expedited: Expedited-line screening.
        biometric: Biometric expedited screening (fastest lane).
    """
    standard: SecurityWait
    expedited: SecurityWait
    biometric: SecurityWait

    def select(self, has_expedited: bool, has_biometric: bool) -> SecurityRegime:
        """Pick the fastest regime the traveler is enrolled in."""
        if has_biometric:
            return SecurityRegime.BIOMETRIC
        if has_expedited:
            return SecurityRegime.EXPEDITED
        return SecurityRegime.STANDARD

    def wait_for(self, regime: SecurityRegime) -> SecurityWait:
        return getattr(self, regime.value)


@dataclass(frozen=True)
class Airport:
    code: str
    name: str
    city: str
    size: str  # "small", "medium" or "large"
    security: SecurityProfile
    has_terminal_train: bool = False
    train_headway_min: Optional[float] = None


@dataclass(frozen=True)
class TripContext:
    """Flight-side facts for one recommendation request.

    Attributes:
        airport: Departure airport.
        flight_time: Scheduled departure. The local clock of this datetime
            decides rush-hour windows.
        flight_type: Domestic or international. Only matters through the
            boarding/door-close minutes the caller supplies.
        boarding_start_min: Minutes before departure when boarding starts.
        door_close_min: Minutes before departure when the door closes.
        is_familiar_airport: False adds the robustness premium.
    """
    airport: Airport
    flight_time: datetime
    flight_type: FlightType = FlightType.DOMESTIC
    has_checked_bag: bool = False
    has_priority_bag_check: bool = False
    has_expedited_security: bool = False
    has_biometric_security: bool = False
    boarding_start_min: float = DEFAULT_BOARDING_START_MIN
    door_close_min: float = DEFAULT_DOOR_CLOSE_MIN
    is_familiar_airport: bool = True

    @property
    def security_regime(self) -> SecurityRegime:
        return self.airport.security.select(
            self.has_expedited_security, self.has_biometric_security
        )

    @property
    def security_wait(self) -> SecurityWait:
        return self.airport.security.wait_for(self.security_regime)


@dataclass(frozen=True)
class TravelEstimate:
    """Door-to-door leg as a self-reported min/max range plus optional fixed legs."""
    mode: TravelMode
    min_minutes: float
    max_minutes: float
    parking_to_terminal_min: Optional[float] = None
    curb_to_security_min: Optional[float] = None
    security_to_gate_min: Optional[float] = None

    @property
    def midpoint(self) -> float:
        return (self.min_minutes + self.max_minutes) / 2

    @property
    def parking_minutes(self) -> float:
        # Parking only exists when the traveler drives themselves
        if self.mode != TravelMode.DRIVING:
            return 0.0
        if self.parking_to_terminal_min is None:
            return float(DEFAULT_PARKING_TO_TERMINAL_MIN)
        return float(self.parking_to_terminal_min)

    @property
    def curb_to_security_minutes(self) -> float:
        if self.curb_to_security_min is None:
            return float(DEFAULT_CURB_TO_SECURITY_MIN)
        return float(self.curb_to_security_min)

    @property
    def security_to_gate_minutes(self) -> float:
        if self.security_to_gate_min is None:
            return float(DEFAULT_SECURITY_TO_GATE_MIN)
        return float(self.security_to_gate_min)


@dataclass(frozen=True)
class CostPreferences:
    """Ordinal levels 1-5: how bad missing the flight is, how bad waiting is."""
    cost_missing: int
    cost_waiting: int


@dataclass(frozen=True)
class SimulationInputs:
    trip_context: TripContext
    travel_estimate: TravelEstimate
    cost_preferences: CostPreferences
