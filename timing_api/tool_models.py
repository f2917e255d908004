from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    code: str
    message: str
    errors: list[str] = Field(default_factory=list)


class CalculateInput(BaseModel):
    airport_code: str = Field(..., description="IATA code of the departure airport, e.g. SFO.")
    flight_time: datetime = Field(
        ...,
        description="Scheduled departure (ISO 8601). Include an offset to pin the local clock used for rush hours.",
    )
    flight_type: Literal["domestic", "international"] = "domestic"
    travel_mode: Literal["driving", "rideshare", "transit"] = "driving"
    travel_min_minutes: float = Field(
        ..., allow_inf_nan=False, description="Fastest door-to-airport time you have seen."
    )
    travel_max_minutes: float = Field(
        ..., allow_inf_nan=False, description="Slowest door-to-airport time you have seen."
    )
    parking_to_terminal_min: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Driving only. Defaults to 15 minutes.",
    )
    curb_to_security_min: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    security_to_gate_min: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    has_checked_bag: bool = False
    has_priority_bag_check: bool = False
    has_expedited_security: bool = False
    has_biometric_security: bool = False
    boarding_start_min: float = Field(30, ge=0, allow_inf_nan=False)
    door_close_min: float = Field(15, ge=0, allow_inf_nan=False)
    is_familiar_airport: bool = True
    cost_missing: int = Field(3, description="1 = no big deal ... 5 = catastrophic.")
    cost_waiting: int = Field(3, description="1 = don't mind waiting ... 5 = hate waiting.")
    include_samples: bool = Field(
        default=False,
        description="Return the raw total-time samples for client-side exploration.",
    )


class LeaveRange(BaseModel):
    earliest: datetime
    latest: datetime


class TradeoffOutput(BaseModel):
    prob_make_flight: float
    wait_before_door_closes: float
    arrive_before_boarding_starts: bool
    time_relative_to_boarding_start: float


class CalculateOutput(BaseModel):
    airport_code: str
    flight_time: datetime
    optimal_leave_time: datetime
    recommended_range: LeaveRange
    tradeoff_metrics: TradeoffOutput
    summary_narrative: str
    debug_info: dict[str, Any]
    samples: Optional[list[float]] = None


class AirportSummary(BaseModel):
    code: str
    name: str
    city: str
    size: str
    has_terminal_train: bool
    display: str


class AirportSearchOutput(BaseModel):
    query: str
    airports: list[AirportSummary]
