"""
PURPOSE: Simulation configuration and fixed reference parameters for the leave-time engine.

RESPONSIBILITIES:
- Define simulation hyperparameters (number of runs, random seed)
- Default minutes for the fixed legs of an airport trip
- Bag-check presets, rush-hour windows and multipliers
- Bracketing rules for the recommended leave-time range
- Single responsibility: configuration only, no simulation logic
"""

# Simulation Parameters
NUM_RUNS = 10000  # Stable to roughly one-minute resolution at the quantiles we read
RANDOM_SEED = None  # Set to int for reproducibility, None for random

# Fixed legs (minutes)
DEFAULT_PARKING_TO_TERMINAL_MIN = 15  # Driving mode only
DEFAULT_CURB_TO_SECURITY_MIN = 8
DEFAULT_SECURITY_TO_GATE_MIN = 10
DEFAULT_BOARDING_START_MIN = 30  # Minutes before departure
DEFAULT_DOOR_CLOSE_MIN = 15  # Minutes before departure

# Bag drop (min, max) minutes, fitted as lognormal
BAG_CHECK_REGULAR_RANGE = (7.0, 25.0)
BAG_CHECK_PRIORITY_RANGE = (3.0, 8.0)

# Security wait: share of the std dev carried by the exponential tail
EX_GAUSSIAN_TAIL_FRACTION = 0.3

# Rush hour, keyed on the scheduled flight's local clock (weekdays only)
# Window is [start_hour, end_hour)
MORNING_RUSH_HOURS = (6, 9)
EVENING_RUSH_HOURS = (16, 19)
MORNING_RUSH_TRAVEL_MULTIPLIER = 1.30
MORNING_RUSH_SECURITY_MULTIPLIER = 1.15
EVENING_RUSH_TRAVEL_MULTIPLIER = 1.25
EVENING_RUSH_SECURITY_MULTIPLIER = 1.10

# Robustness premium for an airport the traveler has not flown from
UNFAMILIAR_AIRPORT_PREMIUM_MIN = 20.0

# Recommended range around the target quantile
EARLIER_QUANTILE_OFFSET = 0.05
EARLIER_QUANTILE_CAP = 0.98
LATER_QUANTILE_OFFSET = 0.10
LATER_QUANTILE_FLOOR = 0.70

# Percentile Outputs
PERCENTILES = [10, 50, 90]  # P10, P50, P90

# Sensitivity Analysis
TOP_N_DRIVERS = 5  # Number of top uncertainty drivers to report

# Output Configuration
ROUND_PROBABILITY = 3  # Decimal places for probabilities
ROUND_MINUTES = 1  # Decimal places for durations


def get_bag_check_range(priority):
    """Return the (min, max) bag-drop minutes for regular or priority drop."""
    if priority:
        return BAG_CHECK_PRIORITY_RANGE
    return BAG_CHECK_REGULAR_RANGE


def get_fixed_leg_defaults():
    """Return the defaults used when the traveler leaves a fixed leg blank."""
    return {
        "parking_to_terminal_min": DEFAULT_PARKING_TO_TERMINAL_MIN,
        "curb_to_security_min": DEFAULT_CURB_TO_SECURITY_MIN,
        "security_to_gate_min": DEFAULT_SECURITY_TO_GATE_MIN,
    }


def get_bracket_settings():
    """Return offsets and bounds for the earlier/later bracketing quantiles."""
    return {
        "earlier_offset": EARLIER_QUANTILE_OFFSET,
        "earlier_cap": EARLIER_QUANTILE_CAP,
        "later_offset": LATER_QUANTILE_OFFSET,
        "later_floor": LATER_QUANTILE_FLOOR,
    }
