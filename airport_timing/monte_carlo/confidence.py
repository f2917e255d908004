"""
PURPOSE: Map the traveler's two cost dials to a target confidence level.

The mapping is a fixed lookup table rather than a formula. Missing a flight is
treated as disproportionately worse than waiting, so confidence rises steeply
with the cost of missing and only falls mildly with the cost of waiting.

Rows are the cost of missing the flight (1-5), columns the cost of waiting
at the gate (1-5). The table is validated once, at import time.
"""

import logging
from typing import Sequence, Tuple

logger = logging.getLogger(__name__)

MIN_COST_LEVEL = 1
MAX_COST_LEVEL = 5

DEFAULT_CONFIDENCE_TABLE: Tuple[Tuple[float, ...], ...] = (
    # waiting:  1      2      3      4      5
    (0.850, 0.800, 0.750, 0.720, 0.700),  # missing = 1
    (0.900, 0.870, 0.850, 0.820, 0.800),  # missing = 2
    (0.950, 0.920, 0.900, 0.880, 0.850),  # missing = 3
    (0.980, 0.970, 0.950, 0.930, 0.920),  # missing = 4
    (0.995, 0.990, 0.980, 0.970, 0.960),  # missing = 5
)


class ConfidenceMatrix:
    """
    Immutable 5x5 lookup from (cost_missing, cost_waiting) to a quantile in (0, 1).

    Construction fails with ValueError unless the table is:
    - total: exactly one entry per pair of levels
    - bounded: every entry strictly inside (0, 1)
    - monotonic: non-decreasing down each column (more costly to miss),
      non-increasing along each row (more costly to wait)
    """

    __slots__ = ("_table",)

    def __init__(self, table: Sequence[Sequence[float]] = DEFAULT_CONFIDENCE_TABLE):
        frozen = tuple(tuple(float(value) for value in row) for row in table)
        self._validate(frozen)
        self._table = frozen

    @staticmethod
    def _validate(table: Tuple[Tuple[float, ...], ...]) -> None:
        size = MAX_COST_LEVEL - MIN_COST_LEVEL + 1
        if len(table) != size or any(len(row) != size for row in table):
            raise ValueError(f"confidence table must be {size}x{size}")

        for i, row in enumerate(table):
            for j, value in enumerate(row):
                if not 0.0 < value < 1.0:
                    raise ValueError(
                        f"confidence at missing={i + MIN_COST_LEVEL}, waiting={j + MIN_COST_LEVEL} "
                        f"must be in (0, 1), got {value}"
                    )
                if j > 0 and value > row[j - 1]:
                    raise ValueError(
                        f"confidence must not increase with cost of waiting (row missing={i + MIN_COST_LEVEL})"
                    )
                if i > 0 and value < table[i - 1][j]:
                    raise ValueError(
                        f"confidence must not decrease with cost of missing (column waiting={j + MIN_COST_LEVEL})"
                    )

    @staticmethod
    def _check_level(name: str, level: int) -> int:
        if isinstance(level, bool) or not isinstance(level, int):
            raise ValueError(f"{name} must be an integer level, got {level!r}")
        if not MIN_COST_LEVEL <= level <= MAX_COST_LEVEL:
            raise ValueError(
                f"{name} must be between {MIN_COST_LEVEL} and {MAX_COST_LEVEL}, got {level}"
            )
        return level - MIN_COST_LEVEL

    def lookup(self, cost_missing: int, cost_waiting: int) -> float:
        row = self._check_level("cost_missing", cost_missing)
        column = self._check_level("cost_waiting", cost_waiting)
        return self._table[row][column]

    def rows(self) -> Tuple[Tuple[float, ...], ...]:
        return self._table

    @property
    def highest(self) -> float:
        return max(max(row) for row in self._table)


CONFIDENCE_MATRIX = ConfidenceMatrix()


def target_confidence(cost_missing: int, cost_waiting: int) -> float:
    """Return the target quantile of total trip time for the given cost dials."""
    confidence = CONFIDENCE_MATRIX.lookup(cost_missing, cost_waiting)
    logger.debug(
        "Target confidence %.3f for cost_missing=%s, cost_waiting=%s",
        confidence,
        cost_missing,
        cost_waiting,
    )
    return confidence
