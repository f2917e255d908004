"""
Tests for the cost-dial -> confidence lookup table.
"""

import itertools

import pytest

from airport_timing.monte_carlo.confidence import (
    CONFIDENCE_MATRIX,
    DEFAULT_CONFIDENCE_TABLE,
    ConfidenceMatrix,
    target_confidence,
)

LEVELS = range(1, 6)


class TestConfidenceTable:

    def test_total_and_bounded(self):
        for missing, waiting in itertools.product(LEVELS, LEVELS):
            confidence = target_confidence(missing, waiting)
            assert 0.0 < confidence < 1.0

    def test_rises_with_cost_of_missing(self):
        for waiting in LEVELS:
            column = [target_confidence(missing, waiting) for missing in LEVELS]
            assert column == sorted(column)

    def test_falls_with_cost_of_waiting(self):
        for missing in LEVELS:
            row = [target_confidence(missing, waiting) for waiting in LEVELS]
            assert row == sorted(row, reverse=True)

    def test_reference_entries(self):
        assert target_confidence(3, 3) == pytest.approx(0.90)
        assert target_confidence(5, 1) == pytest.approx(0.995)

    def test_catastrophic_miss_is_highest(self):
        assert target_confidence(5, 1) == CONFIDENCE_MATRIX.highest

    def test_missing_outweighs_waiting(self):
        # Raising the cost of missing moves confidence more than raising the cost of waiting
        assert target_confidence(5, 3) - target_confidence(1, 3) > target_confidence(3, 1) - target_confidence(3, 5)

    @pytest.mark.parametrize("missing, waiting", [(0, 3), (6, 3), (3, 0), (3, 6), (True, 3), (2.5, 3)])
    def test_invalid_levels_raise(self, missing, waiting):
        with pytest.raises(ValueError):
            target_confidence(missing, waiting)


class TestConfidenceMatrixValidation:

    def test_default_table_accepted(self):
        assert ConfidenceMatrix(DEFAULT_CONFIDENCE_TABLE).rows() == CONFIDENCE_MATRIX.rows()

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError):
            ConfidenceMatrix(DEFAULT_CONFIDENCE_TABLE[:4])
        with pytest.raises(ValueError):
            ConfidenceMatrix([row[:4] for row in DEFAULT_CONFIDENCE_TABLE])

    def test_out_of_range_rejected(self):
        table = [list(row) for row in DEFAULT_CONFIDENCE_TABLE]
        table[4][0] = 1.0
        with pytest.raises(ValueError):
            ConfidenceMatrix(table)

    def test_non_monotonic_in_waiting_rejected(self):
        table = [list(row) for row in DEFAULT_CONFIDENCE_TABLE]
        table[2][4] = 0.95  # above the waiting=1 entry of the same row
        with pytest.raises(ValueError):
            ConfidenceMatrix(table)

    def test_non_monotonic_in_missing_rejected(self):
        table = [list(row) for row in DEFAULT_CONFIDENCE_TABLE]
        table[3][2] = 0.86  # below missing=3 entry (0.90)
        with pytest.raises(ValueError):
            ConfidenceMatrix(table)
