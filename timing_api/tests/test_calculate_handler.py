import unittest
from datetime import datetime, timedelta

from airport_timing.airports import AirportNotFoundError
from airport_timing.monte_carlo.models import FlightType, TravelMode
from airport_timing.monte_carlo.validation import InputValidationError
from timing_api.app import (
    build_simulation_inputs,
    handle_airport_lookup,
    handle_airport_search,
    handle_calculate,
)
from timing_api.tool_models import CalculateInput


def _payload(**overrides) -> CalculateInput:
    values = {
        "airport_code": "sfo",
        "flight_time": datetime.now().replace(microsecond=0) + timedelta(days=3),
        "travel_min_minutes": 20,
        "travel_max_minutes": 40,
    }
    values.update(overrides)
    return CalculateInput(**values)


class TestBuildSimulationInputs(unittest.TestCase):
    def test_maps_request_fields(self):
        inputs = build_simulation_inputs(
            _payload(travel_mode="rideshare", flight_type="international", cost_missing=5, cost_waiting=2)
        )
        self.assertEqual(inputs.trip_context.airport.code, "SFO")
        self.assertEqual(inputs.trip_context.flight_type, FlightType.INTERNATIONAL)
        self.assertEqual(inputs.travel_estimate.mode, TravelMode.RIDESHARE)
        self.assertEqual(inputs.cost_preferences.cost_missing, 5)
        self.assertEqual(inputs.cost_preferences.cost_waiting, 2)

    def test_priority_bag_requires_checked_bag(self):
        inputs = build_simulation_inputs(_payload(has_priority_bag_check=True))
        self.assertFalse(inputs.trip_context.has_priority_bag_check)
        inputs = build_simulation_inputs(_payload(has_checked_bag=True, has_priority_bag_check=True))
        self.assertTrue(inputs.trip_context.has_priority_bag_check)

    def test_unknown_airport(self):
        with self.assertRaises(AirportNotFoundError):
            build_simulation_inputs(_payload(airport_code="XXX"))


class TestHandleCalculate(unittest.TestCase):
    def test_success(self):
        output = handle_calculate(_payload(), num_runs=2000, random_state=1)
        self.assertEqual(output.airport_code, "SFO")
        self.assertLess(output.optimal_leave_time, output.flight_time)
        self.assertLessEqual(output.recommended_range.earliest, output.optimal_leave_time)
        self.assertLessEqual(output.optimal_leave_time, output.recommended_range.latest)
        self.assertAlmostEqual(output.tradeoff_metrics.prob_make_flight, 0.9)
        self.assertIsNone(output.samples)
        self.assertIn("components", output.debug_info)
        self.assertTrue(output.summary_narrative.startswith("Leave at"))

    def test_include_samples(self):
        output = handle_calculate(_payload(include_samples=True), num_runs=300, random_state=2)
        self.assertEqual(len(output.samples), 300)

    def test_invalid_inputs(self):
        with self.assertRaises(InputValidationError) as ctx:
            handle_calculate(_payload(travel_min_minutes=50, travel_max_minutes=40), num_runs=100)
        self.assertEqual(ctx.exception.errors, ["Maximum travel time must be greater than minimum"])


class TestAirportHandlers(unittest.TestCase):
    def test_search(self):
        output = handle_airport_search("atl")
        self.assertEqual(output.query, "atl")
        self.assertEqual(output.airports[0].code, "ATL")
        self.assertTrue(output.airports[0].has_terminal_train)
        self.assertEqual(output.airports[0].display, "ATL - Hartsfield-Jackson Atlanta International")

    def test_lookup(self):
        self.assertEqual(handle_airport_lookup("oak").size, "medium")
        with self.assertRaises(AirportNotFoundError):
            handle_airport_lookup("ZZZ")


if __name__ == "__main__":
    unittest.main()
