"""
Airport Timing Advisor: when to leave home to make a flight.
"""

__version__ = "0.1.0"
