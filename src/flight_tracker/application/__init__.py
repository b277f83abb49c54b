"""
Application layer for the Flight Tracker.

Provides the public API as a facade over the service layer.
"""

from flight_tracker.application.calculate_flight_path import CalculateFlightPath

__all__ = ["CalculateFlightPath"]
