"""
Domain services for the Flight Tracker.
"""

from flight_tracker.services.path_service import FlightPathService

__all__ = ["FlightPathService"]
