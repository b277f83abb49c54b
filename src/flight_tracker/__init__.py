"""
Flight Tracker - HTTP service and application layer around flight_graph.
"""

__version__ = "0.1.0"
