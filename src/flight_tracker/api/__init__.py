"""
HTTP request adapter for the Flight Tracker.
"""
