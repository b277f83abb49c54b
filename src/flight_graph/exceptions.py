"""
Custom exceptions for the flight_graph module.

Provides a hierarchy of exceptions for clear error handling
and debugging of path-derivation operations.
"""

from typing import List, Optional


class FlightGraphError(Exception):
    """Base exception for all flight_graph module errors."""

    pass


class ValidationError(FlightGraphError):
    """Base exception for input validation errors."""

    pass


class DecodeError(ValidationError):
    """Raised when a payload does not match the segment schema."""

    def __init__(self, message: str = "Payload does not match the segment schema") -> None:
        super().__init__(message)


class InvalidSegmentError(DecodeError):
    """Raised when a single segment is missing a field or has the wrong type."""

    def __init__(self, index: int, field: str) -> None:
        self.index = index
        self.field = field
        message = f"Segment {index} has a missing or invalid '{field}' field"
        super().__init__(message)


class EmptyBatchError(ValidationError):
    """Raised when chain reconstruction is requested for zero segments."""

    def __init__(self, message: str = "Segment batch is empty, no start label") -> None:
        super().__init__(message)


class AmbiguousPredecessorError(ValidationError):
    """Raised in strict mode when a destination is reached by more than one segment."""

    def __init__(self, destination: str, previous: str, new: str) -> None:
        self.destination = destination
        self.previous = previous
        self.new = new
        message = (
            f"Destination '{destination}' has more than one origin "
            f"('{previous}' and '{new}')"
        )
        super().__init__(message)


class UnboundedWalkError(FlightGraphError):
    """Raised when a predecessor walk revisits a label or exceeds its step budget."""

    def __init__(
        self,
        label: str,
        partial_path: List[str],
        max_steps: Optional[int] = None,
    ) -> None:
        self.label = label
        self.partial_path = list(partial_path)
        self.max_steps = max_steps
        if max_steps is not None:
            message = (
                f"Predecessor walk exceeded {max_steps} steps at '{label}'"
            )
        else:
            message = f"Predecessor cycle detected at '{label}'"
        super().__init__(message)
