"""
Input validation for the flight_graph module.

Checks batches before algorithm execution so bad input fails fast
with a clear error instead of surfacing as an AttributeError deep
inside a traversal.
"""

from typing import Sequence

from .exceptions import EmptyBatchError, InvalidSegmentError

# Fields every segment must expose
REQUIRED_FIELDS = ("source", "destination")


def validate_segments(segments: Sequence[object]) -> None:
    """
    Validate that every segment has non-empty string labels.

    Args:
        segments: Batch to validate.

    Raises:
        InvalidSegmentError: On the first segment with a missing,
            non-string or empty label.
    """
    for index, segment in enumerate(segments):
        for field in REQUIRED_FIELDS:
            value = getattr(segment, field, None)
            if not isinstance(value, str) or not value:
                raise InvalidSegmentError(index, field)


def validate_batch_not_empty(segments: Sequence[object]) -> None:
    """
    Validate that the batch has at least one segment.

    Raises:
        EmptyBatchError: If the batch is empty.
    """
    if len(segments) == 0:
        raise EmptyBatchError()
