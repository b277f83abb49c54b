"""
Tests for validation module.

Tests input validation functions and custom exceptions.
"""

from types import SimpleNamespace

import pytest

from flight_graph.exceptions import (
    AmbiguousPredecessorError,
    DecodeError,
    EmptyBatchError,
    FlightGraphError,
    InvalidSegmentError,
    UnboundedWalkError,
    ValidationError,
)
from flight_graph.validation import validate_batch_not_empty, validate_segments
from flight_tracker.schemas.segment import Segment


# -------------------------
# Exception hierarchy tests
# -------------------------


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_validation_error_is_flight_graph_error(self) -> None:
        """Test that ValidationError inherits from FlightGraphError."""
        assert issubclass(ValidationError, FlightGraphError)

    def test_decode_error_is_validation_error(self) -> None:
        """Test that DecodeError inherits from ValidationError."""
        assert issubclass(DecodeError, ValidationError)

    def test_invalid_segment_error_is_decode_error(self) -> None:
        """Test that InvalidSegmentError inherits from DecodeError."""
        assert issubclass(InvalidSegmentError, DecodeError)

    def test_empty_batch_error_is_validation_error(self) -> None:
        """Test that EmptyBatchError inherits from ValidationError."""
        assert issubclass(EmptyBatchError, ValidationError)

    def test_empty_batch_is_not_decode_error(self) -> None:
        """Test that a well-formed but empty batch is distinct from bad input."""
        assert not issubclass(EmptyBatchError, DecodeError)

    def test_ambiguous_predecessor_is_validation_error(self) -> None:
        """Test that AmbiguousPredecessorError inherits from ValidationError."""
        assert issubclass(AmbiguousPredecessorError, ValidationError)

    def test_unbounded_walk_is_not_validation_error(self) -> None:
        """Test that UnboundedWalkError sits directly under FlightGraphError."""
        assert issubclass(UnboundedWalkError, FlightGraphError)
        assert not issubclass(UnboundedWalkError, ValidationError)


# -------------------------
# Exception message tests
# -------------------------


class TestExceptionMessages:
    """Tests for exception error messages."""

    def test_invalid_segment_error_message(self) -> None:
        """Test InvalidSegmentError names the index and field."""
        error = InvalidSegmentError(3, "destination")

        assert error.index == 3
        assert error.field == "destination"
        assert "Segment 3" in str(error)
        assert "'destination'" in str(error)

    def test_empty_batch_error_message(self) -> None:
        """Test EmptyBatchError has descriptive message."""
        assert "empty" in str(EmptyBatchError()).lower()

    def test_ambiguous_predecessor_message(self) -> None:
        """Test AmbiguousPredecessorError names both origins."""
        error = AmbiguousPredecessorError("X", "A", "B")

        assert "'X'" in str(error)
        assert "'A'" in str(error) and "'B'" in str(error)

    def test_unbounded_walk_copies_partial_path(self) -> None:
        """Test UnboundedWalkError keeps its own copy of the partial path."""
        partial = ["A", "B"]
        error = UnboundedWalkError("A", partial)
        partial.append("C")

        assert error.partial_path == ["A", "B"]
        assert "cycle" in str(error)


# -------------------------
# validate_segments tests
# -------------------------


class TestValidateSegments:
    """Tests for validate_segments function."""

    def test_valid_batch_passes(self, sample_flights) -> None:
        """Test a well-formed batch raises nothing."""
        validate_segments(sample_flights)

    def test_empty_batch_passes(self) -> None:
        """Test an empty batch is well-formed."""
        validate_segments([])

    def test_empty_label_raises(self) -> None:
        """Test an empty origin label is rejected."""
        with pytest.raises(InvalidSegmentError) as exc_info:
            validate_segments([Segment("A", "B"), Segment("", "C")])

        assert exc_info.value.index == 1
        assert exc_info.value.field == "source"

    def test_missing_attribute_raises(self) -> None:
        """Test an object without a destination is rejected."""
        with pytest.raises(InvalidSegmentError) as exc_info:
            validate_segments([SimpleNamespace(source="A")])

        assert exc_info.value.field == "destination"

    def test_non_string_label_raises(self) -> None:
        """Test a numeric label is rejected."""
        with pytest.raises(InvalidSegmentError):
            validate_segments([SimpleNamespace(source="A", destination=42)])


class TestValidateBatchNotEmpty:
    """Tests for validate_batch_not_empty function."""

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyBatchError):
            validate_batch_not_empty([])

    def test_non_empty_passes(self, simple_chain) -> None:
        validate_batch_not_empty(simple_chain)
