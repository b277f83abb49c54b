"""
Segment schemas.

Defines the core contract for segment data flowing through the system:
a frozen dataclass for in-memory batches, a pydantic model for the JSON
wire format, and a Pandera model used when segments arrive as a table.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series
from pydantic import BaseModel, ConfigDict


class SegmentSchema(pa.DataFrameModel):
    """
    Tabular contract for a batch of segments.

    One row per single-hop segment. Row order is significant and is
    preserved. Extra columns (carrier, flight number, ...) pass through
    unchanged.
    """

    source: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Origin label (e.g., 'SFO')",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Destination label (e.g., 'EWR')",
    )

    class Config:
        strict = False
        coerce = True
        name = "SegmentSchema"
        description = "Directed single-hop travel segments"


SegmentDataFrame = DataFrame[SegmentSchema]


class FlightSchema(BaseModel):
    """JSON wire record: one object per segment, both labels strings."""

    model_config = ConfigDict(from_attributes=True)  # Allows reading from Segment

    source: str
    destination: str


@dataclass(frozen=True)
class Segment:
    """
    Immutable single-hop segment.

    Labels are opaque; no format validation happens here.
    """

    source: str
    destination: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Segment":
        """Create a Segment from a mapping with 'source' and 'destination' keys."""
        return cls(source=data["source"], destination=data["destination"])

    def to_dict(self) -> dict:
        """Serialize to the wire format."""
        return {"source": self.source, "destination": self.destination}


def segments_from_frame(df: pd.DataFrame) -> List[Segment]:
    """
    Validate a DataFrame against SegmentSchema and convert rows to Segments.

    Args:
        df: Table with at least 'source' and 'destination' columns.

    Returns:
        Segments in row order.

    Raises:
        pandera.errors.SchemaError: If the table fails validation.
    """
    validated = SegmentSchema.validate(df)
    return [
        Segment(source=source, destination=destination)
        for source, destination in zip(validated["source"], validated["destination"])
    ]
