"""
File segment provider.

Loads a batch of segments from a CSV or JSON file. Schema validation
(SegmentSchema) happens here at the boundary; the algorithms only ever
see Segment objects.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from flight_graph import DecodeError
from flight_tracker.ports.segment_provider import SegmentProvider
from flight_tracker.schemas.segment import FlightSchema, Segment, segments_from_frame

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".json")

_PAYLOAD_ADAPTER = TypeAdapter(List[FlightSchema])


class FileSegmentProvider(SegmentProvider):
    """
    Provider reading segments from a file.

    CSV files need a header row with at least 'source' and 'destination'.
    JSON files hold a list of objects with the same keys (the request
    payload format). Row order is preserved.

    Attributes:
        _path: File to read on every get_segments() call.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        if self._path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise ValueError(
                f"Unsupported segment file type '{self._path.suffix}', "
                f"expected one of {', '.join(SUPPORTED_SUFFIXES)}"
            )

    @property
    def name(self) -> str:
        return f"File Provider ({self._path.name})"

    @property
    def path(self) -> Path:
        return self._path

    def get_segments(self) -> List[Segment]:
        """
        Read and validate the file.

        Raises:
            FileNotFoundError: If the file does not exist.
            DecodeError: If a JSON file does not match the request payload format.
            pandera.errors.SchemaError: If rows fail SegmentSchema.
        """
        df = self._read_frame()
        segments = segments_from_frame(df)
        logger.info("Loaded %d segments from %s", len(segments), self._path)
        return segments

    def _read_frame(self) -> pd.DataFrame:
        if self._path.suffix.lower() == ".csv":
            # Labels are opaque text: keep "NA", "NAN" etc. as-is
            return pd.read_csv(self._path, dtype=str, keep_default_na=False)

        with open(self._path, "r", encoding="utf-8") as f:
            payload = json.load(f)

        # Same contract as the HTTP request body: no coercion of mistyped labels
        try:
            records = _PAYLOAD_ADAPTER.validate_python(payload)
        except PydanticValidationError as e:
            raise DecodeError(f"{self._path} does not match the segment schema: {e}") from e

        return pd.DataFrame(
            [record.model_dump() for record in records],
            columns=["source", "destination"],
        )
