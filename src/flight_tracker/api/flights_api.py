"""
Flight Path Tracker HTTP API.

Thin request adapter: decodes segment batches, hands them to
CalculateFlightPath and encodes the resulting path.
"""

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from flight_graph import (
    AmbiguousPredecessorError,
    DecodeError,
    EmptyBatchError,
    UnboundedWalkError,
)
from flight_tracker.application import CalculateFlightPath
from flight_tracker.config import Settings
from flight_tracker.schemas.path import FlightPath
from flight_tracker.schemas.segment import FlightSchema, Segment

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the flight path tracker!"

settings = Settings.from_env()
tracker = CalculateFlightPath(settings=settings)

app = FastAPI(title="Flight Path Tracker API")


# --- Pydantic Schemas (The JSON Contract) ---


class FlightPathSchema(BaseModel):
    path: List[str]


class HealthSchema(BaseModel):
    status: str
    algorithms: List[str]


def _to_segments(flights: List[FlightSchema]) -> List[Segment]:
    return [Segment(source=f.source, destination=f.destination) for f in flights]


def _to_response(result: FlightPath) -> FlightPathSchema:
    return FlightPathSchema(path=list(result.path))


# --- Error Handlers ---


def _error_response(status_code: int, error: str, detail, **extra) -> JSONResponse:
    content = {"error": error, "detail": detail}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed payload on %s", request.url.path)
    return _error_response(422, "decode_error", exc.errors())


@app.exception_handler(DecodeError)
async def handle_decode_error(request: Request, exc: DecodeError):
    logger.info("Rejected invalid segment on %s: %s", request.url.path, exc)
    return _error_response(422, "decode_error", str(exc))


@app.exception_handler(EmptyBatchError)
async def handle_empty_batch(request: Request, exc: EmptyBatchError):
    return _error_response(400, "empty_batch", str(exc))


@app.exception_handler(UnboundedWalkError)
async def handle_unbounded_walk(request: Request, exc: UnboundedWalkError):
    logger.warning("Unbounded chain walk on %s: %s", request.url.path, exc)
    return _error_response(
        400, "unbounded_walk", str(exc), partial_path=exc.partial_path
    )


@app.exception_handler(AmbiguousPredecessorError)
async def handle_ambiguous_predecessor(
    request: Request, exc: AmbiguousPredecessorError
):
    return _error_response(400, "ambiguous_predecessor", str(exc))


# --- API Endpoints ---


@app.get("/calculate", response_class=PlainTextResponse)
async def welcome():
    return WELCOME_MESSAGE


@app.post("/calculate", response_model=FlightPathSchema)
async def calculate_flight_path(flights: List[FlightSchema]):
    """Visitation order over every connected component of the batch."""
    result = tracker.traverse(_to_segments(flights))
    return _to_response(result)


@app.post("/calculate/chain", response_model=FlightPathSchema)
async def calculate_flight_chain(flights: List[FlightSchema]):
    """
    Itinerary walk from the first segment's origin back through predecessors.

    The first element is the first segment's origin; the last element is
    the earliest label reached.
    """
    result = tracker.chain(_to_segments(flights))
    return _to_response(result)


@app.get("/flights", response_model=List[FlightSchema])
async def list_flights():
    """Fixed illustrative segment list."""
    return tracker.sample_flights()


@app.post("/flight-path", response_model=FlightPathSchema)
async def flight_path(flights: List[FlightSchema]):
    """Alias of /calculate/chain under the `flightPath` operation name."""
    return await calculate_flight_chain(flights)


@app.get("/health", response_model=HealthSchema)
async def health():
    return HealthSchema(status="ok", algorithms=tracker.algorithm_names)
