"""
HTTP server for the Airport Timing Advisor

Provides HTTP/JSON endpoints around the leave-time engine and the airport
catalog. The engine is CPU-bound, so requests run it in a worker thread.
"""
import asyncio
import logging
import os
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from airport_timing import __version__
from airport_timing.airports import AirportNotFoundError
from airport_timing.monte_carlo.config import NUM_RUNS
from airport_timing.monte_carlo.validation import InputValidationError
from timing_api.app import handle_airport_lookup, handle_airport_search, handle_calculate
from timing_api.dotenv_utils import load_timing_dotenv
from timing_api.tool_models import (
    AirportSearchOutput,
    AirportSummary,
    CalculateInput,
    CalculateOutput,
    ErrorDetail,
)

_dotenv_loaded, _dotenv_paths = load_timing_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)
if not _dotenv_loaded:
    logger.info(
        "No .env file found; searched: %s",
        ", ".join(str(path) for path in _dotenv_paths),
    )

HTTP_HOST = os.environ.get("AIRPORT_TIMING_HTTP_HOST", "127.0.0.1")
HTTP_PORT = int(os.environ.get("PORT") or os.environ.get("AIRPORT_TIMING_HTTP_PORT", "8000"))


def _read_num_runs() -> int:
    value = int(os.environ.get("AIRPORT_TIMING_NUM_RUNS", str(NUM_RUNS)))
    if value < 1:
        raise ValueError(f"AIRPORT_TIMING_NUM_RUNS must be at least 1, got {value}")
    return value


SIMULATION_RUNS = _read_num_runs()


def _split_csv_env(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


CORS_ORIGINS = _split_csv_env(os.environ.get("AIRPORT_TIMING_CORS_ORIGINS"))
if not CORS_ORIGINS:
    CORS_ORIGINS = ["http://localhost", "http://127.0.0.1"]


app = FastAPI(
    title="Airport Timing Advisor (HTTP)",
    description="When to leave home to make a flight",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.post(
    "/api/calculate",
    response_model=CalculateOutput,
    responses={404: {"model": ErrorDetail}, 422: {"model": ErrorDetail}},
)
async def calculate(payload: CalculateInput) -> Any:
    """Recommend a leave time for one flight."""
    try:
        return await asyncio.to_thread(handle_calculate, payload, SIMULATION_RUNS)
    except AirportNotFoundError as e:
        return JSONResponse(
            status_code=404,
            content=ErrorDetail(code="AIRPORT_NOT_FOUND", message=str(e)).model_dump(),
        )
    except InputValidationError as e:
        return JSONResponse(
            status_code=422,
            content=ErrorDetail(
                code="INVALID_INPUT",
                message="Inputs failed validation",
                errors=e.errors,
            ).model_dump(),
        )
    except Exception as e:
        logger.error(f"Error computing recommendation: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorDetail(code="INTERNAL_ERROR", message="Internal server error").model_dump(),
        )


@app.get("/api/airports", response_model=AirportSearchOutput)
def airports(
    q: str = Query("", description="Code, city or name fragment."),
    limit: int = Query(10, ge=1, le=50),
) -> AirportSearchOutput:
    """Search the airport catalog."""
    return handle_airport_search(q, limit=limit)


@app.get("/api/airports/{code}", response_model=AirportSummary)
def airport(code: str) -> AirportSummary:
    try:
        return handle_airport_lookup(code)
    except AirportNotFoundError:
        raise HTTPException(status_code=404, detail=f"Airport {code} not found")


@app.get("/healthcheck")
def healthcheck() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "airport-timing-http",
        "num_runs": SIMULATION_RUNS,
    }


@app.get("/")
def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "service": "Airport Timing Advisor (HTTP)",
        "version": __version__,
        "endpoints": {
            "calculate": "/api/calculate",
            "airports": "/api/airports?q=",
            "airport": "/api/airports/{code}",
            "health": "/healthcheck",
        },
        "documentation": "See /docs for OpenAPI documentation",
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Airport Timing HTTP server on {HTTP_HOST}:{HTTP_PORT}")
    uvicorn.run("timing_api.http_server:app", host=HTTP_HOST, port=HTTP_PORT, reload=False)
