"""Job search endpoint backed by the Mino automation API."""

import logging
from contextlib import aclosing
from datetime import UTC, datetime
from typing import Any

import httpx
from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from backend.api.schemas import ErrorResponse, SearchRequest, SearchResponse, error_body, success_body
from backend.tools.mino import StreamEvent, build_automation_task, get_http_client, stream_events

logger = logging.getLogger(__name__)

MISSING_FIELDS_ERROR = "Missing required fields: jobTitle and location"
METHOD_NOT_ALLOWED_ERROR = "Method not allowed. Use POST."
NO_RESULT_ERROR = "No jobs found in Mino response"
UPSTREAM_ERROR = "Mino API encountered an error"
NO_DATA_ERROR = "No data received from Mino API"
INTERNAL_ERROR = "Internal server error"

router = APIRouter()


def _timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-01-31T12:00:00.000Z."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _has_result(value: Any) -> bool:
    """Check whether a COMPLETE event carries a result.

    Empty arrays and objects count as a result; null, "", 0 and false do not.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def _complete_response(event: StreamEvent) -> JSONResponse:
    """Build the final response for a COMPLETE event."""
    if not _has_result(event.result_json):
        logger.error("No resultJson in COMPLETE event")
        return JSONResponse(status_code=500, content=error_body(NO_RESULT_ERROR))

    jobs = event.result_json if isinstance(event.result_json, list) else []
    logger.info(f"Successfully extracted {len(jobs)} jobs")
    return JSONResponse(status_code=200, content=success_body(jobs, _timestamp()))


@router.options("", include_in_schema=False)
def preflight():
    """Acknowledge CORS preflight requests."""
    return Response(status_code=200)


@router.post(
    "",
    responses={
        200: {"model": SearchResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def search_jobs(
    data: SearchRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Search LinkedIn jobs through Mino and return the extracted listings."""
    try:
        if not data.job_title or not data.location:
            return JSONResponse(status_code=400, content=error_body(MISSING_FIELDS_ERROR))

        logger.info(f"Searching for: {data.job_title} in {data.location}")

        task = build_automation_task(data.job_title, data.location)

        async with aclosing(stream_events(client, task)) as events:
            async for event in events:
                logger.info(f"Mino event: {event.type}")

                if event.type == "COMPLETE":
                    return _complete_response(event)

                if event.type == "ERROR":
                    logger.error(f"Mino API error: {event.message}")
                    return JSONResponse(status_code=500, content=error_body(event.message or UPSTREAM_ERROR))

                if event.type == "PROGRESS":
                    logger.info(f"Progress: {event.message}")

        logger.error("Stream ended without COMPLETE or ERROR event")
        return JSONResponse(status_code=500, content=error_body(NO_DATA_ERROR))

    except Exception as e:
        logger.exception(f"Job search failed: {e}")
        return JSONResponse(
            status_code=500,
            content=error_body(str(e) or INTERNAL_ERROR, timestamp=_timestamp()),
        )
