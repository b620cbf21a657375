"""API request/response schemas."""

from typing import Any

from pydantic import BaseModel, Field


# Search schemas
class SearchRequest(BaseModel):
    job_title: str | None = Field(default=None, alias="jobTitle", description="Job title to search for")
    location: str | None = Field(default=None, description="City, state or region")


class JobListing(BaseModel):
    title: str | None = None
    company: str | None = None
    location: str | None = None
    salary: str | None = Field(default=None, description='Salary range or "Not listed"')
    url: str | None = None
    posted_date: str | None = Field(default=None, alias="postedDate")

    class Config:
        populate_by_name = True
        extra = "allow"


class SearchResponse(BaseModel):
    success: bool = True
    jobs: list[JobListing]
    count: int
    source: str = "linkedin"
    timestamp: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    timestamp: str | None = None


def success_body(jobs: list[Any], timestamp: str) -> dict:
    """Success payload. Listings are passed through exactly as Mino returned them."""
    return {
        "success": True,
        "jobs": jobs,
        "count": len(jobs),
        "source": "linkedin",
        "timestamp": timestamp,
    }


def error_body(error: Any, timestamp: str | None = None) -> dict:
    """Failure payload, with a timestamp only when one is given."""
    body = {"success": False, "error": error}
    if timestamp is not None:
        body["timestamp"] = timestamp
    return body
