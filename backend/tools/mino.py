"""
Mino browser-automation client.

Builds the LinkedIn job search task and streams the events Mino sends back
while its browser works through the page.
"""

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field

from backend.config import settings
from backend.utils.sse import SSELineBuffer, parse_data_line

logger = logging.getLogger(__name__)

LINKEDIN_SEARCH_URL = "https://www.linkedin.com/jobs/search/"

# Entry level experience filter
LINKEDIN_EXPERIENCE_FILTER = "2"

JOBS_PER_SEARCH = 10

GOAL_TEMPLATE = """Navigate to LinkedIn jobs search page.

Extract {count} entry-level {job_title} jobs in {location}.

For each job, get:
- title: Job title
- company: Company name
- location: City and state
- salary: Salary range or "Not listed"
- url: Full job posting URL (click on job card to get the complete URL)
- postedDate: When posted (e.g. "2 days ago")

Return ONLY a JSON array in this exact format:
[
  {{
    "title": "Product Manager",
    "company": "Google",
    "location": "San Francisco, CA",
    "salary": "$90,000 - $120,000/year",
    "url": "https://www.linkedin.com/jobs/view/123456",
    "postedDate": "1 day ago"
  }}
]

Important rules:
- Skip any sponsored or promoted jobs
- Click on each job card to get the full URL
- If salary is not shown, use "Not listed"
- Return ONLY the JSON array, no additional text or markdown
- Ensure all URLs are complete and clickable"""


class MinoAPIError(RuntimeError):
    """Raised when the Mino API answers with a non-success status."""


class ProxyConfig(BaseModel):
    enabled: bool
    country_code: str


class AutomationTask(BaseModel):
    """Request body for a single Mino run."""

    url: str
    goal: str
    browser_profile: str
    proxy_config: ProxyConfig
    timeout: int


class StreamEvent(BaseModel):
    """One decoded event from the Mino stream."""

    type: str | None = None
    message: Any = None
    result_json: Any = Field(default=None, alias="resultJson")

    class Config:
        extra = "ignore"


def _encode(value: str) -> str:
    """Percent-encode a query value the way browsers encode URI components."""
    return quote(value, safe="!~*'()")


def build_search_url(job_title: str, location: str) -> str:
    """Build the LinkedIn job search URL for a title and location."""
    return (
        f"{LINKEDIN_SEARCH_URL}?keywords={_encode(job_title)}"
        f"&location={_encode(location)}&f_E={LINKEDIN_EXPERIENCE_FILTER}"
    )


def build_goal(job_title: str, location: str) -> str:
    """Build the natural-language instructions for the automation run."""
    return GOAL_TEMPLATE.format(count=JOBS_PER_SEARCH, job_title=job_title, location=location)


def build_automation_task(job_title: str, location: str) -> AutomationTask:
    """
    Build the Mino task for a job search.

    Args:
        job_title: Job title to search for (e.g., "Product Manager")
        location: Location to search in (e.g., "New York, NY")

    Returns:
        Task ready to be sent to the Mino API
    """
    return AutomationTask(
        url=build_search_url(job_title, location),
        goal=build_goal(job_title, location),
        browser_profile=settings.browser_profile,
        proxy_config=ProxyConfig(
            enabled=settings.proxy_enabled,
            country_code=settings.proxy_country_code,
        ),
        timeout=settings.automation_timeout,
    )


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """FastAPI dependency for the outbound HTTP client."""
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        yield client


async def stream_events(client: httpx.AsyncClient, task: AutomationTask) -> AsyncIterator[StreamEvent]:
    """
    Run a task on Mino and yield its events as they arrive.

    Malformed event lines are logged and skipped. The response is closed
    when the stream ends, when the caller stops iterating, or on error.

    Raises:
        MinoAPIError: If Mino answers with a non-success status
    """
    headers = {
        "X-API-Key": settings.require_api_key(),
        "Content-Type": "application/json",
    }

    async with client.stream("POST", settings.mino_api_url, headers=headers, json=task.model_dump()) as response:
        if not response.is_success:
            raise MinoAPIError(f"Mino API returned status {response.status_code}")

        buffer = SSELineBuffer()
        async for chunk in response.aiter_text():
            for line in buffer.append(chunk):
                try:
                    data = parse_data_line(line)
                    if data is None:
                        continue
                    event = StreamEvent.model_validate(data)
                except ValueError as e:
                    logger.warning(f"Error parsing SSE data: {e}")
                    continue
                yield event

        if buffer.pending:
            logger.debug(f"Discarding incomplete trailing line ({len(buffer.pending)} chars)")
        logger.info("Stream ended")
