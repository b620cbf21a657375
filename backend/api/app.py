"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.api.routes import jobs
from backend.api.schemas import error_body
from backend.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Refuse to start without a Mino API key."""
    settings.require_api_key()
    logger.info(f"Job search proxy ready, forwarding to {settings.mino_api_url}")
    yield


app = FastAPI(
    title="Job Search Proxy API",
    description="LinkedIn job search through the Mino browser-automation API",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Attach permissive CORS headers to every response."""
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Return 400 with the missing-fields message instead of FastAPI's 422."""
    logger.debug(f"Rejected request body: {exc.errors()}")
    return JSONResponse(status_code=400, content=error_body(jobs.MISSING_FIELDS_ERROR))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Answer any method other than POST and OPTIONS with the JSON 405 body."""
    if exc.status_code == 405:
        return JSONResponse(
            status_code=405,
            content=error_body(jobs.METHOD_NOT_ALLOWED_ERROR),
            headers={"Allow": "POST, OPTIONS"},
        )
    return await http_exception_handler(request, exc)


app.include_router(jobs.router, prefix="/api/jobs", tags=["Jobs"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
