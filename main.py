"""
Job Search Proxy - Server Entry Point.

Serves the FastAPI app with uvicorn.
"""

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from backend.config import settings  # noqa: E402


def main():
    """Run the job search proxy server."""
    uvicorn.run(
        "backend.api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
