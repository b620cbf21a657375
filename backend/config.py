"""
Configuration management for the Job Search Proxy.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Mino automation API
    mino_api_key: str = ""
    mino_api_url: str = "https://mino.ai/v1/automation/run-sse"

    # Automation task
    browser_profile: str = "stealth"
    proxy_enabled: bool = True
    proxy_country_code: str = "US"
    automation_timeout: int = 120

    # Client-side timeout for the outbound call (seconds)
    http_timeout: float = 180.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars

    def require_api_key(self) -> str:
        """Return the Mino API key, raising if it is not configured."""
        if not self.mino_api_key:
            raise ValueError("MINO_API_KEY not set")
        return self.mino_api_key


settings = Settings()
