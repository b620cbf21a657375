"""
Tools for the Job Search Proxy.

- mino: Mino browser-automation API client
"""

from backend.tools.mino import (
    AutomationTask,
    MinoAPIError,
    StreamEvent,
    build_automation_task,
    get_http_client,
    stream_events,
)

__all__ = [
    "AutomationTask",
    "MinoAPIError",
    "StreamEvent",
    "build_automation_task",
    "get_http_client",
    "stream_events",
]
