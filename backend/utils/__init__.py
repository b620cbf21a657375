"""Utility modules."""

from backend.utils.sse import DATA_PREFIX, SSELineBuffer, parse_data_line

__all__ = ["DATA_PREFIX", "SSELineBuffer", "parse_data_line"]
