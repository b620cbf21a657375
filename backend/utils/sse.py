"""
Server-Sent Events framing helpers.

The Mino API streams newline-delimited `data: <json>` lines. Chunks arriving
from the network can cut a line anywhere, so lines are assembled with a small
buffer before being parsed.
"""

import json

DATA_PREFIX = "data: "


class SSELineBuffer:
    """Accumulates streamed text and hands back complete lines."""

    def __init__(self) -> None:
        self._pending = ""

    def append(self, chunk: str) -> list[str]:
        """
        Add a chunk of text and return every line it completes.

        The trailing partial line (if any) is kept until a later chunk
        supplies its newline.
        """
        self._pending += chunk
        lines = self._pending.split("\n")
        self._pending = lines.pop()
        return lines

    @property
    def pending(self) -> str:
        return self._pending


def parse_data_line(line: str) -> dict | None:
    """
    Decode the JSON payload of a `data:` line.

    Args:
        line: One complete line from the stream

    Returns:
        The decoded event object, or None for lines that carry no data

    Raises:
        ValueError: If the payload is not valid JSON or not a JSON object
    """
    if not line.startswith(DATA_PREFIX):
        return None

    payload = json.loads(line[len(DATA_PREFIX):])
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload
