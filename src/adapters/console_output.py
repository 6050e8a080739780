"""Console output for search results.

Keeping the formatting here means the header and result lines stay
consistent no matter which stream they are written to.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from core.config import Config

RESULT_PREFIX = "result: "


def format_result(line: str) -> str:
    """Return a matching line with the result prefix."""

    return f"{RESULT_PREFIX}{line}"


def format_header(config: Config) -> list[str]:
    """Return the lines echoed before the results, ending with a blank line."""

    return [
        f"Searching for: {config.query}",
        f"In file: {config.filename}",
        "",
    ]


class ConsoleSink:
    """Write the header and results to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected or captured stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def header(self, config: Config) -> None:
        for line in format_header(config):
            print(line, file=self.stream)

    def emit(self, line: str) -> None:
        print(format_result(line), file=self.stream)
