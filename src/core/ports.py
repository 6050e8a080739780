"""Ports (interfaces) used by the search runner.

Ports define the minimal contracts for the content source and result sink
adapters so that the core can be reused with other inputs and outputs.
"""

from __future__ import annotations

from typing import Protocol


class ContentSource(Protocol):
    """Loads the full text to search."""

    def read(self, filename: str) -> str:
        ...


class ResultSink(Protocol):
    """Receives matching lines in file order."""

    def emit(self, line: str) -> None:
        ...
