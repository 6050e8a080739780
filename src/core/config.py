"""Core configuration dataclass.

We keep config parsing outside the core, but this dataclass defines the
shape the core expects so the settings layer can build it safely.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """One query/file pair resolved from the command line."""

    query: str
    filename: str
    case_sensitive: bool
