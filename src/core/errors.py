"""Errors that end a minigrep run."""

from __future__ import annotations


class MinigrepError(Exception):
    """Base class for the two fatal error kinds."""


class MissingArguments(MinigrepError):
    """Fewer than two positional arguments were given."""


class FileReadError(MinigrepError):
    """The target file could not be read as text."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(reason)
        self.filename = filename


class SettingsError(MinigrepError):
    """The optional settings file exists but cannot be used."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(reason)
        self.path = path
