"""File-system content source."""

from __future__ import annotations

import logging

from core.errors import FileReadError

LOGGER = logging.getLogger(__name__)


class FileContentSource:
    """Read a whole file into memory as UTF-8 text."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, filename: str) -> str:
        try:
            with open(filename, "r", encoding=self._encoding) as handle:
                return handle.read()
        except UnicodeDecodeError as err:
            LOGGER.debug("Failed to decode %s as %s", filename, self._encoding)
            reason = f"{filename}: stream did not contain valid {self._encoding} ({err.reason})"
            raise FileReadError(filename, reason) from err
        except OSError as err:
            LOGGER.debug("Failed to read %s", filename)
            raise FileReadError(filename, str(err)) from err
