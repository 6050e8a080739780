"""Core search run.

This module is integration-agnostic. It only relies on ports for reading
contents and emitting results.
"""

from __future__ import annotations

import logging
from typing import List

from core.config import Config
from core.ports import ContentSource, ResultSink
from core.search import search, search_case_insensitive

LOGGER = logging.getLogger(__name__)


class SearchRunner:
    """Reads one file, filters its lines and emits the matches."""

    def __init__(self, source: ContentSource, sink: ResultSink) -> None:
        self._source = source
        self._sink = sink

    def run(self, config: Config) -> List[str]:
        """Run one search and return the matches that were emitted.

        Read failures propagate as ``FileReadError`` before anything is
        emitted.
        """

        contents = self._source.read(config.filename)
        LOGGER.debug("Read %s characters from %s", len(contents), config.filename)

        if config.case_sensitive:
            results = search(config.query, contents)
        else:
            results = search_case_insensitive(config.query, contents)

        for line in results:
            self._sink.emit(line)

        LOGGER.info(
            "Search complete: file=%s, case_sensitive=%s, matches=%s",
            config.filename,
            config.case_sensitive,
            len(results),
        )
        return results
