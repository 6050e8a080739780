"""Application entry point for minigrep."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from dotenv import find_dotenv, load_dotenv

import settings
from adapters.console_output import ConsoleSink
from adapters.file_source import FileContentSource
from core.errors import FileReadError, MissingArguments, SettingsError
from core.runner import SearchRunner


def _configure_logging(config: dict) -> list[logging.Handler]:
    """Attach the configured handlers to the root logger and return them."""

    if not config.get("enabled", False):
        return []

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        # StreamHandler defaults to stderr, leaving stdout to the results.
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/minigrep.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backupCount=int(file_cfg.get("backup_count", 5)),
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)
    return handlers


def main(argv: Optional[list[str]] = None) -> int:
    """Run one search; return the process exit code."""

    # A .env in the working directory may set CASE_INSENSITIVE or
    # MINIGREP_CONFIG; real environment variables win.
    load_dotenv(find_dotenv(usecwd=True))

    try:
        _configure_logging(settings.load_logging_settings())
    except (SettingsError, OSError) as err:
        print(f"Problem loading settings: {err}", file=sys.stderr)
        return 1
    logger = logging.getLogger(__name__)

    args = sys.argv if argv is None else argv
    try:
        config = settings.resolve_config(args)
    except MissingArguments as err:
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        return 1

    sink = ConsoleSink()
    sink.header(config)

    runner = SearchRunner(source=FileContentSource(), sink=sink)
    try:
        runner.run(config)
    except FileReadError as err:
        logger.debug("Read failed for %s", err.filename, exc_info=True)
        print(f"Application Error: {err}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
