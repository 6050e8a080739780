"""Static configuration for minigrep.

The search itself is configured from the command line and the
CASE_INSENSITIVE environment variable. Tool settings that have nothing to do
with a single search (currently only logging) live in an optional JSON file,
read after the .env file so MINIGREP_CONFIG may come from there too.
"""

import json
import os
from typing import Mapping, Optional, Sequence

from core.config import Config
from core.errors import MissingArguments, SettingsError

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Presence alone switches to case-insensitive matching, even when empty.
CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"

# Settings file location can be overridden for per-user setups.
CONFIG_ENV = "MINIGREP_CONFIG"
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")


def resolve_config(args: Sequence[str], environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a Config from the raw argument list (program name first).

    Arguments after the filename are ignored. The file is not checked here.
    """

    if len(args) < 3:
        raise MissingArguments("expected args length is two")

    if environ is None:
        environ = os.environ

    return Config(
        query=args[1],
        filename=args[2],
        case_sensitive=CASE_INSENSITIVE_ENV not in environ,
    )


def config_path(environ: Optional[Mapping[str, str]] = None) -> str:
    if environ is None:
        environ = os.environ
    return environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH


def _load_json_config(path: str) -> dict:
    """Load the settings file; a missing file means defaults."""

    if not os.path.exists(path):
        return {}

    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as err:
        # ValueError covers both JSONDecodeError and undecodable bytes.
        raise SettingsError(path, f"cannot load settings from {path}: {err}") from err

    if not isinstance(data, dict):
        raise SettingsError(path, f"settings in {path} must be a JSON object")
    return data


def load_logging_settings(path: Optional[str] = None) -> dict:
    """Return the "logging" section, with relative paths anchored at the file.

    Logging stays disabled unless "enabled" is true so stdout carries nothing
    but the search output.
    """

    if path is None:
        path = config_path()

    logging_cfg = _load_json_config(path).get("logging", {})
    if not isinstance(logging_cfg, dict):
        raise SettingsError(path, f"'logging' in {path} must be a JSON object")

    file_cfg = logging_cfg.get("file")
    if isinstance(file_cfg, dict) and file_cfg.get("path"):
        log_path = file_cfg["path"]
        if not os.path.isabs(log_path):
            base_dir = os.path.dirname(os.path.abspath(path))
            logging_cfg = dict(logging_cfg, file=dict(file_cfg, path=os.path.join(base_dir, log_path)))
    return logging_cfg
