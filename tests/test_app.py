from __future__ import annotations

import json
import logging

import pytest

import app
from settings import CASE_INSENSITIVE_ENV, CONFIG_ENV

CONTENTS = """\
Rust:
    Safe, Fast, Productive.
    Pick three.
    Trust me.
    Duct tape.
"""


@pytest.fixture(autouse=True)
def isolated_run(tmp_path, monkeypatch):
    # Setting then deleting registers each variable with monkeypatch, so
    # values loaded from a .env during the test are removed afterwards.
    for name in (CASE_INSENSITIVE_ENV, CONFIG_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers_before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level_before)


@pytest.fixture
def poem(tmp_path) -> str:
    path = tmp_path / "poem.txt"
    path.write_text(CONTENTS, encoding="utf-8")
    return str(path)


def test_prints_header_and_results(poem, capsys) -> None:
    assert app.main(["minigrep", "duct", poem]) == 0

    out, err = capsys.readouterr()
    assert out == (
        f"Searching for: duct\nIn file: {poem}\n\nresult: Safe, Fast, Productive.\n"
    )
    assert err == ""


def test_case_insensitive_from_environment(poem, monkeypatch, capsys) -> None:
    monkeypatch.setenv(CASE_INSENSITIVE_ENV, "")

    assert app.main(["minigrep", "rUsT", poem]) == 0

    out, _ = capsys.readouterr()
    assert out.splitlines()[3:] == ["result: Rust:", "result: Trust me."]


def test_case_insensitive_from_dotenv_in_working_directory(poem, tmp_path, capsys) -> None:
    (tmp_path / ".env").write_text(f"{CASE_INSENSITIVE_ENV}=1\n", encoding="utf-8")

    assert app.main(["minigrep", "rUsT", poem]) == 0

    out, _ = capsys.readouterr()
    assert out.splitlines()[3:] == ["result: Rust:", "result: Trust me."]


def test_missing_arguments_exit_code(capsys) -> None:
    assert app.main(["minigrep", "only-query"]) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert err == "Problem parsing arguments: expected args length is two\n"


def test_unreadable_file_still_prints_header(tmp_path, capsys) -> None:
    missing = str(tmp_path / "missing.txt")

    assert app.main(["minigrep", "x", missing]) == 1

    out, err = capsys.readouterr()
    assert out == f"Searching for: x\nIn file: {missing}\n\n"
    assert err.startswith("Application Error: ")
    assert "No such file or directory" in err


def test_no_matches_prints_only_header(poem, capsys) -> None:
    assert app.main(["minigrep", "absent", poem]) == 0

    out, _ = capsys.readouterr()
    assert out == f"Searching for: absent\nIn file: {poem}\n\n"


def test_logging_goes_to_stderr_and_file_only(poem, tmp_path, monkeypatch, capsys) -> None:
    settings_dir = tmp_path / "conf"
    settings_dir.mkdir()
    settings_file = settings_dir / "minigrep.json"
    settings_file.write_text(
        json.dumps(
            {
                "logging": {
                    "enabled": True,
                    "level": "DEBUG",
                    "console": True,
                    "file": {"enabled": True, "path": "logs/minigrep.log"},
                }
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_ENV, str(settings_file))

    assert app.main(["minigrep", "duct", poem]) == 0

    out, err = capsys.readouterr()
    assert out == (
        f"Searching for: duct\nIn file: {poem}\n\nresult: Safe, Fast, Productive.\n"
    )
    assert "DEBUG core.runner: Read" in err

    log_text = (settings_dir / "logs" / "minigrep.log").read_text(encoding="utf-8")
    assert "DEBUG core.runner: Read" in log_text
    assert "INFO core.runner: Search complete" in log_text
    assert "matches=1" in log_text


@pytest.mark.parametrize("payload", ["{not json", "[]", '{"logging": 3}'])
def test_broken_settings_file_exit_code(poem, tmp_path, monkeypatch, capsys, payload) -> None:
    settings_file = tmp_path / "minigrep.json"
    settings_file.write_text(payload, encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(settings_file))

    assert app.main(["minigrep", "duct", poem]) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("Problem loading settings: ")
    assert str(settings_file) in err


def test_settings_path_that_is_a_directory(poem, tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path))

    assert app.main(["minigrep", "duct", poem]) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("Problem loading settings: ")


def test_settings_path_from_dotenv(poem, tmp_path, capsys) -> None:
    settings_file = tmp_path / "broken.json"
    settings_file.write_text("{not json", encoding="utf-8")
    (tmp_path / ".env").write_text(f"{CONFIG_ENV}={settings_file}\n", encoding="utf-8")

    assert app.main(["minigrep", "duct", poem]) == 1

    _, err = capsys.readouterr()
    assert err.startswith("Problem loading settings: ")
