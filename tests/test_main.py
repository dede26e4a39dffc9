"""
Tests for the command line entry point.
"""

import json
from pathlib import Path

import pytest

from gitcfg import __version__
from gitcfg.__main__ import format_entry, main
from gitcfg.syntax import Entry, Event


def test_dump_text(example_config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(example_config_path), "--no-color"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        'debug = "true"',
        '[host "example.org"]',
        'host "example.org".port = "8080"',
        'host "example.org".user-name = "example"',
        'host "example.org".motd = "Welcome\\nto example.org"',
        "[paths]",
        'paths.root = "/srv/\\"www\\""',
    ]


def test_dump_json(example_config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(example_config_path), "--format", "json"]) == 0

    records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert records[1] == {
        "event": "section",
        "section": "host",
        "parameter": "example.org",
        "key": "",
        "value": "",
        "line": 5,
        "column": 1,
    }
    assert records[4]["value"] == "Welcome\nto example.org"


def test_check(example_config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--check", str(example_config_path)]) == 0

    out = capsys.readouterr().out
    assert "Sections: 2" in out
    assert "Keys: 5" in out
    assert "Configuration is valid!" in out


def test_malformed_file(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_config(b"\n\n\n    ]")

    assert main([str(path)]) == 1
    assert main(["--check", str(path)]) == 1

    err = capsys.readouterr().err
    assert "Configuration error" in err
    assert "[4, 5] Unexpected ']'" in err


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.conf")]) == 1
    assert "Configuration file not found" in capsys.readouterr().err


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_log_file(example_config_path: Path, tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "gitcfg.log"

    assert main([str(example_config_path), "--debug", "--log-file", str(log_path)]) == 0

    text = log_path.read_text(encoding="utf-8")
    assert f"Reading {example_config_path}" in text
    assert "Loaded" in text


def test_format_flag_key() -> None:
    assert format_entry(Entry(Event.KEY, "", "", "flag", "")) == "flag"
    assert format_entry(Entry(Event.KEY, "s", "", "k", "v w")) == 's.k = "v w"'
