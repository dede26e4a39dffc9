"""
Pytest configuration and fixtures.
"""

from pathlib import Path
from typing import Callable

import pytest


EXAMPLE_CONFIG = """\
# Example file
; Global options
debug = true

[host "example.org"]
port = 8080
user-name = example   ; trailing comment
motd = `Welcome
to example.org`

[paths]
root = "/srv/\\"www\\""
"""


@pytest.fixture
def example_config_path(tmp_path: Path) -> Path:
    """Path to a well formed example config file."""
    path = tmp_path / "example.conf"
    path.write_text(EXAMPLE_CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[bytes], Path]:
    """Factory writing raw bytes to a config file in a temporary directory."""

    def _write(data: bytes, name: str = "test.conf") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
