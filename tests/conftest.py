"""
Pytest configuration and fixtures for pyinidex tests.
"""

from pathlib import Path

import pytest

from pyinidex import IniFile


SERVER_INI = """\
[server]
port = 8080
debug = yes
"""

DUPLICATED_INI = """\
[general]
name = demo

[plugin]
id = alpha
enabled = on

; the same section name again, kept apart from the first one
[plugin]
id = beta
enabled = 0
weight = 2.5
"""


@pytest.fixture
def server_text() -> str:
    return SERVER_INI


@pytest.fixture
def duplicated_text() -> str:
    return DUPLICATED_INI


@pytest.fixture
def ini_path(tmp_path: Path) -> Path:
    """A sample file with repeated sections, written to a temp dir."""
    path = tmp_path / "sample.ini"
    path.write_text(DUPLICATED_INI, encoding="utf-8")
    return path


@pytest.fixture
def loaded(ini_path: Path) -> IniFile:
    ini = IniFile(ini_path)
    ini.load()
    return ini
