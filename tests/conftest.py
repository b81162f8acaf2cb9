"""Shared pytest configuration and fixtures for all tests."""

import os
import stat
from dataclasses import dataclass
from pathlib import Path

import pytest

_STUB_SYSTEMCTL = """#!/bin/sh
if [ -f "{unit_file}" ]; then state=present; else state=absent; fi
echo "$* $state" >> "{log}"
if [ "$2" = "{fail_on}" ]; then exit {fail_code}; fi
exit 0
"""


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: tests that need a real systemd user session")
    config.addinivalue_line("markers", "linux_service: tests that install real systemd user units")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch) -> Path:
    """HOME pointing at an empty directory, running as an ordinary user.

    Returns:
        Path to the home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(os, "getuid", lambda: 1000)
    return home


@dataclass
class StubSystemctl:
    """A shell script standing in for systemctl that records its arguments.

    Each recorded call is "<args> <present|absent>", the second word saying
    whether the unit file existed when the call was made.
    """

    path: Path
    log: Path

    def calls(self) -> list[str]:
        if not self.log.exists():
            return []
        return self.log.read_text().splitlines()


@pytest.fixture
def make_systemctl(tmp_path: Path, fake_home: Path, monkeypatch):
    """Factory installing a stub systemctl as the only entry on PATH.

    Args (of the returned factory):
        unit_name: Unit whose file presence is recorded with each call
        fail_on: Subcommand that exits non-zero (e.g. "enable")
        fail_code: Exit status used for fail_on
    """

    def _make(unit_name: str = "myapp", fail_on: str = "", fail_code: int = 3) -> StubSystemctl:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        log = tmp_path / "systemctl.log"
        unit_file = fake_home / ".config" / "systemd" / "user" / f"{unit_name}.service"
        script = bin_dir / "systemctl"
        script.write_text(
            _STUB_SYSTEMCTL.format(
                unit_file=unit_file,
                log=log,
                fail_on=fail_on or "-never-",
                fail_code=fail_code,
            )
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        monkeypatch.setenv("PATH", str(bin_dir))
        return StubSystemctl(path=script, log=log)

    return _make


@pytest.fixture
def systemctl(make_systemctl) -> StubSystemctl:
    """Stub systemctl that always succeeds, recording calls for unit 'myapp'."""
    return make_systemctl()
