"""Unit tests for unitard.api.unit.Unit."""

import os
import sys
from pathlib import Path

import pytest

import unitard
from unitard.api.unit.Unit import Unit
from unitard.api.unit.UnitDescriptor import UnitDescriptor
from unitard.api.unit.UnitError import (
    ExternalCommandFailed,
    FileCreateFailed,
    FileDeleteFailed,
    InvalidName,
    UnsupportedOption,
)

DEPLOY_CALLS = [
    "--user daemon-reload present",
    "--user enable myapp present",
    "--user restart myapp present",
]
UNDEPLOY_CALLS = [
    "--user disable myapp present",
    "--user stop myapp present",
    "--user daemon-reload absent",
]


@pytest.fixture
def binary(tmp_path, monkeypatch) -> Path:
    """An executable file standing in for the running application."""
    path = tmp_path / "app" / "myapp"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\nsleep 1000\n")
    path.chmod(0o755)
    monkeypatch.setattr(sys, "argv", [str(path)])
    return path


@pytest.fixture
def recorded(tmp_path, monkeypatch) -> list:
    """Replace the command runner with one that records the actions taken."""
    actions: list = []

    def fake_run(command, *args):
        actions.append(("run", command, *args))

    monkeypatch.setattr("unitard.api.unit._Systemctl.run_expect_zero", fake_run)
    return actions


@pytest.fixture
def offline_unit(tmp_path) -> Unit:
    unit_dir = tmp_path / "units"
    unit_dir.mkdir()
    return Unit(
        UnitDescriptor(
            name="test_unit",
            binary_path=Path("/fullpath/to/foobar"),
            systemctl_path=Path("/usr/bin/systemctl"),
            unit_dir=unit_dir,
        )
    )


def test_create_rejects_invalid_name(systemctl):
    with pytest.raises(InvalidName, match="no way"):
        Unit.create("no way")


def test_create_rejects_options(systemctl):
    with pytest.raises(UnsupportedOption):
        Unit.create("myapp", opts={"user": "other"})


def test_create_accepts_empty_options(systemctl):
    unit = Unit.create("myapp", opts={})
    assert unit.name == "myapp"


def test_invalid_name_checked_before_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))

    with pytest.raises(InvalidName):
        Unit.create("/no/slashes")


def test_module_level_create(systemctl):
    unit = unitard.create("myapp")
    assert isinstance(unit, Unit)
    assert unit.unit_file_path().name == "myapp.service"


def test_unit_file_path(offline_unit, tmp_path):
    assert offline_unit.unit_file_path() == tmp_path / "units" / "test_unit.service"
    assert offline_unit.unit_file_path() == offline_unit.descriptor.unit_file_path


def test_deploy_action_order(offline_unit, recorded):
    offline_unit.deploy()

    assert recorded == [
        ("run", "/usr/bin/systemctl", "--user", "daemon-reload"),
        ("run", "/usr/bin/systemctl", "--user", "enable", "test_unit"),
        ("run", "/usr/bin/systemctl", "--user", "restart", "test_unit"),
    ]
    text = offline_unit.unit_file_path().read_text()
    assert "Description=test_unit" in text
    assert "ExecStart=/fullpath/to/foobar" in text


def test_undeploy_action_order(offline_unit, recorded):
    offline_unit.unit_file_path().write_text("[Unit]\n")

    offline_unit.undeploy()

    assert recorded == [
        ("run", "/usr/bin/systemctl", "--user", "disable", "test_unit"),
        ("run", "/usr/bin/systemctl", "--user", "stop", "test_unit"),
        ("run", "/usr/bin/systemctl", "--user", "daemon-reload"),
    ]
    assert not offline_unit.unit_file_path().exists()


def test_deploy_overwrites_existing_file(offline_unit, recorded):
    offline_unit.unit_file_path().write_text("stale content that is longer than the real unit file " * 20)

    offline_unit.deploy()

    text = offline_unit.unit_file_path().read_text()
    assert "stale content" not in text
    assert text.startswith("[Unit]\n")


def test_deploy_file_create_failed(offline_unit, recorded):
    offline_unit.unit_file_path().mkdir()

    with pytest.raises(FileCreateFailed, match="test_unit.service"):
        offline_unit.deploy()
    assert recorded == []


def test_end_to_end(systemctl, binary):
    unit = unitard.create("myapp")
    assert str(unit.unit_file_path()).endswith("myapp.service")
    assert not unit.is_installed()

    unit.deploy()
    assert systemctl.calls() == DEPLOY_CALLS
    assert unit.is_installed()
    text = unit.unit_file_path().read_text()
    assert "Description=myapp" in text.splitlines()
    assert f"ExecStart={binary.resolve()}" in text.splitlines()

    unit.undeploy()
    assert systemctl.calls() == DEPLOY_CALLS + UNDEPLOY_CALLS
    assert not unit.is_installed()


def test_deploy_twice_is_idempotent(systemctl, binary):
    unit = unitard.create("myapp")

    unit.deploy()
    first = unit.unit_file_path().read_bytes()
    unit.deploy()

    assert unit.unit_file_path().read_bytes() == first
    assert systemctl.calls() == DEPLOY_CALLS + DEPLOY_CALLS


def test_undeploy_without_deploy(systemctl):
    unit = unitard.create("myapp")

    with pytest.raises(FileDeleteFailed, match="myapp.service") as exc_info:
        unit.undeploy()
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    # daemon-reload is never reached
    assert systemctl.calls() == [
        "--user disable myapp absent",
        "--user stop myapp absent",
    ]


def test_deploy_stops_when_enable_fails(make_systemctl, binary):
    systemctl = make_systemctl(fail_on="enable")
    unit = unitard.create("myapp")

    with pytest.raises(ExternalCommandFailed, match="enable") as exc_info:
        unit.deploy()

    assert exc_info.value.returncode == 3
    assert exc_info.value.arguments == ("--user", "enable", "myapp")
    assert systemctl.calls() == DEPLOY_CALLS[:2]
    # The unit file stays in place for a later retry
    assert unit.is_installed()


def test_undeploy_stops_when_disable_fails(make_systemctl, binary):
    systemctl = make_systemctl(fail_on="disable")
    unit = unitard.create("myapp")
    unit.unit_file_path().write_text("[Unit]\n")

    with pytest.raises(ExternalCommandFailed, match="disable"):
        unit.undeploy()

    assert systemctl.calls() == ["--user disable myapp present"]
    assert unit.is_installed()


def test_repr(offline_unit):
    assert "test_unit" in repr(offline_unit)


@pytest.mark.skipif(sys.getfilesystemencoding() != "utf-8", reason="needs a utf-8 filesystem encoding")
def test_deploy_binary_path_not_utf8(systemctl, tmp_path, monkeypatch):
    """Path bytes that are not valid UTF-8 end up in ExecStart unchanged."""
    raw_dir = os.fsencode(tmp_path) + b"/app\xff"
    try:
        os.mkdir(raw_dir)
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")
    binary = Path(os.fsdecode(raw_dir)) / "myapp"
    binary.write_text("#!/bin/sh\n")
    binary.chmod(0o755)
    monkeypatch.setattr(sys, "argv", [str(binary)])

    unit = unitard.create("myapp")
    unit.deploy()

    content = unit.unit_file_path().read_bytes()
    assert b"ExecStart=" + os.fsencode(binary.resolve()) + b"\n" in content
    assert systemctl.calls() == DEPLOY_CALLS
