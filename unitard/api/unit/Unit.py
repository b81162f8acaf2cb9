"""Unit public API - deploys and undeploys the running binary as a systemd user service."""

import logging
from pathlib import Path
from typing import Any

from ._probe_environment import probe_environment
from ._render_unit_file import render_unit_file
from ._Systemctl import _Systemctl
from .check_name import check_name
from .UnitDescriptor import UnitDescriptor
from .UnitError import FileCreateFailed, FileDeleteFailed, InvalidName
from .UnitOpts import UnitOpts

logger = logging.getLogger(__name__)


class Unit:
    """A systemd user service for the running binary.

    Nothing on the system changes until deploy() or undeploy() is called.
    Both re-assert the desired state every time, so repeating either one
    after a partial failure is safe.
    """

    def __init__(self, descriptor: UnitDescriptor):
        self._descriptor = descriptor
        self._systemctl = _Systemctl(descriptor.systemctl_path)

    @classmethod
    def create(cls, name: str, opts: UnitOpts | dict[str, Any] | None = None) -> "Unit":
        """Validate name, probe the environment and return a ready Unit.

        Args:
            name: Unit name (letters, digits and underscore only)
            opts: Unit options; none are supported yet

        Raises:
            InvalidName: If name is not a valid unit name
            UnsupportedOption: If any option is given
            UnitError: If the environment cannot host a systemd user service
        """
        if not check_name(name):
            raise InvalidName(name)
        UnitOpts.load(opts)
        return cls(probe_environment(name))

    @property
    def descriptor(self) -> UnitDescriptor:
        return self._descriptor

    @property
    def name(self) -> str:
        return self._descriptor.name

    def unit_file_path(self) -> Path:
        """Full path of the unit file used by deploy() and undeploy()."""
        return self._descriptor.unit_file_path

    def is_installed(self) -> bool:
        """Whether the unit file is currently present."""
        return self.unit_file_path().is_file()

    def deploy(self) -> None:
        """Write the unit file, reload systemd, then enable and (re)start the unit.

        Raises:
            FileCreateFailed: If the unit file cannot be created
            RenderWriteFailed: If the unit file cannot be written
            ExternalCommandFailed: If a systemctl call fails; later steps are skipped
        """
        unit_file = self.unit_file_path()
        try:
            # surrogateescape writes undecodable path bytes back unchanged
            f = unit_file.open("w", encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            raise FileCreateFailed(f"could not create unit file '{unit_file}': {e}") from e
        with f:
            render_unit_file(self._descriptor, f)
        logger.debug(f"Wrote unit file {unit_file}")

        self._systemctl.daemon_reload()
        self._systemctl.enable(self.name)
        # restart rather than start so deploying an already running unit picks up the new file
        self._systemctl.restart(self.name)
        logger.info(f"Deployed unit {self.name!r} ({unit_file})")

    def undeploy(self) -> None:
        """Disable and stop the unit, remove the unit file and reload systemd.

        Raises:
            ExternalCommandFailed: If a systemctl call fails; later steps are skipped
            FileDeleteFailed: If the unit file cannot be removed (including when absent)
        """
        # Disabled before stopping so it is not started again in between
        self._systemctl.disable(self.name)
        self._systemctl.stop(self.name)

        unit_file = self.unit_file_path()
        try:
            unit_file.unlink()
        except OSError as e:
            raise FileDeleteFailed(f"could not remove unit file '{unit_file}': {e}") from e
        logger.debug(f"Removed unit file {unit_file}")

        self._systemctl.daemon_reload()
        logger.info(f"Undeployed unit {self.name!r}")

    def __repr__(self) -> str:
        return f"Unit(name={self.name!r}, unit_file={str(self.unit_file_path())!r})"
