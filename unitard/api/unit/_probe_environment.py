"""Check that the host can run systemd user services and resolve the paths a unit needs."""

import logging
import os
import shutil
import sys
from pathlib import Path

from .UnitDescriptor import UnitDescriptor
from .UnitError import (
    ControlToolNotFound,
    DirectoryCreateFailed,
    HomeDirectoryUnresolvable,
    NotADirectory,
    PrivilegedAccountRejected,
    UnsupportedPlatform,
)

logger = logging.getLogger(__name__)

SYSTEMCTL = "systemctl"
UNIT_DIR_MODE = 0o755


def _find_systemctl() -> Path:
    systemctl_path = shutil.which(SYSTEMCTL)
    if not systemctl_path:
        raise ControlToolNotFound(f"could not find {SYSTEMCTL} in PATH")
    return Path(systemctl_path).absolute()


def _check_user() -> None:
    getuid = getattr(os, "getuid", None)
    if getuid is None:
        raise UnsupportedPlatform(f"systemd user services are not available on {sys.platform}")
    if getuid() == 0:
        raise PrivilegedAccountRejected("cannot manage systemd user services as root")


def _get_home_dir() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryUnresolvable(f"could not find user's home dir: {e}") from e
    if not home.is_absolute():
        raise HomeDirectoryUnresolvable(f"home dir is not an absolute path: '{home}'")
    return home


def _get_unit_dir(home: Path) -> Path:
    """Return ~/.config/systemd/user, creating it and any missing parents."""
    unit_dir = home / ".config" / "systemd" / "user"
    try:
        unit_dir.mkdir(mode=UNIT_DIR_MODE, parents=True, exist_ok=True)
    except FileExistsError:
        # Something other than a directory is in the way; reported below
        pass
    except OSError as e:
        raise DirectoryCreateFailed(f"cannot create the user systemd path '{unit_dir}': {e}") from e

    if not unit_dir.is_dir():
        raise NotADirectory(f"'{unit_dir}' - not a directory")
    return unit_dir


def get_binary_path() -> Path:
    """Absolute path of the running executable.

    Prefers the script or frozen binary in argv[0] when it is an executable
    file, otherwise the interpreter itself. The interpreter fallback (for
    `python app.py` with a non-executable script, or `python -m app`) cannot
    relaunch the application on its own, so such callers should run through
    an executable entry point before deploying.

    Raises:
        RuntimeError: If the host cannot report any executable path
    """
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0:
        candidate = Path(argv0).expanduser()
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return candidate.resolve()
    if sys.executable:
        return Path(sys.executable).resolve()
    raise RuntimeError("cannot determine the path of the running executable")


def probe_environment(name: str) -> UnitDescriptor:
    """Probe the host and build the descriptor for unit `name`.

    Checks run in order and the first failure is raised.

    Raises:
        ControlToolNotFound: systemctl is not on PATH
        UnsupportedPlatform: No POSIX user ids on this host
        PrivilegedAccountRejected: Running as root
        HomeDirectoryUnresolvable: Home directory unknown
        DirectoryCreateFailed: Unit directory could not be created
        NotADirectory: Unit directory path is not a directory
    """
    systemctl_path = _find_systemctl()
    _check_user()
    unit_dir = _get_unit_dir(_get_home_dir())
    binary_path = get_binary_path()

    logger.debug(
        f"Probed unit {name!r}: systemctl={systemctl_path} unit_dir={unit_dir} binary={binary_path}"
    )
    return UnitDescriptor(
        name=name,
        binary_path=binary_path,
        systemctl_path=systemctl_path,
        unit_dir=unit_dir,
    )
