"""Errors raised while creating, deploying or undeploying a unit."""

from collections.abc import Sequence


class UnitError(RuntimeError):
    """Base class for all unit errors."""


class InvalidName(UnitError, ValueError):
    """Unit name is not usable as a filename and systemd unit identifier."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Invalid unit name {name!r}: only letters, digits and underscore are allowed")


class UnsupportedOption(UnitError, ValueError):
    """A unit option was given that is not (yet) supported."""


class ControlToolNotFound(UnitError):
    """systemctl could not be found on PATH."""


class PrivilegedAccountRejected(UnitError):
    """User services cannot be managed as root."""


class UnsupportedPlatform(UnitError):
    """The host has no notion of a POSIX user id."""


class HomeDirectoryUnresolvable(UnitError):
    """The current user's home directory could not be determined."""


class DirectoryCreateFailed(UnitError):
    """The systemd user unit directory could not be created."""


class NotADirectory(UnitError):
    """The systemd user unit path exists but is not a directory."""


class FileCreateFailed(UnitError):
    """The unit file could not be created or truncated."""


class FileDeleteFailed(UnitError):
    """The unit file could not be removed."""


class RenderWriteFailed(UnitError):
    """The rendered unit file could not be written to its sink."""


class ExternalCommandFailed(UnitError):
    """An external command could not be started, was aborted, or exited non-zero.

    Attributes:
        command: Executable that was run
        arguments: Arguments passed to it
        returncode: Exit status, negative for a signal, None if it never started
    """

    def __init__(self, command: str, args: Sequence[str], detail: str, returncode: int | None = None):
        self.command = command
        self.arguments = tuple(args)
        self.returncode = returncode
        self.detail = detail
        super().__init__(f"problem running '{self.command_line}': {detail}")

    @property
    def command_line(self) -> str:
        return " ".join([self.command, *self.arguments])
