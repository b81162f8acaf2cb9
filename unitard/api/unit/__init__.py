"""Unit module - systemd user service deployment."""

from ._output_schemas import UnitDeployOutput, UnitStatusOutput, UnitUndeployOutput
from .check_name import check_name
from .Unit import Unit
from .UnitDescriptor import UnitDescriptor
from .UnitError import (
    ControlToolNotFound,
    DirectoryCreateFailed,
    ExternalCommandFailed,
    FileCreateFailed,
    FileDeleteFailed,
    HomeDirectoryUnresolvable,
    InvalidName,
    NotADirectory,
    PrivilegedAccountRejected,
    RenderWriteFailed,
    UnitError,
    UnsupportedOption,
    UnsupportedPlatform,
)
from .UnitOpts import UnitOpts

__all__ = [
    "ControlToolNotFound",
    "DirectoryCreateFailed",
    "ExternalCommandFailed",
    "FileCreateFailed",
    "FileDeleteFailed",
    "HomeDirectoryUnresolvable",
    "InvalidName",
    "NotADirectory",
    "PrivilegedAccountRejected",
    "RenderWriteFailed",
    "Unit",
    "UnitDeployOutput",
    "UnitDescriptor",
    "UnitError",
    "UnitOpts",
    "UnitStatusOutput",
    "UnitUndeployOutput",
    "UnsupportedOption",
    "UnsupportedPlatform",
    "check_name",
]
