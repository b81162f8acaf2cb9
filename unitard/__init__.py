"""unitard - deploy the running binary as a systemd user service.

    import unitard

    unit = unitard.create("myapp")
    unit.deploy()      # write ~/.config/systemd/user/myapp.service, enable, restart
    unit.undeploy()    # disable, stop, remove the unit file
"""

import logging

from .api.unit import (
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
    Unit,
    UnitDescriptor,
    UnitError,
    UnitOpts,
    UnsupportedOption,
    UnsupportedPlatform,
    check_name,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

create = Unit.create

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
    "UnitDescriptor",
    "UnitError",
    "UnitOpts",
    "UnsupportedOption",
    "UnsupportedPlatform",
    "__version__",
    "check_name",
    "create",
]
