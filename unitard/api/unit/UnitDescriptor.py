"""Immutable description of a probed systemd user unit."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .check_name import check_name


class UnitDescriptor(BaseModel):
    """Validated unit name plus the host paths resolved for it.

    Created once by the environment probe and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Unit name, used for the unit file and systemctl calls")
    binary_path: Path = Field(..., description="Absolute path of the executable the unit starts")
    systemctl_path: Path = Field(..., description="Absolute path of systemctl")
    unit_dir: Path = Field(..., description="systemd user unit directory (~/.config/systemd/user)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not check_name(v):
            raise ValueError(f"unit name must contain only letters, digits and underscore, got: {v!r}")
        return v

    @field_validator("binary_path", "systemctl_path", "unit_dir")
    @classmethod
    def validate_absolute(cls, v: Path) -> Path:
        if not v.is_absolute():
            raise ValueError(f"path must be absolute, got: {str(v)!r}")
        return v

    @property
    def unit_file_path(self) -> Path:
        """Path of the unit file: <unit_dir>/<name>.service."""
        return self.unit_dir / f"{self.name}.service"
