"""Output schemas for the unit commands."""

from pydantic import BaseModel, ConfigDict, Field


class _BaseOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(..., description="Errors encountered")
    warnings: list[str] = Field(..., description="Warnings encountered")
    message: str = Field(..., description="Human readable summary")
    unit_path: str | None = Field(None, description="Unit file path, when the environment could be probed")


class UnitDeployOutput(_BaseOutput):
    deployed: bool = Field(..., description="Unit file written, enabled and (re)started")


class UnitUndeployOutput(_BaseOutput):
    undeployed: bool = Field(..., description="Unit disabled, stopped and its file removed")


class UnitStatusOutput(_BaseOutput):
    installed: bool = Field(..., description="Unit file present")
