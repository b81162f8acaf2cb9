"""Unit deploy command - installs, enables and starts the running binary as a user service."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import UnitDeployOutput
from .Unit import Unit
from .UnitError import UnitError


def cmd_deploy(name: str) -> StageResult:
    """Deploy the running binary as systemd user unit `name`."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Generator that yields (progress, message) and fills in result_obj."""
        unit_path = None
        try:
            yield (0.2, "Checking environment...")
            unit = Unit.create(name)
            unit_path = str(unit.unit_file_path())

            yield (0.5, "Writing unit file and starting service...")
            unit.deploy()

            yield (1.0, "Complete")
            result_obj.result = f"Unit '{name}' deployed ({unit_path})"
            result_obj.output = UnitDeployOutput(
                errors=[],
                warnings=[],
                message=result_obj.result,
                unit_path=unit_path,
                deployed=True,
            ).model_dump(mode="python")
            result_obj.success = True
        except UnitError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error deploying unit '{name}': {e}"
            result_obj.output = UnitDeployOutput(
                errors=[str(e)],
                warnings=[],
                message=result_obj.result,
                unit_path=unit_path,
                deployed=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Deploying unit '{name}'...",
        progress_callback=do_work,
    )
