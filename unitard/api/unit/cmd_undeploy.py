"""Unit undeploy command - stops, disables and removes a user service."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import UnitUndeployOutput
from .Unit import Unit
from .UnitError import UnitError


def cmd_undeploy(name: str) -> StageResult:
    """Undeploy systemd user unit `name`."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        unit_path = None
        try:
            yield (0.2, "Checking environment...")
            unit = Unit.create(name)
            unit_path = str(unit.unit_file_path())

            yield (0.5, "Stopping service and removing unit file...")
            unit.undeploy()

            yield (1.0, "Complete")
            result_obj.result = f"Unit '{name}' undeployed"
            success = True
            errors = []
        except UnitError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error undeploying unit '{name}': {e}"
            success = False
            errors = [str(e)]

        result_obj.output = UnitUndeployOutput(
            errors=errors,
            warnings=[],
            message=result_obj.result,
            unit_path=unit_path,
            undeployed=success,
        ).model_dump(mode="python")
        result_obj.success = success

    return StageResult(
        announce=f"Undeploying unit '{name}'...",
        progress_callback=do_work,
    )
