"""Unit status command - reports whether the unit file is installed."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import UnitStatusOutput
from .Unit import Unit
from .UnitError import UnitError


def cmd_status(name: str) -> StageResult:
    """Report whether systemd user unit `name` has a unit file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Checking environment...")
        try:
            unit = Unit.create(name)
        except UnitError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking unit '{name}': {e}"
            result_obj.output = UnitStatusOutput(
                errors=[str(e)],
                warnings=[],
                message=result_obj.result,
                installed=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Checking unit file...")
        installed = unit.is_installed()
        warnings = []
        if not installed:
            warnings.append(f"Unit file not found at {unit.unit_file_path()}")

        yield (1.0, "Complete")
        result_obj.result = f"Unit '{name}' is {'installed' if installed else 'not installed'}"
        result_obj.output = UnitStatusOutput(
            errors=[],
            warnings=warnings,
            message=result_obj.result,
            unit_path=str(unit.unit_file_path()),
            installed=installed,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Checking unit '{name}'...",
        progress_callback=do_work,
    )
