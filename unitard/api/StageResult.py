"""StageResult dataclass shared by the unit commands."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Outcome of a command, produced in four stages.

    1. `announce` is shown before any work starts.
    2. `progress_callback(result)` is a generator of (fraction, message) tuples
       that does the work and fills in the remaining fields.
    3. `result` is a one-line summary.
    4. `output` is the structured result, `success` the overall status.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def run(self) -> "StageResult":
        """Drive progress_callback to completion and return self."""
        for _ in self.progress_callback(self):
            pass
        return self
