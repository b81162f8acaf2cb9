"""Run a StageResult command and display it for the CLI."""

import json
from collections.abc import Callable
from datetime import datetime

import typer
from rich.console import Console
from rich.markup import escape

from ..api.StageResult import StageResult

_console = Console(stderr=True)


def _handle_stage_result(func: Callable[..., StageResult], *args, quiet: bool = False) -> None:
    """Run func(*args) through the four stages and exit with its status.

    Announce, progress and result go to stderr; the output dict is printed
    to stdout as JSON.

    Raises:
        typer.Exit: Always, with code 0 on success and 1 on failure
    """
    result = func(*args)

    if not quiet:
        _console.print(f"[bold]{escape(result.announce)}[/bold]")

    for progress, message in result.progress_callback(result):
        if not quiet:
            timestamp = datetime.now().strftime("%H:%M:%S")
            _console.print(f"[dim]{timestamp}[/dim] Progress: {escape(message)} ({progress:.1%})")

    if not result.result or not result.output:
        raise ValueError("progress_callback must set result.result and result.output")

    if not quiet:
        style = "green" if result.success else "red"
        _console.print(f"[{style}]{escape(result.result)}[/{style}]")

    typer.echo(json.dumps(result.output, indent=2))
    raise typer.Exit(0 if result.success else 1)
