"""Run an external command and require a zero exit status."""

import logging
import subprocess

from .UnitError import ExternalCommandFailed

logger = logging.getLogger(__name__)


def run_expect_zero(command: str, *args: str) -> None:
    """Run command with args, wait for it, and raise unless it exits with status 0.

    Output is not captured and there is no timeout: a command that never
    exits blocks the caller.

    Raises:
        ExternalCommandFailed: If the command cannot be started, is killed by a
            signal, or exits non-zero
    """
    argv = [command, *args]
    logger.debug(f"Running: {' '.join(argv)}")
    try:
        proc = subprocess.Popen(argv)
    except OSError as e:
        logger.error(f"Could not start {command}: {e}")
        raise ExternalCommandFailed(command, args, f"could not start: {e}") from e

    with proc:
        returncode = proc.wait()

    if returncode < 0:
        error = ExternalCommandFailed(command, args, f"terminated by signal {-returncode}", returncode)
    elif returncode != 0:
        error = ExternalCommandFailed(command, args, f"exit code non-zero: {returncode}", returncode)
    else:
        return
    logger.error(str(error))
    raise error
