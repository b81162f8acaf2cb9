"""systemctl --user subcommands used to deploy and undeploy a unit."""

from pathlib import Path

from ._run_expect_zero import run_expect_zero


class _Systemctl:
    """Issues `systemctl --user` subcommands through one systemctl executable."""

    def __init__(self, systemctl_path: Path):
        self.systemctl_path = systemctl_path

    def _run(self, *args: str) -> None:
        run_expect_zero(str(self.systemctl_path), "--user", *args)

    def daemon_reload(self) -> None:
        self._run("daemon-reload")

    def enable(self, name: str) -> None:
        self._run("enable", name)

    def restart(self, name: str) -> None:
        self._run("restart", name)

    def disable(self, name: str) -> None:
        self._run("disable", name)

    def stop(self, name: str) -> None:
        self._run("stop", name)
