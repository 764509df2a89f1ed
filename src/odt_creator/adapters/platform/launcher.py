"""Open documents by spawning an external viewer process."""

import functools
import logging
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from ...ports.launcher import LauncherPort

logger = logging.getLogger(__name__)

# Own session so an interrupt in the terminal does not reach the viewer
detached_popen = functools.partial(subprocess.Popen, start_new_session=True)


class SubprocessLauncher(LauncherPort):
    """Launcher trying each candidate command until one starts.

    Only spawning counts; the viewer's exit status is never checked and
    the process is not waited on. Started processes are kept in
    ``processes`` for the lifetime of the launcher.
    """

    def __init__(
        self,
        candidates: Sequence[Sequence[str]],
        spawn: Callable[[list[str]], object] = detached_popen,
    ) -> None:
        self.candidates = [list(c) for c in candidates]
        self.spawn = spawn
        self.processes: list[object] = []

    def launch(self, path: Path) -> bool:
        for command in self.candidates:
            args = [*command, str(path)]
            try:
                process = self.spawn(args)
            except OSError as e:
                logger.debug(f"Viewer {command[0]} did not start: {e}")
                continue
            self.processes.append(process)
            logger.info(f"Opened with {command[0]}: {path.name}")
            return True

        logger.debug(f"No viewer could be started for {path}")
        return False
