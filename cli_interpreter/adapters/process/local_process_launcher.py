import logging
import shutil
import subprocess
from typing import Optional

from cli_interpreter.entities.command import ExitOutcome
from cli_interpreter.exceptions import SpawnError, WaitError
from cli_interpreter.ports.process.process_launcher_port import ProcessLauncherPort


class LocalProcessLauncher(ProcessLauncherPort):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def launch(self, name: str, args: list[str], working_dir: str) -> ExitOutcome:
        args = [str(a) for a in (args or [])]
        exe = shutil.which(name) or name
        try:
            # No shell and no stream redirection: the child shares our stdio.
            # argv[0] stays the name as typed; only the executable is resolved.
            proc = subprocess.Popen(
                [name, *args], executable=exe, cwd=working_dir, shell=False
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            self._logger.error(f"Failed to launch {name}: {e}")
            raise SpawnError(name, e)
        self._logger.info(f"Launched {name} (pid={proc.pid}) in {working_dir}")

        try:
            returncode = self._wait(proc)
        except OSError as e:
            self._logger.error(f"Failed to wait for {name} (pid={proc.pid}): {e}")
            raise WaitError(name, e)

        outcome = ExitOutcome.from_returncode(returncode)
        self._logger.info(
            f"{name} (pid={proc.pid}) finished: "
            f"exit_code={outcome.exit_code} signal={outcome.signal}"
        )
        return outcome

    def _wait(self, proc: subprocess.Popen) -> int:
        while True:
            try:
                return proc.wait()
            except KeyboardInterrupt:
                # The terminal delivered the interrupt to the child as well;
                # keep waiting so its real outcome gets reported.
                self._logger.info(f"Interrupt received while waiting for pid={proc.pid}")
                continue
