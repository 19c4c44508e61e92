"""Run shell commands inside a scenario's working directory."""

import logging
import shlex
import subprocess
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from loadtest_runner.exceptions import CommandExecutionError

log = logging.getLogger(__name__)

# Seconds to keep forwarding output after the process exits.
OUTPUT_DRAIN_TIMEOUT = 2.0


def forward_output(lines: Iterable[str], source: str) -> None:
    """Forward process output to the log line by line until EOF."""
    for line in lines:
        log.info("[%s] %s", source, line.rstrip())


@dataclass(frozen=True, kw_only=True)
class ShellRunner:
    """Executes commands and reports their exit code.

    Output of the child process is merged and forwarded to the log; files it
    writes stay in the working directory untouched. A run ends when the
    process exits, even if background children still hold its output open.
    """

    environment: Mapping[str, str] | None = None

    def run(self, command: str, working_directory: Path | str) -> int:
        """Run ``command`` with ``working_directory`` as its current directory.

        Args:
            command: Command line, e.g. "bash run.sh"
            working_directory: Directory the process starts in

        Returns:
            Exit code of the process. Non-zero codes are returned, not raised.

        Raises:
            CommandExecutionError: If the process could not be launched

        """
        args = shlex.split(command)
        if not args:
            raise CommandExecutionError("Cannot execute an empty command")

        log.info("Executing command: %s (cwd=%s)", command, working_directory)
        env = dict(self.environment) if self.environment is not None else None

        try:
            process = subprocess.Popen(
                args,
                cwd=working_directory,
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise CommandExecutionError(
                f"Unable to launch command '{command}' in {working_directory}: {e}"
            ) from e

        assert process.stdout is not None
        reader = threading.Thread(
            target=forward_output,
            args=(process.stdout, args[0]),
            name=f"output-{process.pid}",
            daemon=True,
        )
        reader.start()

        exit_code = process.wait()
        reader.join(timeout=OUTPUT_DRAIN_TIMEOUT)
        if reader.is_alive():
            log.warning(
                "Output of '%s' is still open after it exited; a background "
                "process may hold it. No longer waiting for it.",
                command,
            )
        else:
            process.stdout.close()

        log.info("Command '%s' exited with status %d", command, exit_code)
        return exit_code
