"""Run external commands through ``subprocess``."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from helperkit.config import get_settings
from helperkit.domain.errors import CommandFailedError
from helperkit.domain.value_objects import CommandResult
from helperkit.interfaces.redactor import Redactor

from .redactor import Redactor as RegexRedactor

logger = logging.getLogger(__name__)

CommandLine = str | Sequence[str | None]


class Command:
    """Execute shell commands with a timeout, working directory and environment.

    A string runs through the shell; a sequence runs directly, with empty
    items removed. Command lines are passed through ``redactor`` before they
    are logged.

    Args:
        timeout: Seconds before the process is killed; the configured
            ``command_timeout_seconds`` when omitted.
        working_directory: Directory to run the command in.
        env: Environment of the process; the current one when omitted.
        redactor: Masks secrets in logged command lines.
    """

    def __init__(
        self,
        timeout: float | None = None,
        working_directory: str | Path | None = None,
        env: Mapping[str, str] | None = None,
        redactor: Redactor | None = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else get_settings().command_timeout_seconds
        self.working_directory = working_directory
        self.env = dict(env) if env is not None else None
        self._redactor = redactor or RegexRedactor()

    def run(self, command: CommandLine, timeout: float | None = None) -> bool:
        """Run ``command`` and report whether it succeeded; errors are only logged."""
        return self.run_with_result(command, timeout).is_successful()

    def execute(self, command: CommandLine, timeout: float | None = None) -> str:
        """Run ``command`` and return its standard output.

        Raises:
            CommandFailedError: On a non-zero exit status or a timeout.
        """
        display = self._display(command)
        try:
            completed = self._spawn(command, timeout)
        except subprocess.TimeoutExpired as exc:
            logger.error("Command timed out after %ss: %s", exc.timeout, display)
            raise CommandFailedError(display, -1, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            logger.error("Command could not be started: %s (%s)", display, exc)
            raise CommandFailedError(display, -1, str(exc)) from exc

        logger.info("Executed command: %s", display)
        if completed.returncode != 0:
            logger.error(
                "Command failed with exit code %d: %s\n%s",
                completed.returncode,
                display,
                completed.stderr,
            )
            raise CommandFailedError(display, completed.returncode, completed.stderr)
        return completed.stdout

    def run_with_result(self, command: CommandLine, timeout: float | None = None) -> CommandResult:
        """Run ``command`` and capture everything; never raises for process errors."""
        display = self._display(command)
        try:
            completed = self._spawn(command, timeout)
        except (subprocess.SubprocessError, OSError) as exc:
            logger.error("Command execution exception: %s (%s)", display, exc)
            return CommandResult(False, "", str(exc), -1)

        logger.info("Executed command: %s", display)
        success = completed.returncode == 0
        if not success:
            logger.error(
                "Command failed with exit code %d: %s\n%s",
                completed.returncode,
                display,
                completed.stderr,
            )
        return CommandResult(success, completed.stdout, completed.stderr, completed.returncode)

    # --- Internal Helpers ---

    def _spawn(self, command: CommandLine, timeout: float | None) -> subprocess.CompletedProcess:
        if isinstance(command, str):
            args: str | list[str] = command
            shell = True
        else:
            args = [part for part in command if part]
            shell = False
        return subprocess.run(  # pylint: disable=subprocess-run-check
            args,
            shell=shell,
            cwd=self.working_directory,
            env=self.env,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout if timeout is not None else self.timeout,
        )

    def _display(self, command: CommandLine) -> str:
        if isinstance(command, str):
            line = command
        else:
            line = shlex.join(part for part in command if part)
        return self._redactor.sanitize_command(line)
