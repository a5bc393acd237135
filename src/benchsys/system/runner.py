"""External command execution with sentinel-based failure reporting."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class CommandResult:
    """Captured output and exit status of one command."""

    output: str
    exit_code: int


class CommandExecutor(Protocol):
    """Strategy that actually runs a command."""

    def __call__(self, command: str, args: Sequence[str]) -> CommandResult: ...


class SubprocessExecutor:
    """Run commands as real child processes."""

    def __call__(self, command: str, args: Sequence[str]) -> CommandResult:
        try:
            result = subprocess.run(
                [command, *args],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            # Missing executable, permission denied, ...
            return CommandResult(output=str(e), exit_code=127)

        output = result.stdout or ""
        if result.returncode != 0 and result.stderr:
            output = f"{output}{result.stderr}"
        return CommandResult(output=output, exit_code=result.returncode)


class CommandRunner:
    """Run external commands, returning ``"N/A"`` instead of raising."""

    def __init__(self, executor: Optional[CommandExecutor] = None) -> None:
        self.executor = executor or SubprocessExecutor()

    def run(self, command: str, args: Sequence[str]) -> str:
        """Run ``command`` with ``args`` and return its raw stdout.

        Returns:
            The unmodified standard output, or ``NOT_AVAILABLE`` when the
            command exits non-zero or cannot be executed.
        """
        cmdline = " ".join([command, *args])
        try:
            result = self.executor(command, list(args))
        except Exception as e:
            logger.warning(f"Failed to run '{cmdline}' for system information: {e}")
            return NOT_AVAILABLE

        if result.exit_code != 0:
            logger.warning(
                f"Something went wrong trying to get system information from "
                f"'{cmdline}' (exit code {result.exit_code}):\n{result.output}"
            )
            return NOT_AVAILABLE
        return result.output
