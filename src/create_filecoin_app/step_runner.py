"""Step runner: executes one pipeline step and classifies how it ended."""

import signal
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from create_filecoin_app.managed_subprocess import ManagedSubprocess

# Shell convention for "terminated by Ctrl+C".
SIGINT_EXIT_STATUS = 128 + signal.SIGINT


class CommandFailedError(RuntimeError):
    """A step command exited with a non-zero status."""

    def __init__(self, cmd: List[str], returncode: int):
        self.cmd = cmd
        self.returncode = returncode
        super().__init__(f"Command '{' '.join(cmd)}' exited with status {returncode}")


class CommandInterruptedError(RuntimeError):
    """A step command was stopped by a cancellation signal."""

    def __init__(self, cmd: List[str]):
        self.cmd = cmd
        super().__init__(f"Command '{' '.join(cmd)}' was interrupted")


def _was_interrupted(returncode: int) -> bool:
    return returncode in (-signal.SIGINT, SIGINT_EXIT_STATUS)


def run_command(cmd: List[str], cwd: Optional[str] = None) -> None:
    """Run a command with its output going straight to the terminal.

    Raises:
        CommandInterruptedError: Ctrl+C arrived while the command ran, or
            the command itself died of SIGINT.
        CommandFailedError: Any other non-zero exit status.
        FileNotFoundError: The executable does not exist.
    """
    process = None
    try:
        process = subprocess.Popen(cmd, cwd=cwd, start_new_session=True)
        with ManagedSubprocess(process, label=cmd[0]) as managed:
            process.wait()
    except KeyboardInterrupt:
        # Ctrl+C landed before the child was under management. It runs in
        # its own session and never saw the signal, so stop it here.
        if process is not None:
            ManagedSubprocess(process, label=cmd[0]).stop()
        raise CommandInterruptedError(cmd)

    if managed.interrupted or _was_interrupted(process.returncode):
        raise CommandInterruptedError(cmd)
    if process.returncode != 0:
        raise CommandFailedError(cmd, process.returncode)


class StepStatus(Enum):
    SUCCESS = "success"
    DOMAIN_FAILURE = "domain_failure"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class StepOutcome:
    status: StepStatus
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "StepOutcome":
        return cls(StepStatus.SUCCESS)

    @classmethod
    def failure(cls, message: str) -> "StepOutcome":
        return cls(StepStatus.DOMAIN_FAILURE, message)

    @classmethod
    def interrupted(cls) -> "StepOutcome":
        return cls(StepStatus.INTERRUPTED)


@dataclass(frozen=True)
class Step:
    """One unit of pipeline work.

    ``failure_prefix`` names the step in the error message shown to the
    user, e.g. "Failed to install packages".
    """

    name: str
    failure_prefix: str
    action: Callable[[], None]


class StepRunner:
    """Runs a step and turns its result into a StepOutcome.

    The runner never prompts and never retries; both are up to the caller.
    """

    def run(self, step: Step) -> StepOutcome:
        try:
            step.action()
        except (KeyboardInterrupt, CommandInterruptedError):
            return StepOutcome.interrupted()
        except Exception as exc:
            return StepOutcome.failure(f"{step.failure_prefix}: {exc}")
        return StepOutcome.success()
