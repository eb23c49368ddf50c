"""Ownership of the one external process a pipeline step runs.

Step commands (git clone, yarn install) are started in their own session,
so the terminal's Ctrl+C reaches only the CLI. Stopping the child is
therefore this module's job: when the coordinator's SIGINT handler raises
KeyboardInterrupt while a step is waiting, the child is terminated before
the confirmation question is shown, so its output no longer mixes with
the prompt. Ctrl+Z still suspends the child together with the CLI.
"""

import os
import signal
import subprocess

import click


class ManagedSubprocess:
    """Context manager around a running step process.

    On KeyboardInterrupt inside the block the child is stopped, the
    interrupt is suppressed and ``interrupted`` is set; the caller turns
    that into an interrupted step outcome.
    """

    def __init__(self, process: subprocess.Popen, label: str, terminate_timeout: float = 5.0):
        self.process = process
        self.label = label
        self.terminate_timeout = terminate_timeout
        self.interrupted = False
        self._saved_handlers = {}

    def _suspend_with_child(self, signum, frame):
        os.killpg(self.process.pid, signal.SIGTSTP)
        signal.signal(signal.SIGTSTP, signal.SIG_DFL)
        os.kill(os.getpid(), signal.SIGTSTP)

    def _resume_with_child(self, signum, frame):
        os.killpg(self.process.pid, signal.SIGCONT)
        signal.signal(signal.SIGTSTP, self._suspend_with_child)

    def __enter__(self) -> "ManagedSubprocess":
        for signum, handler in ((signal.SIGTSTP, self._suspend_with_child),
                                (signal.SIGCONT, self._resume_with_child)):
            self._saved_handlers[signum] = signal.signal(signum, handler)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            if exc_type is KeyboardInterrupt:
                self.stop()
                return True
            return False
        finally:
            for signum, handler in self._saved_handlers.items():
                signal.signal(signum, handler)
            self._saved_handlers.clear()

    def stop(self):
        """Terminate the child, killing it if it outlives terminate_timeout."""
        click.echo(f"\nStopping {self.label}...", err=True)
        self.process.terminate()
        try:
            self.process.wait(timeout=self.terminate_timeout)
        except subprocess.TimeoutExpired:
            click.echo(f"{self.label} did not stop, killing it.", err=True)
            self.process.kill()
            self.process.wait()
        self.interrupted = True
