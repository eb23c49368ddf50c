"""Interruption coordinator: turns Ctrl+C into a confirmed resume/abort decision."""

import signal
import sys
import termios
from contextlib import contextmanager
from enum import Enum
from typing import Callable, TextIO

import click


class Decision(Enum):
    RESUME = "resume"
    ABORT = "abort"


def _default_confirm(message: str) -> bool:
    return click.confirm(message, default=False, err=True)


class InterruptionCoordinator:
    """Owns the guard that collapses a burst of Ctrl+C into one prompt.

    The SIGINT handler never talks to the user. It marks a decision as
    pending and raises KeyboardInterrupt, so the code that owns the running
    step reaches a suspension point and calls confirm_exit() on the main
    control path. While a decision is pending, further signals are absorbed.

    Args:
        confirm_fn: Callable(message) -> bool asking a yes/no question.
        output: Stream for interruption notices (defaults to stderr).
        stdin: Input stream whose terminal mode is restored before prompting.
    """

    def __init__(
        self,
        confirm_fn: Callable[[str], bool] = _default_confirm,
        output: TextIO = None,
        stdin: TextIO = None,
    ):
        self._confirm_fn = confirm_fn
        self._output = output
        self._stdin = stdin
        self._pending = False
        self._saved_tty_attrs = None

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stderr

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @contextmanager
    def installed(self):
        """Route SIGINT to this coordinator for the duration of the block.

        Also remembers the terminal's input mode so it can be restored
        before prompting. The previous SIGINT handler is put back on exit.
        """
        self._saved_tty_attrs = self._read_tty_attrs()
        original = signal.getsignal(signal.SIGINT)
        signal.signal(signal.SIGINT, self.handle_signal)
        try:
            yield self
        finally:
            signal.signal(signal.SIGINT, original)

    def is_pending(self) -> bool:
        return self._pending

    def notify(self):
        """Record a cancellation signal.

        Absorbed while a decision is already pending; otherwise marks one
        as pending and raises KeyboardInterrupt.
        """
        if self._pending:
            return
        self._pending = True
        raise KeyboardInterrupt

    def handle_signal(self, signum, frame):
        self.notify()

    def confirm_exit(self) -> Decision:
        """Ask whether to terminate, blocking until the user answers.

        Returns Decision.ABORT with the guard still set, so Ctrl+C during
        the caller's cleanup is absorbed. Returns Decision.RESUME with the
        guard cleared. Closed input counts as a request to terminate.
        """
        self._pending = True
        self._restore_input()
        print("\n\nInterruption detected!", file=self.output)
        try:
            should_exit = self._confirm_fn("Do you want to terminate the process?")
        except (click.Abort, EOFError):
            should_exit = True

        if should_exit:
            print("\nProcess terminated by user.", file=self.output)
            return Decision.ABORT

        print("\nContinuing process...", file=self.output)
        self._pending = False
        return Decision.RESUME

    def _read_tty_attrs(self):
        if not self.stdin.isatty():
            return None
        try:
            return termios.tcgetattr(self.stdin.fileno())
        except termios.error:
            return None

    def _restore_input(self):
        """Put stdin back into the mode it had before a step changed it."""
        if self._saved_tty_attrs is None:
            return
        try:
            termios.tcsetattr(self.stdin.fileno(), termios.TCSANOW, self._saved_tty_attrs)
        except termios.error:
            pass
