"""User-facing message output for the CLI.

Informational messages go to stdout with an ``I:`` prefix; warnings and
errors go to stderr with ``W:`` and ``E:`` prefixes. Message text is never
interpreted as Rich markup, so values such as ``[auto manual]`` print as-is.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.text import Text

_logger = logging.getLogger("rosa")


class Reporter:
    """Prefix-style reporter mirroring the terse output of cloud CLIs."""

    def _console(self, stderr: bool = False) -> Console:
        # Resolved per call so redirected streams (tests, pipes) are honoured.
        return Console(stderr=stderr, highlight=False, soft_wrap=True)

    def _emit(self, prefix: str, style: str, message: str, *, stderr: bool) -> None:
        text = Text(prefix, style=style)
        text.append(message)
        self._console(stderr=stderr).print(text)

    def is_terminal(self) -> bool:
        """Return whether stdout is attached to an interactive terminal."""
        return bool(getattr(sys.stdout, "isatty", None) and sys.stdout.isatty())

    def debug(self, message: str) -> None:
        _logger.debug(message)

    def info(self, message: str) -> None:
        self._emit("I: ", "bold green", message, stderr=False)

    def warn(self, message: str) -> None:
        self._emit("W: ", "bold yellow", message, stderr=True)

    def error(self, message: str) -> None:
        self._emit("E: ", "bold red", message, stderr=True)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Show an info line and a spinner while the block runs.

        Outside a terminal the block runs silently.
        """
        if not self.is_terminal():
            yield
            return
        self.info(message)
        with self._console().status("", spinner="dots"):
            yield


_REPORTER = Reporter()


def get_reporter() -> Reporter:
    return _REPORTER
