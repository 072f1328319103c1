"""Confirmation input sources.

A live terminal answers with a single keystroke; piped or redirected input
is read a full line at a time. `get_confirmation_reader` picks one by asking
the stream whether it is a TTY.
"""

import sys
from typing import Optional, Protocol, TextIO

from rich.console import Console

from git_worktree_manager.logging_config import get_logger

logger = get_logger(__name__)


class ConfirmationReader(Protocol):
    # Raw terminal mode does not echo, so the caller shows the key
    needs_echo: bool

    def read_reply(self, prompt: str) -> str:
        """Show prompt, block until the user answers; return the raw reply ("" on EOF)."""
        ...


class LineReader:
    """Read one full line from a stream."""

    needs_echo = False

    def __init__(self, stream: TextIO, console: Optional[Console] = None):
        self.stream = stream
        self.console = console or Console()

    def read_reply(self, prompt: str) -> str:
        line = self.console.input(prompt, markup=False, stream=self.stream)
        return line.rstrip("\r\n")


class KeyReader:
    """Read a single keystroke from a terminal in raw mode."""

    needs_echo = True

    def __init__(self, stream: TextIO, console: Optional[Console] = None):
        self.stream = stream
        self.console = console or Console()

    def read_reply(self, prompt: str) -> str:
        import termios
        import tty

        self.console.print(prompt, end="", markup=False, highlight=False)
        fd = self.stream.fileno()
        old = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            key = self.stream.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old)
        return key


def get_confirmation_reader(
    stream: Optional[TextIO] = None, console: Optional[Console] = None
) -> ConfirmationReader:
    """Choose the reader for stream (defaults to sys.stdin)."""
    stream = stream if stream is not None else sys.stdin
    try:
        interactive = stream.isatty()
    except (AttributeError, ValueError):
        interactive = False

    if interactive and sys.platform != "win32":
        logger.debug("stdin is a terminal, reading a single key")
        return KeyReader(stream, console)
    logger.debug("stdin is not a terminal, reading a full line")
    return LineReader(stream, console)


def is_affirmative(reply: str) -> bool:
    """Only a lone y or Y confirms."""
    return reply.strip() in ("y", "Y")
