"""Terminal helpers: colours, console I/O, timing, randomness and text checks."""

from __future__ import annotations

import os
import random
import select
import string
import subprocess
import sys
import time
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, TextIO

try:
    import termios
except ImportError:
    termios = None

try:
    import msvcrt
except ImportError:
    msvcrt = None


class Color(str, Enum):
    """ANSI colour escape sequences."""

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    RESET = "\033[0m"

    def __str__(self) -> str:
        return self.value


class Console:
    """Line-oriented terminal input and output.

    When ``interactive`` is false, clearing the screen and pausing are skipped,
    which keeps scripted sessions fast.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        interactive: Optional[bool] = None,
    ) -> None:
        if interactive is None:
            interactive = stdin is None and stdout is None
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.interactive = interactive

    def read_line(self, prompt: str = "") -> str:
        """Show ``prompt`` and return the next line without its newline.

        Raises EOFError when the input is exhausted.
        """
        if prompt:
            self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("input closed")
        return line[:-1] if line.endswith("\n") else line

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def clear(self) -> None:
        if self.interactive:
            clear_screen()

    def pause(self, seconds: float) -> None:
        if self.interactive:
            sleep(seconds)


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def sleep(seconds: float) -> None:
    time.sleep(seconds)


def sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


def random_int(low: int, high: int) -> int:
    """Return a uniformly chosen integer in ``[low, high]``."""
    return random.randint(low, high)


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(" \t\n\r")


def is_digit(text: str) -> bool:
    """True if ``text`` is non-empty and made of ASCII digits only."""
    return bool(text) and all(c in string.digits for c in text)


def is_alpha(text: str) -> bool:
    """True if ``text`` is non-empty and made of ASCII letters only."""
    return bool(text) and all(c in string.ascii_letters for c in text)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters, leaving every other character alone."""
    return "".join(c.upper() if c.isascii() else c for c in text)


def kbhit() -> bool:
    """True if a key press is waiting on standard input."""
    if msvcrt is not None:
        return bool(msvcrt.kbhit())
    ready, _, _ = select.select([sys.stdin], [], [], 0)
    return bool(ready)


def getch() -> str:
    """Read one character from standard input; empty string if none."""
    if msvcrt is not None:
        return msvcrt.getwch()
    data = os.read(sys.stdin.fileno(), 1)
    return data.decode("latin-1") if data else ""


@contextmanager
def non_blocking_input() -> Iterator[None]:
    """Turn off line buffering and echo on the terminal for the block."""
    if termios is None or not sys.stdin.isatty():
        yield
        return
    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)