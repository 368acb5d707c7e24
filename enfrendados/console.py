"""Terminal helpers: colours, cursor control, key reading and screen clearing."""

from __future__ import annotations

import contextlib
import os
import select
import sys
import time
from enum import IntEnum
from typing import Iterator, Optional, TextIO

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - platforms without termios
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]


class Color(IntEnum):
    """Console colour codes (QBasic / Windows numbering)."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    GREY = 7
    DARKGREY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15


class Key(IntEnum):
    """Key codes returned by :meth:`Console.getkey`."""

    ESCAPE = 0
    ENTER = 1
    SPACE = 32
    INSERT = 2
    HOME = 3
    PGUP = 4
    DELETE = 5
    END = 6
    PGDOWN = 7
    UP = 14
    DOWN = 15
    LEFT = 16
    RIGHT = 17
    F1 = 18
    F2 = 19
    F3 = 20
    F4 = 21
    F5 = 22
    F6 = 23
    F7 = 24
    F8 = 25
    F9 = 26
    F10 = 27
    F11 = 28
    F12 = 29
    NUMDEL = 30
    NUMPAD0 = 31
    NUMPAD1 = 127
    NUMPAD2 = 128
    NUMPAD3 = 129
    NUMPAD4 = 130
    NUMPAD5 = 131
    NUMPAD6 = 132
    NUMPAD7 = 133
    NUMPAD8 = 134
    NUMPAD9 = 135


ANSI_CLS = "\033[2J\033[3J"
ANSI_CONSOLE_TITLE_PRE = "\033]0;"
ANSI_CONSOLE_TITLE_POST = "\007"
ANSI_ATTRIBUTE_RESET = "\033[0m"
ANSI_CURSOR_HIDE = "\033[?25l"
ANSI_CURSOR_SHOW = "\033[?25h"
ANSI_CURSOR_HOME = "\033[H"

_FOREGROUND = {
    Color.BLACK: "\033[22;30m",
    Color.BLUE: "\033[22;34m",
    Color.GREEN: "\033[22;32m",
    Color.CYAN: "\033[22;36m",
    Color.RED: "\033[22;31m",
    Color.MAGENTA: "\033[22;35m",
    Color.BROWN: "\033[22;33m",
    Color.GREY: "\033[22;37m",
    Color.DARKGREY: "\033[01;30m",
    Color.LIGHTBLUE: "\033[01;34m",
    Color.LIGHTGREEN: "\033[01;32m",
    Color.LIGHTCYAN: "\033[01;36m",
    Color.LIGHTRED: "\033[01;31m",
    Color.LIGHTMAGENTA: "\033[01;35m",
    Color.YELLOW: "\033[01;33m",
    Color.WHITE: "\033[01;37m",
}

# Only the eight dark colours have a background counterpart.
_BACKGROUND = {
    Color.BLACK: "\033[40m",
    Color.BLUE: "\033[44m",
    Color.GREEN: "\033[42m",
    Color.CYAN: "\033[46m",
    Color.RED: "\033[41m",
    Color.MAGENTA: "\033[45m",
    Color.BROWN: "\033[43m",
    Color.GREY: "\033[47m",
}

_PREFIX_ZERO = {
    71: Key.NUMPAD7,
    72: Key.NUMPAD8,
    73: Key.NUMPAD9,
    75: Key.NUMPAD4,
    77: Key.NUMPAD6,
    79: Key.NUMPAD1,
    80: Key.NUMPAD2,
    81: Key.NUMPAD3,
    82: Key.NUMPAD0,
    83: Key.NUMDEL,
}

_PREFIX_EXTENDED = {
    71: Key.HOME,
    72: Key.UP,
    73: Key.PGUP,
    75: Key.LEFT,
    77: Key.RIGHT,
    79: Key.END,
    80: Key.DOWN,
    81: Key.PGDOWN,
    82: Key.INSERT,
    83: Key.DELETE,
}

_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}


def ansi_color(c: int) -> str:
    """Return the ANSI foreground escape for colour ``c``, or "" if unknown."""
    try:
        return _FOREGROUND[Color(c)]
    except ValueError:
        return ""


def ansi_background_color(c: int) -> str:
    """Return the ANSI background escape for colour ``c``, or "" if unsupported."""
    try:
        return _BACKGROUND.get(Color(c), "")
    except ValueError:
        return ""


def msleep(ms: int) -> None:
    """Wait the given number of milliseconds."""
    time.sleep(ms / 1000)


def _as_key(code: int) -> int:
    try:
        return Key(code)
    except ValueError:
        return code


class Console:
    """An ANSI terminal bound to an output and an input text stream."""

    def __init__(self, out: Optional[TextIO] = None, inp: Optional[TextIO] = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.inp = inp if inp is not None else sys.stdin

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _input_is_tty(self) -> bool:
        try:
            return self.inp.isatty()
        except (AttributeError, ValueError):
            return False

    def cls(self) -> None:
        """Clear the screen and move the cursor home."""
        self._write(ANSI_CLS + ANSI_CURSOR_HOME)

    def locate(self, x: int, y: int) -> None:
        """Move the cursor to the 1-based column ``x`` and row ``y``."""
        self._write(f"\033[{y};{x}H")

    def set_color(self, c: int) -> None:
        """Change the foreground colour."""
        self._write(ansi_color(c))

    def set_background_color(self, c: int) -> None:
        """Change the background colour."""
        self._write(ansi_background_color(c))

    def reset_color(self) -> None:
        """Reset all text attributes."""
        self._write(ANSI_ATTRIBUTE_RESET)

    def set_string(self, text: str) -> None:
        """Print ``text`` and move the cursor back to where it started."""
        self._write(f"{text}\033[{len(text)}D")

    def set_char(self, ch: str) -> None:
        """Print one character without advancing the cursor."""
        if len(ch) != 1:
            raise ValueError("set_char expects exactly one character")
        self.set_string(ch)

    def set_cursor_visibility(self, visible: bool) -> None:
        """Show or hide the cursor."""
        self._write(ANSI_CURSOR_SHOW if visible else ANSI_CURSOR_HIDE)

    def hide_cursor(self) -> None:
        self.set_cursor_visibility(False)

    def show_cursor(self) -> None:
        self.set_cursor_visibility(True)

    @contextlib.contextmanager
    def cursor_hidden(self) -> Iterator["Console"]:
        """Hide the cursor for the duration of the block."""
        self.hide_cursor()
        try:
            yield self
        finally:
            self.show_cursor()

    def set_title(self, title: str) -> None:
        """Set the terminal window title."""
        self._write(ANSI_CONSOLE_TITLE_PRE + title + ANSI_CONSOLE_TITLE_POST)

    def getch(self) -> int:
        """Read one character without waiting for Return; raise EOFError at end of input."""
        if self._input_is_tty() and termios is not None:
            fd = self.inp.fileno()
            saved = termios.tcgetattr(fd)
            try:
                tty.setcbreak(fd)
                ch = os.read(fd, 1).decode(errors="replace")
            finally:
                termios.tcsetattr(fd, termios.TCSANOW, saved)
        else:
            ch = self.inp.read(1)
        if not ch:
            raise EOFError("no more input")
        return ord(ch)

    def _has_pending(self) -> bool:
        if not self._input_is_tty():
            return True
        try:
            ready, _, _ = select.select([self.inp], [], [], 0.0001)
        except (OSError, ValueError):
            return False
        return bool(ready)

    def getkey(self) -> int:
        """Read a key press and translate it to a :class:`Key` code where possible."""
        k = self.getch()
        if k == 0:
            kk = self.getch()
            return _PREFIX_ZERO.get(kk, _as_key(kk - 59 + Key.F1))
        if k == 224:
            kk = self.getch()
            return _PREFIX_EXTENDED.get(kk, _as_key(kk - 123 + Key.F1))
        if k == 13:
            return Key.ENTER
        if k in (27, 155):
            if not self._has_pending():
                return Key.ESCAPE
            try:
                second = self.getch()
            except EOFError:
                return Key.ESCAPE
            if second != ord("["):
                return Key.ESCAPE
            third = self.getch()
            return _ARROWS.get(chr(third), third)
        return k

    def anykey(self, message: Optional[str] = None) -> int:
        """Optionally print ``message``, then wait for a key and return it."""
        if message:
            self._write(message)
        return self.getch()

    def _terminal_size(self) -> Optional[os.terminal_size]:
        for stream in (self.inp, self.out):
            try:
                return os.get_terminal_size(stream.fileno())
            except (OSError, ValueError, AttributeError):
                continue
        return None

    def rows(self) -> int:
        """Number of rows in the terminal, or -1 if unknown."""
        size = self._terminal_size()
        return size.lines if size is not None else -1

    def cols(self) -> int:
        """Number of columns in the terminal, or -1 if unknown."""
        size = self._terminal_size()
        return size.columns if size is not None else -1