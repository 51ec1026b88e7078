"""Terminal control: cursor, clearing and size queries behind one interface.

The galaxy only ever sees ``write_frame``; which implementation is active
depends on the platform (see ``get_terminal``).
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from typing import TextIO

from .constants import FALLBACK_TERMINAL_SIZE

logger = logging.getLogger(__name__)

CURSOR_HOME = "\033[H"
CURSOR_HIDE = "\033[?25l"
CURSOR_SHOW = "\033[?25h"
CLEAR_SCREEN = "\033[2J"


class TerminalError(Exception):
    """The terminal cannot host the animation."""


class Terminal:
    """ANSI/VT100 terminal on a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def hide_cursor(self) -> None:
        self._emit(CURSOR_HIDE)

    def show_cursor(self) -> None:
        self._emit(CURSOR_SHOW)

    def clear(self) -> None:
        self._emit(CLEAR_SCREEN + CURSOR_HOME)

    def size(self) -> tuple[int, int]:
        """(columns, rows) of the terminal window, or 120x40 when it cannot be read.

        Windows consoles are measured the same way; ``shutil`` asks the
        console itself, so there is no separate screen-buffer query.
        """
        columns, rows = shutil.get_terminal_size(FALLBACK_TERMINAL_SIZE)
        return columns, rows

    def write_frame(self, text: str) -> None:
        """Redraw from the top-left corner in a single write."""
        self._emit(CURSOR_HOME + text)


class WindowsTerminal(Terminal):
    """Windows console: clears with ``cls`` and turns on VT escape handling."""

    _ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
    _STD_OUTPUT_HANDLE = -11

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(stream)
        self._enable_vt_mode()

    def _enable_vt_mode(self) -> None:
        import ctypes

        kernel32 = ctypes.windll.kernel32
        handle = kernel32.GetStdHandle(self._STD_OUTPUT_HANDLE)
        mode = ctypes.c_uint32()
        if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            # Not a console (redirected output); nothing to enable
            logger.debug("stdout is not a Windows console, VT mode unchanged")
            return
        kernel32.SetConsoleMode(handle, mode.value | self._ENABLE_VIRTUAL_TERMINAL_PROCESSING)

    def clear(self) -> None:
        self.stream.flush()
        os.system("cls")


def get_terminal(stream: TextIO | None = None) -> Terminal:
    """Terminal implementation for the running platform."""
    if sys.platform == "win32":
        return WindowsTerminal(stream)
    return Terminal(stream)
