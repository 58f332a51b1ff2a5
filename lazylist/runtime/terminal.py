"""Terminal session control for the list view.

Owns raw-mode lifecycle, the alternate screen and output of composed frames.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

FALLBACK_SIZE = os.terminal_size((80, 24))


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Alternate screen, hidden cursor, cleared once; frames only repaint rows.
        self.write("\x1b[?1049h\x1b[?25l\x1b[2J")

    def disable_tui_mode(self) -> None:
        self.write("\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> os.terminal_size:
        try:
            return os.get_terminal_size(self.stdout_fd)
        except OSError:
            return FALLBACK_SIZE

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        self.enable_tui_mode()
        try:
            yield self
        finally:
            self.disable_tui_mode()
