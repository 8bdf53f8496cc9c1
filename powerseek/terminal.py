"""Terminal mode handling and raw I/O"""
import codecs
import os
import sys
import time

from .config import *
from .utils import get_terminal_size

if os.name == "nt":
    import msvcrt
    _TTY_ERRORS = ()
else:
    import select
    import termios
    import tty
    _TTY_ERRORS = (termios.error,)


class TerminalError(Exception):
    """The terminal could not be switched into dashboard mode."""


class Terminal:
    """Raw mode + alternate screen for the lifetime of a ``with`` block.

    Leaving the block restores the terminal exactly once, whatever the exit path.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self._saved_attrs = None
        self._active = False
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pushback = []

    def __enter__(self):
        try:
            if os.name == "nt":
                # Enable ANSI processing in the Windows console
                os.system("")
            else:
                fd = self.stdin.fileno()
                self._saved_attrs = termios.tcgetattr(fd)
                tty.setraw(fd)
            self._active = True
            self.stdout.write(ALT_SCREEN_ON + CURSOR_HIDE + CLEAR_SCREEN)
            self.stdout.flush()
        except (OSError, ValueError) + _TTY_ERRORS as e:
            if self._saved_attrs is not None:
                self._active = True
            self.restore()
            raise TerminalError(f"cannot set up terminal: {e}") from e
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False

    def restore(self):
        if not self._active:
            return
        self._active = False
        try:
            self.stdout.write(C_RESET + CURSOR_SHOW + ALT_SCREEN_OFF)
            self.stdout.flush()
        finally:
            if self._saved_attrs is not None:
                termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
                self._saved_attrs = None

    @property
    def active(self):
        return self._active

    def size(self):
        return get_terminal_size()

    def clear(self):
        self.stdout.write(CLEAR_SCREEN)

    def draw(self, lines):
        """Paint a full frame from the top-left corner."""
        # Erase first: after a full-width line the cursor still sits on its last column
        # Raw mode disables output post-processing, so lines need an explicit \r
        self.stdout.write(CURSOR_HOME)
        self.stdout.write("\r\n".join(ERASE_LINE + line for line in lines))
        self.stdout.flush()

    # --- input ---

    def unread_char(self, ch):
        """Push a character back so the next read returns it."""
        self._pushback.append(ch)

    def input_pending(self):
        if self._pushback:
            return True
        if os.name == "nt":
            return msvcrt.kbhit()
        ready, _, _ = select.select([self.stdin.fileno()], [], [], 0)
        return bool(ready)

    def wait_for_input(self, timeout):
        """Block for at most timeout seconds until a key is available."""
        if self._pushback:
            return True
        if os.name == "nt":
            poll_end = time.time() + timeout
            while time.time() < poll_end:
                if msvcrt.kbhit():
                    return True
                time.sleep(0.02)
            return msvcrt.kbhit()
        ready, _, _ = select.select([self.stdin.fileno()], [], [], timeout)
        return bool(ready)

    def read_char(self):
        if self._pushback:
            return self._pushback.pop()
        if os.name == "nt":
            return msvcrt.getwch()
        fd = self.stdin.fileno()
        while True:
            data = os.read(fd, 1)
            if not data:
                return ""
            ch = self._decoder.decode(data)
            if ch:
                return ch
