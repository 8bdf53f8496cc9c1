"""Application state container"""
import logging
import time

from .config import DEFAULT_REFRESH_INTERVAL, MIN_REFRESH_INTERVAL, MAX_REFRESH_INTERVAL
from .input import KEY_ENTER, KEY_ESC, KEY_CTRL_C, KEY_EOF
from .telemetry import HardwareQueryError

logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", KEY_ESC, KEY_CTRL_C, KEY_EOF)
REFRESH_KEYS = ("r", KEY_ENTER)


def clamp_interval(seconds):
    return max(MIN_REFRESH_INTERVAL, min(seconds, MAX_REFRESH_INTERVAL))


class AppState:
    def __init__(self, reader, clock=time.monotonic, refresh_interval=DEFAULT_REFRESH_INTERVAL):
        self.reader = reader
        self.clock = clock

        # Data
        self.records = ()
        self.refresh_interval = clamp_interval(refresh_interval)
        self.last_refresh = clock()
        self.exit_requested = False

        # Internal tracking
        self.prev_term_size = (0, 0)

        self.refresh()

    def refresh(self):
        """Replace the snapshot with a fresh read. On failure the old snapshot stays."""
        try:
            self.records = tuple(self.reader.read_all())
        except HardwareQueryError as e:
            logger.debug("Refresh failed, keeping previous snapshot: %s", e)
        self.last_refresh = self.clock()

    def should_refresh(self):
        return self.clock() - self.last_refresh >= self.refresh_interval

    def increase_interval(self):
        self.refresh_interval = clamp_interval(self.refresh_interval + 1)

    def decrease_interval(self):
        self.refresh_interval = clamp_interval(self.refresh_interval - 1)

    def handle_key(self, key):
        """Apply one decoded key. Unbound keys are ignored."""
        if key in QUIT_KEYS:
            self.exit_requested = True
        elif key in REFRESH_KEYS:
            self.refresh()
        elif key == "+":
            self.increase_interval()
        elif key == "-":
            self.decrease_interval()
