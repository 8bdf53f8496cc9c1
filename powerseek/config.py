# ANSI Colors & Styling
C_RESET = "\033[0m"
C_RED = "\033[91m"
C_GREEN = "\033[92m"
C_YELLOW = "\033[93m"
C_CYAN = "\033[96m"
C_BOLD = "\033[1m"
C_DIM = "\033[2m"

# Terminal control
ALT_SCREEN_ON = "\033[?1049h"
ALT_SCREEN_OFF = "\033[?1049l"
CURSOR_HIDE = "\033[?25l"
CURSOR_SHOW = "\033[?25h"
CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"
ERASE_LINE = "\033[2K"

# Refresh interval, whole seconds
DEFAULT_REFRESH_INTERVAL = 2
MIN_REFRESH_INTERVAL = 1
MAX_REFRESH_INTERVAL = 10

# Input poll window per loop iteration (seconds)
POLL_TIMEOUT = 0.1

# Battery sources
POWER_SUPPLY_PATH = "/sys/class/power_supply"

# Layout
TITLE_HEIGHT = 3
FOOTER_HEIGHT = 3
CHARGE_BAR_WIDTH = 20
