"""UI rendering module"""
from . import strings
from .config import *
from .telemetry import BatteryState
from .utils import center, display_width, draw_bar, fit, truncate

STATE_COLORS = {
    BatteryState.CHARGING: C_GREEN,
    BatteryState.DISCHARGING: C_YELLOW,
    BatteryState.FULL: C_CYAN,
    BatteryState.EMPTY: C_RED,
}


def charge_color(percentage):
    if percentage < 20:
        return C_RED
    if percentage < 50:
        return C_YELLOW
    return C_GREEN


def battery_lines(record):
    """The list entry for one battery, one string per row."""
    label = strings.state_label(record.state)
    color = STATE_COLORS.get(record.state)
    if color:
        label = f"{color}{label}{C_RESET}"

    lines = [
        strings.NAME_LINE.format(name=record.name),
        strings.STATE_LINE.format(state=label),
    ]

    if record.percentage > 0:
        pct = strings.PERCENTAGE_LINE.format(percentage=record.percentage)
        bar = draw_bar(record.percentage, CHARGE_BAR_WIDTH, charge_color(record.percentage))
        lines.append(f"{pct}  {bar}")

    lines.extend([
        strings.VOLTAGE_LINE.format(voltage=record.voltage),
        strings.CURRENT_LINE.format(current=record.current),
        strings.POWER_LINE.format(power=record.power),
        "",
    ])
    return lines


def battery_box(records, cols, height):
    """Bordered battery list filling exactly `height` rows."""
    if height < 2:
        return [""] * max(0, height)

    inner = max(0, cols - 2)
    title = truncate(strings.BATTERY_LIST_TITLE, inner)
    top = "┌" + title + "─" * (inner - display_width(title)) + "┐"

    content = []
    for record in records:
        content.extend(battery_lines(record))
    if not records:
        content.append(f"{C_DIM}{strings.NO_BATTERIES}{C_RESET}")

    rows = content[:height - 2]
    rows += [""] * (height - 2 - len(rows))

    lines = [top]
    lines.extend(f"│{fit(row, inner)}{C_RESET}│" for row in rows)
    lines.append("└" + "─" * inner + "┘")
    return lines


def build_frame(records, refresh_interval, cols, rows):
    """Build every line of the screen for the given terminal size."""
    lines = []

    # --- Title bar ---
    lines.append(f"{C_BOLD}{center(strings.TITLE, cols)}{C_RESET}")
    lines.extend([""] * (TITLE_HEIGHT - 1))

    # --- Battery list ---
    body_height = max(0, rows - TITLE_HEIGHT - FOOTER_HEIGHT)
    lines.extend(battery_box(records, cols, body_height))

    # --- Footer ---
    lines.append(f"{C_DIM}{'─' * cols}{C_RESET}")
    lines.append(center(strings.FOOTER.format(interval=refresh_interval), cols))
    lines.extend([""] * (FOOTER_HEIGHT - 2))

    return lines[:rows]


def render(state, term):
    """Paint the current snapshot."""
    cols, rows = term.size()

    # Detect terminal resize
    if (cols, rows) != state.prev_term_size:
        term.clear()
        state.prev_term_size = (cols, rows)

    term.draw(build_frame(state.records, state.refresh_interval, cols, rows))
