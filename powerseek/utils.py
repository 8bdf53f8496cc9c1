"""Utility functions module"""
import os
import re
import unicodedata

from .config import *

_ANSI_RE = re.compile(r"\033\[[0-9;?]*[A-Za-z]")


def get_terminal_size():
    """Get terminal dimensions."""
    try:
        size = os.get_terminal_size()
        return size.columns, size.lines
    except OSError:
        return 100, 30


def strip_ansi(text):
    return _ANSI_RE.sub("", text)


def char_width(ch):
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def display_width(text):
    """Columns the text occupies on screen, ignoring color codes."""
    return sum(char_width(ch) for ch in strip_ansi(text))


def truncate(text, width):
    """Cut plain text to at most width columns."""
    out = []
    used = 0
    for ch in text:
        w = char_width(ch)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)


def fit(text, width):
    """Pad or cut text to exactly width columns."""
    current = display_width(text)
    if current > width:
        text = truncate(strip_ansi(text), width)
        current = display_width(text)
    return text + " " * (width - current)


def center(text, width):
    current = display_width(text)
    if current >= width:
        return fit(text, width)
    left = (width - current) // 2
    return " " * left + text + " " * (width - current - left)


def draw_bar(percent, width=20, color=C_GREEN, empty_char="░", fill_char="█"):
    """Draw a colored progress bar."""
    percent = max(0, min(100, percent))
    filled = int((percent / 100.0) * width)
    empty = width - filled
    return f"[{color}{fill_char * filled}{C_DIM}{empty_char * empty}{C_RESET}]"
