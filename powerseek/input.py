"""Keyboard input decoding"""

KEY_ENTER = "enter"
KEY_ESC = "esc"
KEY_CTRL_C = "ctrl+c"
KEY_EOF = "eof"
KEY_IGNORED = "ignored"

# Longest CSI parameter run we bother to swallow (e.g. "\x1b[1;5A")
_MAX_SEQUENCE = 8


def _consume_csi(term):
    """Swallow the parameters and final byte of a buffered CSI sequence."""
    for _ in range(_MAX_SEQUENCE):
        if not term.input_pending():
            break
        ch = term.read_char()
        if ch in ("", "\x1b"):
            # Not part of this sequence
            if ch:
                term.unread_char(ch)
            break
        if "@" <= ch <= "~":
            break


def _decode_escape(term):
    if not term.input_pending():
        return KEY_ESC
    ch = term.read_char()
    if ch == "[":
        _consume_csi(term)
        return KEY_IGNORED
    if ch == "O":
        # SS3: one final byte (F1-F4, keypad)
        if term.input_pending():
            term.read_char()
        return KEY_IGNORED
    # A separate key typed right after Escape
    if ch:
        term.unread_char(ch)
    return KEY_ESC


def decode_key(term, ch):
    """Translate one raw character (plus any trailing bytes) into a key name."""
    if ch == "":
        return KEY_EOF
    if ch in ("\r", "\n"):
        return KEY_ENTER
    if ch == "\x03":
        return KEY_CTRL_C
    if ch == "\x1b":
        return _decode_escape(term)
    if ch in ("\x00", "\xe0"):
        # Windows scan code prefix: arrows, function keys
        if term.input_pending():
            term.read_char()
        return KEY_IGNORED
    return ch


def poll_key(term, timeout):
    """Wait up to timeout seconds for a key. Returns the key name or None."""
    if not term.wait_for_input(timeout):
        return None
    return decode_key(term, term.read_char())
