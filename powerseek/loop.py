"""Refresh/render loop"""
from .config import POLL_TIMEOUT
from .input import poll_key
from .ui import render


def run_loop(state, term, poll_timeout=POLL_TIMEOUT):
    """Refresh, paint, poll, dispatch until a quit key is seen."""
    while True:
        if state.should_refresh():
            state.refresh()

        render(state, term)

        # The poll window is the only place the loop waits
        key = poll_key(term, poll_timeout)
        if key is not None:
            state.handle_key(key)

        if state.exit_requested:
            break
