#
#     ___                          ____            _
#    / _ \___ _    _____ ____    / __/__ ___ ___ | |__
#   / ___/ _ \ |/|/ / -_) __/   _\ \/ -_) -_) _ \|  '_/
#  /_/   \___/__,__/\__/_/     /___/\__/\__/_//_/|_|\_\
#
import sys
import traceback

from powerseek.loop import run_loop
from powerseek.state import AppState
from powerseek.telemetry import HardwareQueryError, TelemetryReader, default_manager
from powerseek.terminal import Terminal, TerminalError


def main():
    """Run the dashboard. Returns the process exit code."""
    try:
        reader = TelemetryReader(default_manager())
    except HardwareQueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        with Terminal() as term:
            state = AppState(reader)
            run_loop(state, term)
    except TerminalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    except Exception as e:
        # The terminal has been restored by the time we get here
        print(f"CRASH: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
