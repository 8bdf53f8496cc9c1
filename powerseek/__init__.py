"""Terminal battery telemetry dashboard."""
import logging

__version__ = "0.1.0"

# Nothing may write over the full-screen UI unless the caller configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
