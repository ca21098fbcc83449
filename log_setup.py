"""
Logging for the station explorer page.

``streamlit run`` executes app.py again on every widget interaction, so the
stdout handler is tagged with a name and only attached on the first run of the
server process.
"""

import logging
import sys
from typing import Optional

from config import LOG_FORMAT, LOG_LEVEL

HANDLER_NAME = "station-explorer"

# Chatty on every rerun / file change
QUIET_LOGGERS = ("urllib3", "watchdog", "fsevents")


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Handler:
    """
    Attach the page's stdout handler to the root logger.

    Args:
        level: Log level name; defaults to ``config.LOG_LEVEL``
        format_string: Record format; defaults to ``config.LOG_FORMAT``
        force: Replace a handler left by an earlier run instead of reusing it

    Returns:
        The handler in place after the call
    """
    root = logging.getLogger()
    ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
    if ours and not force:
        return ours[0]
    for h in ours:
        root.removeHandler(h)
        h.close()

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(format_string or LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, (level or LOG_LEVEL).upper()))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
