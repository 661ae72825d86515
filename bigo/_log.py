"""Package logger.

Usage from any module::

    from ._log import log

    log.debug("parsed %r", text)

Silent unless enabled through the environment::

    BIGO_LOG=DEBUG streamlit run bigo_visualizer.py   # all messages
    BIGO_LOG=INFO  streamlit run bigo_visualizer.py   # info and above
    BIGO_LOG=1     streamlit run bigo_visualizer.py   # alias for DEBUG

or programmatically with ``configure("DEBUG")``.
"""

import logging
import os

from .config import LOG_ENV_VAR

log = logging.getLogger("bigo")
log.addHandler(logging.NullHandler())

_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
}
_RESET = "\033[0m"
_ALIASES = {"1": "DEBUG", "0": "WARNING", "TRUE": "DEBUG", "FALSE": "WARNING"}


class ColoredFormatter(logging.Formatter):
    """Colour the level name when the handler writes to a terminal."""

    def __init__(self, fmt, stream):
        super().__init__(fmt)
        self._tty = hasattr(stream, "isatty") and stream.isatty()

    def format(self, record):
        text = super().format(record)
        if not self._tty:
            return text
        color = _COLORS.get(record.levelname, "")
        return text.replace(record.levelname, f"{color}{record.levelname}{_RESET}", 1)


def _resolve_level(value):
    value = str(value).strip().upper()
    value = _ALIASES.get(value, value)
    level = getattr(logging, value, None)
    return level if isinstance(level, int) else None


def configure(level) -> bool:
    """Set the package log level and attach a stream handler once.

    Returns False when ``level`` is not a recognised level name.
    """
    resolved = _resolve_level(level)
    if resolved is None:
        return False
    log.setLevel(resolved)
    if not any(isinstance(h, logging.StreamHandler) for h in log.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            ColoredFormatter("[bigo %(levelname)s] %(message)s (%(filename)s:%(lineno)d)", handler.stream)
        )
        log.addHandler(handler)
    return True


_level_str = os.environ.get(LOG_ENV_VAR, "")
if _level_str.strip():
    configure(_level_str)
