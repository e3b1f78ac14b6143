"""Minimal levelled console logger writing straight to standard output."""

import sys

_MAX_LEVEL = 9
_level = 1


def log(level, message):
    """Write ``message`` to stdout if ``level`` does not exceed the current level."""
    if level <= _level:
        sys.stdout.write(message)
        sys.stdout.flush()


def set_log_level(level):
    """Set the active log level, clamped to at most 9."""
    global _level
    if level < 0:
        raise ValueError("log level must not be negative")
    _level = min(level, _MAX_LEVEL)


def get_log_level():
    """Return the active log level."""
    return _level