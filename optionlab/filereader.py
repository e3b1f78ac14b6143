"""Helpers for reading files and converting text fields to numbers."""

import re

from .logger import log

_DOUBLE_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def read_file_into_string(path):
    """Return the whole contents of the file at ``path``.

    Raises OSError if the file cannot be opened.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        log(1, f"read_file_into_string: Could not open the file - {path}\n")
        raise OSError(f"Could not open file: {path}") from exc


def _split_number(text, pattern):
    """Return the leading number matched by ``pattern`` and the rest, or None."""
    stripped = text.lstrip()
    match = pattern.match(stripped)
    if match is None:
        return None
    return match.group(0), stripped[match.end():]


def string_to_double(text):
    """Convert ``text`` to a float, rejecting trailing non-space characters."""
    parts = _split_number(text, _DOUBLE_PREFIX)
    if parts is None:
        log(1, "string_to_double: Error with string to double conversion.\n")
        raise ValueError("String is not a valid double.")
    number, rest = parts
    if rest.strip():
        log(1, "string_to_double: Error with string to double conversion.\n")
        raise ValueError("String contains non-numeric characters after the double.")
    return float(number)


def string_to_int(text):
    """Convert ``text`` to a 32-bit integer, rejecting trailing non-space characters."""
    parts = _split_number(text, _INT_PREFIX)
    value = int(parts[0]) if parts is not None else None
    if value is None or not _INT_MIN <= value <= _INT_MAX:
        log(1, "string_to_int: Error with string to int conversion.\n")
        raise ValueError("String is not a valid integer.")
    if parts[1].strip():
        log(1, "string_to_int: Error with string to int conversion.\n")
        raise ValueError("String contains non-numeric characters after the integer.")
    return value