"""
Intrinsic type and shape predicates.

Every function here is a pure check of a single value and returns a strict
bool. numpy scalar types are treated like their Python counterparts.
"""

import io
import mmap
import numbers
import re
import socket
from typing import Any

import numpy as np

# Decimal notation with optional sign, fraction and exponent
NUMERIC_PATTERN = re.compile(
    r'\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*'
)


def is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def is_float(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_string_with_content(value: Any) -> bool:
    return isinstance(value, str) and value != ''


def is_numeric(value: Any) -> bool:
    """Return True for non-bool real numbers and strings in numeric notation."""
    if is_bool(value):
        return False
    if isinstance(value, numbers.Real):
        return True
    return isinstance(value, str) and NUMERIC_PATTERN.fullmatch(value) is not None


def is_scalar(value: Any) -> bool:
    return is_bool(value) or is_int(value) or is_float(value) or is_string(value)


def is_array(value: Any) -> bool:
    """Return True for the native containers: list, tuple and dict."""
    return isinstance(value, (list, tuple, dict))


# OS-level handle types, open or closed
HANDLE_TYPES = (io.IOBase, mmap.mmap, socket.socket)


def is_resource(value: Any) -> bool:
    """Return True for an open OS-level handle (file object, socket or memory map)."""
    if isinstance(value, (io.IOBase, mmap.mmap)):
        return not value.closed
    if isinstance(value, socket.socket):
        return value.fileno() != -1
    return False


def is_stream_resource(value: Any) -> bool:
    return isinstance(value, io.IOBase) and not value.closed


def is_object(value: Any) -> bool:
    """
    Return True for values that are neither None, scalars, native containers
    nor OS handles. Closed handles are neither resources nor objects.
    """
    return (
        value is not None
        and not is_scalar(value)
        and not is_array(value)
        and not isinstance(value, HANDLE_TYPES)
    )


def is_callable(value: Any) -> bool:
    return callable(value)
