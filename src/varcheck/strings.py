"""
Text shape predicates: stringables, substring search and pattern matching.
"""

import abc
import re
from typing import Any, Optional, Pattern, Union

import numpy as np

from .errors import PredicateArgumentError, require_bool, require_string_with_content
from .kinds import is_bool, is_scalar, is_string

# Their __str__ renders a repr, not their content
REPR_ONLY_TYPES = (bytes, bytearray, memoryview, np.ndarray)


class Stringable(abc.ABC):
    """
    Capability of converting to a meaningful string.

    Classes opt in by subclassing or registering. A class that defines its
    own __str__ somewhere below object is recognised without opting in.
    """

    @abc.abstractmethod
    def __str__(self) -> str:
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Stringable:
            for klass in subclass.__mro__:
                if klass is object:
                    break
                if '__str__' in klass.__dict__:
                    return klass.__dict__['__str__'] is not None
        return NotImplemented


def is_stringable(value: Any) -> bool:
    """
    Return True for strings and objects with a string conversion.

    Byte strings and numpy arrays are excluded, their conversion is a repr.
    """
    if is_string(value):
        return True
    if value is None or is_scalar(value) or isinstance(value, REPR_ONLY_TYPES):
        return False
    return isinstance(value, Stringable)


def _convert(value: Any) -> Optional[str]:
    try:
        return str(value)
    except Exception:
        return None


def is_stringable_with_content(value: Any) -> bool:
    if not is_stringable(value):
        return False
    text = _convert(value)
    return text is not None and text != ''


def _as_text(value: Any) -> Optional[str]:
    """Text of a non-bool scalar or stringable, None for anything else."""
    if is_bool(value):
        return None
    if is_scalar(value) or is_stringable(value):
        return _convert(value)
    return None


def contains(value: Any, needle: str, case_sensitive: bool = False) -> bool:
    """
    Return True if the value's text contains the needle.

    Args:
        value: Non-bool scalar or stringable to search in
        needle: Non-empty substring to look for
        case_sensitive: Whether letter case must match, off by default

    Raises:
        PredicateArgumentError: If needle is not a non-empty str or
            case_sensitive is not a bool
    """
    require_string_with_content(needle, 'needle')
    require_bool(case_sensitive, 'case_sensitive')

    text = _as_text(value)
    if text is None:
        return False

    if case_sensitive:
        return needle in text
    return needle.lower() in text.lower()


def compile_pattern(pattern: Union[str, Pattern[str]]) -> Pattern[str]:
    """
    Compile a regular expression given as text, passing compiled ones through.

    Raises:
        PredicateArgumentError: If the pattern is empty, not text or invalid
    """
    if isinstance(pattern, re.Pattern):
        if not isinstance(pattern.pattern, str):
            raise PredicateArgumentError("pattern must be compiled from str, not bytes")
        return pattern

    require_string_with_content(pattern, 'pattern')
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PredicateArgumentError(f"Invalid regular expression {pattern!r}: {exc}") from exc


def matches(value: Any, pattern: Union[str, Pattern[str]]) -> bool:
    r"""
    Return True if the pattern matches anywhere in the value's text.

    Patterns use Python `re` syntax without PCRE delimiters: write
    r"^\d{4}$", not "/^\d{4}$/".
    """
    regex = compile_pattern(pattern)

    text = _as_text(value)
    if text is None:
        return False
    return regex.search(text) is not None
