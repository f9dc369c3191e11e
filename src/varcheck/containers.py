"""
Traversal helpers: the element-wise applicator and container shape checks.

All-members predicates are built on `apply_callback`, so short-circuiting and
vacuous truth for empty containers are decided in one place.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Callable, Tuple

import numpy as np

from .errors import PredicateArgumentError, require_bool, require_callable
from .kinds import is_array, is_int


def is_traversable(value: Any) -> bool:
    """
    Return True for native containers and any other iterable, except text,
    byte strings and zero-dimensional numpy arrays.
    """
    if isinstance(value, (str, bytes, bytearray)):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return is_array(value) or isinstance(value, Iterable)


def _members(value: Any) -> Iterator[Tuple[Any, Any]]:
    """Yield (delta, member) pairs; mappings yield their keys as deltas."""
    if isinstance(value, Mapping):
        yield from value.items()
    else:
        yield from enumerate(value)


def apply_callback(value: Any, callback: Callable[..., Any], pass_delta: bool = False) -> bool:
    """
    Apply callback to all members of a traversable value.

    Args:
        value: Value to examine
        callback: Called with each member, and with the member's key or
            position as second argument when `pass_delta` is set. A falsy
            result aborts the iteration.
        pass_delta: Whether to pass the key or position to the callback

    Returns:
        False if the value is not traversable or the callback rejected a
        member, True otherwise (including for empty containers)

    Raises:
        PredicateArgumentError: If callback is not callable or pass_delta is
            not a bool
    """
    require_callable(callback, 'callback')
    require_bool(pass_delta, 'pass_delta')

    if not is_traversable(value):
        return False

    for delta, member in _members(value):
        result = callback(member, delta) if pass_delta else callback(member)
        if not result:
            return False
    return True


def is_strict_array(value: Any) -> bool:
    """
    Return True if the value is indexed continuously from 0 to its length.

    Lists, tuples and numpy arrays are never sparse and always qualify.
    Mappings may be sparse or keyed by anything, so every index below the
    mapping's length is looked up. None values count as present.
    """
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    if isinstance(value, (list, tuple)):
        return True
    if isinstance(value, Mapping):
        for index in range(len(value)):
            if index not in value:
                return False
        return True
    return False


def has_keys(value: Any, *keys: Any) -> bool:
    """
    Return True if a non-empty traversable value contains every key.

    Presence is checked, not truthiness. Sequences and numpy arrays expose
    their positions as keys; other traversables have no keys.

    Raises:
        PredicateArgumentError: If a key is unhashable
    """
    for key in keys:
        try:
            hash(key)
        except TypeError as exc:
            raise PredicateArgumentError(f"keys must be hashable, got {key!r}") from exc

    if not is_traversable(value):
        return False

    if isinstance(value, Mapping):
        return len(value) > 0 and all(key in value for key in keys)

    if isinstance(value, (Sequence, np.ndarray)):
        size = len(value)
        return size > 0 and all(is_int(key) and 0 <= key < size for key in keys)

    return False
