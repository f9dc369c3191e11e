"""Precondition checks for predicate configuration arguments."""

from typing import Any


class PredicateArgumentError(ValueError):
    """Raised when a predicate is called with a malformed configuration argument."""


def require_bool(value: Any, name: str) -> None:
    if not isinstance(value, bool):
        raise PredicateArgumentError(f"{name} must be of type bool, got {type(value).__name__}")


def require_string_with_content(value: Any, name: str) -> None:
    if not isinstance(value, str) or value == '':
        raise PredicateArgumentError(f"{name} must be of type str and have content")


def require_callable(value: Any, name: str) -> None:
    if not callable(value):
        raise PredicateArgumentError(f"{name} must be callable, got {type(value).__name__}")
