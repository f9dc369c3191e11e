"""
Type relationship predicates.

Target types may be given as a type, as an instance of the type, or by name.
Names are builtins ("int") or dotted paths ("collections.OrderedDict") and are
resolved by importing; names that do not resolve to a type never match.
Examined string values only name types of modules that are already loaded,
so examining data never triggers an import.
"""

import builtins
import pydoc
import sys
from typing import Any, Optional

from .errors import PredicateArgumentError, require_bool
from .logging import get_logger

logger = get_logger(__name__)


def resolve_type(name: str) -> Optional[type]:
    """Import and return the type a name refers to, or None."""
    if not name:
        return None
    try:
        target = pydoc.locate(name)
    except (pydoc.ErrorDuringImport, ImportError, ValueError) as exc:
        logger.debug(f"Could not resolve type name {name!r}: {exc}")
        return None
    return target if isinstance(target, type) else None


def loaded_type(name: str) -> Optional[type]:
    """Return the type a name refers to among builtins and loaded modules, or None."""
    module_name, _, attribute = name.rpartition('.')
    module = sys.modules.get(module_name) if module_name else builtins
    target = getattr(module, attribute, None) if module is not None and attribute else None
    return target if isinstance(target, type) else None


def target_type(cls: Any) -> Optional[type]:
    """
    Normalise a target given as type, instance or type name.

    Raises:
        PredicateArgumentError: If cls is None or an empty name
    """
    if cls is None:
        raise PredicateArgumentError("class must be a type, an object or a type name, got None")
    if isinstance(cls, type):
        return cls
    if isinstance(cls, str):
        if cls == '':
            raise PredicateArgumentError("class name must have content")
        return resolve_type(cls)
    return type(cls)


def _examined_type(value: Any, allow_string: bool) -> type:
    if allow_string and isinstance(value, str):
        resolved = loaded_type(value)
        if resolved is not None:
            return resolved
    if isinstance(value, type):
        return value
    return type(value)


def is_instance_of(value: Any, cls: Any, allow_string: bool = True) -> bool:
    """
    Return True if the value is an instance of the class.

    Args:
        value: Value to examine
        cls: Type, object or type name to test against
        allow_string: Whether a string value may name a builtin or loaded type; the
            check then tests whether that type is the class or derives from it

    Raises:
        PredicateArgumentError: If cls is None or empty, or allow_string is
            not a bool
    """
    target = target_type(cls)
    require_bool(allow_string, 'allow_string')
    if target is None:
        return False

    if allow_string and isinstance(value, str):
        resolved = loaded_type(value)
        if resolved is not None:
            return issubclass(resolved, target)
    return isinstance(value, target)


def is_subclass_of(value: Any, cls: Any, allow_string: bool = True) -> bool:
    """
    Return True if the value's class (or the value, when it is a class)
    strictly derives from cls. The class itself does not count.
    """
    target = target_type(cls)
    require_bool(allow_string, 'allow_string')
    if target is None:
        return False

    examined = _examined_type(value, allow_string)
    return examined is not target and issubclass(examined, target)
