"""
All-members predicates.

Each function applies one single-value predicate to every member of a
traversable value through `apply_callback`: non-traversables fail, empty
containers pass, and the first rejected member stops the iteration.
"""

import functools
from typing import Any, Callable, Optional, Pattern, Union

import numpy as np

from .config import DEFAULT_SCALE, Settings
from .containers import apply_callback, is_strict_array, is_traversable
from .errors import PredicateArgumentError, require_bool, require_string_with_content
from .kinds import (
    is_array,
    is_bool,
    is_callable,
    is_float,
    is_int,
    is_numeric,
    is_object,
    is_resource,
    is_scalar,
    is_stream_resource,
    is_string,
    is_string_with_content,
)
from .numeric import (
    is_integer,
    is_natural_number,
    is_positive_natural_number,
    is_real_number,
    is_scalar_natural_number,
    is_scalar_positive_natural_number,
)
from .objects import is_instance_of, is_subclass_of, target_type
from .strings import compile_pattern, contains, is_stringable, is_stringable_with_content, matches


def each(predicate: Callable[..., bool], name: str) -> Callable[..., bool]:
    """
    Build an all-members predicate from a single-value predicate.

    Keyword options given to the built function are forwarded to the
    predicate for every member.
    """
    def check(value: Any, **options: Any) -> bool:
        if options:
            return apply_callback(value, functools.partial(predicate, **options))
        return apply_callback(value, predicate)

    check.__name__ = check.__qualname__ = name
    check.__doc__ = f"Return True if every member of a traversable value satisfies {predicate.__name__}."
    return check


def _is_non_empty(member: Any) -> bool:
    if member is None:
        return False
    if isinstance(member, np.ndarray):
        return member.size > 0
    return bool(member)


has_arrays_only = each(is_array, 'has_arrays_only')
has_bools_only = each(is_bool, 'has_bools_only')
has_callables_only = each(is_callable, 'has_callables_only')
has_floats_only = each(is_float, 'has_floats_only')
has_ints_only = each(is_int, 'has_ints_only')
has_integers_only = each(is_integer, 'has_integers_only')
has_natural_numbers_only = each(is_natural_number, 'has_natural_numbers_only')
has_no_empty_values = each(_is_non_empty, 'has_no_empty_values')
has_numerics_only = each(is_numeric, 'has_numerics_only')
has_objects_only = each(is_object, 'has_objects_only')
has_positive_natural_numbers_only = each(is_positive_natural_number, 'has_positive_natural_numbers_only')
has_resources_only = each(is_resource, 'has_resources_only')
has_scalars_only = each(is_scalar, 'has_scalars_only')
has_scalar_natural_numbers_only = each(is_scalar_natural_number, 'has_scalar_natural_numbers_only')
has_scalar_positive_natural_numbers_only = each(
    is_scalar_positive_natural_number, 'has_scalar_positive_natural_numbers_only'
)
has_stream_resources_only = each(is_stream_resource, 'has_stream_resources_only')
has_strict_arrays_only = each(is_strict_array, 'has_strict_arrays_only')
has_strings_only = each(is_string, 'has_strings_only')
has_strings_with_content_only = each(is_string_with_content, 'has_strings_with_content_only')
has_stringables_only = each(is_stringable, 'has_stringables_only')
has_stringables_with_content_only = each(is_stringable_with_content, 'has_stringables_with_content_only')
has_traversables_only = each(is_traversable, 'has_traversables_only')


def has_real_numbers_only(value: Any, scale: int = DEFAULT_SCALE, *, settings: Optional[Settings] = None) -> bool:
    """Return True if every member is a real number (ℝ) at the given scale."""
    if not is_scalar_natural_number(scale):
        raise PredicateArgumentError("scale must be a natural number (ℕ₀) of type int")
    return apply_callback(value, functools.partial(is_real_number, scale=scale, settings=settings))


def has_instances_of_only(value: Any, cls: Any, allow_string: bool = True) -> bool:
    """Return True if every member is an instance of cls, see is_instance_of."""
    target = target_type(cls)
    require_bool(allow_string, 'allow_string')
    if target is None:
        return apply_callback(value, lambda member: False)
    return apply_callback(value, functools.partial(is_instance_of, cls=target, allow_string=allow_string))


def has_subclasses_of_only(value: Any, cls: Any, allow_string: bool = True) -> bool:
    """Return True if every member strictly derives from cls, see is_subclass_of."""
    target = target_type(cls)
    require_bool(allow_string, 'allow_string')
    if target is None:
        return apply_callback(value, lambda member: False)
    return apply_callback(value, functools.partial(is_subclass_of, cls=target, allow_string=allow_string))


def all_contain(value: Any, needle: str, case_sensitive: bool = False) -> bool:
    """Return True if every member contains the needle, see contains."""
    require_string_with_content(needle, 'needle')
    require_bool(case_sensitive, 'case_sensitive')
    return apply_callback(value, functools.partial(contains, needle=needle, case_sensitive=case_sensitive))


def all_match(value: Any, pattern: Union[str, Pattern[str]]) -> bool:
    """
    Return True if the pattern matches every member, see matches.

    Patterns use Python `re` syntax without PCRE delimiters.
    """
    regex = compile_pattern(pattern)
    return apply_callback(value, functools.partial(matches, pattern=regex))
