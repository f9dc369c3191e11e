"""
varcheck: variable examination predicates for assert statements.

Every predicate returns True if the examined value complies with its rules
and False otherwise. Only malformed configuration arguments (needles,
patterns, scales, flags) raise PredicateArgumentError.
"""

from .config import DEFAULT_SCALE, DEFAULT_SETTINGS, Settings
from .containers import apply_callback, has_keys, is_strict_array, is_traversable
from .errors import PredicateArgumentError
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
from .members import (
    all_contain,
    all_match,
    each,
    has_arrays_only,
    has_bools_only,
    has_callables_only,
    has_floats_only,
    has_instances_of_only,
    has_integers_only,
    has_ints_only,
    has_natural_numbers_only,
    has_no_empty_values,
    has_numerics_only,
    has_objects_only,
    has_positive_natural_numbers_only,
    has_real_numbers_only,
    has_resources_only,
    has_scalar_natural_numbers_only,
    has_scalar_positive_natural_numbers_only,
    has_scalars_only,
    has_stream_resources_only,
    has_strict_arrays_only,
    has_stringables_only,
    has_stringables_with_content_only,
    has_strings_only,
    has_strings_with_content_only,
    has_subclasses_of_only,
    has_traversables_only,
)
from .numeric import (
    is_integer,
    is_natural_number,
    is_positive_natural_number,
    is_real_number,
    is_scalar_natural_number,
    is_scalar_positive_natural_number,
)
from .objects import is_instance_of, is_subclass_of
from .strings import Stringable, contains, is_stringable, is_stringable_with_content, matches

__all__ = [
    # Configuration
    "DEFAULT_SCALE",
    "DEFAULT_SETTINGS",
    "Settings",
    "PredicateArgumentError",
    # Applicator
    "apply_callback",
    "each",
    # Type and shape
    "is_array",
    "is_bool",
    "is_callable",
    "is_float",
    "is_int",
    "is_numeric",
    "is_object",
    "is_resource",
    "is_scalar",
    "is_stream_resource",
    "is_string",
    "is_string_with_content",
    # Containers
    "has_keys",
    "is_strict_array",
    "is_traversable",
    # Numbers
    "is_integer",
    "is_natural_number",
    "is_positive_natural_number",
    "is_real_number",
    "is_scalar_natural_number",
    "is_scalar_positive_natural_number",
    # Text and objects
    "Stringable",
    "contains",
    "is_instance_of",
    "is_stringable",
    "is_stringable_with_content",
    "is_subclass_of",
    "matches",
    # All members
    "all_contain",
    "all_match",
    "has_arrays_only",
    "has_bools_only",
    "has_callables_only",
    "has_floats_only",
    "has_instances_of_only",
    "has_integers_only",
    "has_ints_only",
    "has_natural_numbers_only",
    "has_no_empty_values",
    "has_numerics_only",
    "has_objects_only",
    "has_positive_natural_numbers_only",
    "has_real_numbers_only",
    "has_resources_only",
    "has_scalar_natural_numbers_only",
    "has_scalar_positive_natural_numbers_only",
    "has_scalars_only",
    "has_stream_resources_only",
    "has_strict_arrays_only",
    "has_stringables_only",
    "has_stringables_with_content_only",
    "has_strings_only",
    "has_strings_with_content_only",
    "has_subclasses_of_only",
    "has_traversables_only",
]
