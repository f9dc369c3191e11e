"""
Numeric category predicates: integers (ℤ), natural numbers (ℕ₀), positive
natural numbers (ℕ₁) and real numbers (ℝ).

Values are validated natively first. Numeric strings the native path rejects
fall back to the gmpy2 backend; without it a notice is emitted through the
settings and the predicate answers False.
"""

import math
import numbers
import re
from typing import Any, Optional

from . import bignum
from .config import DEFAULT_SCALE, DEFAULT_SETTINGS, Settings
from .errors import PredicateArgumentError
from .kinds import is_float, is_int, is_numeric
from .logging import get_logger

logger = get_logger(__name__)

# Integer text the native path accepts, no leading zeros
NATIVE_INTEGER_PATTERN = re.compile(r'\s*[+-]?(?:0|[1-9][0-9]*)\s*')


def _backend_ready(settings: Settings, message: str) -> bool:
    if settings.bignum_available and bignum.is_bignum_available():
        return True
    settings.notify(message)
    return False


def _native_integer(value: Any, settings: Settings) -> Optional[int]:
    if is_int(value):
        return int(value)

    if isinstance(value, str) and NATIVE_INTEGER_PATTERN.fullmatch(value):
        digits = value.strip().lstrip('+-')
        # Anything longer cannot fit and would trip int()'s digit limit
        if len(digits) > len(str(max(-settings.native_int_min, settings.native_int_max))):
            return None
        number = int(value)
        if settings.native_int_min <= number <= settings.native_int_max:
            return number

    return None


def _integer_value(value: Any, settings: Optional[Settings]) -> Optional[Any]:
    """Return the integer a value denotes, or None if it is not an integer."""
    if is_float(value) or not is_numeric(value):
        return None

    settings = DEFAULT_SETTINGS if settings is None else settings

    number = _native_integer(value, settings)
    if number is not None:
        return number

    if not isinstance(value, str):
        return None

    if not _backend_ready(settings, "gmpy2 is not installed, cannot assert big integers."):
        return None

    logger.debug(f"Falling back to gmpy2 for integer candidate {value[:40]!r}")
    return bignum.parse_integer(value)


def is_integer(value: Any, *, settings: Optional[Settings] = None) -> bool:
    """
    Return True if the value is an integer (ℤ).

    Float-typed values never qualify, even when integral. Integer strings of
    any magnitude are accepted when gmpy2 is available; strings with leading
    zeros such as "007" are rejected.
    """
    return _integer_value(value, settings) is not None


def is_natural_number(value: Any, *, settings: Optional[Settings] = None) -> bool:
    """Return True if the value is a natural number (ℕ₀), zero included."""
    number = _integer_value(value, settings)
    return number is not None and number >= 0


def is_positive_natural_number(value: Any, *, settings: Optional[Settings] = None) -> bool:
    """Return True if the value is a positive natural number (ℕ₁), zero excluded."""
    number = _integer_value(value, settings)
    return number is not None and number > 0


def is_scalar_natural_number(value: Any) -> bool:
    """Return True if the value is an int (no coercion) and not negative."""
    return is_int(value) and bool(value >= 0)


def is_scalar_positive_natural_number(value: Any) -> bool:
    """Return True if the value is an int (no coercion) greater than zero."""
    return is_int(value) and bool(value > 0)


def _native_real(value: Any) -> bool:
    if isinstance(value, numbers.Integral):
        return True
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (OverflowError, ValueError, TypeError):
        return False
    return math.isfinite(number)


def is_real_number(value: Any, scale: int = DEFAULT_SCALE, *, settings: Optional[Settings] = None) -> bool:
    """
    Return True if the value is a real number (ℝ).

    Finite native numbers qualify directly. Numeric strings beyond float range
    are parsed by gmpy2 with enough precision for `scale` fractional digits
    and must compare equal to themselves.

    Args:
        value: Value to examine
        scale: Fractional decimal digits kept by the big decimal check
        settings: Backend capability and notice channel, defaults to
            DEFAULT_SETTINGS

    Raises:
        PredicateArgumentError: If scale is not a natural number of type int
    """
    if not is_scalar_natural_number(scale):
        raise PredicateArgumentError("scale must be a natural number (ℕ₀) of type int")

    if not is_numeric(value):
        return False

    if _native_real(value):
        return True

    if not isinstance(value, str):
        return False

    settings = DEFAULT_SETTINGS if settings is None else settings
    if not _backend_ready(settings, "gmpy2 is not installed, cannot assert big floating-point numbers."):
        return False

    number = bignum.parse_decimal(value, scale)
    return number is not None and bignum.compare(number, number) == 0
