"""
Optional arbitrary-precision backend built on gmpy2.

Numeric strings that the native fast path cannot represent are validated
here. Availability is probed once when this module is imported; callers
decide how to degrade when the backend is missing.
"""

import math
import re
from typing import Any, Optional

from .logging import get_logger

logger = get_logger(__name__)

try:
    import gmpy2  # type: ignore[import]
except ImportError:
    gmpy2 = None

# Canonical integer text, leading zeros are malformed (never octal)
BIG_INTEGER_PATTERN = re.compile(r'[+-]?[1-9][0-9]*')

# Decimal text split into sign, integer part, fraction and exponent
BIG_DECIMAL_PATTERN = re.compile(
    r'(?P<sign>[+-]?)(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?:[eE](?P<exp>[+-]?[0-9]+))?'
)

# mpfr refuses precisions below this
MIN_PRECISION_BITS = 2


def is_bignum_available() -> bool:
    """Return True if gmpy2 could be imported."""
    return gmpy2 is not None


def parse_integer(text: str) -> Optional[Any]:
    """
    Parse integer text of any magnitude.

    Args:
        text: Numeric string, surrounding whitespace is ignored

    Returns:
        gmpy2.mpz value, or None if the text is not a canonical integer
    """
    candidate = text.strip()
    if BIG_INTEGER_PATTERN.fullmatch(candidate) is None:
        logger.debug(f"Rejected big integer candidate: {candidate[:40]!r}")
        return None

    return gmpy2.mpz(candidate.lstrip('+'), 10)


def precision_bits(integer_digits: int, scale: int) -> int:
    """Binary precision needed to hold the integer digits plus `scale` fractional digits."""
    return max(MIN_PRECISION_BITS, math.ceil((integer_digits + scale) * math.log2(10)) + 1)


def parse_decimal(text: str, scale: int) -> Optional[Any]:
    """
    Parse decimal text at a precision large enough for `scale` fractional digits.

    Args:
        text: Numeric string, surrounding whitespace is ignored
        scale: Number of fractional decimal digits to preserve

    Returns:
        Finite gmpy2.mpfr value, or None if the text cannot be represented
    """
    match = BIG_DECIMAL_PATTERN.fullmatch(text.strip())
    if match is None or not (match.group('int') or match.group('frac')):
        return None

    integer_part = match.group('int') or '0'
    canonical = f"{match.group('sign')}{integer_part}.{match.group('frac') or '0'}"
    if match.group('exp') is not None:
        canonical += f"e{match.group('exp')}"

    try:
        number = gmpy2.mpfr(canonical.lstrip('+'), precision_bits(len(integer_part), scale))
    except ValueError:
        return None

    if not gmpy2.is_finite(number):
        logger.debug(f"Big decimal overflowed: {canonical[:40]!r}")
        return None
    return number


def compare(left: Any, right: Any) -> int:
    """Three-way comparison of two backend numbers."""
    return gmpy2.cmp(left, right)
