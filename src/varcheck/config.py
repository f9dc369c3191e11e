import os
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

from .bignum import is_bignum_available
from .logging import get_logger

logger = get_logger(__name__)

# Fractional digits kept when validating big decimals
DEFAULT_SCALE = 1000

_NATIVE_INT = np.iinfo(np.int64)
_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    bignum_available: bool = field(default_factory=is_bignum_available)
    native_int_min: int = int(_NATIVE_INT.min)
    native_int_max: int = int(_NATIVE_INT.max)
    on_notice: Optional[Callable[[str], None]] = None

    def notify(self, message: str) -> None:
        """Report a non-fatal diagnostic without interrupting the caller."""
        if self.on_notice is not None:
            self.on_notice(message)
        else:
            logger.warning(message)

    @classmethod
    def from_env(cls) -> "Settings":
        disabled = os.getenv('VARCHECK_DISABLE_BIGNUM', '').strip().lower() in _TRUTHY
        return cls(bignum_available=is_bignum_available() and not disabled)


DEFAULT_SETTINGS = Settings.from_env()
