"""Parameter coercion and clamping applied before steps reach the operations.

Numeric parameters never raise: anything that does not parse as a number
becomes 0 and is then clamped (saturating) into the parameter's bounds.
"""

import math
from typing import Any

MIN_SHIFT = 0
MAX_SHIFT = 100
MIN_RAILS = 2
MAX_RAILS = 10


def coerce_number(value: Any, default: float = 0) -> float:
    """Parse ``value`` as a number, falling back to ``default``.

    Accepts ints, floats, bools and numeric strings (surrounding whitespace
    allowed). NaN is treated as non-numeric. Infinities are returned as-is so
    callers can saturate them.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default

    if isinstance(number, float) and math.isnan(number):
        return default
    return number


def clamp_int(value: Any, minimum: int, maximum: int) -> int:
    """Coerce ``value`` to a number and clamp it into ``[minimum, maximum]``.

    Fractional values are truncated toward zero after clamping.
    """
    number = coerce_number(value)
    clamped = min(maximum, max(minimum, number))
    return int(clamped)


def clamp_shift(value: Any) -> int:
    """Clamp a Caesar shift into ``[0, 100]``."""
    return clamp_int(value, MIN_SHIFT, MAX_SHIFT)


def clamp_rails(value: Any) -> int:
    """Clamp a rail-fence rail count into ``[2, 10]``."""
    return clamp_int(value, MIN_RAILS, MAX_RAILS)


def coerce_text(value: Any) -> str:
    """Return ``value`` as a string; ``None`` becomes the empty string."""
    if value is None:
        return ""
    return str(value)
