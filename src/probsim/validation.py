"""Argument checks shared by the samplers and distribution functions."""

import numpy as np

from probsim.errors import InvalidParameter


def check_integer(name: str, value) -> int:
    """Reject anything that is not a plain or numpy integer (bools included)."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    return int(value)


def check_count(name: str, value) -> int:
    """Validate a non-negative integer count."""
    value = check_integer(name, value)
    if value < 0:
        raise InvalidParameter(f"{name} must be non-negative, got {value}")
    return value


def check_probability(value, name: str = "probability") -> float:
    """Validate a probability in [0, 1]."""
    if isinstance(value, (bool, str)):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    try:
        p = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None
    # NaN fails both comparisons
    if not 0.0 <= p <= 1.0:
        raise InvalidParameter(f"{name} must lie in [0, 1], got {value}")
    return p


def check_level(value, name: str = "p") -> float:
    """Validate a quantile level in (0, 1]; 0 has no finite left-inverse."""
    if isinstance(value, (bool, str)):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    try:
        level = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None
    if not 0.0 <= level <= 1.0:
        raise InvalidParameter(f"{name} must lie in (0, 1], got {value}")
    if level == 0.0:
        raise InvalidParameter(f"quantile at {name}=0 is unbounded below")
    return level


def reject_bool(value):
    """Field validator body: booleans are not numbers here."""
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    return value
