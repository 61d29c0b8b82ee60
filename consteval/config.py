from __future__ import annotations
import os
from typing import Callable, TypeVar

T = TypeVar("T")

# Defaults
_DEFAULT_INTEGER_BITS = 128
_DEFAULT_EPSILON = 0.01


def value_from_env(var: str, default: T, convert: Callable[[str], T]) -> T:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        raise ValueError(f"{var} has an invalid value: {raw!r}") from None


def get_integer_bits() -> int:
    bits = value_from_env('CONSTEVAL_INTEGER_BITS', _DEFAULT_INTEGER_BITS, int)
    # Integer must cover at least the signed 128-bit range
    if bits < _DEFAULT_INTEGER_BITS:
        raise ValueError(f"CONSTEVAL_INTEGER_BITS must be at least {_DEFAULT_INTEGER_BITS}, got {bits}")
    return bits


def get_default_epsilon() -> float:
    epsilon = value_from_env('CONSTEVAL_EPSILON', _DEFAULT_EPSILON, float)
    if not epsilon > 0.0:
        raise ValueError(f"CONSTEVAL_EPSILON must be positive, got {epsilon}")
    return epsilon


def integer_bounds() -> tuple[int, int]:
    """Smallest and largest representable Integer for the configured width."""
    bits = get_integer_bits()
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
