"""Primitive values: the only runtime values of the expression language.

- Boolean -> Python bool
- Integer -> Python int, range checked against the configured width
- Float   -> Python float, arithmetic done on numpy.float64

Integer and Float compare equal when the float holds exactly that integer, so
an integer literal default compares equal to a computed float.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import numpy as np

from consteval.config import get_default_epsilon, integer_bounds
from consteval.errors import InvalidArgument, Overflow


class Primitive:
    __slots__ = ()

    def approx_eq(self, other: Primitive, epsilon: Optional[float] = None) -> bool:
        """Normal equality, except that two Floats only need to be within `epsilon`."""
        if isinstance(self, Float) and isinstance(other, Float):
            if epsilon is None:
                epsilon = get_default_epsilon()
            return abs(self.value - other.value) < epsilon
        return self == other

    def logical_not(self) -> Primitive:
        if isinstance(self, Boolean):
            return Boolean(not self.value)
        raise InvalidArgument(f"Cannot (not {self})")

    def logical_and(self, other: Primitive) -> Primitive:
        if isinstance(self, Boolean) and isinstance(other, Boolean):
            return Boolean(self.value and other.value)
        raise InvalidArgument(f"Cannot (and {self} {other})")

    def logical_or(self, other: Primitive) -> Primitive:
        if isinstance(self, Boolean) and isinstance(other, Boolean):
            return Boolean(self.value or other.value)
        raise InvalidArgument(f"Cannot (or {self} {other})")

    def add(self, other: Primitive) -> Primitive:
        return _arithmetic("add", self, other, lambda a, b: a + b, np.add)

    def mul(self, other: Primitive) -> Primitive:
        return _arithmetic("mul", self, other, lambda a, b: a * b, np.multiply)

    def fract(self) -> Primitive:
        if isinstance(self, Float):
            fractional, _ = np.modf(np.float64(self.value))
            return Float(float(fractional))
        raise InvalidArgument("Only floats have fractional parts")


@dataclass(frozen=True, eq=False)
class Boolean(Primitive):
    value: bool

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Boolean) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Boolean, self.value))

    def __str__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True, eq=False)
class Integer(Primitive):
    value: int

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Integer):
            return self.value == other.value
        if isinstance(other, Float):
            return int_float_eq(self.value, other.value)
        return False

    def __hash__(self) -> int:
        # hash(n) == hash(float(n)) whenever the two are equal
        return hash(self.value)

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True, eq=False)
class Float(Primitive):
    value: float

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Float):
            return self.value == other.value
        if isinstance(other, Integer):
            return int_float_eq(other.value, self.value)
        return False

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self):
        return repr(self.value)


Number = Union[Integer, Float]


def int_float_eq(i: int, f: float) -> bool:
    if not math.isfinite(f) or not f.is_integer():
        return False
    low, high = integer_bounds()
    if not low <= f <= high:
        return False
    return int(f) == i


def checked_integer(value: int) -> Integer:
    low, high = integer_bounds()
    if not low <= value <= high:
        raise Overflow()
    return Integer(value)


def to_float(value: Number) -> float:
    if isinstance(value, Float):
        return value.value
    try:
        return float(value.value)
    except OverflowError:
        raise Overflow() from None


def _arithmetic(
    name: str,
    a: Primitive,
    b: Primitive,
    int_op: Callable[[int, int], int],
    float_op: Callable[[np.float64, np.float64], np.float64],
) -> Primitive:
    """Apply a binary arithmetic op. The add and mul built-ins reject Booleans
    before folding, so the InvalidArgument here only reaches direct callers."""
    if isinstance(a, Integer) and isinstance(b, Integer):
        return checked_integer(int_op(a.value, b.value))
    if isinstance(a, (Integer, Float)) and isinstance(b, (Integer, Float)):
        with np.errstate(all="ignore"):
            result = float_op(np.float64(to_float(a)), np.float64(to_float(b)))
        return Float(float(result))
    raise InvalidArgument(f"Cannot ({name} {a} {b})")


def primitive(value: Any) -> Primitive:
    """Wrap a plain Python bool, int or float."""
    if isinstance(value, Primitive):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return checked_integer(value)
    if isinstance(value, float):
        return Float(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a primitive value")
