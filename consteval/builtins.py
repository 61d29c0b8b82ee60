from __future__ import annotations
from typing import Callable

from consteval.errors import ArgumentCount, EvalError, InvalidArgument
from consteval.types.expression import Expr, Literal
from consteval.types.function_table import FunctionTable
from consteval.types.location import Location
from consteval.types.primitive import Boolean, Primitive

# Arguments reaching a built-in are already evaluated, i.e. Literal nodes.


def _value(arg: Expr) -> Primitive:
    if not isinstance(arg, Literal):
        raise RuntimeError(f"Unevaluated argument reached a built-in: {arg!r}")
    return arg.value


def _check_argc_exact(count: int, location: Location, args: list[Expr]) -> None:
    if len(args) != count:
        raise ArgumentCount(location)


def _check_argc_min(count: int, location: Location, args: list[Expr]) -> None:
    if len(args) < count:
        raise ArgumentCount(location)


def _fold(
    acc: Primitive,
    args: list[Expr],
    op: Callable[[Primitive, Primitive], Primitive],
) -> Primitive:
    for arg in args:
        try:
            acc = op(acc, _value(arg))
        except EvalError as err:
            raise err.at(arg.location)
    return acc


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(location: Location, args: list[Expr]) -> Expr:
    _check_argc_exact(1, location, args)
    try:
        result = _value(args[0]).logical_not()
    except EvalError as err:
        raise err.at(args[0].location)
    return Literal(location, result)


def logical_and(location: Location, args: list[Expr]) -> Expr:
    _check_argc_min(1, location, args)
    return Literal(location, _fold(Boolean(True), args, Primitive.logical_and))


def logical_or(location: Location, args: list[Expr]) -> Expr:
    _check_argc_min(1, location, args)
    return Literal(location, _fold(Boolean(False), args, Primitive.logical_or))


# -------------------------------
# Arithmetic
# -------------------------------
def _numeric_operands(name: str, args: list[Expr]) -> None:
    # Locates a Boolean at its own operand, the first one included
    for arg in args:
        value = _value(arg)
        if isinstance(value, Boolean):
            raise InvalidArgument(f"Cannot ({name} {value}), expected a number", arg.location)


def add(location: Location, args: list[Expr]) -> Expr:
    _check_argc_min(2, location, args)
    _numeric_operands("add", args)
    return Literal(location, _fold(_value(args[0]), args[1:], Primitive.add))


def mul(location: Location, args: list[Expr]) -> Expr:
    _check_argc_min(2, location, args)
    _numeric_operands("mul", args)
    return Literal(location, _fold(_value(args[0]), args[1:], Primitive.mul))


def fract(location: Location, args: list[Expr]) -> Expr:
    _check_argc_exact(1, location, args)
    try:
        result = _value(args[0]).fract()
    except EvalError as err:
        raise err.at(args[0].location)
    return Literal(location, result)


# -------------------------------
# Registration
# -------------------------------
def register(table: FunctionTable) -> None:
    table.register("not", logical_not)
    table.register("and", logical_and)
    table.register("or", logical_or)
    table.register("add", add)
    table.register("mul", mul)
    table.register("fract", fract)
