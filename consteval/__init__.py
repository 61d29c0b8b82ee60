# Public API of the constant expression evaluator.
#
# Values are Primitive objects (Boolean, Integer, Float); expressions are
# S-expression strings such as "(add BASE (mul PAGE_SIZE 2))".
#
# Typical use:
#   functions = FunctionTable.default()   # build once, share read-only
#   context = Context()                    # grows one constant at a time
#   context.define("BASE", evaluate("0x1000", context, functions))

from consteval.errors import (
    ArgumentCount,
    CallNonSymbol,
    ConstantError,
    ConstantEvaluationError,
    ConstEvalError,
    DuplicateConstant,
    EmptyExpression,
    EvalError,
    InvalidArgument,
    InvalidCharacter,
    Overflow,
    UnexpectedToken,
    UnknownFunction,
    UnknownSymbol,
    UnmatchedClose,
    UnmatchedOpen,
)
from consteval.types.location import Location
from consteval.types.primitive import Boolean, Float, Integer, Primitive, primitive
from consteval.types.context import Context
from consteval.types.function_table import FunctionTable, NativeFunction
from consteval.evaluation.evaluator import evaluate
from consteval.constants import Constant, resolve_constants

__all__ = [
    "evaluate",
    "Context",
    "FunctionTable",
    "NativeFunction",
    "Location",
    "Primitive",
    "Boolean",
    "Integer",
    "Float",
    "primitive",
    "Constant",
    "resolve_constants",
    "ConstEvalError",
    "EvalError",
    "InvalidCharacter",
    "EmptyExpression",
    "UnmatchedOpen",
    "UnmatchedClose",
    "UnexpectedToken",
    "CallNonSymbol",
    "UnknownSymbol",
    "UnknownFunction",
    "ArgumentCount",
    "InvalidArgument",
    "Overflow",
    "ConstantError",
    "DuplicateConstant",
    "ConstantEvaluationError",
]
