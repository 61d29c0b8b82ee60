"""The two tree rewriting passes run after parsing.

1) resolve_symbols: every symbol leaf becomes the literal bound in the context
2) call_functions: calls are applied bottom-up through the function table

Both passes rebuild the tree rather than mutate it. They walk it post-order
with an explicit stack, so nesting depth is not bounded by the recursion limit.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable

from consteval.errors import UnknownFunction, UnknownSymbol
from consteval.types.expression import Call, Expr, Literal, SymbolRef
from consteval.types.function_table import FunctionTable
from consteval.types.primitive import Primitive


def _rebuild(
    expr: Expr,
    leaf: Callable[[Expr], Expr],
    combine: Callable[[Call, list[Expr]], Expr],
) -> Expr:
    """Rebuild `expr` bottom-up, children left to right before their call."""
    if not isinstance(expr, Call):
        return leaf(expr)

    # Each frame is a call and the rebuilt forms of its first len(done) args
    stack: list[tuple[Call, list[Expr]]] = [(expr, [])]
    while True:
        call, done = stack[-1]
        if len(done) < len(call.args):
            child = call.args[len(done)]
            if isinstance(child, Call):
                stack.append((child, []))
            else:
                done.append(leaf(child))
            continue

        stack.pop()
        result = combine(call, done)
        if not stack:
            return result
        stack[-1][1].append(result)


def resolve_symbols(expr: Expr, context: Mapping[str, Primitive]) -> Expr:
    def leaf(node: Expr) -> Expr:
        if isinstance(node, SymbolRef):
            value = context.get(node.name)
            if value is None:
                raise UnknownSymbol(node.name, node.location)
            return Literal(node.location, value)
        return node

    # The call's own name is a function, not a symbol
    return _rebuild(expr, leaf, lambda call, args: Call(call.location, call.name, tuple(args)))


def call_functions(expr: Expr, functions: FunctionTable) -> Expr:
    def apply(call: Call, args: list[Expr]) -> Expr:
        fn = functions.lookup(call.name)
        if fn is None:
            raise UnknownFunction(call.name, call.location)
        return fn(call.location, args)

    return _rebuild(expr, lambda node: node, apply)
