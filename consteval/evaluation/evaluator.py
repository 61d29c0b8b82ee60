"""Entry point of the expression language.

evaluate() runs scan -> parse -> resolve_symbols -> call_functions and stops
at the first error. It only reads the context and the function table, so one
table can serve any number of evaluations, including concurrent ones.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from consteval.evaluation.resolver import call_functions, resolve_symbols
from consteval.reader.parser import parse
from consteval.reader.scanner import scan
from consteval.types.expression import Literal
from consteval.types.function_table import FunctionTable
from consteval.types.primitive import Primitive

logger = logging.getLogger(__name__)


def evaluate(text: str, context: Mapping[str, Primitive], functions: FunctionTable) -> Primitive:
    """Evaluate `text` against the bound constants and the function table.

    Raises an EvalError subclass locating the failure in `text`.
    """
    logger.debug("Evaluating %r", text)
    expr = parse(scan(text), source=text)
    expr = resolve_symbols(expr, context)
    expr = call_functions(expr, functions)

    if not isinstance(expr, Literal):
        raise RuntimeError(f"Evaluation left an unresolved node: {expr!r}")
    logger.debug("Evaluated %r -> %r", text, expr.value)
    return expr.value
