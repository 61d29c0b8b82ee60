from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from consteval.errors import ConstantEvaluationError, DuplicateConstant, EvalError
from consteval.evaluation.evaluator import evaluate
from consteval.types.context import Context
from consteval.types.function_table import FunctionTable
from consteval.types.primitive import Primitive

logger = logging.getLogger(__name__)


@dataclass
class Constant:
    """A named constant declared by an expression, e.g. (add BASE 0x1000).

    `type` is the declared type name, passed through untouched for the code
    generator.
    """

    name: str
    value: str
    type: Optional[str] = None
    resolved: Optional[Primitive] = field(default=None, compare=False)

    @property
    def primitive(self) -> Primitive:
        if self.resolved is None:
            raise RuntimeError(f"Constant {self.name!r} has not been resolved")
        return self.resolved

    def resolve(self, context: Context, functions: FunctionTable) -> Primitive:
        try:
            self.resolved = evaluate(self.value, context, functions)
        except EvalError as err:
            raise ConstantEvaluationError(self.name, err) from err
        return self.resolved


def resolve_constants(
    constants: Iterable[Constant], functions: Optional[FunctionTable] = None
) -> Context:
    """Resolve constants in declaration order.

    Each constant sees only the constants declared before it. Stops at the
    first duplicate name or failing expression.
    """
    if functions is None:
        functions = FunctionTable.default()

    context = Context()
    for constant in constants:
        if constant.name in context:
            raise DuplicateConstant(constant.name)
        value = constant.resolve(context, functions)
        context.define(constant.name, value)
        logger.info("Resolved constant %s = %s", constant.name, value)
    return context
