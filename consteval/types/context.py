"""Symbol environment for constant expressions.

A Context maps constant names to their resolved primitive values. It is built
by inserting one constant at a time, in declaration order, so an expression can
only refer to names defined before it. Evaluation only ever reads it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from consteval.errors import DuplicateConstant
from consteval.types.primitive import Primitive, primitive


class Context(Mapping):
    """Insertion-ordered mapping from names to Primitive values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Primitive] = {}

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> Context:
        """Build a context from plain Python values, keeping their order."""
        ctx = cls()
        for name, value in values.items():
            ctx.define(name, primitive(value))
        return ctx

    def define(self, name: str, value: Primitive) -> None:
        """Bind `name` to `value`.

        Raises DuplicateConstant if `name` is already bound.
        """
        if not isinstance(value, Primitive):
            raise TypeError(f"Cannot bind {name} to non-primitive {value!r}")
        if name in self.vars:
            raise DuplicateConstant(name)
        self.vars[name] = value

    def lookup(self, name: str) -> Optional[Primitive]:
        return self.vars.get(name)

    def __getitem__(self, name: str) -> Primitive:
        return self.vars[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self):
        items = ", ".join(f"{name}={value}" for name, value in self.vars.items())
        return f"Context({items})"
