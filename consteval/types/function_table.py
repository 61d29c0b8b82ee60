from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Callable, Optional

from consteval.types.expression import Expr
from consteval.types.location import Location

# A native operation gets the call location and its evaluated arguments
NativeFunction = Callable[[Location, list[Expr]], Expr]


class FunctionTable(Mapping):
    """Registry of the functions callable from expressions.

    Built once, then frozen and shared read-only between evaluations.
    """

    __slots__ = ("functions", "frozen")

    def __init__(self):
        self.functions: dict[str, NativeFunction] = {}
        self.frozen = False

    @classmethod
    def default(cls) -> FunctionTable:
        """A frozen table holding the built-in functions."""
        from consteval.builtins import register

        table = cls()
        register(table)
        return table.freeze()

    def register(self, name: str, fn: NativeFunction) -> None:
        if self.frozen:
            raise TypeError(f"Cannot register {name!r}: function table is frozen")
        if not callable(fn):
            raise TypeError(f"Function {name!r} must be callable")
        self.functions[name] = fn

    def freeze(self) -> FunctionTable:
        self.frozen = True
        return self

    def lookup(self, name: str) -> Optional[NativeFunction]:
        return self.functions.get(name)

    def __getitem__(self, name: str) -> NativeFunction:
        return self.functions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.functions)

    def __len__(self) -> int:
        return len(self.functions)
