from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from consteval.types.location import Location
from consteval.types.primitive import Primitive


@dataclass(frozen=True)
class Literal:
    location: Location
    value: Primitive


@dataclass(frozen=True)
class SymbolRef:
    location: Location
    name: str


@dataclass(frozen=True)
class Call:
    """(name arg...), located at the function name."""

    location: Location
    name: str
    args: tuple[Expr, ...]


Expr = Union[Literal, SymbolRef, Call]
