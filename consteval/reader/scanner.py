"""
  Lexical scanner for constant expressions.

- Regex driven, the alternation order is the token priority:
    float > radix integer > decimal integer > boolean > symbol > whitespace > brackets
- Literal tokens carry their already parsed Primitive:

    - 1.5, -2.0e3          -> Float
    - 0b1010, 0o17, 0xff   -> Integer (base 2 / 8 / 16)
    - 42, -1_000           -> Integer
    - true, false          -> Boolean
    - '_' digit separators are stripped before parsing

Floats are tried first so that 1.5 is not scanned as 1 followed by an
invalid '.'.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from consteval.errors import InvalidCharacter, Overflow
from consteval.types.location import Location
from consteval.types.primitive import Boolean, Float, Primitive, checked_integer


TOKEN_RE = re.compile(
    r"(?P<float>[-+]?[0-9]+\.[0-9]+(?:[eE][-+]?[0-9]+)?)"  # mandatory '.', optional exponent
    r"|(?P<radix>0(?:b[01_]*[01]|o[0-7_]*[0-7]|x[0-9a-fA-F_]*[0-9a-fA-F]))"  # 0b, 0o, 0x
    r"|(?P<integer>[-+]?[0-9](?:[0-9_]*[0-9])?)"  # decimal integer
    r"|(?P<boolean>(?:true|false)\b)"  # whole word only, true_x is a symbol
    r"|(?P<symbol>[a-zA-Z_][a-zA-Z0-9_]*)"
    r"|(?P<whitespace>\s+)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
)

RADIX_BASES: dict[str, int] = {
    "b": 2,
    "o": 8,
    "x": 16,
}


@dataclass(frozen=True)
class Token:
    kind: str  # literal, symbol, lparen or rparen
    location: Location
    value: Union[Primitive, str, None] = None


def _literal(kind: str, text: str) -> Primitive:
    if kind == "float":
        return Float(float(text))
    if kind == "radix":
        return checked_integer(int(text[2:].replace("_", ""), RADIX_BASES[text[1]]))
    if kind == "integer":
        return checked_integer(int(text.replace("_", ""), 10))
    return Boolean(text == "true")


def lex(text: str) -> Iterator[Token]:
    """Token generator over `text`, left to right."""
    pos = 0
    n = len(text)
    while pos < n:
        match = TOKEN_RE.match(text, pos)
        if not match:
            raise InvalidCharacter(text[pos], Location(text, pos, 1))

        kind: Optional[str] = match.lastgroup
        location = Location(text, pos, match.end() - pos)
        pos = match.end()

        if kind == "whitespace":
            continue
        if kind in ("lparen", "rparen"):
            yield Token(kind, location)
        elif kind == "symbol":
            yield Token("symbol", location, match.group())
        else:
            try:
                value = _literal(kind, match.group())
            except Overflow as err:
                raise err.at(location)
            yield Token("literal", location, value)


def scan(text: str) -> list[Token]:
    return list(lex(text))
