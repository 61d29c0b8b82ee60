"""
  S-expression parser for constant expressions.

- A lone literal or symbol is a complete expression: 42, PAGE_SIZE
- Anything longer must be one bracketed call: (name arg ...)
- Calls nest arbitrarily; the first item inside a bracket must be a symbol
- Groups collapse innermost first, so errors inside a nested call are
  reported before errors of the calls around it
"""

from __future__ import annotations

from typing import Iterable, Optional

from consteval.errors import CallNonSymbol, EmptyExpression, UnexpectedToken, UnmatchedClose, UnmatchedOpen
from consteval.types.expression import Call, Expr, Literal, SymbolRef
from consteval.types.location import Location
from consteval.reader.scanner import Token


def _leaf(token: Token) -> Expr:
    if token.kind == "literal":
        return Literal(token.location, token.value)
    return SymbolRef(token.location, token.value)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.index += 1
        return token

    def parse_expr(self) -> Expr:
        """Parse the whole stream as a single expression."""
        first = self.tokens[0]
        if len(self.tokens) == 1:
            if first.kind == "lparen":
                raise UnmatchedOpen(first.location)
            if first.kind == "rparen":
                raise UnmatchedClose(first.location)
            return _leaf(first)

        if first.kind == "rparen":
            raise UnmatchedClose(first.location)
        if first.kind != "lparen":
            raise UnexpectedToken(self.tokens[1].location)
        return self.parse_call()

    def parse_call(self) -> Expr:
        # One frame per open bracket, holding the items read so far
        frames: list[list[Expr]] = []
        opening = self.peek()

        while True:
            token = self.advance()
            if token is None:
                break
            if token.kind == "lparen":
                frames.append([])
            elif token.kind == "rparen":
                call = self._collapse(frames.pop(), token)
                if not frames:
                    trailing = self.peek()
                    if trailing is not None:
                        raise UnexpectedToken(trailing.location)
                    return call
                frames[-1].append(call)
            else:
                frames[-1].append(_leaf(token))

        # Ran out of tokens with brackets still open
        raise UnexpectedToken(opening.location)

    @staticmethod
    def _collapse(items: list[Expr], closing: Token) -> Call:
        if not items:
            raise EmptyExpression(closing.location)
        head, *args = items
        if not isinstance(head, SymbolRef):
            raise CallNonSymbol(head.location)
        return Call(head.location, head.name, tuple(args))


def parse(tokens: Iterable[Token], source: str = "") -> Expr:
    """Parse scanned tokens into an expression tree.

    `source` is the scanned text, only used to locate the error for input
    without any tokens.
    """
    stream = TokenStream(tokens)
    if stream.peek() is None:
        raise EmptyExpression(Location(source, 0, 0))
    return stream.parse_expr()
