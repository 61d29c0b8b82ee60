from __future__ import annotations
from typing import Optional

from consteval.types.location import Location


class ConstEvalError(Exception):
    """ Base class for all consteval errors"""
    pass


class EvalError(ConstEvalError):
    """ Raised when an expression cannot be evaluated.

    Carries the offending source span; value-model operations raise without
    one and the built-in that knows the operand attaches it with `at()`.
    """

    def __init__(self, message: str, location: Optional[Location] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def at(self, location: Location) -> EvalError:
        if self.location is None:
            self.location = location
        return self

    def __str__(self):
        if self.location is None:
            return self.message
        return f"{self.message}\n{self.location}"


class InvalidCharacter(EvalError):
    """ Raised when the scanner meets a character no token can start with"""

    def __init__(self, char: str, location: Optional[Location] = None):
        super().__init__(f"Invalid character {char!r} for this position", location)
        self.char = char


class EmptyExpression(EvalError):
    """ Raised for empty input or an empty call such as ()"""

    def __init__(self, location: Optional[Location] = None):
        super().__init__("Empty expressions are not allowed", location)


class UnmatchedOpen(EvalError):
    """ Raised when a '(' is never closed"""

    def __init__(self, location: Optional[Location] = None):
        super().__init__("Unmatched opening '('", location)


class UnmatchedClose(EvalError):
    """ Raised when a ')' has no opening bracket"""

    def __init__(self, location: Optional[Location] = None):
        super().__init__("Unmatched closing ')'", location)


class UnexpectedToken(EvalError):
    """ Raised for leading or trailing tokens outside of the expression"""

    def __init__(self, location: Optional[Location] = None):
        super().__init__("Unexpected token", location)


class CallNonSymbol(EvalError):
    """ Raised when the head of a call is not a function name"""

    def __init__(self, location: Optional[Location] = None):
        super().__init__("Only functions can be called", location)


class UnknownSymbol(EvalError):
    """ Raised when a symbol is not bound in the context"""

    def __init__(self, name: str, location: Optional[Location] = None):
        super().__init__(f'Unknown symbol name "{name}"', location)
        self.name = name


class UnknownFunction(EvalError):
    """ Raised when a call names a function missing from the function table"""

    def __init__(self, name: str, location: Optional[Location] = None):
        super().__init__(f'Unknown function "{name}"', location)
        self.name = name


class ArgumentCount(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, location: Optional[Location] = None):
        super().__init__("Function argument count incorrect", location)


class InvalidArgument(EvalError):
    """ Raised when the kinds of arguments passed to a function are incorrect"""

    def __init__(self, detail: str, location: Optional[Location] = None):
        super().__init__(f"Argument invalid: {detail}", location)
        self.detail = detail


class Overflow(EvalError):
    """ Raised when integer arithmetic leaves the representable range"""

    def __init__(self, location: Optional[Location] = None):
        super().__init__("Overflow or underflow occurred", location)


class ConstantError(ConstEvalError):
    """ Base class for errors while resolving named constants"""
    pass


class DuplicateConstant(ConstantError):
    """ Raised when a constant name is defined twice"""

    def __init__(self, name: str):
        super().__init__(f'Duplicate constant definition "{name}"')
        self.name = name


class ConstantEvaluationError(ConstantError):
    """ Raised when the expression of a named constant fails to evaluate"""

    def __init__(self, name: str, error: EvalError):
        super().__init__(f'In constant "{name}": {error}')
        self.name = name
        self.error = error
