"""Errores clasificados del motor de evaluación.

Todas las clases derivan de EvalError, que a su vez deriva de ValueError
para que los llamadores que ya capturaban ValueError sigan funcionando.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_CHARACTER = "InvalidCharacter"
    INCOMPLETE_EXPRESSION = "IncompleteExpression"
    MALFORMED_EXPRESSION = "MalformedExpression"
    UNKNOWN_TOKEN = "UnknownToken"
    STACK_UNDERFLOW = "StackUnderflow"
    TRAILING_OPERANDS = "TrailingOperands"
    EMPTY_EXPRESSION = "EmptyExpression"
    NON_FINITE_RESULT = "NonFiniteResult"


class EvalError(ValueError):
    """Fallo recuperable al evaluar una expresión."""

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION


class InvalidCharacterError(EvalError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, position: int):
        super().__init__(f"Carácter inválido {char!r} en la posición {position}")
        self.char = char
        self.position = position


class IncompleteExpressionError(EvalError):
    kind = ErrorKind.INCOMPLETE_EXPRESSION


class MalformedExpressionError(EvalError):
    kind = ErrorKind.MALFORMED_EXPRESSION


class UnknownTokenError(MalformedExpressionError):
    kind = ErrorKind.UNKNOWN_TOKEN


class StackUnderflowError(EvalError):
    kind = ErrorKind.STACK_UNDERFLOW


class TrailingOperandsError(EvalError):
    kind = ErrorKind.TRAILING_OPERANDS


class EmptyExpressionError(EvalError):
    kind = ErrorKind.EMPTY_EXPRESSION


class NonFiniteResultError(EvalError):
    kind = ErrorKind.NON_FINITE_RESULT

    def __init__(self, value: float):
        super().__init__(f"Resultado no finito: {value}")
        self.value = value
