"""Evaluación de secuencias postfijas con una pila de operandos."""

import logging
import operator
from typing import Iterable

import numpy as np

from calculator_errors import (
    EmptyExpressionError,
    MalformedExpressionError,
    StackUnderflowError,
    TrailingOperandsError,
    UnknownTokenError,
)
from expression_tokenizer import NumberToken, OperatorToken, Token
from postfix_converter import is_number_literal


logger = logging.getLogger(__name__)

_BIN_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def parse_number(text: str) -> np.float64:
    if not is_number_literal(text):
        raise MalformedExpressionError(f"Número mal formado: {text!r}")
    try:
        return np.float64(text)
    except ValueError as exc:
        raise MalformedExpressionError(f"Número mal formado: {text!r}") from exc


def evaluate_postfix(postfix: Iterable[Token]) -> float:
    """Reduce la secuencia postfija a un único valor.

    La división por cero no lanza: produce ±inf o NaN según IEEE-754 y
    el valor sigue propagándose por la pila.

    Raises:
        MalformedExpressionError: literal que no se puede parsear.
        StackUnderflowError: operador con menos de dos operandos.
        TrailingOperandsError: quedan varios valores al terminar.
        EmptyExpressionError: la pila termina vacía.
    """
    stack = []

    with np.errstate(all="ignore"):
        for token in postfix:
            if isinstance(token, NumberToken):
                stack.append(parse_number(token.text))
            elif isinstance(token, OperatorToken) and token.symbol in _BIN_OPS:
                if len(stack) < 2:
                    raise StackUnderflowError(
                        f"Operandos insuficientes para {token.symbol!r}"
                    )
                b = stack.pop()
                a = stack.pop()
                stack.append(_BIN_OPS[token.symbol](a, b))
            else:
                raise UnknownTokenError(f"Token desconocido: {token!r}")

    if not stack:
        raise EmptyExpressionError("La evaluación no produjo ningún valor")
    if len(stack) > 1:
        logger.debug("Pila con %d valores al terminar: %s", len(stack), stack)
        raise TrailingOperandsError(
            f"Quedan {len(stack)} valores en la pila, se esperaba 1"
        )
    return float(stack[0])
