"""Conversión infija → postfija (shunting-yard sin paréntesis)."""

import re
from typing import Iterable

from calculator_errors import MalformedExpressionError, UnknownTokenError
from expression_tokenizer import NumberToken, OperatorToken, Token


PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
SIGN_OPERATORS = ("+", "-")

_NUMBER_LITERAL = re.compile(r"\d+\.?\d*|\.\d+")


def is_number_literal(text: str) -> bool:
    return _NUMBER_LITERAL.fullmatch(text) is not None


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """Reordena los tokens en notación postfija.

    Todos los operadores son asociativos por la izquierda: con igual
    precedencia sale primero el que ya estaba en la pila, de modo que
    8-3-2 se agrupa como (8-3)-2.

    Un + o - inicial seguido de un número se toma como signo y se
    antepone un 0 implícito (-3+2 → 0 3 - 2 +).

    Raises:
        MalformedExpressionError: literal numérico mal formado.
        UnknownTokenError: token que no es número ni operador.
    """
    tokens = list(tokens)
    output: list[Token] = []
    stack: list[Token] = []

    if (
        len(tokens) > 1
        and isinstance(tokens[0], OperatorToken)
        and tokens[0].symbol in SIGN_OPERATORS
        and isinstance(tokens[1], NumberToken)
    ):
        output.append(NumberToken("0"))

    for token in tokens:
        if isinstance(token, NumberToken):
            if not is_number_literal(token.text):
                raise MalformedExpressionError(
                    f"Número mal formado: {token.text!r}"
                )
            output.append(token)
        elif isinstance(token, OperatorToken) and token.symbol in PRECEDENCE:
            precedence = PRECEDENCE[token.symbol]
            while stack and precedence <= PRECEDENCE[stack[-1].symbol]:
                output.append(stack.pop())
            stack.append(token)
        else:
            raise UnknownTokenError(f"Token desconocido: {token!r}")

    while stack:
        top = stack.pop()
        # Solo hay operadores en la pila mientras no existan paréntesis
        if not isinstance(top, OperatorToken):
            raise MalformedExpressionError(f"Token inesperado en la pila: {top!r}")
        output.append(top)

    return output
