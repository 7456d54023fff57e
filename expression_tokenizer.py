"""Tokens y tokenizador de expresiones aritméticas planas."""

from dataclasses import dataclass
from typing import Union

from calculator_errors import InvalidCharacterError


DIGITS = "0123456789"
DECIMAL_POINT = "."
OPERATORS = "+-*/"


@dataclass(frozen=True)
class NumberToken:
    """Literal numérico tal como aparece en la entrada."""

    text: str


@dataclass(frozen=True)
class OperatorToken:
    symbol: str


Token = Union[NumberToken, OperatorToken]


def token_text(token: Token) -> str:
    if isinstance(token, NumberToken):
        return token.text
    return token.symbol


def tokenize(expression: str) -> list[Token]:
    """Divide la expresión en números y operadores.

    Los puntos se acumulan junto a los dígitos sin validar el literal:
    "1.2.3" produce un único NumberToken y el fallo llega al parsearlo.

    Raises:
        InvalidCharacterError: carácter fuera de 0-9 . + - * /
    """
    tokens: list[Token] = []
    pending = []

    for position, char in enumerate(expression):
        if char in DIGITS or char == DECIMAL_POINT:
            pending.append(char)
        elif char in OPERATORS:
            if pending:
                tokens.append(NumberToken("".join(pending)))
                pending = []
            tokens.append(OperatorToken(char))
        else:
            raise InvalidCharacterError(char, position)

    if pending:
        tokens.append(NumberToken("".join(pending)))
    return tokens
