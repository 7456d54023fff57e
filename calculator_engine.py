"""
Motor de cálculo de la calculadora.

Este módulo es la fachada del pipeline de evaluación:
tokenizador → conversión a postfija → evaluación de la pila.
Es el único punto de entrada que deben usar las interfaces.

Contrato de interfaz:
    - evaluate_expression(expression: str) -> float
    - CalculatorEngine.evaluate(expression: str) -> str
"""

import logging
import math

import numpy as np

from calculator_errors import (
    EvalError,
    IncompleteExpressionError,
    NonFiniteResultError,
)
from expression_tokenizer import OPERATORS, tokenize
from postfix_converter import to_postfix
from postfix_evaluator import evaluate_postfix


SIGNIFICANT_DIGITS = 15

logger = logging.getLogger(__name__)


def evaluate_expression(expression: str) -> float:
    """Evalúa la expresión y devuelve su valor numérico.

    Raises:
        IncompleteExpressionError: vacía o terminada en operador.
        NonFiniteResultError: resultado infinito o NaN.
        EvalError: cualquier otro fallo clasificado del pipeline.
    """
    if not expression:
        raise IncompleteExpressionError("Expresión vacía")
    if expression[-1] in OPERATORS:
        raise IncompleteExpressionError(
            f"La expresión termina en operador: {expression[-1]!r}"
        )

    try:
        tokens = tokenize(expression)
        postfix = to_postfix(tokens)
        logger.debug("%r → postfija %s", expression, postfix)
        result = evaluate_postfix(postfix)
    except EvalError as exc:
        logger.debug("%r rechazada (%s): %s", expression, exc.kind.value, exc)
        raise

    if not math.isfinite(result):
        raise NonFiniteResultError(result)
    return result


class CalculatorEngine:
    """Evalúa expresiones y entrega el resultado listo para mostrar."""

    # ── Evaluación principal ─────────────────────────────────────

    def evaluate(self, expression: str) -> str:
        """Evalúa la expresión y devuelve el resultado como cadena.

        Raises:
            EvalError: expresión inválida, incompleta o resultado no finito.
        """
        return self.format_result(self.evaluate_value(expression))

    @staticmethod
    def evaluate_value(expression: str) -> float:
        return evaluate_expression(expression)

    # ── Formato del resultado ────────────────────────────────────

    @staticmethod
    def format_result(value: float) -> str:
        """Resultado en notación posicional, sin exponente.

        La cadena vuelve a ser una expresión válida: la interfaz puede
        seguir operando sobre ella (1e15 → "1000000000000000").
        """
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "∞" if value > 0 else "-∞"
        if value == 0:
            return "0"
        return np.format_float_positional(
            value,
            precision=SIGNIFICANT_DIGITS,
            unique=True,
            fractional=False,
            trim="-",
        )
