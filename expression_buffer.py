"""
Estado de entrada de la calculadora, propiedad del llamador.

El motor no guarda estado entre llamadas; la expresión que se va
escribiendo, el último resultado y el mensaje de error pendiente viven
aquí, una instancia por interfaz.
"""

import logging

from calculator_engine import CalculatorEngine
from calculator_errors import ErrorKind, EvalError
from expression_tokenizer import DECIMAL_POINT, DIGITS, OPERATORS


INPUT_KEYS = DIGITS + DECIMAL_POINT + OPERATORS
EVALUATE_KEYS = ("Enter", "=")
BACKSPACE_KEY = "Backspace"
CLEAR_KEY = "Escape"

ERROR_MESSAGES = {
    ErrorKind.INCOMPLETE_EXPRESSION: "Error: Expresión incompleta",
    ErrorKind.NON_FINITE_RESULT: "Error: División por cero",
}
DEFAULT_ERROR_MESSAGE = "Error: Expresión inválida"

logger = logging.getLogger(__name__)


def message_for(error: EvalError) -> str:
    """Mensaje para el usuario según el tipo de error."""
    return ERROR_MESSAGES.get(error.kind, DEFAULT_ERROR_MESSAGE)


class ExpressionBuffer:
    """Expresión en edición con las reglas de tecleo de la calculadora."""

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else CalculatorEngine()
        self.text = ""
        self.last_result: float | None = None
        self.error: str | None = None

    @property
    def display(self) -> str:
        if self.error is not None:
            return self.error
        return self.text or "0"

    # ── Edición ──────────────────────────────────────────────────

    def append(self, value: str):
        self.error = None
        last_char = self.text[-1:]

        if value in OPERATORS:
            if not self.text and value != "-":
                # Solo el signo menos puede abrir una expresión
                return
            if last_char and last_char in OPERATORS:
                self.text = self.text[:-1] + value
                return

        # "0" seguido de otro dígito reemplaza al cero
        if self.text == "0" and value in DIGITS:
            self.text = value
        else:
            self.text += value

    def backspace(self):
        self.error = None
        self.text = self.text[:-1]

    def clear(self):
        self.text = ""
        self.last_result = None
        self.error = None

    # ── Evaluación ───────────────────────────────────────────────

    def evaluate(self) -> str | None:
        if not self.text:
            return None

        try:
            value = self.engine.evaluate_value(self.text)
        except EvalError as exc:
            logger.info("No se pudo evaluar %r: %s", self.text, exc)
            self.error = message_for(exc)
            self.text = ""
            return self.error

        self.last_result = value
        self.text = self.engine.format_result(value)
        return self.text

    # ── Teclado ──────────────────────────────────────────────────

    def handle_key(self, key: str) -> bool:
        """Aplica una tecla; devuelve False si no corresponde a la calculadora."""
        if len(key) == 1 and key in INPUT_KEYS:
            if key == DECIMAL_POINT and self.text.endswith(DECIMAL_POINT):
                return True
            self.append(key)
            return True
        if key in EVALUATE_KEYS:
            self.evaluate()
            return True
        if key == BACKSPACE_KEY:
            self.backspace()
            return True
        if key == CLEAR_KEY:
            self.clear()
            return True
        return False
