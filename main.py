"""Punto de entrada de la calculadora en línea de comandos."""

import argparse
import logging
import sys

from calculator_engine import CalculatorEngine
from calculator_errors import EvalError
from expression_buffer import message_for


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Evalúa expresiones con + - * / y números decimales."
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expresiones a evaluar; sin argumentos se leen de la entrada estándar",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="muestra los pasos del pipeline (nivel DEBUG)",
    )
    return parser.parse_args(argv)


def _read_expressions(stream):
    for line in stream:
        expression = line.strip()
        if expression:
            yield expression


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    engine = CalculatorEngine()
    expressions = args.expressions or _read_expressions(sys.stdin)
    failures = 0

    for expression in expressions:
        try:
            result = engine.evaluate(expression)
        except EvalError as exc:
            failures += 1
            print(f"{expression}: {message_for(exc)}")
            continue
        print(f"{expression} = {result}")

    if failures:
        logger.debug("%d expresiones con error", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
