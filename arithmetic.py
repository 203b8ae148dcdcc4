"""Aritmética de la calculadora: operadores, evaluación y conversión de texto.

Las cuatro operaciones son fijas. ``evaluate`` nunca lanza excepciones
por errores aritméticos: la división entre cero se devuelve como un
valor ``DivisionByZero`` que el motor traduce al marcador de error.
"""

from __future__ import annotations

import enum
import math
import operator
import re
from dataclasses import dataclass

MAX_DISPLAY_LENGTH = 12


class Operation(enum.Enum):
    """Operador pendiente; el valor es el símbolo que muestra el teclado."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol) -> Operation:
        if isinstance(symbol, cls):
            return symbol
        try:
            return cls(_SYMBOL_ALIASES.get(symbol, symbol))
        except ValueError:
            raise ValueError(f"Operador desconocido: {symbol!r}") from None


_SYMBOL_ALIASES = {
    "-": "−",
    "*": "×",
    "/": "÷",
}

_BINARY_OPERATORS = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}


@dataclass(frozen=True)
class DivisionByZero:
    """Resultado de una división con divisor exactamente cero."""

    dividend: float

    def __str__(self) -> str:
        return f"{self.dividend} ÷ 0"


def evaluate(a: float, b: float, op) -> float | DivisionByZero:
    """Aplica ``op`` a los operandos.

    Un operador que no está en la tabla (p. ej. el de igual) devuelve
    ``b`` sin cambios.
    """
    if op is Operation.DIVIDE and b == 0:
        return DivisionByZero(a)
    fn = _BINARY_OPERATORS.get(op)
    if fn is None:
        return b
    return fn(a, b)


# ── Conversión texto <-> número ──────────────────────────────────

_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> float:
    """Lee el prefijo numérico más largo de ``text``.

    ``"12."`` vale 12, ``"1.5e+"`` vale 1.5 y un texto sin prefijo
    numérico (``"-"``, ``"Error"``) vale NaN.
    """
    match = _NUMBER_PREFIX.match(text.strip())
    if match is None:
        return math.nan
    return float(match.group(0))


def format_number(value: float, max_length: int = MAX_DISPLAY_LENGTH) -> str:
    """Texto decimal por defecto de un resultado finito.

    Si no cabe en ``max_length`` caracteres se reducen los dígitos
    significativos, pasando a notación exponencial cuando haga falta.
    """
    if not math.isfinite(value):
        raise ValueError(f"Resultado no finito: {value}")

    if value == int(value) and abs(value) < 1e15:
        text = str(int(value))
    else:
        text = repr(float(value))
    if len(text) <= max_length:
        return text

    for digits in range(max_length, 0, -1):
        text = f"{value:.{digits}g}"
        if len(text) <= max_length:
            return text
    return text
