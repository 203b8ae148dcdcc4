"""
Motor de la calculadora básica.

El estado de la calculadora es un valor inmutable (``CalculatorState``)
y cada pulsación es una función pura que recibe el estado actual y
devuelve el siguiente. ``CalculatorEngine`` guarda el único estado de la
sesión para que la interfaz solo tenga que llamar acciones y leer
``display``.

Contrato de interfaz:
    - input_digit(d), input_decimal(), backspace(), clear()
    - apply_operator(op), equals()
    - display: texto a mostrar tras cada acción
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from arithmetic import (
    MAX_DISPLAY_LENGTH,
    DivisionByZero,
    Operation,
    evaluate,
    format_number,
    parse_number,
)

ERROR_MARKER = "Error"

_DIGITS = frozenset("0123456789")

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorState:
    """Cálculo pendiente tal como lo ve el usuario."""

    display: str = "0"
    previous_value: float | None = None
    operation: Operation | None = None
    waiting_for_operand: bool = False

    @property
    def is_error(self) -> bool:
        return self.display == ERROR_MARKER


INITIAL_STATE = CalculatorState()


# ── Transiciones ─────────────────────────────────────────────────

def clear(state: CalculatorState | None = None) -> CalculatorState:
    return INITIAL_STATE


def input_digit(state: CalculatorState, digit) -> CalculatorState:
    """Escribe un dígito; por encima de 12 caracteres se ignora."""
    text = str(digit)
    if text not in _DIGITS:
        raise ValueError(f"Dígito inválido: {digit!r}")

    if state.is_error:
        state = INITIAL_STATE

    if state.waiting_for_operand:
        return replace(state, display=text, waiting_for_operand=False)

    display = text if state.display == "0" else state.display + text
    if len(display) > MAX_DISPLAY_LENGTH:
        return state
    return replace(state, display=display)


def input_decimal(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        state = INITIAL_STATE

    if state.waiting_for_operand:
        return replace(state, display="0.", waiting_for_operand=False)

    if "." in state.display or len(state.display) >= MAX_DISPLAY_LENGTH:
        return state
    return replace(state, display=state.display + ".")


def backspace(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return INITIAL_STATE

    display = state.display[:-1]
    # Un signo suelto no es un número
    if display in ("", "-"):
        display = "0"
    return replace(state, display=display)


def apply_operator(state: CalculatorState, op) -> CalculatorState:
    """Fija el operador pendiente, resolviendo antes el anterior si lo hay.

    Pulsar dos operadores seguidos vuelve a resolver el operador previo
    con el mismo valor en pantalla: ``9 − −`` deja 0 como acumulado.
    """
    op = Operation.from_symbol(op)
    if state.is_error:
        return state

    input_value = parse_number(state.display)
    if state.previous_value is None:
        return replace(
            state,
            previous_value=input_value,
            operation=op,
            waiting_for_operand=True,
        )

    result = evaluate(state.previous_value, input_value, state.operation)
    if _is_failure(result):
        return _error_state(result)

    log.debug("%s %s %s = %s", state.previous_value, state.operation,
              input_value, result)
    return CalculatorState(
        display=format_number(result),
        previous_value=result,
        operation=op,
        waiting_for_operand=True,
    )


def equals(state: CalculatorState) -> CalculatorState:
    if state.is_error or state.previous_value is None or state.operation is None:
        return state

    input_value = parse_number(state.display)
    result = evaluate(state.previous_value, input_value, state.operation)
    if _is_failure(result):
        return _error_state(result)

    log.debug("%s %s %s = %s", state.previous_value, state.operation,
              input_value, result)
    return CalculatorState(display=format_number(result), waiting_for_operand=True)


def _is_failure(result) -> bool:
    return isinstance(result, DivisionByZero) or not math.isfinite(result)


def _error_state(result) -> CalculatorState:
    if isinstance(result, DivisionByZero):
        log.info("División entre cero: %s", result)
    else:
        log.info("Resultado no finito: %s", result)
    return replace(INITIAL_STATE, display=ERROR_MARKER)


# ── Sesión ───────────────────────────────────────────────────────

class CalculatorEngine:
    """Guarda el estado de la sesión y aplica las pulsaciones."""

    def __init__(self, state: CalculatorState | None = None):
        self._state = state if state is not None else INITIAL_STATE

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    def input_digit(self, digit) -> str:
        return self._apply(input_digit, digit)

    def input_decimal(self) -> str:
        return self._apply(input_decimal)

    def backspace(self) -> str:
        return self._apply(backspace)

    def clear(self) -> str:
        return self._apply(clear)

    def apply_operator(self, op) -> str:
        return self._apply(apply_operator, op)

    def equals(self) -> str:
        return self._apply(equals)

    def _apply(self, transition, *args) -> str:
        self._state = transition(self._state, *args)
        return self._state.display
