"""
Motor aritmético de la calculadora de botones.

Este módulo no guarda estado: aplica un operador a dos operandos y
convierte resultados a texto. El estado de la calculadora vive en
calculator_state.CalculatorState.

Contrato de interfaz:
    - compute(a, b, operator) -> float | ErrorMarker
    - parse_input(text: str) -> float
    - format_value(value) -> str
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union


OPERATORS = ("+", "-", "*", "/")


class ErrorMarker(Enum):
    """Resultado no numérico que se muestra como 'Error'."""

    DIVISION_BY_ZERO = "Error"

    def __str__(self) -> str:
        return self.value


Result = Union[float, ErrorMarker]


# ── Aritmética ───────────────────────────────────────────────────

def compute(a: Result, b: Result, operator: str) -> Result:
    """Aplica ``operator`` a ``a`` y ``b`` con aritmética de coma flotante.

    La división entre cero no lanza excepción: devuelve
    ``ErrorMarker.DIVISION_BY_ZERO``. Si cualquiera de los operandos ya
    es el marcador, el marcador se propaga. Un operador desconocido
    devuelve ``b``.
    """
    if isinstance(a, ErrorMarker) or isinstance(b, ErrorMarker):
        return ErrorMarker.DIVISION_BY_ZERO

    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        if b == 0:
            return ErrorMarker.DIVISION_BY_ZERO
        return a / b
    return b


def parse_input(text: str) -> float:
    """Convierte el texto en curso ('12', '0.', '3.5') a número."""
    return float(text)


# ── Formato del resultado ────────────────────────────────────────

def format_value(value: Result) -> str:
    if isinstance(value, ErrorMarker):
        return str(value)

    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value == float("inf"):
            return "∞"
        if value == float("-inf"):
            return "-∞"
        text = repr(value)
        if value.is_integer() and "e" not in text:
            return str(int(value))
        return text

    return str(value)
