"""
Estado de la calculadora de botones.

CalculatorState guarda la entrada en curso, el valor acumulado y el
operador pendiente, y los modifica en respuesta a pulsaciones
discretas (dígito, punto, operador, igual, borrar, retroceso). Tras
cada cambio entrega el texto de pantalla a un receptor opcional.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from calculator_engine import (
    OPERATORS,
    ErrorMarker,
    Result,
    compute,
    format_value,
    parse_input,
)


logger = logging.getLogger(__name__)

DisplaySink = Callable[[str], None]

DIGITS = tuple("0123456789")


class CalculatorState:
    """Máquina de estados de la calculadora.

    Atributos:
        current_input: dígitos tecleados desde el último operador,
            igual o borrado. Cadena vacía = sin entrada en curso.
        previous_value: resultado acumulado, o None si aún no hay
            operando. Puede contener ``ErrorMarker.DIVISION_BY_ZERO``.
        pending_operator: operador a la espera de su operando derecho.
        display_sink: receptor del texto de pantalla; puede asignarse
            después de construir el estado.
    """

    def __init__(self, display_sink: Optional[DisplaySink] = None):
        self.display_sink = display_sink
        self.current_input = ""
        self.previous_value: Optional[Result] = None
        self.pending_operator: Optional[str] = None

    # ── Pantalla ─────────────────────────────────────────────────

    def derive_display(self) -> str:
        """Texto a mostrar; nunca vacío."""
        if self.current_input != "":
            text = self.current_input
        elif self.previous_value is not None:
            text = format_value(self.previous_value)
        else:
            text = "0"
        return text or "0"

    def _refresh(self):
        if self.display_sink is not None:
            self.display_sink(self.derive_display())

    # ── Entrada de números ───────────────────────────────────────

    def input_digit(self, digit: str):
        if self.current_input == "" and digit == "0":
            # Se admite un único cero inicial
            self.current_input = "0"
            self._refresh()
            return
        if self.current_input == "0" and digit == "0":
            return
        if self.current_input == "0":
            self.current_input = digit
        else:
            self.current_input += digit
        self._refresh()

    def input_decimal(self):
        if self.current_input == "":
            self.current_input = "0."
        elif "." not in self.current_input:
            self.current_input += "."
        self._refresh()

    # ── Operadores ───────────────────────────────────────────────

    def _input_number(self) -> Optional[float]:
        if self.current_input == "":
            return None
        return parse_input(self.current_input)

    def input_operator(self, op: str):
        """Fija ``op`` como operador pendiente.

        Si ya había un operador pendiente y se tecleó un operando
        derecho, la operación anterior se resuelve en el acto
        (encadenamiento: 9 + 1 * ... deja 10 como valor acumulado).
        """
        input_number = self._input_number()

        if self.pending_operator and input_number is not None:
            result = compute(self.previous_value, input_number,
                             self.pending_operator)
            logger.debug("Encadenado %r %s %r = %r", self.previous_value,
                         self.pending_operator, input_number, result)
            self._store_result(result)
        elif self.previous_value is None:
            self.previous_value = input_number if input_number is not None else 0.0

        self.pending_operator = op
        self.current_input = ""
        self._refresh()

    def handle_equals(self):
        if not self.pending_operator:
            return

        input_number = self._input_number()
        b = input_number if input_number is not None else self.previous_value
        result = compute(self.previous_value, b, self.pending_operator)
        logger.debug("Igual %r %s %r = %r", self.previous_value,
                     self.pending_operator, b, result)
        self._store_result(result)
        self.pending_operator = None
        self.current_input = ""
        self._refresh()

    def _store_result(self, result: Result):
        if result is ErrorMarker.DIVISION_BY_ZERO and not isinstance(
                self.previous_value, ErrorMarker):
            logger.info("División entre cero")
        self.previous_value = result

    # ── Borrado ──────────────────────────────────────────────────

    def clear_all(self):
        self.current_input = ""
        self.previous_value = None
        self.pending_operator = None
        self._refresh()

    def backspace(self):
        """Quita el último carácter de la entrada en curso, si la hay."""
        if self.current_input:
            self.current_input = self.current_input[:-1]
            self._refresh()

    # ── Acciones del teclado ─────────────────────────────────────

    def dispatch(self, action: str) -> bool:
        """Traduce una acción de botón ('digit:7', 'operator:+', 'equals'...).

        Devuelve False si la acción no se reconoce; en ese caso no se
        modifica el estado.
        """
        kind, _, value = action.partition(":")
        if kind == "digit" and value in DIGITS:
            self.input_digit(value)
        elif kind == "operator" and value in OPERATORS:
            self.input_operator(value)
        elif action == "decimal":
            self.input_decimal()
        elif action == "equals":
            self.handle_equals()
        elif action == "clear":
            self.clear_all()
        elif action == "backspace":
            self.backspace()
        else:
            logger.debug("Acción ignorada: %r", action)
            return False
        return True
