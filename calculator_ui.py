"""
Interfaz gráfica de la calculadora de botones.

Usa tkinter. La ventana solo traduce clics a acciones de
CalculatorState y pinta el texto que este le entrega.
"""

import tkinter as tk
from tkinter import font as tkfont

from calculator_state import CalculatorState


class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    COLORS = {
        "window":       "#202124",
        "screen":       "#111214",
        "screen_fg":    "#F1F3F4",
        "digit":        "#3C4043",
        "digit_fg":     "#E8EAED",
        "operator":     "#F29900",
        "operator_fg":  "#202124",
        "control":      "#5F6368",
        "control_fg":   "#E8EAED",
        "equals":       "#8AB4F8",
        "equals_fg":    "#202124",
        "pressed":      "#80868B",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "digit", "operator", "control", "equals"

    KEYPAD = [
        [("AC", "clear",      "control"), ("⌫", "backspace", "control"),
         ("÷", "operator:/", "operator")],

        [("7",  "digit:7",    "digit"), ("8", "digit:8", "digit"),
         ("9",  "digit:9",    "digit"), ("×", "operator:*", "operator")],

        [("4",  "digit:4",    "digit"), ("5", "digit:5", "digit"),
         ("6",  "digit:6",    "digit"), ("−", "operator:-", "operator")],

        [("1",  "digit:1",    "digit"), ("2", "digit:2", "digit"),
         ("3",  "digit:3",    "digit"), ("+", "operator:+", "operator")],

        [("0",  "digit:0",    "digit"), (".", "decimal", "digit"),
         ("=",  "equals",     "equals")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, state: CalculatorState | None = None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.COLORS["window"])
        self.root.resizable(False, False)

        self._init_fonts()
        self._create_display()
        self._create_keypad()

        self._bind_state(state if state is not None else CalculatorState())

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_result = tkfont.Font(family="Consolas", size=26, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.COLORS["screen"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.display_var = tk.StringVar(value="0")
        tk.Label(
            frame, textvariable=self.display_var,
            font=self._f_result, bg=self.COLORS["screen"],
            fg=self.COLORS["screen_fg"], anchor="e",
        ).pack(fill="x", pady=(4, 4))

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.COLORS["window"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._column_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.COLORS[kind], fg=self.COLORS[f"{kind}_fg"],
                    activebackground=self.COLORS["pressed"],
                    relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _column_spans(buttons: int, width: int) -> list[int]:
        """Ancho en columnas de cada botón de una fila.

        El primer botón (AC, 0) ocupa las columnas que sobran.
        """
        spans = [1] * buttons
        spans[0] += width - buttons
        return spans

    # ── Acciones ─────────────────────────────────────────────────

    def _bind_state(self, state: CalculatorState):
        """Conecta la pantalla al estado y muestra su texto actual."""
        self.state = state
        state.display_sink = self.display_var.set
        self.display_var.set(state.derive_display())

    def _on_key(self, action: str):
        self.state.dispatch(action)
