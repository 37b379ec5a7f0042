"""Punto de entrada de la calculadora."""

import logging
import os
import tkinter as tk

from calculator_ui import CalculatorApp


WINDOW_GEOMETRY = "340x480"
WINDOW_MIN_SIZE = (300, 440)
LOG_LEVEL_ENV = "CALCULADORA_LOG_LEVEL"


def _setup_logging():
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if root_logger.handlers:
        return  # ya configurado

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    root_logger.addHandler(handler)


def main():
    _setup_logging()
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
