"""Punto de entrada de la calculadora básica."""

import logging
import os
import tkinter as tk
from logging.handlers import RotatingFileHandler

from calculator_engine import CalculatorEngine
from calculator_ui import THEMES, CalculatorApp


WINDOW_GEOMETRY = "360x560"
WINDOW_MIN_SIZE = (320, 500)
DEFAULT_THEME = "dark"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging() -> logging.Logger:
    """Configura el logger raíz de la aplicación a partir del entorno.

    CALC_LOG_LEVEL fija el nivel (WARNING por defecto) y CALC_LOG_FILE,
    si existe, añade un fichero rotativo.
    """
    level_name = os.getenv("CALC_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    logger = logging.getLogger()
    logger.setLevel(level)

    if logger.handlers:
        return logger  # ya configurado

    fmt = logging.Formatter(LOG_FORMAT)

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    log_path = os.getenv("CALC_LOG_FILE")
    if log_path:
        fh = RotatingFileHandler(log_path, maxBytes=512_000, backupCount=2,
                                 encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def initial_theme() -> str:
    theme = os.getenv("CALC_THEME", DEFAULT_THEME).lower()
    if theme not in THEMES:
        raise ValueError(
            f"CALC_THEME debe ser uno de {sorted(THEMES)}, no {theme!r}"
        )
    return theme


def main():
    log = setup_logging()
    theme = initial_theme()

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root, engine=CalculatorEngine(), theme=theme)
    log.info("Calculadora iniciada (tema %s)", theme)
    root.mainloop()


if __name__ == "__main__":
    main()
