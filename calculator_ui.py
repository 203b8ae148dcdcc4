"""
Interfaz gráfica de la calculadora básica.

Usa tkinter. La interfaz no calcula nada: cada botón llama a una acción
del motor y vuelve a pintar ``engine.display``. El tema claro/oscuro es
estado exclusivo de la interfaz.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine

log = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Temas
# ═════════════════════════════════════════════════════════════════

THEMES = {
    "light": {
        "bg":         "#ffffff",
        "display_bg": "#f8f9fa",
        "display_fg": "#000000",
        "num":        "#e9ecef",
        "num_fg":     "#000000",
        "op":         "#007bff",
        "op_fg":      "#ffffff",
        "equals":     "#28a745",
        "equals_fg":  "#ffffff",
        "clear":      "#dc3545",
        "clear_fg":   "#ffffff",
        "toggle":     "#6c757d",
        "toggle_fg":  "#ffffff",
    },
    "dark": {
        "bg":         "#1a1a1a",
        "display_bg": "#2d2d2d",
        "display_fg": "#ffffff",
        "num":        "#404040",
        "num_fg":     "#ffffff",
        "op":         "#007bff",
        "op_fg":      "#ffffff",
        "equals":     "#28a745",
        "equals_fg":  "#ffffff",
        "clear":      "#dc3545",
        "clear_fg":   "#ffffff",
        "toggle":     "#6c757d",
        "toggle_fg":  "#ffffff",
    },
}


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "equals", "clear"

    KEYPAD = [
        [("C", "clear", "clear"), ("÷", "operator:÷", "op"),
         ("×", "operator:×", "op"), ("⌫", "backspace", "op")],

        [("7", "digit:7", "num"), ("8", "digit:8", "num"),
         ("9", "digit:9", "num"), ("−", "operator:−", "op")],

        [("4", "digit:4", "num"), ("5", "digit:5", "num"),
         ("6", "digit:6", "num"), ("+", "operator:+", "op")],

        [("1", "digit:1", "num"), ("2", "digit:2", "num"),
         ("3", "digit:3", "num"), ("=", "equals", "equals")],

        [("0", "digit:0", "num"), (".", "decimal", "num")],
    ]

    TOGGLE_ICONS = {"dark": "☀️", "light": "🌙"}

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None, theme: str = "dark"):
        if theme not in THEMES:
            raise ValueError(f"Tema desconocido: {theme!r}")

        self.root = root
        self.root.title("Calculadora")
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()
        self.theme = theme
        self._keys: list[tuple[tk.Button, str]] = []

        self._init_fonts()
        self._create_header()
        self._create_display()
        self._create_keypad()
        self._apply_theme()

    @property
    def colors(self) -> dict:
        return THEMES[self.theme]

    @classmethod
    def action_for(cls, text: str) -> str:
        """Acción asociada al texto de un botón del teclado."""
        for row in cls.KEYPAD:
            for key_text, action, _kind in row:
                if key_text == text:
                    return action
        raise KeyError(text)

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_display = tkfont.Font(family="Consolas", size=32, weight="bold")
        self._f_btn     = tkfont.Font(family="Segoe UI", size=18)
        self._f_toggle  = tkfont.Font(family="Segoe UI", size=14)

    # ── Cabecera con el cambio de tema ───────────────────────────

    def _create_header(self):
        self.header = tk.Frame(self.root)
        self.header.pack(fill="x", padx=6, pady=(6, 2))

        self.toggle_btn = tk.Button(
            self.header, font=self._f_toggle, width=3, relief="flat",
            cursor="hand2", command=self.toggle_theme,
        )
        self.toggle_btn.pack(side="right")

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        self.display_frame = tk.Frame(self.root, padx=12, pady=8)
        self.display_frame.pack(fill="x", padx=6, pady=2)

        self.display_var = tk.StringVar(value=self.engine.display)
        self.display_label = tk.Label(
            self.display_frame, textvariable=self.display_var,
            font=self._f_display, anchor="e",
        )
        self.display_label.pack(fill="x", pady=(12, 4))

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        self.keypad_frame = tk.Frame(self.root)
        self.keypad_frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            self.keypad_frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            # Repartir columnas con colspan para filas cortas
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    self.keypad_frame, text=text, font=self._f_btn,
                    relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=10)
                self._keys.append((btn, kind))
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            self.keypad_frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        spans[-1] += extra
        return spans

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        if action == "clear":
            self.engine.clear()
        elif action == "backspace":
            self.engine.backspace()
        elif action == "equals":
            self.engine.equals()
        elif action == "decimal":
            self.engine.input_decimal()
        elif action.startswith("digit:"):
            self.engine.input_digit(int(action[6:]))
        elif action.startswith("operator:"):
            self.engine.apply_operator(action[9:])
        else:
            raise ValueError(f"Acción desconocida: {action!r}")
        log.debug("%s -> %s", action, self.engine.display)
        self.display_var.set(self.engine.display)

    # ── Tema ─────────────────────────────────────────────────────

    def toggle_theme(self):
        self.theme = "light" if self.theme == "dark" else "dark"
        log.debug("Tema: %s", self.theme)
        self._apply_theme()

    def _apply_theme(self):
        c = self.colors
        self.root.configure(bg=c["bg"])
        self.header.configure(bg=c["bg"])
        self.keypad_frame.configure(bg=c["bg"])
        self.display_frame.configure(bg=c["display_bg"])
        self.display_label.configure(bg=c["display_bg"], fg=c["display_fg"])
        self.toggle_btn.configure(
            text=self.TOGGLE_ICONS[self.theme],
            bg=c["toggle"], fg=c["toggle_fg"],
            activebackground=c["toggle"],
        )
        for btn, kind in self._keys:
            btn.configure(bg=c[kind], fg=c[f"{kind}_fg"],
                          activebackground=c[kind])
