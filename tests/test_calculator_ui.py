import pytest

from calculator_ui import THEMES, CalculatorApp
from regression_checks import _make_app, final_display, walk


def test_themes_share_keys():
    assert set(THEMES["light"]) == set(THEMES["dark"])


def test_every_key_kind_has_colors():
    for row in CalculatorApp.KEYPAD:
        for _text, _action, kind in row:
            for palette in THEMES.values():
                assert kind in palette
                assert f"{kind}_fg" in palette


@pytest.mark.parametrize("text, action", [
    ("7", "digit:7"),
    (".", "decimal"),
    ("÷", "operator:÷"),
    ("=", "equals"),
    ("C", "clear"),
    ("⌫", "backspace"),
])
def test_action_for(text, action):
    assert CalculatorApp.action_for(text) == action


def test_action_for_unknown_key():
    with pytest.raises(KeyError):
        CalculatorApp.action_for("%")


@pytest.mark.parametrize("cols, max_cols, spans", [
    (4, 4, [1, 1, 1, 1]),
    (2, 4, [2, 2]),
    (3, 4, [1, 1, 2]),
])
def test_compute_spans(cols, max_cols, spans):
    assert CalculatorApp._compute_spans(cols, max_cols) == spans


def test_display_follows_every_key():
    assert walk("7+3=") == ["7", "7", "3", "10"]


def test_unknown_action_raises():
    app = _make_app()
    with pytest.raises(ValueError):
        app._on_key("percent")


def test_subtract_twice_scenario():
    assert final_display("9--2=") == "-2"


class _FakeWidget:
    def __init__(self):
        self.options = {}

    def configure(self, **kw):
        self.options.update(kw)


def _make_themed_app(theme="dark"):
    app = _make_app()
    app.theme = theme
    app.root = _FakeWidget()
    app.header = _FakeWidget()
    app.keypad_frame = _FakeWidget()
    app.display_frame = _FakeWidget()
    app.display_label = _FakeWidget()
    app.toggle_btn = _FakeWidget()
    app._keys = [
        (_FakeWidget(), kind)
        for row in CalculatorApp.KEYPAD
        for _text, _action, kind in row
    ]
    app._apply_theme()
    return app


def _assert_painted(app):
    palette = THEMES[app.theme]
    assert app.root.options["bg"] == palette["bg"]
    assert app.display_label.options["bg"] == palette["display_bg"]
    assert app.display_label.options["fg"] == palette["display_fg"]
    assert app.toggle_btn.options["text"] == CalculatorApp.TOGGLE_ICONS[app.theme]
    for btn, kind in app._keys:
        assert btn.options["bg"] == palette[kind]
        assert btn.options["fg"] == palette[f"{kind}_fg"]


def test_toggle_theme_switches_palettes():
    app = _make_themed_app()
    _assert_painted(app)
    assert app.toggle_btn.options["text"] == "☀️"

    app.toggle_theme()
    assert app.theme == "light"
    assert app.toggle_btn.options["text"] == "🌙"
    _assert_painted(app)

    app.toggle_theme()
    assert app.theme == "dark"
    assert app.toggle_btn.options["text"] == "☀️"
    _assert_painted(app)


def test_toggle_theme_leaves_engine_alone():
    app = _make_themed_app()
    for action in ("digit:7", "operator:+", "digit:3"):
        app._on_key(action)
    state = app.engine.state

    app.toggle_theme()
    assert app.engine.state == state
    assert app.engine.display == "3"
    assert app.display_var.get() == "3"
