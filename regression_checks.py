from calculator_engine import ERROR_MARKER, CalculatorEngine
from calculator_ui import CalculatorApp
import sys


_KEY_ALIASES = {
	"-": "−",
	"*": "×",
	"/": "÷",
	"<": "⌫",
	"c": "C",
}


class _FakeVar:
	def __init__(self):
		self.v = ""

	def set(self, x):
		self.v = x

	def get(self):
		return self.v


class _DummyApp(CalculatorApp):
	def __init__(self):
		pass


def _make_app() -> _DummyApp:
	app = _DummyApp()
	app.engine = CalculatorEngine()
	app.display_var = _FakeVar()
	app.display_var.set(app.engine.display)
	return app


def walk(keys: str) -> list[str]:
	"""Pulsa cada tecla en una app sin ventana y devuelve las pantallas."""
	app = _make_app()
	states = []
	for key in keys:
		if key.isspace():
			continue
		app._on_key(CalculatorApp.action_for(_KEY_ALIASES.get(key, key)))
		states.append(app.display_var.get())
	return states


def final_display(keys: str) -> str:
	states = walk(keys)
	return states[-1] if states else "0"


def inspect_keys(keys: str) -> None:
	"""Imprime la pantalla tras cada pulsación."""
	print("Key inspection")
	print(f"keys:    {keys}")
	for key, text in zip((k for k in keys if not k.isspace()), walk(keys)):
		print(f"  {key!s:>2} -> {text}")


def collect_checks() -> tuple[list[tuple[str, bool]], list[tuple[str, str, str]]]:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for keys, expected in (
		("7+3=", "10"),
		("9--2=", "-2"),
		("12*3-6=", "30"),
		("1/3=", "0.3333333333"),
		("0.1+0.2=", "0.3"),
		("999999999999*999999999999=", "1e+24"),
		("2.5*4=", "10"),
	):
		expected_actual.append((keys, expected, final_display(keys)))

	states_div0 = walk("5/0=9")
	checks.append((
		"division by zero shows the error marker",
		states_div0[-2] == ERROR_MARKER,
	))
	checks.append((
		"digit after error starts a fresh number",
		states_div0[-1] == "9",
	))
	checks.append((
		"operator after error is ignored",
		final_display("5/0=+") == ERROR_MARKER,
	))
	checks.append((
		"backspace after error resets to 0",
		final_display("5/0=<") == "0",
	))
	checks.append((
		"decimal after error starts at 0.",
		final_display("5/0=.") == "0.",
	))
	checks.append((
		"fold by zero on operator shows the error marker",
		final_display("8/0+") == ERROR_MARKER,
	))

	checks.append((
		"leading zero collapses",
		final_display("05") == "5",
	))
	checks.append((
		"13th digit is rejected",
		final_display("1234567890123") == "123456789012",
	))
	checks.append((
		"second decimal point is ignored",
		final_display("1.2.3") == "1.23",
	))
	checks.append((
		"backspace on one character returns to 0",
		final_display("7<") == "0",
	))
	checks.append((
		"clear resets everything",
		final_display("7+3C=") == "0",
	))
	checks.append((
		"equals without operator keeps the display",
		final_display("42=") == "42",
	))
	checks.append((
		"digit after equals starts a new number",
		final_display("7+3=4") == "4",
	))
	checks.append((
		"decimal after operator starts at 0.",
		final_display("7+.") == "0.",
	))
	checks.append((
		"long results fit in the display",
		all(len(text) <= 12 for text in walk("999999999999*999999999999=")),
	))

	for label, expected, actual in expected_actual:
		checks.append((f"{label} gives {expected}", expected == actual))

	return checks, expected_actual


def run_regressions() -> None:
	checks, expected_actual = collect_checks()

	for name, ok in checks:
		print(f"{'OK  ' if ok else 'FAIL'} {name}")

	print("\nKey walks:")
	for keys, expected, actual in expected_actual:
		if expected == actual:
			print(f"  {keys:<28} = {actual}")
		else:
			print(f"  {keys:<28} ! {actual} (expected {expected})")

	failed = sum(1 for _name, ok in checks if not ok)
	if failed:
		raise SystemExit(f"{failed} of {len(checks)} regression checks failed.")

	print(f"\nAll {len(checks)} regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "9--2="
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing keys after --inspect")
		inspect_keys(keys)
	else:
		run_regressions()
