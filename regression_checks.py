import sys

from calculator_state import CalculatorState


_KEY_ACTIONS = {
	".": "decimal",
	"=": "equals",
	"C": "clear",
	"<": "backspace",
}


def keys_to_actions(keys: str) -> list[str]:
	"""Convierte una secuencia como '9+1*2=' en acciones de botón.

	Dígitos y operadores se toman tal cual; 'C' es AC y '<' retroceso.
	Los espacios se ignoran.
	"""
	actions = []
	for key in keys:
		if key.isspace():
			continue
		if key in "0123456789":
			actions.append(f"digit:{key}")
		elif key in "+-*/":
			actions.append(f"operator:{key}")
		elif key in _KEY_ACTIONS:
			actions.append(_KEY_ACTIONS[key])
		else:
			raise ValueError(f"Unknown key: {key!r}")
	return actions


def _walk(keys: str):
	shown: list[str] = []
	state = CalculatorState(display_sink=shown.append)
	for action in keys_to_actions(keys):
		state.dispatch(action)
	return state, shown


def inspect_sequence(keys: str) -> None:
	"""Imprime la pantalla tras cada pulsación de la secuencia."""
	state = CalculatorState()
	print("Key inspection")
	print(f"keys:           {keys}")
	for i, action in enumerate(keys_to_actions(keys), start=1):
		state.dispatch(action)
		print(f"  {i}. {action:<12} -> {state.derive_display()}")
	print(f"current input:  {state.current_input!r}")
	print(f"previous value: {state.previous_value!r}")
	print(f"pending op:     {state.pending_operator!r}")


def collect_checks() -> list[tuple[str, bool]]:
	checks: list[tuple[str, bool]] = []

	state, _ = _walk("5+3=")
	checks.append(("5 + 3 = shows 8", state.derive_display() == "8"))

	state, _ = _walk("7/0=")
	checks.append(("7 / 0 = shows Error", state.derive_display() == "Error"))

	state, _ = _walk("1.5")
	checks.append(("1 . 5 shows 1.5", state.derive_display() == "1.5"))

	state, shown = _walk("9+1*2=")
	checks.append(("9 + 1 * folds to 10", "10" in shown))
	checks.append(("9 + 1 * 2 = shows 20", state.derive_display() == "20"))

	state, shown = _walk("C<")
	checks.append(("clear then backspace shows 0", state.derive_display() == "0"))
	checks.append(("backspace on empty input does not refresh", shown == ["0"]))

	state, _ = _walk("007")
	checks.append(("repeated leading zeros collapse", state.current_input == "7"))

	state, _ = _walk("..5.")
	checks.append(("single decimal point with leading zero", state.current_input == "0.5"))

	state, _ = _walk("+5=")
	checks.append(("operator first defaults left operand to 0", state.derive_display() == "5"))

	state, _ = _walk("4*=")
	checks.append(("equals without new input reuses previous value", state.derive_display() == "16"))

	state, _ = _walk("7/0=+1=")
	checks.append(("Error propagates through later arithmetic", state.derive_display() == "Error"))

	state, _ = _walk("7/0=C")
	checks.append(("clear recovers from Error", state.derive_display() == "0"))

	state, _ = _walk(".1+.2=")
	checks.append((
		"float artifacts are shown as-is",
		state.derive_display() == "0.30000000000000004",
	))

	state, _ = _walk("12.5<<<<")
	checks.append(("backspace never reaches previous value", state.derive_display() == "0"))

	return checks


def run_regressions() -> None:
	checks = collect_checks()
	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "9+1*2="
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")
		try:
			inspect_sequence(keys)
		except ValueError as exc:
			raise SystemExit(str(exc))
	else:
		run_regressions()
