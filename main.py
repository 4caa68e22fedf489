# Main.py
""""" Entry point for the Desk Calculator console.

   Responsibilities:
   - Load configuration and logging
   - Feed keys (command line or interactive input) into the CalculatorController
   - Print the display and any calculator errors

   Usage:
     python main.py 2 + 3 × 4 =        ->  20
     python main.py 200 + 10 % =       ->  220  (numbers are split into digit keys)
     python main.py                     ->  interactive, keys separated by spaces
                                            :copy, :set <key> <value>, :quit

"""""
import sys

from Calculator import config_manager as config_manager
from Calculator import error as E
from Calculator.CalcEngine import Engine
from Calculator.logging_config import setup_logging
from Calculator.UI import KEYPAD, CalculatorController


def print_error(error):
    print(f"Error {error.code}: {error.user_message()}")


def split_keys(tokens):
    """Expand typed tokens into keypad labels.

    A token that is not a label itself, but made only of label characters,
    is pressed character by character: "200" -> "2", "0", "0" and "12,5" -> "1", "2", ",", "5".
    Anything else is passed through and rejected by the controller.
    """
    keys = []
    for token in tokens:
        if token not in KEYPAD and len(token) > 1 and all(char in KEYPAD for char in token):
            keys.extend(token)
        else:
            keys.append(token)
    return keys


def build_controller(all_settings):
    engine = Engine(settings=config_manager.engine_settings(all_settings))
    controller = CalculatorController(engine)
    controller.error_raised.connect(print_error)
    return controller


def handle_command(controller, line, all_settings):
    """Run a ':' console command. Returns False when the loop should stop."""
    parts = line[1:].split()
    command = parts[0] if parts else ""

    if command in ("quit", "q", "exit"):
        return False

    elif command == "copy":
        if controller.copy_display():
            print("Copied:", controller.display())

    elif command == "set" and len(parts) == 3:
        key_value, raw = parts[1], parts[2]
        try:
            new_settings = dict(all_settings)
            new_settings[key_value] = config_manager.coerce_setting(key_value, raw)
            config_manager.save_setting(new_settings)
        except E.ConfigError as e:
            print_error(e)
        else:
            all_settings.update(new_settings)
            print("Saved. Restart to apply.")

    else:
        print_error(E.InputError(line))

    return True


def run_interactive(controller, all_settings):
    print(controller.display())
    for line in sys.stdin:
        line = line.strip()
        if not line:
            continue
        if line.startswith(":"):
            if not handle_command(controller, line, all_settings):
                break
            continue
        controller.press_sequence(split_keys(line.split()))
        print(controller.display())


def main(argv=None):

    """
    Load configuration and start the console.
    - Keep this thin: no business logic here.
    """

    argv = sys.argv[1:] if argv is None else argv
    all_settings = config_manager.load_setting_value("all")

    try:
        controller = build_controller(all_settings)
    except E.ConfigError as e:
        print_error(e)
        return 1

    try:
        setup_logging(all_settings["log_level"], all_settings["log_file"] or None)
    except OSError as e:
        print_error(E.ConfigError(f"log_file: {e}", code="5002"))
        return 1

    if argv:
        accepted = controller.press_sequence(split_keys(argv))
        print(controller.display())
        return 0 if accepted else 1

    run_interactive(controller, all_settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
