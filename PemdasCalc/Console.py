# Console.py
"""""
Line-oriented front-end for the PEMDAS Calculator.

Reads one expression per line, prints the rendered result (or the error) and
prompts again until 'q' / 'Q' or end of input. The quit check happens here,
before MathEngine ever sees the line.
"""""

import sys

from . import config_manager as config_manager
from . import MathEngine as MathEngine
from . import error as E


BANNER = (
    "=============================\n"
    "   Python Calculator (PEMDAS)\n"
    "=============================\n"
)
PROMPT = "Enter expression (or Q to quit): "


def is_quit(line):
    return line.strip().lower() == "q"


def main(stdin=None, stdout=None):
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    # Settings are read once per session, not per line
    settings = config_manager.load_setting_value("all")

    print(BANNER, file=stdout)

    while True:
        stdout.write(PROMPT)
        stdout.flush()

        line = stdin.readline()
        if line == "":
            # End of input: finish the prompt line before saying goodbye
            stdout.write("\n")
            break

        line = line.rstrip("\r\n")
        if is_quit(line):
            break

        try:
            result = MathEngine.calculate(line, settings)
            print(f"Result {result}\n", file=stdout)
        except E.MathError as e:
            print(f"Error {e.code}: {e}\n", file=stdout)

    print("Goodbye!", file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
