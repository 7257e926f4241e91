"""Run script.

Lets the CLI run with `python -m main` from inside `src/` during development,
next to the `plan-prices` console script.
"""

from __future__ import annotations

import sys

# Rich tables use non-ASCII glyphs; cp1252 Windows consoles choke on them.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
