"""Script entry-point.

Allows `python src/main.py get <url>` next to the installed `naive-httpie`
console script.
"""

from __future__ import annotations

import sys

# Windows consoles default to cp1252; response bodies are arbitrary UTF-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
