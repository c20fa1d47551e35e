"""Development entry-point for naive-httpie (no install needed).

Run modes:
- installed: `naive-httpie get https://httpbin.org/get` (console script
  `cli.main:run`, declared in pyproject.toml)
- from a checkout: `python -m main post https://httpbin.org/post a=1`

The checkout mode needs this shim because the packages live under `src/`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
