"""Allow ``python -m vec2math`` to run the command line interface."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    raise SystemExit(main())
