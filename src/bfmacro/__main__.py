"""Module entry-point for ``python -m bfmacro``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
