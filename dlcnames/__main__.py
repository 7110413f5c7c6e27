"""Module entrypoint for running dlcnames as ``python -m dlcnames``."""

from __future__ import annotations

from dlcnames.cli import main


if __name__ == "__main__":
    main()
