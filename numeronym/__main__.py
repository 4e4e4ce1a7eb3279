"""Module entrypoint for running Numeronym as ``python -m numeronym``."""

from __future__ import annotations

from numeronym.cli import main


if __name__ == "__main__":
    main()
