"""Module entrypoint for running storeopts as ``python -m storeopts``."""

from __future__ import annotations

from storeopts.cli import main


if __name__ == "__main__":
    main()
