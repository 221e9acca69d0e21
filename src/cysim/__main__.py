"""cysim CLI bootstrap."""

from __future__ import annotations

from cysim.cli.app import app

if __name__ == "__main__":
    app()
