"""CLI entry-point for Smart Variables."""

from __future__ import annotations

from smart_variables.cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
