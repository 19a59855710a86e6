"""Porutham command line interface package."""

from __future__ import annotations

from collections.abc import Sequence

import click
from typer.main import get_command

from ..boot.logging import configure_logging
from .app import app

__all__ = ["app", "console_main", "main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Invoke the Typer application and return its exit code."""

    configure_logging(level="WARNING")
    command = get_command(app)
    args = list(argv) if argv is not None else None
    try:
        result = command.main(args=args, prog_name="porutham", standalone_mode=False)
    except click.exceptions.Exit as exc:
        return int(exc.exit_code or 0)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    # Non-standalone click returns the exit code of typer.Exit instead of raising.
    return result if isinstance(result, int) else 0


def console_main() -> None:
    raise SystemExit(main())
