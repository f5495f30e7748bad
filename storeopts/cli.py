"""Command-line interface for storeopts.

Responsibilities:
- Expose commands to tokenize and check option strings for one domain.
- Configure loguru output for library events.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Callable

import typer

from .cli_rendering import echo_changed_fields, echo_option_map, exit_with_command_error
from .convenience import (
    apply_column_family_options,
    apply_db_options,
    apply_mutable_options,
    apply_table_options,
    parse_map,
)
from .models.options import BlockBasedTableOptions, ColumnFamilyOptions, DBOptions, MutableCFOptions
from .models.results import OptionsResult
from .telemetry import configure_logging

app = typer.Typer(
    name="storeopts",
    no_args_is_help=True,
    help="Parse and check storage engine option strings.",
)


class Domain(str, Enum):
    DB = "db"
    CF = "cf"
    TABLE = "table"
    MUTABLE = "mutable"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_DOMAINS: dict[Domain, tuple[Callable[[], Any], Callable[[Any, str], OptionsResult[Any]]]] = {
    Domain.DB: (DBOptions, apply_db_options),
    Domain.CF: (ColumnFamilyOptions, apply_column_family_options),
    Domain.TABLE: (BlockBasedTableOptions, apply_table_options),
    Domain.MUTABLE: (MutableCFOptions, apply_mutable_options),
}


@app.callback()
def configure(
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", case_sensitive=False, help="Library log level."),
    ] = LogLevel.WARNING,
) -> None:
    """Parse and check storage engine option strings."""

    configure_logging(log_level.value)


@app.command("tokenize")
def tokenize_command(
    options: Annotated[str, typer.Argument(help="Option string, e.g. `a=1;b={c=2}`.")],
) -> None:
    """Print the raw key/value pairs of an option string."""

    try:
        opts_map = parse_map(options).unwrap()
    except Exception as exc:
        exit_with_command_error("tokenize", exc)

    echo_option_map(opts_map)


@app.command("check")
def check_command(
    options: Annotated[str, typer.Argument(help="Option string to apply.")],
    domain: Annotated[
        Domain,
        typer.Option("--domain", help="Options domain the string targets."),
    ] = Domain.CF,
    base: Annotated[
        str | None,
        typer.Option("--base", help="Option string applied to the defaults first."),
    ] = None,
) -> None:
    """Apply an option string and print the fields it changes."""

    make_default, apply = _DOMAINS[domain]
    try:
        base_options = make_default()
        if base is not None:
            base_options = apply(base_options, base).unwrap()
        updated = apply(base_options, options).unwrap()
    except Exception as exc:
        exit_with_command_error("check", exc)

    echo_changed_fields(base_options, updated)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
