# src/plainsettings/cli.py
"""
plainsettings Command Line Interface (CLI).

Two commands built with `typer` and `rich`:

- **inspect**: parse a settings file on its own and show what each line
  would be inferred as. No fields are involved, so unknown keys are fine.
- **check**: load a settings file into a fresh :class:`EngineSettings` and show
  the resulting values plus every diagnostic.

Usage
-----
    $ plainsettings inspect settings.txt
    $ plainsettings check settings.txt --advisory
    $ plainsettings check settings.txt --json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from plainsettings.core.contracts.report import LoadReport
from plainsettings.core.errors import MissingSettingPolicy, SettingsError
from plainsettings.core.inference import infer_value
from plainsettings.core.parser import iter_entries
from plainsettings.engine import ENGINE_FIELDS, EngineSettings, engine_registry
from plainsettings.loader import SOURCE_ENCODING, SOURCE_ERRORS, SettingsLoader

load_dotenv()

app = typer.Typer(
    help="plainsettings: inspect and check plain-text key/value settings files.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _render_values(settings: EngineSettings) -> None:
    """Print the current engine values as a key/value table."""
    table = Table(title="Engine settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, (attr, _kind) in ENGINE_FIELDS.items():
        table.add_row(key, repr(getattr(settings, attr)))
    console.print(table)


def _quiet_logger() -> logging.Logger:
    """Logger for loads whose diagnostics are rendered by the CLI itself."""
    logger = logging.getLogger("plainsettings.cli")
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


def _render_diagnostics(report: LoadReport) -> None:
    for diagnostic in report.diagnostics:
        console.print(f"[yellow]⚠️ {escape(diagnostic.render())}[/yellow]")


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def inspect(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Settings file to parse.",
        ),
    ],
) -> None:
    """
    Show how every line of a settings file is parsed and inferred.

    Exits with code 1 when the file contains malformed lines.
    """
    table = Table(title=str(file))
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Key", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Value")

    malformed = 0
    with file.open(encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS) as handle:
        for parsed in iter_entries(handle):
            if parsed.is_err():
                malformed += 1
                console.print(f"[red]{escape(parsed.unwrap_err().render())}[/red]")
                continue
            entry = parsed.unwrap()
            inferred = infer_value(entry.text)
            table.add_row(
                str(entry.line_number), entry.key, inferred.kind.value, repr(inferred.value)
            )

    console.print(table)
    if malformed:
        raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def check(
    file: Annotated[
        Path,
        typer.Argument(help="Settings file to load into the engine settings."),
    ],
    advisory: Annotated[
        bool,
        typer.Option(
            "--advisory/--fatal",
            help="Collect every problem instead of stopping at the first one.",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the load report as JSON."),
    ] = False,
) -> None:
    """
    Load a settings file into default engine settings and report the result.

    Exits with code 1 when any diagnostic was produced.
    """
    settings = EngineSettings()
    policy = MissingSettingPolicy.ADVISORY if advisory else MissingSettingPolicy.FATAL
    loader = SettingsLoader(
        engine_registry(settings), file, policy=policy, logger=_quiet_logger()
    )

    try:
        report = loader.load()
    except SettingsError as e:
        if as_json:
            typer.echo(json.dumps({"error": e.diagnostic.model_dump(mode="json")}, indent=2))
            raise typer.Exit(code=1) from e
        console.print(f"[bold red]❌ {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        _render_values(settings)
        _render_diagnostics(report)

    if not report.ok:
        raise typer.Exit(code=1)
    if not as_json:
        console.print(f"[bold green]✅ {len(report.bound)} setting(s) bound.[/bold green]")


if __name__ == "__main__":
    app()
