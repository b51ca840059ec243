"""
Typer application for ``realm-clone``.

Usage::

    realm-clone realm-export.json                  # auto-detect old name
    realm-clone realm-export.json ajax ajax-dev
    realm-clone realm-export.json ajax ajax-dev --output clones/ajax-dev.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from realm_clone import __version__
from realm_clone.config import get_settings
from realm_clone.core.cloner import clone_realm
from realm_clone.core.errors import ConfigError, RealmCloneError
from realm_clone.core.logging import LogContext, get_logger
from realm_clone.documents import detect_realm_name, load_document, output_path_for, write_document

from .console import console
from .logging_config import LogFormat, LogLevel, configure_cli_logging
from .ui import render_error_panel, render_next_steps, render_summary_panel

log = get_logger(__name__)

app = typer.Typer(
    name="realm-clone",
    help="Clone a Keycloak realm export under a new realm name with fresh identifiers.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"realm-clone, version {__version__}")
        raise typer.Exit()


@app.command(no_args_is_help=True)
def clone(
    input_file: Annotated[
        Path,
        typer.Argument(help="Realm export JSON file", dir_okay=False),
    ],
    old_realm: Annotated[
        Optional[str],
        typer.Argument(help="Realm name in the export (default: auto-detect)"),
    ] = None,
    new_realm: Annotated[
        Optional[str],
        typer.Argument(help="Realm name for the clone"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file (default: <new realm>-realm-export.json)"),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", help="Directory for the derived output file"),
    ] = None,
    indent: Annotated[
        Optional[int],
        typer.Option("--indent", min=0, help="JSON indentation"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Transform without writing the output file"),
    ] = False,
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option("--log-level", case_sensitive=False, help="Logging level"),
    ] = None,
    log_format: Annotated[
        Optional[LogFormat],
        typer.Option("--log-format", case_sensitive=False, help="Log format"),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Clone a realm export so it can be imported alongside the original."""
    try:
        settings = get_settings()
    except ConfigError as e:
        configure_cli_logging(
            log_level=log_level or LogLevel.WARNING,
            log_format=log_format or LogFormat.CONSOLE,
        )
        log.error("settings_invalid", **e.to_dict())
        render_error_panel("Invalid Configuration", e.message, details=e.details)
        raise typer.Exit(1)

    configure_cli_logging(
        log_level=log_level or settings.log_level,
        log_format=log_format or settings.log_format,
    )

    if not input_file.exists():
        render_error_panel("File Not Found", f"File {input_file} not found")
        raise typer.Exit(1)

    with LogContext(input_file=str(input_file)):
        try:
            document = load_document(input_file)

            if old_realm is None:
                detected = detect_realm_name(document)
                if detected:
                    old_realm = detected
                    console.print(f"Auto-detected realm name: [cyan]{escape(old_realm)}[/cyan]")
                else:
                    old_realm = settings.default_old_realm
                    console.print(
                        "[yellow]⚠[/yellow] Could not auto-detect realm name, "
                        f"using default [cyan]{escape(old_realm)}[/cyan]"
                    )
            new_realm = new_realm or settings.default_new_realm

            console.print(f"Processing {escape(str(input_file))}...")
            console.print(
                f"Converting realm from [cyan]{escape(old_realm)}[/cyan] "
                f"to [cyan]{escape(new_realm)}[/cyan]"
            )

            result = clone_realm(document, old_realm, new_realm)

            target = output or output_path_for(
                new_realm,
                output_dir or settings.output_dir,
                settings.output_template,
            )
            if not dry_run:
                write_document(
                    document,
                    target,
                    indent=settings.indent if indent is None else indent,
                )
        except RealmCloneError as e:
            log.error("clone_failed", **e.to_dict())
            render_error_panel("Error Processing Realm Export", e.message)
            raise typer.Exit(1)

    if dry_run:
        console.print("[yellow]⚠[/yellow] Dry run: no file written")
    else:
        console.print(f"[green]✓[/green] Successfully created {escape(str(target))}")
    render_summary_panel(result, input_file, target, dry_run=dry_run)
    render_next_steps()


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
