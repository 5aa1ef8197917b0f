"""
addonscan CLI - command-line interface for listing installed add-ons.

Reads the AddOns root from CLASSIC_WOW_PATH (or an explicit path) and prints
the add-ons found there.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from addonscan.logging_config import setup_logging
from addonscan.models.addon import Addon

app = typer.Typer(
    name="addonscan",
    help="addonscan - Inventory of installed game add-ons",
    no_args_is_help=True,
)

console = Console()


def _init_logging(verbose: bool) -> None:
    # Fall back to console-only logging if file logging is not permitted
    try:
        setup_logging(context="cli", level="DEBUG" if verbose else None)
    except PermissionError:
        import logging

        logging.basicConfig(level=logging.WARNING)


def _print_addon(addon: Addon, depth: int = 0) -> None:
    indent = "  " * depth
    if addon.version is not None:
        console.print(f"{indent}{addon.title}: v{addon.version}", markup=False)
    else:
        console.print(f"{indent}{addon.title}", markup=False)

    for child in addon.attachments or ():
        _print_addon(child, depth + 1)


@app.command()
def scan(
    path: Optional[Path] = typer.Argument(
        None, help="AddOns directory (defaults to $CLASSIC_WOW_PATH/Interface/AddOns)"
    ),
    game_path: Optional[Path] = typer.Option(
        None, "--game-path", help="Game installation root containing Interface/AddOns"
    ),
    show_all: bool = typer.Option(
        False, "--all", help="Also list add-ons that declare no version"
    ),
    group: bool = typer.Option(True, help="Nest attachments under their add-on"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """
    List the add-ons installed in an AddOns directory.

    By default only add-ons with a known version are shown, as
    "Title: vVersion"; an unversioned add-on is hidden along with its
    attachments unless --all is given.
    """
    from addonscan.config import settings
    from addonscan.parsers.base import AddonIOError
    from addonscan.scanner import resolve_addons_root, scan_addons

    _init_logging(verbose)

    if path is not None:
        root = path
    elif game_path is not None:
        root = resolve_addons_root(game_path)
    else:
        root = settings.addons_directory

    if root is None:
        console.print(
            "[bold red]Error:[/bold red] No AddOns directory given. "
            "Pass a path or set CLASSIC_WOW_PATH."
        )
        raise typer.Exit(1)

    try:
        result = scan_addons(
            root, group=group, separator=settings.attachment_separator
        )
    except AddonIOError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        shown = result.addons if show_all else result.versioned()
        for addon in shown:
            _print_addon(addon)

        for failure in result.failures:
            console.print(
                f"[yellow]⚠ {failure.path.name}:[/yellow] {failure.message}"
            )

        console.print()
        console.print("[bold]Summary:[/bold]")
        console.print(f"  Add-ons: {len(result.addons)}")
        console.print(f"  Failed: {result.failure_count}")

    if result.has_failures:
        raise typer.Exit(1)


@app.command()
def show(
    directory: Path = typer.Argument(..., help="Add-on directory to read"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Extract and print a single add-on's manifest details."""
    from addonscan.parsers.base import ExtractorError
    from addonscan.parsers.toc import extract_addon

    _init_logging(verbose)

    try:
        addon = extract_addon(directory)
    except ExtractorError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(addon.model_dump_json(indent=2))
        return

    console.print(f"Title: {addon.title}", markup=False)
    console.print(f"Version: {addon.version or 'N/A'}", markup=False)
    console.print(f"Path: {addon.path}", markup=False)


if __name__ == "__main__":
    app()
