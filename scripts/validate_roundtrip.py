#!/usr/bin/env python3
"""
Command-line interface for testing the editor's load -> form -> JSON roundtrip.

A resume passes when projecting it into the editor form and serializing the
untouched form reproduces the document (blank lines in skills/achievements aside).

Usage:
    python scripts/validate_roundtrip.py test <resume.json>
    python scripts/validate_roundtrip.py batch <directory> [--pattern "*.json"]
"""

from pathlib import Path
from typing import List

import typer
from typing_extensions import Annotated

from cvsite.contexts.document import FetchError, ResumeParseError, load_resume
from cvsite.contexts.editor import validate_roundtrip
from cvsite.utils.settings import load_settings

app = typer.Typer(
    add_completion=False,
    help="Test the editor's form roundtrip on resume JSON files",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def run_roundtrip(source: str, override: List[str] = None, verbose: bool = False) -> bool:
    """Load one resume, validate it, print the outcome."""
    try:
        document = load_resume(source)
    except (FetchError, ResumeParseError) as e:
        typer.secho(f"  ✗ {source}: {e}", fg=typer.colors.RED, err=True)
        return False

    result = validate_roundtrip(document, settings=load_settings(overrides=override))
    if result.success:
        typer.secho(f"  ✓ {source} ({result.time_ms:.1f}ms)", fg=typer.colors.GREEN)
        return True

    typer.secho(f"  ✗ {source}: {result.num_diffs} diffs", fg=typer.colors.RED)
    for line in result.diffs if verbose else result.diffs[:5]:
        typer.echo(f"      {line}")
    if not verbose and result.num_diffs > 5:
        typer.echo(f"      ... ({result.num_diffs - 5} more, use --verbose)")
    return False


@app.command("test")
def test_command(
    source: Annotated[str, typer.Argument(help="resume.json path or URL")],
    override: Annotated[
        List[str],
        typer.Option("--set", "-s", help="Settings override in dotlist form"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show every difference"),
    ] = False,
):
    """
    Validate the roundtrip of a single resume.

    Example:\n

        $ validate_roundtrip.py test resume.json
    """
    typer.secho("\nRoundtrip test\n", fg=typer.colors.BLUE, bold=True)
    passed = run_roundtrip(source, override, verbose)
    raise typer.Exit(code=0 if passed else 1)


@app.command("batch")
def batch_command(
    directory: Annotated[
        Path,
        typer.Argument(
            help="Directory of resume JSON files",
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
    ],
    pattern: Annotated[
        str,
        typer.Option("--pattern", "-p", help="Glob pattern for files"),
    ] = "*.json",
    override: Annotated[
        List[str],
        typer.Option("--set", "-s", help="Settings override in dotlist form"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show every difference"),
    ] = False,
):
    """
    Validate the roundtrip of every matching file in a directory.

    Example:\n

        $ validate_roundtrip.py batch data/ --pattern "resume*.json"
    """
    files = sorted(directory.glob(pattern))
    if not files:
        typer.secho(f"No files matching '{pattern}' in {directory}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nRoundtrip test ({len(files)} files)\n", fg=typer.colors.BLUE, bold=True)
    passed = sum(run_roundtrip(str(path), override, verbose) for path in files)

    typer.echo(f"\nPassed: {passed}/{len(files)}")
    raise typer.Exit(code=0 if passed == len(files) else 1)


if __name__ == "__main__":
    app()
