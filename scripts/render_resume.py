#!/usr/bin/env python3
"""
Command-line interface for building the static resume page.

Subcommands:
- build: Load resume.json and write the rendered page (or the error page)
- toc: List the sections of a resume
- section: Print the HTML of one section
"""

import os
from pathlib import Path
from typing import List

import typer
from dotenv import load_dotenv

from cvsite.contexts.document import FetchError, ResumeParseError, load_resume
from cvsite.contexts.rendering import ResumeRenderer, build_site
from cvsite.contexts.rendering.site import SITE_OUTPUT_PATH
from cvsite.utils.settings import load_settings
from cvsite.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Render resume.json as a static HTML page",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    source: str = typer.Argument(
        None,
        help="resume.json path or URL (defaults to settings source.resume_path)",
    ),
    output_dir: Path = typer.Option(
        SITE_OUTPUT_PATH,
        "--output-dir",
        "-o",
        help="Directory to write the page to",
    ),
    override: List[str] = typer.Option(
        None,
        "--set",
        "-s",
        help="Settings override in dotlist form (e.g. rendering.lang=de)",
    ),
    log: bool = typer.Option(
        False,
        "--log",
        help="Write a log file to LOGS_PATH/build_TIMESTAMP/",
    ),
):
    """
    Build the resume page.

    On load failure the error page is written instead and the exit code is 1.

    Examples:\n

        $ render_resume.py build

        $ render_resume.py build data/resume.json -o site/

        $ render_resume.py build https://example.com/resume.json --set rendering.stylesheet=main.css
    """
    settings = load_settings(overrides=override)
    log_dir = LOGS_PATH / f"build_{now()}" if log else None

    typer.secho("\nBuilding resume page\n", fg=typer.colors.BLUE, bold=True)
    result = build_site(source=source, output_dir=output_dir, settings=settings, log_dir=log_dir)

    if result.success:
        typer.secho("✓ Build succeeded", fg=typer.colors.GREEN)
    else:
        typer.secho("✗ Failed to load resume data", fg=typer.colors.RED, err=True)
        typer.secho(f"  Error: {result.error}", err=True)

    typer.echo(f"  Source: {result.source}")
    typer.echo(f"  Page: {result.output_path}")
    typer.echo(f"  Time: {result.time_s:.2f}s")
    if result.log_dir:
        typer.echo(f"  Log: {result.log_dir / 'render.log'}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


def _load_or_exit(source: str):
    settings = load_settings()
    try:
        return load_resume(source or settings.source.resume_path)
    except (FetchError, ResumeParseError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("toc")
def toc_command(
    source: str = typer.Argument(None, help="resume.json path or URL"),
):
    """
    List the sections of a resume with their types and item counts.

    Example:\n

        $ render_resume.py toc resume.json
    """
    document = _load_or_exit(source)
    info = document.personal_info
    typer.secho(f"\n{info.name or '(no name)'}", fg=typer.colors.BLUE, bold=True)
    if info.title:
        typer.echo(info.title)
    typer.echo("")
    typer.echo(document.table_of_contents)


@app.command("section")
def section_command(
    section_type: str = typer.Argument(..., help="Section type (e.g. experience)"),
    source: str = typer.Argument(None, help="resume.json path or URL"),
):
    """
    Print the HTML of the first section of a type.

    Example:\n

        $ render_resume.py section projects resume.json
    """
    document = _load_or_exit(source)
    section = document.get_section(section_type)
    if section is None:
        typer.secho(f"No '{section_type}' section in resume", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    typer.echo(ResumeRenderer().render_section(section))


if __name__ == "__main__":
    app()
