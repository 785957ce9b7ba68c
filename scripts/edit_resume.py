#!/usr/bin/env python3
"""
Command-line interface for editing resume.json.

Subcommands:
- show: Print the widget values the editor form would show
- form: Write the editor form as an HTML page
- generate: Apply edits to the form and generate new resume JSON
- apply: Apply posted form data (JSON mapping of widget id -> text) and generate JSON
"""

import json
import os
from pathlib import Path
from typing import List

import typer
from dotenv import load_dotenv

from cvsite.contexts.document import CvsiteError, SectionType
from cvsite.contexts.editor import EditorSession, ExportResult
from cvsite.contexts.editor.logger import setup_editor_logger
from cvsite.utils.settings import load_settings
from cvsite.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Edit resume.json through the editor form",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def open_session(source: str, yes: bool = False, override: List[str] = None) -> EditorSession:
    """Create an editor session and load the resume, reporting a fallback to the empty form."""
    confirm = (lambda message: True) if yes else None
    session = EditorSession(settings=load_settings(overrides=override), confirm=confirm)
    try:
        loaded = session.load(source)
    except CvsiteError as e:
        typer.secho(f"\n✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if not loaded:
        typer.secho(f"Failed to load resume data: {session.load_error}", fg=typer.colors.RED, err=True)
        typer.secho("Starting from an empty resume\n", fg=typer.colors.YELLOW, err=True)
    return session


def print_export_result(result: ExportResult, show: bool) -> None:
    """Helper to print where generated JSON went."""
    color = typer.colors.GREEN if result.copied else typer.colors.YELLOW
    typer.secho(f"\n{result.message}", fg=color)
    if result.output_path:
        typer.echo(f"  Saved to: {result.output_path}")
    # Without a clipboard or a file the printed text is the only copy
    if show or not (result.copied or result.output_path):
        typer.echo("")
        typer.echo(result.text, nl=False)


def _parse_assignment(assignment: str, option: str) -> tuple:
    if "=" not in assignment:
        typer.secho(f"Error: {option} expects KEY=VALUE, got '{assignment}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    key, value = assignment.split("=", 1)
    return key.strip(), value


def _parse_removal(removal: str) -> tuple:
    section_type, _, position = removal.rpartition(":")
    if not section_type or not position.isdigit():
        typer.secho(f"Error: --remove expects TYPE:POSITION, got '{removal}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return section_type, int(position)


@app.command("show")
def show_command(
    source: str = typer.Argument(None, help="resume.json path or URL"),
):
    """
    Print every form widget with its current value.

    Example:\n

        $ edit_resume.py show resume.json
    """
    session = open_session(source)
    state = session.state

    typer.secho("\nFields", fg=typer.colors.BLUE, bold=True)
    for widget_id, value in state.scalars.items():
        first_line = value.splitlines()[0] if value else ""
        typer.echo(f"  {widget_id:26} {first_line}")

    for section_type in SectionType.list_types():
        groups = state.groups[section_type]
        typer.secho(f"\n{section_type} ({len(groups)})", fg=typer.colors.BLUE, bold=True)
        for position, group in enumerate(groups):
            summary = " | ".join(value.splitlines()[0] for value in group.values.values() if value)
            typer.echo(f"  [{position}] {group.label}: {summary}")


@app.command("form")
def form_command(
    source: str = typer.Argument(None, help="resume.json path or URL"),
    output: Path = typer.Option(
        Path("editor.html"),
        "--output",
        "-o",
        help="HTML file to write",
    ),
):
    """
    Write the editor form as a standalone HTML page.

    Example:\n

        $ edit_resume.py form resume.json -o editor.html
    """
    session = open_session(source)
    output.write_text(session.render_form(), encoding="utf-8")
    typer.secho(f"✓ Form written to: {output}", fg=typer.colors.GREEN)


@app.command("generate")
def generate_command(
    source: str = typer.Argument(None, help="resume.json path or URL"),
    assignments: List[str] = typer.Option(
        None,
        "--set",
        "-s",
        help="Set a field widget: WIDGET_ID=TEXT (e.g. title='Staff Engineer')",
    ),
    additions: List[str] = typer.Option(
        None,
        "--add",
        "-a",
        help="Append an item: TYPE=JSON (e.g. education='{\"degree\": \"MSc\"}')",
    ),
    removals: List[str] = typer.Option(
        None,
        "--remove",
        "-r",
        help="Remove the item displayed at a position: TYPE:POSITION (e.g. experience:0)",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write the JSON to",
    ),
    no_copy: bool = typer.Option(
        False,
        "--no-copy",
        help="Do not copy the JSON to the clipboard",
    ),
    show: bool = typer.Option(
        False,
        "--show",
        help="Always print the generated JSON",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Remove items without asking",
    ),
    override: List[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings override in dotlist form (e.g. document.missing_sections=error)",
    ),

    log: bool = typer.Option(
        False,
        "--log",
        help="Write a log file to LOGS_PATH/generate_TIMESTAMP/",
    ),
):
    """
    Load a resume into the form, apply edits and generate JSON.

    Removals are applied first (positions refer to the loaded order), then
    additions, then field assignments.

    Examples:\n

        $ edit_resume.py generate resume.json --set title="Staff Engineer" -o new.json

        $ edit_resume.py generate resume.json --remove experience:2 --yes

        $ edit_resume.py generate --add projects='{"name": "cvsite", "url": ""}' --show
    """
    if log:
        log_file = setup_editor_logger(LOGS_PATH / f"generate_{now()}", action="generate")
        typer.echo(f"Log: {log_file}")

    session = open_session(source, yes=yes, override=override)

    try:
        # Highest positions first so earlier removals don't shift later ones
        for section_type, position in sorted(map(_parse_removal, removals or []), key=lambda r: -r[1]):
            if session.remove_item(section_type, position):
                typer.echo(f"Removed {section_type} item {position}")
            else:
                typer.echo(f"Kept {section_type} item {position}")

        for addition in additions or []:
            section_type, raw_item = _parse_assignment(addition, "--add")
            item = json.loads(raw_item) if raw_item.strip() else {}
            if not isinstance(item, dict):
                typer.secho(f"Error: --add {section_type} needs a JSON object", fg=typer.colors.RED, err=True)
                raise typer.Exit(code=1)
            group = session.add_item(section_type, item)
            typer.echo(f"Added {group.label}")

        for assignment in assignments or []:
            widget_id, value = _parse_assignment(assignment, "--set")
            session.set_value(widget_id, value.replace("\\n", "\n"))

        result = session.generate(output_path=output, copy=not no_copy)
    except (CvsiteError, ValueError, IndexError) as e:
        typer.secho(f"\n✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    print_export_result(result, show)


@app.command("apply")
def apply_command(
    form_data: Path = typer.Argument(
        ...,
        help="JSON file holding posted form data (widget id -> text)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    source: str = typer.Argument(None, help="resume.json path or URL the form was made from"),
    output: Path = typer.Option(None, "--output", "-o", help="File to write the JSON to"),
    no_copy: bool = typer.Option(False, "--no-copy", help="Do not copy the JSON to the clipboard"),
    show: bool = typer.Option(False, "--show", help="Always print the generated JSON"),
):
    """
    Generate JSON from data posted by the HTML editor form.

    Example:\n

        $ edit_resume.py apply posted.json resume.json -o resume.new.json
    """
    data = json.loads(form_data.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        typer.secho("Error: form data must be a JSON object", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    session = open_session(source)
    try:
        session.apply_form_data(data)
        result = session.generate(output_path=output, copy=not no_copy)
    except CvsiteError as e:
        typer.secho(f"\n✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    print_export_result(result, show)


if __name__ == "__main__":
    app()
