"""Command-line interface for Chord Finder.

Provides commands for:
- identify: Name the chord spelled by a list of notes
- spell: Spell the notes of a chord symbol
- templates: Show the chord template library
"""

import typer
from dataclasses import asdict
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core import pc_to_name
from .input import parse_notes_input, parse_chord_symbol, prefer_flats_from_input
from .inference import Candidate, ChordDetector, TEMPLATES, spell_chord_tones
from .output import notes_list, chord_tones_from_root

app = typer.Typer(
    name="chord-finder",
    help="Name chords from notes and spell notes from chord symbols",
    rich_markup_mode="markdown",
)
console = Console()


@app.command()
def identify(
    notes: str = typer.Argument(..., help='Notes to name, e.g. "C E G Bb"'),
    flats: Optional[bool] = typer.Option(
        None, "--flats/--sharps", help="Force flat or sharp names (default: follow the input)"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Name the most likely chord(s) for a list of notes.

    Examples:
        chord-finder identify "C E G Bb"
        chord-finder identify "b-flat, d, f, a-flat" --sharps
        chord-finder identify "C Eb Gb A" --json
    """
    parsed = parse_notes_input(notes)

    if not parsed.ok:
        if json_output:
            console.print_json(data={
                "ok": False,
                "error": parsed.kind.value,
                "message": parsed.message,
                "warnings": parsed.warnings,
            })
        else:
            _show_warnings(parsed.warnings)
            console.print(f"[red]Error: {escape(parsed.message)}[/red]")
        raise typer.Exit(1)

    prefer_flats = prefer_flats_from_input(notes) if flats is None else flats

    detector = ChordDetector()
    candidates = detector.detect(
        parsed.notes, lambda pc: pc_to_name(pc, prefer_flats)
    )
    best = candidates[0] if candidates else None

    if json_output:
        console.print_json(data={
            "ok": True,
            "notes": parsed.notes,
            "normalized_input": parsed.normalized_input,
            "prefer_flats": prefer_flats,
            "candidates": [asdict(c) for c in candidates],
            "warnings": parsed.warnings,
        })
        return

    console.print(f"\n[bold blue]Notes: {notes_list(parsed.notes, prefer_flats)}[/bold blue]")
    _show_warnings(parsed.warnings)

    if best is None:
        console.print("[yellow]No chord matches these notes.[/yellow]")
        return

    console.print(f"   [green]Best match: {escape(best.name)}[/green]")
    tones = chord_tones_from_root(best.root_pc, best.intervals_from_root, prefer_flats)
    console.print(f"   Chord tones: {tones}")

    _show_candidates_table(candidates, prefer_flats)


@app.command()
def spell(
    symbol: str = typer.Argument(..., help='Chord symbol, e.g. "F#m7b5"'),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Spell the notes of a chord symbol with correct letter names.

    Examples:
        chord-finder spell Cmaj7
        chord-finder spell "Ab7(b9)"
    """
    parsed = parse_chord_symbol(symbol)

    if not parsed.ok:
        if json_output:
            console.print_json(data={
                "ok": False,
                "error": parsed.kind.value,
                "message": parsed.message,
                "warnings": parsed.warnings,
            })
        else:
            console.print(f"[red]Error: {escape(parsed.message)}[/red]")
        raise typer.Exit(1)

    spelled = spell_chord_tones(parsed.root_name, parsed.intervals_from_root)

    if json_output:
        console.print_json(data={
            "ok": True,
            "root_pc": parsed.root_pc,
            "intervals": parsed.intervals_from_root,
            "normalized_symbol": parsed.normalized_symbol,
            "notes": spelled.split(),
            "warnings": parsed.warnings,
        })
        return

    console.print(f"\n[bold blue]{escape(parsed.normalized_symbol)}[/bold blue]")
    console.print(f"   Intervals: {_format_intervals(parsed.intervals_from_root)}")
    console.print(f"   [green]Notes: {spelled}[/green]")
    _show_warnings(parsed.warnings)


@app.command()
def templates():
    """Show the chord templates used for naming."""
    table = Table(title="Chord Templates")
    table.add_column("Id", style="cyan")
    table.add_column("Example", style="green")
    table.add_column("Intervals", style="yellow")
    table.add_column("Important", style="magenta")

    for template in TEMPLATES:
        table.add_row(
            template.id,
            f"C{template.label}",
            _format_intervals(template.intervals),
            _format_intervals(template.important),
        )

    console.print(table)


def _format_intervals(intervals) -> str:
    return ", ".join(str(i) for i in intervals)


def _show_warnings(warnings: List[str]):
    """Print parser warnings."""
    for warning in warnings:
        console.print(f"[yellow]Warning: {escape(warning)}[/yellow]")


def _show_candidates_table(candidates: List[Candidate], prefer_flats: bool):
    """Display chord candidates in a table."""
    table = Table(title="Chord Candidates")
    table.add_column("Chord", style="cyan")
    table.add_column("Root", style="green")
    table.add_column("Score", style="magenta")
    table.add_column("Missing", style="yellow")
    table.add_column("Extras", style="yellow")

    for candidate in candidates:
        table.add_row(
            escape(candidate.name),
            pc_to_name(candidate.root_pc, prefer_flats),
            str(candidate.score),
            _format_intervals(candidate.missing) or "-",
            _format_intervals(candidate.extras) or "-",
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
