"""Command-line interface for Voice Consistency Analyzer."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from voice_consistency_analyzer import __version__

console = Console()

STATUS_STYLES = {
    "match": "green",
    "partial": "yellow",
    "mismatch": "red",
}


def _fail(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)


def _read_input(path: str | None, text: str | None) -> str:
    """Resolve the text to analyze from a file path or --text."""
    from voice_consistency_analyzer.ingest import load_sample

    if text is not None:
        return text
    if path is None:
        _fail("Provide a file path or --text")
    try:
        return load_sample(Path(path))
    except ValueError as e:
        _fail(str(e))


def _bar(percent: float, width: int = 20) -> str:
    filled = round(percent / 100 * width)
    return "█" * filled + "░" * (width - filled)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool) -> None:
    """Voice Consistency Analyzer - check that new copy sounds like you."""
    from voice_consistency_analyzer.config import get_settings

    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@main.command()
def status() -> None:
    """Show settings and whether a voice profile is saved."""
    from voice_consistency_analyzer.config import get_settings
    from voice_consistency_analyzer.storage import ProfileStore

    settings = get_settings()
    store = ProfileStore.from_settings(settings)

    console.print("[bold]Voice Consistency Analyzer Status[/bold]\n")
    console.print(f"Data directory: {settings.data_dir}")
    console.print(f"Minimum samples: {settings.min_samples}")

    voice_profile = store.load_profile()
    if voice_profile:
        console.print(
            f"[green]OK[/green] Voice profile saved "
            f"({voice_profile.sample_count} samples, {voice_profile.total_words:,} words)"
        )
    else:
        console.print("[yellow]No voice profile saved yet[/yellow]")


@main.command()
@click.argument("path", required=False, type=click.Path(exists=True))
@click.option("--text", "-t", help="Analyze this text instead of a file")
@click.option("--json", "as_json", is_flag=True, help="Print the raw analysis as JSON")
def measure(path: str | None, text: str | None, as_json: bool) -> None:
    """Measure the nine voice dimensions of a text.

    Example:
        vca measure landing_page.txt
    """
    from voice_consistency_analyzer.voice import DIMENSION_SCALES, Dimension, label_for, measure as measure_text

    analysis = measure_text(_read_input(path, text))
    if analysis is None:
        _fail("Nothing to analyze - the text is empty")

    if as_json:
        click.echo(analysis.to_json())
        return

    table = Table(title=f"Voice Dimensions ({analysis.word_count:,} words, {analysis.sentence_count:,} sentences)")
    table.add_column("Dimension", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Reading", style="green")

    for dimension in Dimension:
        value = analysis.value(dimension)
        table.add_row(DIMENSION_SCALES[dimension].label, f"{value:g}", label_for(dimension, value))

    console.print(table)


# ============================================================================
# Profile Commands
# ============================================================================

@main.group()
def profile() -> None:
    """Voice profile commands - build, show and reset."""
    pass


@profile.command(name="build")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), help="Also write the profile to this file (JSON)")
@click.option("--no-save", is_flag=True, help="Do not store the profile in the data directory")
def profile_build(paths: tuple[str, ...], output: str | None, no_save: bool) -> None:
    """Build a voice profile from 2-3 samples of your best copy.

    Example:
        vca profile build about.txt email.txt launch.html
    """
    from voice_consistency_analyzer.config import get_settings
    from voice_consistency_analyzer.ingest import load_sample
    from voice_consistency_analyzer.storage import ProfileStore
    from voice_consistency_analyzer.voice import build_profile

    settings = get_settings()

    samples = []
    for p in paths:
        try:
            samples.append(load_sample(Path(p)))
        except ValueError as e:
            _fail(str(e))

    filled = [s for s in samples if s.strip()]
    if len(filled) < settings.min_samples:
        _fail(f"Fill in at least {settings.min_samples} samples to generate a profile (got {len(filled)})")

    with console.status("Building voice profile..."):
        voice_profile = build_profile(filled)

    if voice_profile is None:
        _fail("None of the samples contained any text")

    _print_profile(voice_profile)

    if not no_save:
        ProfileStore.from_settings(settings).save(voice_profile, samples)
        console.print(f"\n[green]OK[/green] Profile saved to {settings.profile_path}")

    if output:
        output_path = Path(output)
        output_path.write_text(voice_profile.to_json(), encoding="utf-8")
        console.print(f"[green]OK[/green] Profile written to {output_path}")


@profile.command(name="show")
@click.argument("path", required=False, type=click.Path(exists=True))
def profile_show(path: str | None) -> None:
    """Show the saved voice profile, or one read from a JSON file."""
    _print_profile(_resolve_profile(path))


@profile.command(name="reset")
@click.confirmation_option(prompt="Delete the saved voice profile and samples?")
def profile_reset() -> None:
    """Delete the saved voice profile and its samples."""
    from voice_consistency_analyzer.storage import ProfileStore

    ProfileStore.from_settings().clear()
    console.print("[green]OK[/green] Voice profile reset")


def _resolve_profile(path: str | None):
    """Load a profile from an explicit file or from the store."""
    from voice_consistency_analyzer.storage import ProfileStore, load_profile_file

    if path:
        try:
            return load_profile_file(path)
        except ValueError as e:
            _fail(str(e))

    voice_profile = ProfileStore.from_settings().load_profile()
    if voice_profile is None:
        _fail("No voice profile found. Run 'vca profile build' first.")
    return voice_profile


def _print_profile(voice_profile) -> None:
    from voice_consistency_analyzer.voice import DIMENSION_SCALES, Dimension, label_for, scale_percent

    plural = "s" if voice_profile.sample_count != 1 else ""
    table = Table(
        title="Your Voice Profile",
        caption=f"{voice_profile.sample_count} sample{plural} · {voice_profile.created_at[:10]}",
    )
    table.add_column("Dimension", style="cyan")
    table.add_column("Scale")
    table.add_column("Reading", style="magenta")

    for dimension in Dimension:
        scale = DIMENSION_SCALES[dimension]
        value = voice_profile.value(dimension)
        bar = _bar(scale_percent(dimension, value))
        table.add_row(
            scale.label,
            f"[dim]{scale.left_label}[/dim] {bar} [dim]{scale.right_label}[/dim]",
            label_for(dimension, value),
        )

    console.print(table)


# ============================================================================
# Check Command
# ============================================================================

@main.command()
@click.argument("path", required=False, type=click.Path(exists=True))
@click.option("--text", "-t", help="Check this text instead of a file")
@click.option("--profile", "-p", "profile_path", type=click.Path(exists=True), help="Profile JSON to check against")
@click.option("--output", "-o", type=click.Path(), help="Output file for the result (JSON)")
def check(path: str | None, text: str | None, profile_path: str | None, output: str | None) -> None:
    """Check new copy against your voice profile.

    Example:
        vca check new_post.md
    """
    from voice_consistency_analyzer.voice import check_consistency, label_for, verdict_for

    voice_profile = _resolve_profile(profile_path)
    result = check_consistency(_read_input(path, text), voice_profile)
    if result is None:
        _fail("Nothing to check - the text is empty")

    verdict = verdict_for(result.overall_score)
    style = "green" if result.overall_score >= 80 else "yellow" if result.overall_score >= 40 else "red"
    console.print(f"\n[bold]Voice Consistency Score:[/bold] [{style}]{result.overall_score}/100 {verdict.label}[/{style}]")
    console.print(f"[dim]{verdict.summary}[/dim]\n")

    table = Table(title="Dimension Breakdown")
    table.add_column("Dimension", style="cyan")
    table.add_column("Profile")
    table.add_column("Current")
    table.add_column("Score", justify="right")
    table.add_column("Status")

    for row in result.breakdown:
        status_style = STATUS_STYLES[row.status.value]
        table.add_row(
            row.label,
            label_for(row.key, row.profile_value),
            label_for(row.key, row.current_value),
            str(row.score),
            f"[{status_style}]{row.status.value.title()}[/{status_style}]",
        )

    console.print(table)

    if result.mismatches:
        console.print("\n[bold]Tips:[/bold]")
        for row in result.mismatches:
            console.print(f"  [cyan]{row.label}:[/cyan] {escape(row.tip)}")

    if output:
        output_path = Path(output)
        output_path.write_text(result.to_json(), encoding="utf-8")
        console.print(f"\n[green]OK[/green] Result saved to {output_path}")


if __name__ == "__main__":
    main()
