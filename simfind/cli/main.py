"""Command-line interface for simfind."""

import sys
from pathlib import Path
from typing import Optional
import click

from .. import __version__
from ..core import (
    Config,
    SimilarityDetector,
    ReportGenerator,
    extract_words
)
from ..core.log import set_logger
from .display import create_console, display_report


def setup_logging(verbose: bool):
    """Set up logging configuration."""
    set_logger(
        'simfind',
        level='DEBUG' if verbose else 'INFO',
        datefmt='%H:%M:%S',
        remove_handlers=True
    )


def build_config(numwords: Optional[int]) -> Config:
    """Create a configuration, overriding the minimum match length if given."""
    config = Config()
    if numwords is not None:
        try:
            config.min_words = numwords
        except ValueError:
            click.echo("Error: --numwords must be at least 1.", err=True)
            sys.exit(1)
    return config


@click.group()
@click.version_option(version=__version__, prog_name="simfind")
def cli():
    """Find runs of identical consecutive words shared by two texts."""
    pass


@cli.command()
@click.argument('file1', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('file2', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--numwords', '-n', type=int, default=None, help='Number of words that comprise a match (default 3)')
@click.option('--output', '-o', type=click.Path(path_type=Path), help='Output file path')
@click.option('--format', '-f', type=click.Choice(['json', 'html', 'text']), default='html', help='Output format')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def compare(
    file1: Path,
    file2: Path,
    numwords: Optional[int],
    output: Optional[Path],
    format: str,
    verbose: bool
):
    """
    Compare two text files and highlight their shared word runs.

    FILE1: Path to the first text file
    FILE2: Path to the second text file
    """
    setup_logging(verbose)
    config = build_config(numwords)

    if not output:
        output = Path(f"similarity_{file1.stem}_{file2.stem}.{format}")

    detector = SimilarityDetector(config)
    try:
        report = detector.compare_documents(str(file1), str(file2))
    except (OSError, ValueError) as e:
        click.echo(f"Error during detection: {e}", err=True)
        sys.exit(1)

    generator = ReportGenerator()
    generator.save_report(report, str(output), format)

    display_report(report, max_matches=config.max_display_matches, console=create_console())
    click.echo(f"Report saved: {output}")


@cli.command()
@click.argument('text1')
@click.argument('text2')
@click.option('--numwords', '-n', type=int, default=None, help='Number of words that comprise a match (default 3)')
def quick_compare(text1: str, text2: str, numwords: Optional[int]):
    """
    Quick comparison of two text strings.

    TEXT1: First text string
    TEXT2: Second text string
    """
    config = build_config(numwords)
    report = SimilarityDetector(config).compare_texts(text1, text2, name1="Text 1", name2="Text 2")
    display_report(report, max_matches=config.max_display_matches, console=create_console())


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--preview', type=int, default=10, help='Number of words to preview')
def analyze(file_path: Path, preview: int):
    """
    Show word statistics for a file without running a comparison.

    FILE_PATH: Path to the file to analyze
    """
    click.echo(f"Analyzing file: {file_path}")

    try:
        text = SimilarityDetector().read_file(str(file_path))
    except (OSError, ValueError) as e:
        click.echo(f"Error reading file: {e}", err=True)
        sys.exit(1)

    words = extract_words(text)
    blocks = len(text.split())

    click.echo("\nWord Statistics:")
    click.echo(f"   File length: {len(text):,} characters")
    click.echo(f"   Whitespace-separated blocks: {blocks:,}")
    click.echo(f"   Words: {len(words):,}")
    click.echo(f"   Distinct words: {len(set(w.text for w in words)):,}")

    if words:
        click.echo(f"\nFirst {min(preview, len(words))} words:")
        for word in words[:preview]:
            click.echo(f"   [{word.start}-{word.end}] {word.text}")


if __name__ == "__main__":
    cli()
