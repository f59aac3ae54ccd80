"""Rich-based display module for similarity detection results."""

from typing import List, Tuple
from rich.console import Console, RenderableType
from rich.text import Text
from rich.table import Table

from ..core.types import SimilarityReport

HIGHLIGHT_STYLE = "bold yellow"


def create_console() -> Console:
    """Create a rich Console instance."""
    return Console()


def comparison(renderable1: RenderableType, renderable2: RenderableType) -> Table:
    """
    Create a side-by-side comparison table with two columns.

    Args:
        renderable1: Content for the first column
        renderable2: Content for the second column

    Returns:
        A Table with two equal-width columns
    """
    table = Table(show_header=True, pad_edge=False, box=None, expand=True)
    table.add_column("Text 1", ratio=1)
    table.add_column("Text 2", ratio=1)
    table.add_row(renderable1, renderable2)
    return table


def highlight_spans(text: str, spans: List[Tuple[int, int]]) -> Text:
    """
    Highlight inclusive character spans in text.

    Args:
        text: The text to highlight
        spans: (start, end) pairs, end inclusive

    Returns:
        Rich Text object with highlights
    """
    rich_text = Text(text)
    for start, end in spans:
        rich_text.stylize(HIGHLIGHT_STYLE, start, end + 1)
    return rich_text


def get_coverage_style(coverage: float) -> str:
    """Pick a colour for a coverage percentage."""
    if coverage >= 50:
        return "bold red"
    elif coverage >= 20:
        return "bold yellow"
    return "bold green"


def display_summary(console: Console, report: SimilarityReport):
    """
    Display summary statistics.

    Args:
        console: Rich Console instance
        report: SimilarityReport object
    """
    console.print("Analysis complete!", style="bold green")
    console.print()

    console.print(f"  Matches found: {report.total_matches} (minimum {report.min_words} words)")
    console.print(f"  {report.file1}: ", end="", markup=False)
    console.print(f"{report.coverage1:.1f}%", style=get_coverage_style(report.coverage1), end="")
    console.print(" covered")
    console.print(f"  {report.file2}: ", end="", markup=False)
    console.print(f"{report.coverage2:.1f}%", style=get_coverage_style(report.coverage2), end="")
    console.print(" covered")
    console.print()


def display_matches(console: Console, report: SimilarityReport, max_matches: int = 10):
    """
    List matches with their extracts from both texts.

    Args:
        console: Rich Console instance
        report: SimilarityReport object
        max_matches: Maximum number of matches to list
    """
    for i, match in enumerate(report.matches[:max_matches], 1):
        header = Text()
        header.append(f"Match #{i}", style="bold cyan")
        header.append(f" {match}", style="dim")
        console.print(header)
        console.print(f'  Text 1: "{match.extract1(report.text1)}"', highlight=False, markup=False)
        console.print(f'  Text 2: "{match.extract2(report.text2)}"', highlight=False, markup=False)

    if len(report.matches) > max_matches:
        console.print(f"... and {len(report.matches) - max_matches} more matches (see full report)", style="dim")
    console.print()


def display_report(report: SimilarityReport, max_matches: int = 10, console: Console = None):
    """
    Display a similarity report with rich formatting.

    Args:
        report: SimilarityReport object
        max_matches: Maximum number of matches to list
        console: Console to print to (a new one if not provided)
    """
    console = console or create_console()

    display_summary(console, report)

    if not report.matches:
        console.print("No matches found.", style="bold green")
        return

    text1 = highlight_spans(report.text1, [(m.start1, m.end1) for m in report.matches])
    text2 = highlight_spans(report.text2, [(m.start2, m.end2) for m in report.matches])
    console.print(comparison(text1, text2))
    console.print()

    display_matches(console, report, max_matches)
