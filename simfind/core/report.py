"""Report generation module for similarity detection results."""

import json
import html
from datetime import datetime
from pathlib import Path

from .types import SimilarityReport
from .renderer import generate_html_highlight


class ReportGenerator:
    """Generates various report formats for similarity detection results."""

    def generate_json(self, report: SimilarityReport, indent: int = 2) -> str:
        """
        Generate JSON format report.

        Args:
            report: SimilarityReport object
            indent: JSON indentation level

        Returns:
            JSON string
        """
        return json.dumps(report.model_dump(), ensure_ascii=False, indent=indent)

    def generate_text(self, report: SimilarityReport, max_matches: int = 10) -> str:
        """
        Generate plain text format report.

        Args:
            report: SimilarityReport object
            max_matches: Maximum number of matches to list

        Returns:
            Plain text report
        """
        lines = []
        lines.append("=" * 60)
        lines.append("TEXT SIMILARITY REPORT")
        lines.append("=" * 60)
        lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append("")

        lines.append("TEXTS COMPARED:")
        lines.append(f"  Text A: {report.file1}")
        lines.append(f"          Length: {report.text1_length:,} characters")
        lines.append(f"  Text B: {report.file2}")
        lines.append(f"          Length: {report.text2_length:,} characters")
        lines.append(f"  Minimum match length: {report.min_words} words")
        lines.append("")

        lines.append("RESULTS SUMMARY:")
        lines.append(f"  Total Matches Found: {report.total_matches}")
        lines.append(f"  Text A Coverage: {report.coverage1:.1f}%")
        lines.append(f"  Text B Coverage: {report.coverage2:.1f}%")
        lines.append("")

        if report.matches:
            lines.append(f"Found {report.total_matches} match(es):")

            for i, match in enumerate(report.matches[:max_matches], 1):
                lines.append(f"\n--- Match {i} ---")
                lines.append(str(match))
                lines.append(f'  Text A extract: "{match.extract1(report.text1)}"')
                lines.append(f'  Text B extract: "{match.extract2(report.text2)}"')

            if len(report.matches) > max_matches:
                lines.append(f"\n... and {len(report.matches) - max_matches} more matches")
        else:
            lines.append("No matches found.")

        return "\n".join(lines)

    def generate_html(self, report: SimilarityReport) -> str:
        """
        Generate a standalone HTML page with the side-by-side highlight view.

        Args:
            report: SimilarityReport object

        Returns:
            HTML string
        """
        fragment = generate_html_highlight(report.text1, report.text2, report.matches)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Text Similarity Report</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            color: #333;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
        }}
        .summary {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
            gap: 20px;
            margin-bottom: 30px;
        }}
        .summary-card {{
            padding: 15px;
            border-radius: 8px;
            border: 1px solid #ddd;
        }}
        .summary-card h3 {{
            margin: 0 0 10px 0;
            color: #666;
            font-size: 0.9em;
            text-transform: uppercase;
        }}
        .summary-card .value {{
            font-size: 1.8em;
            font-weight: bold;
        }}
    </style>
</head>
<body>
    <h1>Text Similarity Report</h1>
    <p>Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}</p>
    <p>Text 1: {html.escape(Path(report.file1).name)}</p>
    <p>Text 2: {html.escape(Path(report.file2).name)}</p>

    <div class="summary">
        <div class="summary-card">
            <h3>Total Matches</h3>
            <div class="value">{report.total_matches}</div>
        </div>
        <div class="summary-card">
            <h3>Text 1 Coverage</h3>
            <div class="value">{report.coverage1:.1f}%</div>
        </div>
        <div class="summary-card">
            <h3>Text 2 Coverage</h3>
            <div class="value">{report.coverage2:.1f}%</div>
        </div>
        <div class="summary-card">
            <h3>Minimum Words</h3>
            <div class="value">{report.min_words}</div>
        </div>
    </div>

{fragment}
</body>
</html>"""

    def save_report(
        self,
        report: SimilarityReport,
        output_path: str,
        format: str = "json"
    ):
        """
        Save report to file.

        Args:
            report: SimilarityReport object
            output_path: Path to save the report
            format: Output format (json, html, text)
        """
        path = Path(output_path)

        if format == "json":
            content = self.generate_json(report)
        elif format == "html":
            content = self.generate_html(report)
        elif format == "text":
            content = self.generate_text(report)
        else:
            raise ValueError(f"Unsupported format: {format}")

        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
