"""HTML rendering of two texts side by side with their matches highlighted."""

import html
from typing import List

from .types import Match, SubMatch

HIGHLIGHT_STYLE = """<style>
    table.similarity-table { width: 100%; border-collapse: collapse; table-layout: fixed; }
    th.similarity-header { padding: 12px; border: 1px solid #ddd; background-color: #f4f4f4; }
    td.similarity-cell { width: 50%; vertical-align: top; padding: 12px; border: 1px solid #ddd; font-family: sans-serif; line-height: 1.6; white-space: pre-wrap; word-wrap: break-word; }
    mark.match-highlight { background-color: #ffff99; padding: 2px 1px; border-radius: 3px; cursor: help; }
</style>"""


def generate_html_highlight(text1: str, text2: str, matches: List[Match]) -> str:
    """
    Generate an HTML fragment showing both texts in a two-column table.

    Args:
        text1: The first original text
        text2: The second original text
        matches: Non-overlapping matches, e.g. from find_consecutive_word_matches

    Returns:
        HTML fragment with an inline stylesheet
    """
    if text1 is None:
        raise ValueError("text1 cannot be None")
    if text2 is None:
        raise ValueError("text2 cannot be None")
    if matches is None:
        raise ValueError("matches cannot be None")

    sub_matches1 = []
    sub_matches2 = []
    for match_id, match in enumerate(matches, 1):
        sub_matches1.append(SubMatch(start=match.start1, end=match.end1, match_id=match_id))
        sub_matches2.append(SubMatch(start=match.start2, end=match.end2, match_id=match_id))

    sub_matches1.sort(key=lambda sm: sm.start)
    sub_matches2.sort(key=lambda sm: sm.start)

    return f"""{HIGHLIGHT_STYLE}
<table class="similarity-table">
<thead>
<tr>
    <th class="similarity-header">Text 1</th>
    <th class="similarity-header">Text 2</th>
</tr>
</thead>
<tbody>
<tr>
    <td class="similarity-cell">{build_highlighted_html(text1, sub_matches1)}</td>
    <td class="similarity-cell">{build_highlighted_html(text2, sub_matches2)}</td>
</tr>
</tbody>
</table>"""


def build_highlighted_html(text: str, sorted_sub_matches: List[SubMatch]) -> str:
    """
    Escape a single text and wrap each matched segment in a <mark> tag.

    Args:
        text: The full original text
        sorted_sub_matches: Segments of this text, sorted by start index

    Returns:
        HTML string with highlights
    """
    parts = []
    current = 0

    for sub in sorted_sub_matches:
        if sub.start > current:
            parts.append(html.escape(text[current:sub.start]))

        end = min(sub.end + 1, len(text))
        parts.append(f'<mark class="match-highlight" title="Match {sub.match_id}">')
        parts.append(html.escape(text[sub.start:end]))
        parts.append('</mark>')

        current = sub.end + 1

    if current < len(text):
        parts.append(html.escape(text[current:]))

    return "".join(parts)
