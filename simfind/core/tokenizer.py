"""Word extraction with original character positions."""

import re
import unicodedata
from typing import List

from .types import Word

_BLOCK_RE = re.compile(r'\S+')


def is_punctuation(char: str) -> bool:
    """Check whether a character is Unicode punctuation (P*) or a symbol (S*)."""
    return unicodedata.category(char)[0] in ('P', 'S')


def extract_words(text: str) -> List[Word]:
    """
    Split text into words and capture their original start and end indices.

    A word is any run of non-whitespace characters with the punctuation and
    symbols at its start and end removed. Blocks made only of punctuation
    (such as "---") produce no word. Word text is lowercased for comparison.

    Args:
        text: The text to split

    Returns:
        List of Word objects in order of appearance
    """
    if text is None:
        raise ValueError("text cannot be None")

    words = []
    for block in _BLOCK_RE.finditer(text):
        start = block.start()
        end = block.end() - 1  # inclusive

        while start <= end and is_punctuation(text[end]):
            end -= 1
        while start <= end and is_punctuation(text[start]):
            start += 1

        if start > end:
            continue

        words.append(Word(text=text[start:end + 1].lower(), start=start, end=end))

    return words
