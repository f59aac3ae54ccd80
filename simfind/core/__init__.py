"""Core modules for consecutive-word similarity detection."""

from .config import Config
from .types import Word, Match, SimilarityReport
from .tokenizer import extract_words
from .matcher import SimilarityFinder, find_consecutive_word_matches
from .renderer import generate_html_highlight
from .detector import SimilarityDetector
from .report import ReportGenerator

__all__ = [
    "Config",
    "Word",
    "Match",
    "SimilarityReport",
    "extract_words",
    "SimilarityFinder",
    "find_consecutive_word_matches",
    "generate_html_highlight",
    "SimilarityDetector",
    "ReportGenerator",
]
