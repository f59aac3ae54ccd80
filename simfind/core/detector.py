"""Document-level similarity detection."""

import chardet
from pathlib import Path
from typing import List, Optional, Tuple

from .config import Config
from .types import SimilarityReport
from .tokenizer import extract_words
from .matcher import SimilarityFinder
from .log import base_logger

logger = base_logger.getChild('detector')


class SimilarityDetector:
    """Reads documents and reports the verbatim overlap between them."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the similarity detector.

        Args:
            config: Configuration object (uses defaults if not provided)
        """
        self.config = config or Config()
        self.finder = SimilarityFinder(self.config)

    def read_file(self, file_path: str) -> str:
        """
        Read a file with automatic encoding detection.

        Args:
            file_path: Path to the file

        Returns:
            File contents as string
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        raw_data = path.read_bytes()
        result = chardet.detect(raw_data)
        encoding = result['encoding'] or 'utf-8'
        confidence = result['confidence'] or 0

        logger.debug(f"Detected encoding for {file_path}: {encoding} (confidence: {confidence:.2f})")

        for enc in [encoding] + self.config.encodings:
            try:
                text = raw_data.decode(enc)
            except (UnicodeDecodeError, LookupError):
                continue
            logger.info(f"Successfully read {file_path} with encoding: {enc}")
            return text

        raise ValueError(f"Could not decode file {file_path} with any known encoding")

    def compare_texts(
        self,
        text1: str,
        text2: str,
        name1: str = "text1",
        name2: str = "text2"
    ) -> SimilarityReport:
        """
        Compare two texts and build a report.

        Args:
            text1: First text
            text2: Second text
            name1: Label for the first text in the report
            name2: Label for the second text in the report

        Returns:
            SimilarityReport with all matches and coverage figures
        """
        words1 = extract_words(text1)
        words2 = extract_words(text2)
        accepted = self.finder.match_words(words1, words2)
        matches = self.finder.to_matches(words1, words2, accepted)

        spans1 = [(m.start1, m.end1) for m in matches]
        spans2 = [(m.start2, m.end2) for m in matches]

        report = SimilarityReport(
            file1=name1,
            file2=name2,
            text1_length=len(text1),
            text2_length=len(text2),
            min_words=self.finder.min_words,
            total_matches=len(matches),
            coverage1=self._coverage(spans1, len(text1)),
            coverage2=self._coverage(spans2, len(text2)),
            matches=matches,
            metadata={
                "words1": len(words1),
                "words2": len(words2),
                "longest_match": max((pm.word_length for pm in accepted), default=0)
            },
            text1=text1,
            text2=text2
        )

        logger.info(
            f"Detection complete: {report.total_matches} matches, "
            f"{report.coverage1:.1f}% of {name1} and {report.coverage2:.1f}% of {name2} covered"
        )

        return report

    def compare_documents(self, file1: str, file2: str) -> SimilarityReport:
        """
        Compare two documents on disk.

        Args:
            file1: Path to the first document
            file2: Path to the second document

        Returns:
            SimilarityReport with detection results
        """
        logger.info(f"Comparing {file1} with {file2}")

        text1 = self.read_file(file1)
        text2 = self.read_file(file2)

        return self.compare_texts(text1, text2, name1=str(file1), name2=str(file2))

    def _coverage(self, spans: List[Tuple[int, int]], total: int) -> float:
        """Percentage of characters covered by inclusive spans that do not overlap."""
        if total == 0:
            return 0.0
        matched = sum(end - start + 1 for start, end in spans)
        return matched / total * 100
