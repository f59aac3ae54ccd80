"""Detection of identical consecutive-word runs shared by two texts."""

from typing import List, Optional
import numpy as np

from .config import Config
from .types import Word, PotentialMatch, Match
from .tokenizer import extract_words
from .log import base_logger

logger = base_logger.getChild('matcher')

DEFAULT_MIN_WORDS = 3


def _check_min_words(min_words: int) -> int:
    if isinstance(min_words, bool) or not isinstance(min_words, int):
        raise ValueError(f"min_words must be an integer, got {min_words!r}")
    if min_words < 1:
        raise ValueError("min_words must be at least 1")
    return min_words


class SimilarityFinder:
    """Finds the longest non-overlapping runs of identical words in two texts."""

    def __init__(self, config: Optional[Config] = None, min_words: Optional[int] = None):
        """
        Initialize the finder.

        Args:
            config: Configuration object (uses defaults if neither argument is given)
            min_words: Minimum match length, takes precedence over the config
        """
        if min_words is None:
            min_words = (config or Config()).min_words
        self._min_words = _check_min_words(min_words)

    @property
    def min_words(self) -> int:
        """Minimum number of words required to comprise a match."""
        return self._min_words

    @min_words.setter
    def min_words(self, words: int):
        self._min_words = _check_min_words(words)

    def find_consecutive_word_matches(
        self,
        text1: str,
        text2: str,
        min_words: Optional[int] = None
    ) -> List[Match]:
        """
        Find runs of at least ``min_words`` identical consecutive words.

        The comparison is case-insensitive and ignores punctuation at the start
        and end of words. Longer runs win over shorter ones; a run that shares
        any word with an already accepted run is dropped.

        Args:
            text1: First text
            text2: Second text
            min_words: Overrides the finder's minimum match length for this call

        Returns:
            List of Match objects sorted by their start in text1
        """
        if text1 is None:
            raise ValueError("text1 cannot be None")
        if text2 is None:
            raise ValueError("text2 cannot be None")

        words1 = extract_words(text1)
        words2 = extract_words(text2)
        accepted = self.match_words(words1, words2, min_words)
        return self.to_matches(words1, words2, accepted)

    def match_words(
        self,
        words1: List[Word],
        words2: List[Word],
        min_words: Optional[int] = None
    ) -> List[PotentialMatch]:
        """
        Select the non-overlapping runs between two already tokenized texts.

        Returns:
            Accepted runs in selection order, longest first
        """
        min_words = self._min_words if min_words is None else _check_min_words(min_words)
        if len(words1) < min_words or len(words2) < min_words:
            logger.debug(f"Too few words to match: {len(words1)} and {len(words2)} (min_words={min_words})")
            return []

        candidates = self._find_candidates(words1, words2, min_words)
        logger.debug(f"Found {len(candidates)} candidate runs between {len(words1)} and {len(words2)} words")

        accepted = self._select_non_overlapping(candidates, len(words1), len(words2))
        logger.debug(f"Accepted {len(accepted)} non-overlapping runs")
        return accepted

    def to_matches(
        self,
        words1: List[Word],
        words2: List[Word],
        accepted: List[PotentialMatch]
    ) -> List[Match]:
        """Convert word-index runs to character spans sorted by their start in text1."""
        matches = [
            Match(
                start1=words1[pm.word_index1].start,
                end1=words1[pm.word_index1 + pm.word_length - 1].end,
                start2=words2[pm.word_index2].start,
                end2=words2[pm.word_index2 + pm.word_length - 1].end
            )
            for pm in accepted
        ]
        matches.sort(key=lambda m: m.start1)
        return matches

    def _find_candidates(
        self,
        words1: List[Word],
        words2: List[Word],
        min_words: int
    ) -> List[PotentialMatch]:
        """
        Record every maximal run of equal words of at least ``min_words``.

        After a run is found at column j, the columns inside it are skipped
        since none of them can start a new run for the same i.
        """
        tokens1 = [w.text for w in words1]
        tokens2 = [w.text for w in words2]
        len1 = len(tokens1)
        len2 = len(tokens2)

        candidates = []
        for i in range(len1 - min_words + 1):
            j = 0
            while j <= len2 - min_words:
                length = 0
                while (i + length < len1 and
                       j + length < len2 and
                       tokens1[i + length] == tokens2[j + length]):
                    length += 1

                if length >= min_words:
                    candidates.append(PotentialMatch(word_index1=i, word_index2=j, word_length=length))
                    j += length
                else:
                    j += 1

        return candidates

    def _select_non_overlapping(
        self,
        candidates: List[PotentialMatch],
        len1: int,
        len2: int
    ) -> List[PotentialMatch]:
        """
        Greedily accept candidates, longest first, skipping any that reuse a word.

        Ties in length are broken by the earliest start in text1.
        """
        ranked = sorted(candidates, key=lambda pm: (-pm.word_length, pm.word_index1))

        word1_used = np.zeros(len1, dtype=bool)
        word2_used = np.zeros(len2, dtype=bool)

        accepted = []
        for pm in ranked:
            span1 = slice(pm.word_index1, pm.word_index1 + pm.word_length)
            span2 = slice(pm.word_index2, pm.word_index2 + pm.word_length)

            # Claimed by an equal or longer run
            if word1_used[span1].any() or word2_used[span2].any():
                continue

            word1_used[span1] = True
            word2_used[span2] = True
            accepted.append(pm)

        return accepted


def find_consecutive_word_matches(
    text1: str,
    text2: str,
    min_words: int = DEFAULT_MIN_WORDS
) -> List[Match]:
    """Find consecutive-word matches between two texts with a one-off finder."""
    return SimilarityFinder(min_words=min_words).find_consecutive_word_matches(text1, text2)
