"""Shared data types for consecutive-word similarity detection."""

from typing import List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class Word(BaseModel):
    """A single word of a text with its position in the original string."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Lowercased word with edge punctuation removed")
    start: int = Field(description="Starting character index in the original text (inclusive)")
    end: int = Field(description="Ending character index in the original text (inclusive)")


class PotentialMatch(BaseModel):
    """A candidate run of equal words, addressed by word index."""

    model_config = ConfigDict(frozen=True)

    word_index1: int = Field(description="Index of the first word of the run in text1")
    word_index2: int = Field(description="Index of the first word of the run in text2")
    word_length: int = Field(description="Number of words in the run")


class Match(BaseModel):
    """A verbatim overlap between two texts. All indices are character based and inclusive."""

    model_config = ConfigDict(frozen=True)

    start1: int = Field(description="Start of the match in text1")
    end1: int = Field(description="End of the match in text1")
    start2: int = Field(description="Start of the match in text2")
    end2: int = Field(description="End of the match in text2")

    def extract1(self, text1: str) -> str:
        """Return the matched part of text1."""
        return text1[self.start1:self.end1 + 1]

    def extract2(self, text2: str) -> str:
        """Return the matched part of text2."""
        return text2[self.start2:self.end2 + 1]

    def __str__(self) -> str:
        return f"Match[text1({self.start1}-{self.end1}), text2({self.start2}-{self.end2})]"


class SubMatch(BaseModel):
    """One side of a Match together with its 1-based match id."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(description="Starting character index in one text (inclusive)")
    end: int = Field(description="Ending character index in one text (inclusive)")
    match_id: int = Field(description="1-based id shared by both sides of the same match")


class SimilarityReport(BaseModel):
    """Result of comparing two documents."""

    file1: str = Field(description="Name or path of the first document")
    file2: str = Field(description="Name or path of the second document")
    text1_length: int = Field(description="Total length of text1")
    text2_length: int = Field(description="Total length of text2")
    min_words: int = Field(description="Minimum number of consecutive words per match")
    total_matches: int = Field(description="Total number of matches found")
    coverage1: float = Field(description="Percentage of text1 covered by matches")
    coverage2: float = Field(description="Percentage of text2 covered by matches")
    matches: List[Match] = Field(default_factory=list, description="Matches sorted by position in text1")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional metadata")
    text1: str = Field(default="", exclude=True, description="Full text of the first document")
    text2: str = Field(default="", exclude=True, description="Full text of the second document")
