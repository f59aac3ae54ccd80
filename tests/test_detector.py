"""Tests for the detector module."""

import pytest
from simfind.core.config import Config
from simfind.core.detector import SimilarityDetector
from simfind.core.tokenizer import extract_words
from simfind.core.types import Match


@pytest.fixture
def detector():
    return SimilarityDetector(Config(min_words=3))


class TestReadFile:
    """Test cases for SimilarityDetector.read_file."""

    def test_utf8(self, detector, tmp_path):
        """Test reading a UTF-8 file with non-ASCII text."""
        path = tmp_path / "utf8.txt"
        text = "人工智能正在改变世界。 Café au lait, s'il vous plaît."
        path.write_text(text, encoding="utf-8")

        assert detector.read_file(str(path)) == text

    def test_latin1(self, detector, tmp_path):
        """Test that a file that is not UTF-8 still decodes."""
        path = tmp_path / "latin1.txt"
        path.write_bytes("Le garçon a mangé une crème brûlée très sucrée.".encode("latin-1"))

        text = detector.read_file(str(path))

        assert text == "Le garçon a mangé une crème brûlée très sucrée."

    def test_missing_file(self, detector, tmp_path):
        """Test that a missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="File not found"):
            detector.read_file(str(tmp_path / "missing.txt"))


class TestCompare:
    """Test cases for comparing texts and documents."""

    def test_compare_identical_texts(self, detector):
        """Test that identical texts are fully covered."""
        report = detector.compare_texts("the quick brown fox", "the quick brown fox")

        assert report.total_matches == 1
        assert report.matches == [Match(start1=0, end1=18, start2=0, end2=18)]
        assert report.coverage1 == pytest.approx(100.0)
        assert report.coverage2 == pytest.approx(100.0)
        assert report.min_words == 3
        assert report.metadata["words1"] == 4
        assert report.metadata["longest_match"] == 4

    def test_compare_unrelated_texts(self, detector):
        """Test texts with nothing in common."""
        report = detector.compare_texts("alpha beta gamma delta", "one two three four")

        assert report.total_matches == 0
        assert report.matches == []
        assert report.coverage1 == 0.0
        assert report.metadata["longest_match"] == 0

    def test_compare_empty_text(self, detector):
        """Test that an empty text gives zero coverage rather than an error."""
        report = detector.compare_texts("", "some words here")

        assert report.total_matches == 0
        assert report.coverage1 == 0.0
        assert report.coverage2 == 0.0

    def test_partial_coverage(self, detector):
        """Test coverage of a text that is only partly copied."""
        text1 = "one two three"
        text2 = "one two three four five six"
        report = detector.compare_texts(text1, text2, name1="a.txt", name2="b.txt")

        assert report.file1 == "a.txt"
        assert report.coverage1 == pytest.approx(100.0)
        assert report.coverage2 == pytest.approx(len("one two three") / len(text2) * 100)

    def test_compare_documents(self, detector, tmp_path):
        """Test comparing two files on disk."""
        file1 = tmp_path / "one.txt"
        file2 = tmp_path / "two.txt"
        file1.write_text("Filler. This is a common phrase.", encoding="utf-8")
        file2.write_text("This is a common string. This is a common string.", encoding="utf-8")

        report = detector.compare_documents(str(file1), str(file2))

        assert report.file1 == str(file1)
        assert report.matches == [Match(start1=8, end1=23, start2=0, end2=15)]
        assert report.text1 == "Filler. This is a common phrase."

    def test_min_words_from_config(self):
        """Test that the configured minimum is used."""
        detector = SimilarityDetector(Config(min_words=5))
        report = detector.compare_texts("This is a common string.", "This is a common phrase.")

        assert report.total_matches == 0
        assert report.min_words == 5

    def test_each_text_tokenized_once(self, detector, monkeypatch):
        """Test that comparing reuses the word lists for matching and metadata."""
        calls = []

        def counting_extract_words(text):
            calls.append(text)
            return extract_words(text)

        monkeypatch.setattr("simfind.core.detector.extract_words", counting_extract_words)
        monkeypatch.setattr("simfind.core.matcher.extract_words", counting_extract_words)

        report = detector.compare_texts("one two three four five", "zero one two three four")

        assert calls == ["one two three four five", "zero one two three four"]
        assert report.metadata["longest_match"] == 4
        assert report.metadata["words2"] == 5
