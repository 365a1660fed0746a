#!/usr/bin/env python3

"""Tests for the TextChunk entity and ChunkCollection."""

import pytest

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.domain.entities.chunk_collection import ChunkCollection
from textsplit.chunking.types import LineEnding
from textsplit.chunking.unified.recursive_strategy import RecursiveTextSplitter


class TestTextChunk:
    """Test suite for TextChunk."""

    def test_from_segment(self) -> None:
        """Test raw chunks carry no overlap."""
        chunk = TextChunk.from_segment("hello", 7, " ")

        assert chunk.text == chunk.chunk_text == "hello"
        assert chunk.overlap_text == ""
        assert (chunk.start_position, chunk.end_position) == (7, 12)
        assert chunk.character_count == 5
        assert not chunk.has_overlap

    def test_negative_start_rejected(self) -> None:
        """Test positions cannot be negative."""
        with pytest.raises(ValueError, match="non-negative"):
            TextChunk(text="a", chunk_text="a", start_position=-1, end_position=0, separator_used="")

    def test_end_before_start_rejected(self) -> None:
        """Test end cannot precede start."""
        with pytest.raises(ValueError, match="must not precede"):
            TextChunk(text="a", chunk_text="a", start_position=5, end_position=4, separator_used="")

    def test_to_dict(self) -> None:
        """Test serialization includes all fields."""
        data = TextChunk.from_segment("hi", 0, "char").to_dict()

        assert data["text"] == "hi"
        assert data["separator_used"] == "char"
        assert set(data) >= {"overlap_text", "chunk_index", "start_line", "end_column"}

    def test_repr_truncates(self) -> None:
        """Test long text is shortened in the representation."""
        assert "..." in repr(TextChunk.from_segment("x" * 80, 0, " "))


class TestChunkCollection:
    """Test suite for ChunkCollection."""

    @pytest.fixture()
    def collection(self) -> ChunkCollection:
        return RecursiveTextSplitter(12).split_to_collection("Hello world. Foo bar.")

    def test_gaps_are_dropped_separators(self, collection: ChunkCollection) -> None:
        """Test the skipped sentence separator shows up as a gap."""
        assert collection.find_gaps() == [(11, 13)]
        assert collection.calculate_coverage() == pytest.approx(19 / 21)

    def test_lookup_by_position(self, collection: ChunkCollection) -> None:
        """Test positions resolve to the covering chunk."""
        assert collection.get_chunk_at_position(0).chunk_text == "Hello world"
        assert collection.get_chunk_at_position(11) is None
        assert collection.get_chunk_at_position(12) is None
        assert collection.get_chunk_at_position(13).chunk_text == "Foo bar."

    def test_lookup_by_index_and_range(self, collection: ChunkCollection) -> None:
        """Test index and range queries."""
        assert collection.get_chunk_by_index(1).chunk_text == "Foo bar."
        assert collection.get_chunk_by_index(5) is None
        assert len(collection.get_chunks_in_range(10, 15)) == 2
        assert collection.get_chunks_in_range(11, 13) == []

    def test_completeness(self, collection: ChunkCollection) -> None:
        """Test a split that only drops separators is complete."""
        is_valid, issues = collection.validate_completeness()

        assert is_valid
        assert issues == []

    def test_dropped_custom_separator_is_not_lost_content(self) -> None:
        """Test a custom separator skipped at a cut is accepted."""
        # Arrange
        collection = RecursiveTextSplitter(3, separators=["XYZ", ""]).split_to_collection("abcXYZdef")

        # Act
        is_valid, issues = collection.validate_completeness()

        # Assert
        assert collection.find_gaps() == [(3, 6)]
        assert is_valid
        assert issues == []

    def test_adjacent_dropped_separators_are_not_lost_content(self) -> None:
        """Test a gap holding separators from two levels is accepted."""
        # Arrange
        chunks = [TextChunk.from_segment("ab", 0, ". "), TextChunk.from_segment("cd", 6, "\n\n")]
        chunks[1].chunk_index = 1
        collection = ChunkCollection("ab. \n\ncd", chunks)

        # Act
        is_valid, issues = collection.validate_completeness()

        # Assert
        assert collection.find_gaps() == [(2, 6)]
        assert is_valid
        assert issues == []

    def test_completeness_reports_lost_content(self) -> None:
        """Test a gap that is not a separator is reported."""
        # Arrange
        collection = ChunkCollection("abcdef", [TextChunk.from_segment("abc", 0, "char")], separators=["XYZ", ""])

        # Act
        is_valid, issues = collection.validate_completeness()

        # Assert
        assert not is_valid
        assert issues == ["Content lost between offsets 3 and 6: 'def'"]

    @pytest.mark.parametrize("chunk_size", [1, 5, 13, 40, 200])
    def test_default_splits_are_complete(self, multi_paragraph_document: str, chunk_size: int) -> None:
        """Test splits with the default hierarchy never report lost content."""
        collection = RecursiveTextSplitter(chunk_size).split_to_collection(multi_paragraph_document)

        assert collection.validate_completeness() == (True, [])

    def test_statistics(self, collection: ChunkCollection) -> None:
        """Test the summary report."""
        stats = collection.get_statistics()

        assert stats["chunk_count"] == 2
        assert stats["source_length"] == 21
        assert stats["line_ending"] == "LF"
        assert stats["gaps"] == [[11, 13]]
        assert stats["sizes"]["max_chars"] == 11
        assert stats["sizes"]["min_chars"] == 8
        assert stats["overlap"]["total_overlap_chars"] == 0

    def test_overlap_statistics(self, three_sentence_paragraph: str) -> None:
        """Test overlap sizes are summarized."""
        collection = RecursiveTextSplitter(80, 25).split_to_collection(three_sentence_paragraph)

        stats = collection.calculate_overlap_statistics()

        assert stats["max_overlap"] == 24
        assert stats["min_overlap"] == 21
        assert stats["total_overlap_chars"] == 45

    def test_empty_collection(self) -> None:
        """Test an empty document."""
        collection = ChunkCollection("", [])

        assert len(collection) == 0
        assert collection.find_gaps() == []
        assert collection.calculate_coverage() == 0.0
        assert collection.calculate_size_statistics()["total_chars"] == 0
        assert collection.line_ending is LineEnding.LF

    def test_iteration_and_texts(self, collection: ChunkCollection) -> None:
        """Test the collection iterates in document order."""
        assert [c.chunk_index for c in collection] == [0, 1]
        assert collection.get_texts() == ["Hello world", "Foo bar."]
        assert collection.count_separators() == {"! ": 1, ". ": 1}
