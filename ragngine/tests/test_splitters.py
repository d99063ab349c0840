"""Tests for character and recursive splitters."""
import pytest

from ragngine.core.exceptions import ConfigurationError
from ragngine.rag.splitters import CharacterSplitter, RecursiveCharacterSplitter

LONG_TEXT = "".join(chr(ord("a") + (i % 26)) for i in range(1000))


class TestCharacterSplitter:
    def test_default_sizes(self):
        splitter = CharacterSplitter()
        assert splitter.chunk_size == 400
        assert splitter.chunk_overlap == 50

    def test_chunks_bounded_and_overlapping(self):
        chunks = CharacterSplitter(400, 50).split(LONG_TEXT)
        assert len(chunks) == 3
        assert all(c.char_count <= 400 for c in chunks)
        for prev, nxt in zip(chunks, chunks[1:]):
            assert prev.content[-50:] == nxt.content[:50]

    def test_chunks_cover_text(self):
        chunks = CharacterSplitter(400, 50).split(LONG_TEXT)
        rebuilt = chunks[0].content + "".join(c.content[50:] for c in chunks[1:])
        assert rebuilt == LONG_TEXT

    def test_short_text_single_chunk(self):
        chunks = CharacterSplitter().split("A short note about cats.")
        assert len(chunks) == 1
        assert chunks[0].content == "A short note about cats."
        assert chunks[0].chunk_index == 0

    def test_exact_chunk_size_single_chunk(self):
        assert len(CharacterSplitter(400, 50).split("x" * 400)) == 1

    def test_empty_and_whitespace(self):
        assert CharacterSplitter().split("") == []
        assert CharacterSplitter().split("   \n\n  ") == []

    def test_metadata_copied_per_chunk(self):
        meta = {"source": "a.txt"}
        chunks = CharacterSplitter(10, 2).split("x" * 30, metadata=meta)
        assert [c.chunk_index for c in chunks] == list(range(len(chunks)))
        chunks[0].metadata["source"] = "changed"
        assert chunks[1].metadata["source"] == "a.txt"
        assert meta["source"] == "a.txt"

    def test_to_document_carries_chunk_index(self):
        chunk = CharacterSplitter().split("hello", metadata={"source": "a.txt"})[0]
        doc = chunk.to_document()
        assert doc.page_content == "hello"
        assert doc.metadata == {"source": "a.txt", "chunk_index": 0}

    @pytest.mark.parametrize(
        "size,overlap",
        [(0, 0), (-5, 0), (100, -1), (100, 100), (100, 150)],
    )
    def test_invalid_config_rejected(self, size, overlap):
        with pytest.raises(ConfigurationError):
            CharacterSplitter(size, overlap)


class TestRecursiveCharacterSplitter:
    PARAGRAPHS = [f"Paragraph {i}. " + "word " * 30 for i in range(10)]

    def test_chunks_never_exceed_size(self):
        text = "\n\n".join(self.PARAGRAPHS)
        chunks = RecursiveCharacterSplitter(400, 50).split(text)
        assert len(chunks) > 1
        assert all(len(c.content) <= 400 for c in chunks)

    def test_paragraphs_kept_whole(self):
        text = "\n\n".join(self.PARAGRAPHS)
        chunks = RecursiveCharacterSplitter(400, 50).split(text)
        for i, paragraph in enumerate(self.PARAGRAPHS):
            assert any(paragraph in c.content for c in chunks), f"paragraph {i} was cut"

    def test_unbroken_text_falls_back_to_windows(self):
        chunks = RecursiveCharacterSplitter(400, 50).split(LONG_TEXT)
        assert [c.content for c in chunks] == [
            LONG_TEXT[0:400], LONG_TEXT[350:750], LONG_TEXT[700:1000]
        ]

    def test_oversized_paragraph_split_on_lines(self):
        lines = [f"line {i:03d} " + "z" * 40 for i in range(20)]
        text = "\n".join(lines) + "\n\nTail paragraph."
        chunks = RecursiveCharacterSplitter(200, 0).split(text)
        assert all(len(c.content) <= 200 for c in chunks)
        assert chunks[-1].content.endswith("Tail paragraph.")

    def test_short_text_single_chunk(self):
        chunks = RecursiveCharacterSplitter(separators=["\n\n"]).split("One.\n\nTwo.")
        assert [c.content for c in chunks] == ["One.\n\nTwo."]
