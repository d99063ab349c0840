"""Tests for parsers and DocumentLoader (local files and mocked HTTP)."""
from __future__ import annotations

import asyncio
import tempfile
import unittest
from pathlib import Path

import httpx

from ragngine.core.exceptions import (
    ConfigurationError,
    ExtractionError,
    UnsupportedFileTypeError,
)
from ragngine.rag.loader import DocumentLoader, document_extension, is_url, split_document
from ragngine.rag.parsers import PdfParser, TxtParser, find_parser, get_parser, list_supported_extensions
from ragngine.rag.types import DocumentSource


def _run(coro):
    return asyncio.run(coro)


class TestParsers(unittest.TestCase):
    def test_registered_extensions(self) -> None:
        self.assertEqual(list_supported_extensions(), ("pdf", "txt"))
        self.assertIsInstance(find_parser(".PDF"), PdfParser)
        self.assertIsInstance(find_parser("txt"), TxtParser)
        self.assertIsNone(find_parser("docx"))

    def test_get_parser_unknown_raises(self) -> None:
        with self.assertRaises(UnsupportedFileTypeError):
            get_parser("docx")
        with self.assertRaises(UnsupportedFileTypeError):
            get_parser("")

    def test_separators(self) -> None:
        self.assertEqual(TxtParser().separators, ["\n\n", "\n"])
        self.assertEqual(PdfParser().separators, ["\n\n"])

    def test_txt_decodes_cp1252(self) -> None:
        parsed = TxtParser().extract("café".encode("cp1252"))
        self.assertEqual(parsed.text, "café")
        self.assertEqual(parsed.source_type, "txt")

    def test_txt_missing_file(self) -> None:
        with self.assertRaises(ExtractionError):
            TxtParser().extract(Path("/nonexistent/dir/notes.txt"))

    def test_pdf_garbage_bytes(self) -> None:
        with self.assertRaises(ExtractionError) as ctx:
            PdfParser().extract(b"this is not a pdf")
        self.assertIn("converting PDF to text", str(ctx.exception))


class TestDocumentHelpers(unittest.TestCase):
    def test_is_url(self) -> None:
        self.assertTrue(is_url("https://example.com/a.pdf"))
        self.assertFalse(is_url("./docs/a.pdf"))

    def test_document_extension(self) -> None:
        self.assertEqual(document_extension("./docs/Handbook.PDF"), "pdf")
        self.assertEqual(document_extension("https://example.com/notes.txt?dl=1"), "txt")
        self.assertEqual(document_extension("README"), "")

    def test_empty_url_rejected(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            DocumentSource("")
        self.assertIn("Please provide a document", str(ctx.exception))

    def test_unknown_method_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            DocumentSource("a.txt", method="semantic")


class TestDocumentLoader(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name: str, text: str) -> str:
        path = self.dir / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_split_txt_with_defaults(self) -> None:
        path = self._write("notes.txt", "x" * 1000)
        chunks = _run(split_document(DocumentSource(path)))
        self.assertEqual(len(chunks), 3)
        self.assertTrue(all(len(c.content) <= 400 for c in chunks))
        self.assertEqual(chunks[0].content[-50:], chunks[1].content[:50])
        meta = chunks[0].metadata
        self.assertEqual(meta["source_type"], "txt")
        self.assertEqual(meta["source"], path)

    def test_short_txt_single_chunk(self) -> None:
        path = self._write("short.txt", "Cats sleep a lot.")
        chunks = _run(split_document(DocumentSource(path)))
        self.assertEqual([c.content for c in chunks], ["Cats sleep a lot."])

    def test_source_metadata_merged(self) -> None:
        path = self._write("tagged.txt", "hello")
        chunks = _run(split_document(DocumentSource(path, metadata={"team": "docs"})))
        self.assertEqual(chunks[0].metadata["team"], "docs")

    def test_unsupported_type_returns_none(self) -> None:
        path = self._write("letter.docx", "not really a docx")
        self.assertIsNone(_run(split_document(DocumentSource(path))))

    def test_unsupported_type_skips_reading(self) -> None:
        self.assertIsNone(_run(split_document(DocumentSource("/nonexistent/file.md"))))

    def test_missing_file_raises_extraction_error(self) -> None:
        with self.assertRaises(ExtractionError):
            _run(split_document(DocumentSource(str(self.dir / "missing.txt"))))

    def test_invalid_chunking_fails_before_reading(self) -> None:
        source = DocumentSource("/nonexistent/notes.txt", chunk_size=50, chunk_overlap=50)
        with self.assertRaises(ConfigurationError):
            _run(split_document(source))

    def test_recursive_method_uses_paragraphs(self) -> None:
        text = "\n\n".join(f"Section {i}: " + "data " * 20 for i in range(6))
        path = self._write("sections.txt", text)
        chunks = _run(split_document(DocumentSource(path, chunk_size=250, method="recursive")))
        self.assertTrue(all(len(c.content) <= 250 for c in chunks))
        self.assertTrue(chunks[0].content.startswith("Section 0:"))

    def test_split_from_url(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            self.assertEqual(request.url.path, "/docs/faq.txt")
            return httpx.Response(200, content=b"Remote text about dogs.")

        async def go():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await DocumentLoader(http_client=client).split(
                    DocumentSource("https://example.com/docs/faq.txt")
                )

        chunks = _run(go())
        self.assertEqual([c.content for c in chunks], ["Remote text about dogs."])
        self.assertEqual(chunks[0].metadata["source"], "https://example.com/docs/faq.txt")

    def test_url_http_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        async def go():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await DocumentLoader(http_client=client).split(
                    DocumentSource("https://example.com/missing.txt")
                )

        with self.assertRaises(ExtractionError):
            _run(go())


if __name__ == "__main__":
    unittest.main()
