import io
import unittest
from pathlib import Path

from doc_extract.ingestion import BytesInput, DocumentIngestor, FileInput, UrlInput


class TestDocumentIngestor(unittest.TestCase):

    def test_paths(self):
        self.assertEqual(DocumentIngestor.ingest("doc.pdf"), FileInput(path="doc.pdf"))
        self.assertEqual(DocumentIngestor.ingest(Path("dir") / "doc.pdf"), FileInput(path=str(Path("dir") / "doc.pdf")))

    def test_missing_file_is_not_checked(self):
        self.assertEqual(DocumentIngestor.ingest("/does/not/exist.pdf"), FileInput(path="/does/not/exist.pdf"))

    def test_bytes(self):
        self.assertEqual(DocumentIngestor.ingest(b"%PDF-1.4"), BytesInput(data=b"%PDF-1.4"))
        self.assertEqual(DocumentIngestor.ingest(bytearray(b"abc")), BytesInput(data=b"abc"))
        self.assertEqual(DocumentIngestor.ingest(memoryview(b"abc")), BytesInput(data=b"abc"))

    def test_file_like_objects(self):
        self.assertEqual(DocumentIngestor.ingest(io.BytesIO(b"data")), BytesInput(data=b"data"))
        self.assertEqual(DocumentIngestor.ingest(io.StringIO("héllo")), BytesInput(data="héllo".encode("utf-8")))

    def test_input_variants_pass_through(self):
        url = UrlInput(url="https://example.com/doc.html")
        self.assertIs(DocumentIngestor.ingest(url), url)

    def test_unsupported_source(self):
        with self.assertRaises(TypeError):
            DocumentIngestor.ingest(42)


if __name__ == "__main__":
    unittest.main()
