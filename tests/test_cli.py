import contextlib
import io
import json
import pathlib
import tempfile
import unittest
from unittest.mock import patch

from doc_extract import cli
from doc_extract.exceptions import ExtractionError
from doc_extract.results import ExtractionResult


class TestCli(unittest.TestCase):

    def setUp(self):
        patcher = patch("doc_extract.cli.DocumentPipeline")
        self.pipeline_cls = patcher.start()
        self.addCleanup(patcher.stop)
        self.pipeline = self.pipeline_cls.from_payload.return_value
        self.pipeline.extract_from_file.return_value = ExtractionResult("hello", "{'k': ['v']}")
        self.pipeline.extract_from_url.return_value = ExtractionResult("remote", "{}")

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = cli.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_file(self):
        code, out, _ = self._run(["doc.txt", "--metadata"])
        self.assertEqual(code, 0)
        self.assertIn("hello", out)
        self.assertIn("{'k': ['v']}", out)
        self.pipeline_cls.from_payload.assert_called_once_with(None)
        self.pipeline.extract_from_file.assert_called_once_with("doc.txt")

    def test_url_with_flags(self):
        code, out, _ = self._run(["https://example.com", "--url", "--xml", "--max-length", "10"])
        self.assertEqual(code, 0)
        self.assertIn("remote", out)
        payload = json.loads(self.pipeline_cls.from_payload.call_args[0][0])
        self.assertEqual(payload, {"xml": True, "max_length": 10})

    def test_config_file_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "options.yaml"
            path.write_text("encoding: utf8\npdf:\n  ocr_strategy: NO_OCR\n", encoding="utf-8")
            code, _, _ = self._run(["doc.pdf", "--config-file", str(path)])
        self.assertEqual(code, 0)
        payload = json.loads(self.pipeline_cls.from_payload.call_args[0][0])
        self.assertEqual(payload, {"encoding": "utf8", "pdf": {"ocr_strategy": "NO_OCR"}})

    def test_conflicting_config_sources(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run(["doc.pdf", "--config", "{}", "--xml"])
        self.assertEqual(ctx.exception.code, 2)

    def test_log_level(self):
        code, _, _ = self._run(["doc.txt", "--log-level", "debug"])
        self.assertEqual(code, 0)

    def test_unknown_log_level_is_a_usage_error(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run(["doc.txt", "--log-level", "LOUD"])
        self.assertEqual(ctx.exception.code, 2)
        self.pipeline_cls.from_payload.assert_not_called()

    def test_unknown_log_level_from_environment(self):
        with patch.dict("os.environ", {"DOC_EXTRACT_LOG_LEVEL": "chatty"}):
            with self.assertRaises(SystemExit) as ctx:
                self._run(["doc.txt"])
        self.assertEqual(ctx.exception.code, 2)

    def test_configuration_error_exit_code(self):
        from doc_extract.exceptions import UnrecognizedEnumValue
        self.pipeline_cls.from_payload.side_effect = UnrecognizedEnumValue("encoding", "x", ["UTF-8"])
        code, _, err = self._run(["doc.pdf", "--config", '{"encoding": "x"}'])
        self.assertEqual(code, 2)
        self.assertIn("Configuration error", err)

    def test_extraction_error_exit_code(self):
        self.pipeline.extract_from_file.side_effect = ExtractionError("Extraction failed", "missing")
        code, _, err = self._run(["missing.pdf"])
        self.assertEqual(code, 1)
        self.assertIn("Extraction failed: missing", err)


if __name__ == "__main__":
    unittest.main()
