import unittest

from doc_extract.enums import CharacterSet, OcrStrategy, resolve_charset, resolve_ocr_strategy
from doc_extract.exceptions import ConfigurationError, UnrecognizedEnumValue


class TestResolveCharset(unittest.TestCase):

    def test_aliases_resolve_case_insensitively(self):
        cases = {
            CharacterSet.UTF_8: ["UTF-8", "utf-8", "utf8", "UTF8", "utf_8", "Utf_8"],
            CharacterSet.UTF_16BE: ["UTF-16BE", "utf-16be", "utf16be", "UTF_16BE", "utf-16-be"],
            CharacterSet.US_ASCII: ["US-ASCII", "us-ascii", "us_ascii", "USASCII", "ascii"],
        }
        for expected, names in cases.items():
            for name in names:
                with self.subTest(name=name):
                    self.assertIs(resolve_charset(name), expected)

    def test_surrounding_whitespace_is_ignored(self):
        self.assertIs(resolve_charset("  utf8 "), CharacterSet.UTF_8)

    def test_unknown_charset_is_rejected(self):
        for name in ["latin1", "utf-16", "", "utf-8x"]:
            with self.subTest(name=name):
                with self.assertRaises(UnrecognizedEnumValue) as ctx:
                    resolve_charset(name)
                self.assertEqual(ctx.exception.value, name)
                self.assertEqual(ctx.exception.field, "encoding")
                self.assertEqual(ctx.exception.supported, ["UTF-8", "UTF-16BE", "US-ASCII"])

    def test_unrecognized_value_is_a_configuration_error(self):
        with self.assertRaises(ConfigurationError) as ctx:
            resolve_charset("ebcdic")
        self.assertIn("'ebcdic'", str(ctx.exception))
        self.assertIn("UTF-16BE", str(ctx.exception))


class TestResolveOcrStrategy(unittest.TestCase):

    def test_aliases(self):
        cases = {
            "NO_OCR": OcrStrategy.NO_OCR,
            "no-ocr": OcrStrategy.NO_OCR,
            "NoOcr": OcrStrategy.NO_OCR,
            "auto": OcrStrategy.AUTO,
            "OCR_ONLY": OcrStrategy.OCR_ONLY,
            "ocr-only": OcrStrategy.OCR_ONLY,
            "OCR_AND_TEXT_EXTRACTION": OcrStrategy.OCR_AND_TEXT_EXTRACTION,
            "OcrAndTextExtraction": OcrStrategy.OCR_AND_TEXT_EXTRACTION,
        }
        for name, expected in cases.items():
            with self.subTest(name=name):
                self.assertIs(resolve_ocr_strategy(name), expected)

    def test_unknown_strategy_falls_back_to_auto(self):
        for name in ["", "sometimes", "OCR", "no ocr", "ocr_and_text"]:
            with self.subTest(name=name):
                self.assertIs(resolve_ocr_strategy(name), OcrStrategy.AUTO)


if __name__ == "__main__":
    unittest.main()
