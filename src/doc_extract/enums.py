import logging
from enum import Enum
from typing import Dict

from .exceptions import UnrecognizedEnumValue

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    PLAIN_TEXT = "PlainText"
    XML = "Xml"


class CharacterSet(str, Enum):
    UTF_8 = "UTF-8"
    UTF_16BE = "UTF-16BE"
    US_ASCII = "US-ASCII"


class OcrStrategy(str, Enum):
    NO_OCR = "NO_OCR"
    AUTO = "AUTO"
    OCR_ONLY = "OCR_ONLY"
    OCR_AND_TEXT_EXTRACTION = "OCR_AND_TEXT_EXTRACTION"


# Keys are lower-cased aliases.
_CHARSET_ALIASES: Dict[str, CharacterSet] = {
    "utf-8": CharacterSet.UTF_8,
    "utf8": CharacterSet.UTF_8,
    "utf_8": CharacterSet.UTF_8,
    "utf-16be": CharacterSet.UTF_16BE,
    "utf16be": CharacterSet.UTF_16BE,
    "utf_16be": CharacterSet.UTF_16BE,
    "utf-16-be": CharacterSet.UTF_16BE,
    "utf_16_be": CharacterSet.UTF_16BE,
    "us-ascii": CharacterSet.US_ASCII,
    "us_ascii": CharacterSet.US_ASCII,
    "usascii": CharacterSet.US_ASCII,
    "ascii": CharacterSet.US_ASCII,
}

_OCR_STRATEGY_ALIASES: Dict[str, OcrStrategy] = {
    "no_ocr": OcrStrategy.NO_OCR,
    "no-ocr": OcrStrategy.NO_OCR,
    "noocr": OcrStrategy.NO_OCR,
    "auto": OcrStrategy.AUTO,
    "ocr_only": OcrStrategy.OCR_ONLY,
    "ocr-only": OcrStrategy.OCR_ONLY,
    "ocronly": OcrStrategy.OCR_ONLY,
    "ocr_and_text_extraction": OcrStrategy.OCR_AND_TEXT_EXTRACTION,
    "ocr-and-text-extraction": OcrStrategy.OCR_AND_TEXT_EXTRACTION,
    "ocrandtextextraction": OcrStrategy.OCR_AND_TEXT_EXTRACTION,
}


def resolve_charset(name: str) -> CharacterSet:
    """
    Maps a character-set name (any case, common punctuation variants) to a CharacterSet.

    Raises:
        UnrecognizedEnumValue: If the name is not a known alias.
    """
    charset = _CHARSET_ALIASES.get(name.strip().lower())
    if charset is None:
        raise UnrecognizedEnumValue("encoding", name, [c.value for c in CharacterSet])
    return charset


def resolve_ocr_strategy(name: str) -> OcrStrategy:
    """
    Maps an OCR strategy name to an OcrStrategy.
    Unknown names fall back to AUTO instead of failing.
    """
    strategy = _OCR_STRATEGY_ALIASES.get(name.strip().lower())
    if strategy is None:
        logger.debug(f"[Resolver] Unknown ocr_strategy {name!r}, using AUTO")
        return OcrStrategy.AUTO
    return strategy
