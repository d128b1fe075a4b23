"""
doc_extract Library

Configuration resolution and dispatch in front of the Extractous extraction engine.

Usage:
    from doc_extract import extract_from_file

    result = extract_from_file("document.pdf", xml=True, pdf={"ocr_strategy": "no_ocr"})
    content, metadata = result
"""

__version__ = "0.1.0"

from .config import OcrConfig, OfficeConfig, PdfConfig, PipelineConfig
from .enums import CharacterSet, OcrStrategy, OutputFormat, resolve_charset, resolve_ocr_strategy
from .exceptions import (
    ConfigurationDeserializationError,
    ConfigurationError,
    DocExtractError,
    ExtractionError,
    UnrecognizedEnumValue,
)
from .ingestion import BytesInput, FileInput, UrlInput
from .pipeline import DocumentPipeline, extract, extract_from_bytes, extract_from_file, extract_from_url
from .resolver import resolve
from .results import ExtractionResult

__all__ = [
    "__version__",
    # Entry points
    "DocumentPipeline",
    "extract",
    "extract_from_file",
    "extract_from_bytes",
    "extract_from_url",
    "resolve",
    # Configuration
    "PipelineConfig",
    "PdfConfig",
    "OfficeConfig",
    "OcrConfig",
    "OutputFormat",
    "CharacterSet",
    "OcrStrategy",
    "resolve_charset",
    "resolve_ocr_strategy",
    # Inputs and results
    "FileInput",
    "BytesInput",
    "UrlInput",
    "ExtractionResult",
    # Errors
    "DocExtractError",
    "ConfigurationError",
    "ConfigurationDeserializationError",
    "UnrecognizedEnumValue",
    "ExtractionError",
]
