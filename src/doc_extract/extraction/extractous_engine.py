import logging
from typing import Any, Tuple

from extractous import (
    CharSet,
    Extractor,
    OfficeParserConfig,
    PdfOcrStrategy,
    PdfParserConfig,
    TesseractOcrConfig,
)

from ..config import OcrConfig, OfficeConfig, PdfConfig, PipelineConfig
from ..enums import CharacterSet, OcrStrategy
from .base import ExtractionEngine

logger = logging.getLogger(__name__)

_CHARSETS = {
    CharacterSet.UTF_8: CharSet.UTF_8,
    CharacterSet.UTF_16BE: CharSet.UTF_16BE,
    CharacterSet.US_ASCII: CharSet.US_ASCII,
}

_OCR_STRATEGIES = {
    OcrStrategy.NO_OCR: PdfOcrStrategy.NO_OCR,
    OcrStrategy.AUTO: PdfOcrStrategy.AUTO,
    OcrStrategy.OCR_ONLY: PdfOcrStrategy.OCR_ONLY,
    OcrStrategy.OCR_AND_TEXT_EXTRACTION: PdfOcrStrategy.OCR_AND_TEXT_EXTRACTION,
}


def _pdf_parser_config(pdf: PdfConfig) -> PdfParserConfig:
    return (
        PdfParserConfig()
        .set_ocr_strategy(_OCR_STRATEGIES[pdf.ocr_strategy])
        .set_extract_annotation_text(pdf.extract_annotation_text)
        .set_extract_inline_images(pdf.extract_inline_images)
        .set_extract_unique_inline_images_only(pdf.extract_unique_inline_images_only)
        .set_extract_marked_content(pdf.extract_marked_content)
    )


def _office_parser_config(office: OfficeConfig) -> OfficeParserConfig:
    return (
        OfficeParserConfig()
        .set_include_shape_based_content(office.include_shape_based_content)
        .set_include_slide_notes(office.include_slide_notes)
        .set_include_slide_master_content(office.include_slide_master_content)
        .set_concatenate_phonetic_runs(office.concatenate_phonetic_runs)
        .set_include_headers_and_footers(office.include_headers_and_footers)
        .set_include_deleted_content(office.include_deleted_content)
        .set_include_move_from_content(office.include_move_from_content)
        .set_include_missing_rows(office.include_missing_rows)
        .set_extract_macros(office.extract_macros)
        .set_extract_all_alternatives_from_msg(office.extract_all_alternatives_from_msg)
    )


def _ocr_config(ocr: OcrConfig) -> TesseractOcrConfig:
    return (
        TesseractOcrConfig()
        .set_language(ocr.language)
        .set_timeout_seconds(ocr.timeout_seconds)
        .set_density(ocr.density)
        .set_depth(ocr.depth)
        .set_apply_rotation(ocr.apply_rotation)
        .set_enable_image_preprocessing(ocr.enable_image_preprocessing)
    )


def build_extractor(config: PipelineConfig) -> Extractor:
    """
    Creates an Extractor with every option of `config` applied.
    The Extractor setters return new instances, so the result is rebound at each step.
    """
    extractor = (
        Extractor()
        .set_xml_output(config.as_xml)
        .set_encoding(_CHARSETS[config.character_set])
        .set_pdf_config(_pdf_parser_config(config.pdf))
        .set_office_config(_office_parser_config(config.office))
        .set_ocr_config(_ocr_config(config.ocr))
    )
    if config.max_output_length is not None:
        extractor = extractor.set_extract_string_max_length(config.max_output_length)
    return extractor


class ExtractousEngine(ExtractionEngine):
    """
    Extracts text and metadata with Extractous (Apache Tika compiled to a native library).
    A fresh Extractor is built for every call.
    """

    def extract_path(self, path: str, config: PipelineConfig) -> Tuple[str, Any]:
        logger.debug(f"    [ExtractousEngine] extract_file_to_string({path!r})")
        return build_extractor(config).extract_file_to_string(path)

    def extract_bytes(self, data: bytes, config: PipelineConfig) -> Tuple[str, Any]:
        logger.debug(f"    [ExtractousEngine] extract_bytes_to_string({len(data)} bytes)")
        return build_extractor(config).extract_bytes_to_string(bytearray(data))

    def extract_url(self, url: str, config: PipelineConfig) -> Tuple[str, Any]:
        logger.debug(f"    [ExtractousEngine] extract_url_to_string({url!r})")
        return build_extractor(config).extract_url_to_string(url)
