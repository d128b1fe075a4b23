from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from .enums import CharacterSet, OcrStrategy, OutputFormat, resolve_ocr_strategy

if TYPE_CHECKING:
    from .resolver import RawOcrOptions, RawOfficeOptions, RawPdfOptions


@dataclass(frozen=True)
class PdfConfig:
    """
    PDF parser options. Defaults match the engine's built-in defaults.
    """
    ocr_strategy: OcrStrategy = OcrStrategy.AUTO
    extract_annotation_text: bool = False
    extract_inline_images: bool = False
    extract_unique_inline_images_only: bool = False
    extract_marked_content: bool = False


@dataclass(frozen=True)
class OfficeConfig:
    """
    Office (OOXML, OLE2, MSG) parser options.
    """
    include_shape_based_content: bool = True
    include_slide_notes: bool = True
    include_slide_master_content: bool = True
    concatenate_phonetic_runs: bool = True
    include_headers_and_footers: bool = True
    include_deleted_content: bool = False
    include_move_from_content: bool = False
    include_missing_rows: bool = False
    extract_macros: bool = False
    extract_all_alternatives_from_msg: bool = False


@dataclass(frozen=True)
class OcrConfig:
    """
    Tesseract OCR options. `timeout_seconds` is forwarded to the engine as-is.
    """
    language: str = "eng"
    timeout_seconds: int = 130
    density: int = 300
    depth: int = 4
    apply_rotation: bool = False
    enable_image_preprocessing: bool = False


@dataclass(frozen=True)
class PipelineConfig:
    """
    Fully resolved configuration for one extraction call.
    Every field is populated; `max_output_length=None` leaves the engine's own limit in place.
    """
    output_format: OutputFormat = OutputFormat.PLAIN_TEXT
    max_output_length: Optional[int] = None
    character_set: CharacterSet = CharacterSet.UTF_8
    pdf: PdfConfig = field(default_factory=PdfConfig)
    office: OfficeConfig = field(default_factory=OfficeConfig)
    ocr: OcrConfig = field(default_factory=OcrConfig)

    @classmethod
    def defaults(cls) -> "PipelineConfig":
        return cls()

    @property
    def as_xml(self) -> bool:
        return self.output_format is OutputFormat.XML


def _pick(value, default):
    return default if value is None else value


def build_pdf_config(raw: Optional["RawPdfOptions"]) -> PdfConfig:
    """
    Builds a PdfConfig from the raw `pdf` group, defaulting every absent field.
    """
    base = PdfConfig()
    if raw is None:
        return base
    return PdfConfig(
        ocr_strategy=(
            base.ocr_strategy if raw.ocr_strategy is None
            else resolve_ocr_strategy(raw.ocr_strategy)
        ),
        extract_annotation_text=_pick(raw.extract_annotation_text, base.extract_annotation_text),
        extract_inline_images=_pick(raw.extract_inline_images, base.extract_inline_images),
        extract_unique_inline_images_only=_pick(
            raw.extract_unique_inline_images_only, base.extract_unique_inline_images_only
        ),
        extract_marked_content=_pick(raw.extract_marked_content, base.extract_marked_content),
    )


def build_office_config(raw: Optional["RawOfficeOptions"]) -> OfficeConfig:
    base = OfficeConfig()
    if raw is None:
        return base
    return OfficeConfig(
        include_shape_based_content=_pick(raw.include_shape_based_content, base.include_shape_based_content),
        include_slide_notes=_pick(raw.include_slide_notes, base.include_slide_notes),
        include_slide_master_content=_pick(raw.include_slide_master_content, base.include_slide_master_content),
        concatenate_phonetic_runs=_pick(raw.concatenate_phonetic_runs, base.concatenate_phonetic_runs),
        include_headers_and_footers=_pick(raw.include_headers_and_footers, base.include_headers_and_footers),
        include_deleted_content=_pick(raw.include_deleted_content, base.include_deleted_content),
        include_move_from_content=_pick(raw.include_move_from_content, base.include_move_from_content),
        include_missing_rows=_pick(raw.include_missing_rows, base.include_missing_rows),
        extract_macros=_pick(raw.extract_macros, base.extract_macros),
        extract_all_alternatives_from_msg=_pick(
            raw.extract_all_alternatives_from_msg, base.extract_all_alternatives_from_msg
        ),
    )


def build_ocr_config(raw: Optional["RawOcrOptions"]) -> OcrConfig:
    base = OcrConfig()
    if raw is None:
        return base
    return OcrConfig(
        language=_pick(raw.language, base.language),
        timeout_seconds=_pick(raw.timeout_seconds, base.timeout_seconds),
        density=_pick(raw.density, base.density),
        depth=_pick(raw.depth, base.depth),
        apply_rotation=_pick(raw.apply_rotation, base.apply_rotation),
        enable_image_preprocessing=_pick(raw.enable_image_preprocessing, base.enable_image_preprocessing),
    )
