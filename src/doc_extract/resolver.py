"""
Turns an optional, loosely structured configuration payload into a PipelineConfig.

The payload is a JSON object with optional top-level fields (`xml`, `max_length`,
`encoding`) and optional `pdf`, `office` and `ocr` groups. Unknown keys are ignored,
wrongly typed known keys are rejected, and `encoding` must name a supported charset.
"""
import json
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import PipelineConfig, build_ocr_config, build_office_config, build_pdf_config
from .enums import CharacterSet, OutputFormat, resolve_charset
from .exceptions import ConfigurationDeserializationError

logger = logging.getLogger(__name__)

RawSource = Union[str, bytes, Mapping[str, Any]]

# Integers are handed to the engine as signed 32-bit values.
INT32_MAX = 2**31 - 1
# Tesseract accepts these image densities (dpi) and bit depths only.
OCR_DENSITY_RANGE = (150, 1200)
OCR_DEPTHS = (2, 4, 8, 16, 32, 64, 256, 4096)


class _RawGroup(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class RawPdfOptions(_RawGroup):
    ocr_strategy: Optional[str] = None
    extract_annotation_text: Optional[bool] = None
    extract_inline_images: Optional[bool] = None
    extract_unique_inline_images_only: Optional[bool] = None
    extract_marked_content: Optional[bool] = None


class RawOfficeOptions(_RawGroup):
    include_shape_based_content: Optional[bool] = None
    include_slide_notes: Optional[bool] = None
    include_slide_master_content: Optional[bool] = None
    concatenate_phonetic_runs: Optional[bool] = None
    include_headers_and_footers: Optional[bool] = None
    include_deleted_content: Optional[bool] = None
    include_move_from_content: Optional[bool] = None
    include_missing_rows: Optional[bool] = None
    extract_macros: Optional[bool] = None
    extract_all_alternatives_from_msg: Optional[bool] = None


class RawOcrOptions(_RawGroup):
    language: Optional[str] = None
    timeout_seconds: Optional[int] = Field(default=None, ge=0, le=INT32_MAX)
    density: Optional[int] = Field(default=None, ge=OCR_DENSITY_RANGE[0], le=OCR_DENSITY_RANGE[1])
    depth: Optional[int] = None
    apply_rotation: Optional[bool] = None
    enable_image_preprocessing: Optional[bool] = None

    @field_validator("depth")
    @classmethod
    def _check_depth(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value not in OCR_DEPTHS:
            raise ValueError(f"depth must be one of {', '.join(map(str, OCR_DEPTHS))}")
        return value


class RawPayload(_RawGroup):
    """
    Intermediate form of the configuration payload. Every field is optional.
    """
    xml: Optional[bool] = None
    max_length: Optional[int] = Field(default=None, gt=0, le=INT32_MAX)
    encoding: Optional[str] = None
    pdf: Optional[RawPdfOptions] = None
    office: Optional[RawOfficeOptions] = None
    ocr: Optional[RawOcrOptions] = None


def parse_payload(raw: RawSource) -> RawPayload:
    """
    Deserializes a JSON payload (text, bytes or an already decoded mapping).

    Raises:
        ConfigurationDeserializationError: If the payload is malformed or a field has the wrong type.
    """
    if isinstance(raw, Mapping):
        try:
            raw = json.dumps(dict(raw))
        except (TypeError, ValueError) as e:
            raise ConfigurationDeserializationError(str(e)) from e
    try:
        return RawPayload.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigurationDeserializationError(str(e)) from e


def resolve_payload(payload: RawPayload) -> PipelineConfig:
    """
    Builds the PipelineConfig for an already deserialized payload.
    """
    character_set = (
        CharacterSet.UTF_8 if payload.encoding is None
        else resolve_charset(payload.encoding)
    )
    return PipelineConfig(
        output_format=OutputFormat.XML if payload.xml else OutputFormat.PLAIN_TEXT,
        max_output_length=payload.max_length,
        character_set=character_set,
        pdf=build_pdf_config(payload.pdf),
        office=build_office_config(payload.office),
        ocr=build_ocr_config(payload.ocr),
    )


def resolve(raw_payload: Optional[RawSource] = None) -> PipelineConfig:
    """
    Resolves an optional configuration payload.

    Args:
        raw_payload: JSON text, bytes or mapping. None yields the all-defaults configuration.

    Returns:
        PipelineConfig: The fully populated configuration.

    Raises:
        ConfigurationDeserializationError: Malformed payload or wrongly typed field.
        UnrecognizedEnumValue: Unsupported `encoding`.
    """
    if raw_payload is None:
        return PipelineConfig.defaults()
    payload = parse_payload(raw_payload)
    config = resolve_payload(payload)
    logger.debug(f"[Resolver] Resolved configuration: {config}")
    return config


def resolve_flag(as_xml: bool) -> PipelineConfig:
    """
    Legacy call shape: only the XML output flag is given.
    """
    return resolve_payload(RawPayload(xml=bool(as_xml)))
