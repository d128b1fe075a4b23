import logging
from typing import Optional

from .config import PipelineConfig
from .exceptions import ExtractionError
from .extraction import ExtractionEngine, ExtractousEngine
from .ingestion import BytesInput, DocumentInput, FileInput, UrlInput
from .results import ExtractionResult, package

logger = logging.getLogger(__name__)

FILE_PREFIX = "Extraction failed"
BYTES_PREFIX = "Extraction from bytes failed"
URL_PREFIX = "Extraction from URL failed"


def dispatch(
    config: PipelineConfig,
    document_input: DocumentInput,
    engine: Optional[ExtractionEngine] = None,
) -> ExtractionResult:
    """
    Sends one document input to the matching engine entry point.

    Args:
        config: Resolved configuration, passed to the engine unchanged.
        document_input: Exactly one of FileInput, BytesInput, UrlInput.
        engine: Extraction engine. Defaults to ExtractousEngine.

    Returns:
        ExtractionResult: Content and rendered metadata.

    Raises:
        ExtractionError: The engine failed; the message starts with the pathway prefix.
        TypeError: `document_input` is not an input variant.
    """
    engine = engine or ExtractousEngine()

    if isinstance(document_input, FileInput):
        pathway, prefix = "file", FILE_PREFIX
        extract, source = engine.extract_path, document_input.path
    elif isinstance(document_input, BytesInput):
        pathway, prefix = "bytes", BYTES_PREFIX
        extract, source = engine.extract_bytes, document_input.data
    elif isinstance(document_input, UrlInput):
        pathway, prefix = "url", URL_PREFIX
        extract, source = engine.extract_url, document_input.url
    else:
        raise TypeError(f"Unsupported document input: {type(document_input)}")

    try:
        content, metadata = extract(source, config)
    except Exception as e:
        logger.error(f"  [Dispatcher] {prefix}: {e}")
        raise ExtractionError(prefix, str(e), pathway=pathway) from e

    return package(content, metadata)
