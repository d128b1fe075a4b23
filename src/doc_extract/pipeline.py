import asyncio
import logging
import time
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

from .config import PipelineConfig
from .dispatch import dispatch
from .extraction import ExtractionEngine, ExtractousEngine
from .ingestion import BytesInput, DocumentIngestor, DocumentInput, FileInput, UrlInput
from .options import options_to_payload
from .resolver import RawSource, resolve, resolve_flag
from .results import ExtractionResult

logger = logging.getLogger(__name__)

ConfigSource = Union[PipelineConfig, RawSource, None]


class DocumentPipeline:
    """
    Extraction façade: holds one resolved configuration and an engine.
    Holds no per-call state, so one instance can serve concurrent calls.
    """

    def __init__(self,
                 config: Optional[PipelineConfig] = None,
                 engine: Optional[ExtractionEngine] = None):
        self.config = config or PipelineConfig.defaults()
        self.engine = engine or ExtractousEngine()

    @classmethod
    def from_payload(cls, raw_payload: Optional[RawSource], engine: Optional[ExtractionEngine] = None) -> "DocumentPipeline":
        return cls(config=resolve(raw_payload), engine=engine)

    @classmethod
    def from_options(cls, engine: Optional[ExtractionEngine] = None, **options: Any) -> "DocumentPipeline":
        return cls(config=resolve(options_to_payload(**options)), engine=engine)

    def _run(self, document_input: DocumentInput) -> ExtractionResult:
        t0 = time.time()
        logger.info(f"  [Pipeline] Starting {type(document_input).__name__} extraction...")
        result = dispatch(self.config, document_input, engine=self.engine)
        logger.info(f"  [Pipeline] Extraction done ({time.time() - t0:.2f}s) - {len(result.content)} chars")
        return result

    def extract(self, source: Union[str, Path, bytes, BinaryIO, DocumentInput]) -> ExtractionResult:
        """
        Extracts from a path, bytes, file-like object or explicit input variant.
        """
        return self._run(DocumentIngestor.ingest(source))

    def extract_from_file(self, file_path: Union[str, Path]) -> ExtractionResult:
        return self._run(FileInput(path=str(file_path)))

    def extract_from_bytes(self, data: Union[bytes, bytearray]) -> ExtractionResult:
        return self._run(BytesInput(data=bytes(data)))

    def extract_from_url(self, url: str) -> ExtractionResult:
        return self._run(UrlInput(url=url))

    # Extraction is CPU bound; the async variants run it on a worker thread.

    async def aextract_from_file(self, file_path: Union[str, Path]) -> ExtractionResult:
        return await asyncio.to_thread(self.extract_from_file, file_path)

    async def aextract_from_bytes(self, data: Union[bytes, bytearray]) -> ExtractionResult:
        return await asyncio.to_thread(self.extract_from_bytes, data)

    async def aextract_from_url(self, url: str) -> ExtractionResult:
        return await asyncio.to_thread(self.extract_from_url, url)


def _pipeline_for(config: ConfigSource, options: dict) -> DocumentPipeline:
    if config is not None and options:
        raise ValueError("Pass either a configuration payload or keyword options, not both")
    if isinstance(config, PipelineConfig):
        return DocumentPipeline(config=config)
    if config is not None:
        return DocumentPipeline.from_payload(config)
    return DocumentPipeline.from_options(**options)


def extract_from_file(file_path: Union[str, Path], config: ConfigSource = None, **options: Any) -> ExtractionResult:
    """
    Extracts text and metadata from a file.

    Args:
        file_path: Path of the document.
        config: JSON payload (text, bytes or mapping) or a resolved PipelineConfig.
        **options: Keyword options (xml, max_length, encoding, pdf, office, ocr) instead of `config`.

    Raises:
        ConfigurationError: The configuration could not be resolved.
        ExtractionError: The engine failed.
    """
    return _pipeline_for(config, options).extract_from_file(file_path)


def extract_from_bytes(data: Union[bytes, bytearray], config: ConfigSource = None, **options: Any) -> ExtractionResult:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("data must be bytes")
    return _pipeline_for(config, options).extract_from_bytes(data)


def extract_from_url(url: str, config: ConfigSource = None, **options: Any) -> ExtractionResult:
    if not isinstance(url, str):
        raise TypeError("url must be a string")
    return _pipeline_for(config, options).extract_from_url(url)


def extract(file_path: Union[str, Path], as_xml: bool = False) -> ExtractionResult:
    """
    Legacy entry point taking only the XML output flag.
    """
    return DocumentPipeline(config=resolve_flag(as_xml)).extract_from_file(file_path)
