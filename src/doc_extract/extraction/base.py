from abc import ABC, abstractmethod
from typing import Any, Tuple

from ..config import PipelineConfig


class ExtractionEngine(ABC):
    """
    Abstract base class for extraction engines.
    Each entry point returns the extracted content and the engine's raw metadata.
    """

    @abstractmethod
    def extract_path(self, path: str, config: PipelineConfig) -> Tuple[str, Any]:
        """
        Extracts text and metadata from a local file.

        Args:
            path: Path of the document.
            config: Resolved pipeline configuration.

        Returns:
            Tuple[str, Any]: The content and the engine metadata.
        """
        pass

    @abstractmethod
    def extract_bytes(self, data: bytes, config: PipelineConfig) -> Tuple[str, Any]:
        pass

    @abstractmethod
    def extract_url(self, url: str, config: PipelineConfig) -> Tuple[str, Any]:
        pass
