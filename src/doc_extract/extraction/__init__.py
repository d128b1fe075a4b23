from .base import ExtractionEngine
from .extractous_engine import ExtractousEngine, build_extractor

__all__ = ["ExtractionEngine", "ExtractousEngine", "build_extractor"]
