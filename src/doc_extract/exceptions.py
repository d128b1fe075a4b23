from typing import Iterable, List


class DocExtractError(Exception):
    """Base exception for the library."""
    pass

class ConfigurationError(DocExtractError):
    """Invalid configuration."""
    pass

class ConfigurationDeserializationError(ConfigurationError):
    """Configuration payload is not well-formed or has wrongly typed fields."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid configuration payload: {detail}")

class UnrecognizedEnumValue(ConfigurationError):
    """A strictly validated field holds a value outside its accepted set."""

    def __init__(self, field: str, value: str, supported: Iterable[str]):
        self.field = field
        self.value = value
        self.supported: List[str] = list(supported)
        super().__init__(
            f"Unsupported {field} {value!r}. Supported values: {', '.join(self.supported)}"
        )

class ExtractionError(DocExtractError):
    """Failed to extract text or metadata."""

    def __init__(self, prefix: str, message: str, pathway: str = "file"):
        self.prefix = prefix
        self.pathway = pathway
        super().__init__(f"{prefix}: {message}")
