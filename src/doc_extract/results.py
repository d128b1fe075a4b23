import pprint
from dataclasses import dataclass
from typing import Any, Iterator, Tuple


@dataclass(frozen=True)
class ExtractionResult:
    """
    Extracted content plus the engine metadata rendered as text.
    Unpacks as a pair: `content, metadata = result`.
    """
    content: str
    metadata: str

    def __iter__(self) -> Iterator[str]:
        yield self.content
        yield self.metadata

    def as_tuple(self) -> Tuple[str, str]:
        return (self.content, self.metadata)


def render_metadata(metadata: Any) -> str:
    """
    Renders engine metadata as stable debug text (mapping keys sorted).
    The metadata is not interpreted.
    """
    if isinstance(metadata, str):
        return metadata
    return pprint.pformat(metadata, sort_dicts=True)


def package(content: str, metadata: Any) -> ExtractionResult:
    return ExtractionResult(content=content, metadata=render_metadata(metadata))
