import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union


@dataclass(frozen=True)
class FileInput:
    path: str


@dataclass(frozen=True)
class BytesInput:
    data: bytes


@dataclass(frozen=True)
class UrlInput:
    url: str


DocumentInput = Union[FileInput, BytesInput, UrlInput]


class DocumentIngestor:
    """
    Handles ingestion of documents from file paths, bytes, or file-like objects.
    """

    @staticmethod
    def ingest(source: Union[str, Path, bytes, bytearray, memoryview, BinaryIO, DocumentInput]) -> DocumentInput:
        """
        Wraps a document source in the matching input variant.

        Args:
            source: File path (str/Path), raw bytes, file-like object, or an input variant.

        Returns:
            DocumentInput: FileInput, BytesInput or UrlInput.

        Raises:
            TypeError: If the source type is not supported.
        """
        if isinstance(source, (FileInput, BytesInput, UrlInput)):
            return source

        if isinstance(source, (str, os.PathLike)):
            return FileInput(path=os.fspath(source))

        elif isinstance(source, (bytes, bytearray, memoryview)):
            return BytesInput(data=bytes(source))

        elif hasattr(source, 'read'):
            # File-like object
            content = source.read()
            if isinstance(content, str):
                content = content.encode('utf-8') # normalize to bytes
            return BytesInput(data=bytes(content))

        else:
            raise TypeError(f"Unsupported source type: {type(source)}")
