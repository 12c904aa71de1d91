"""Plain-text extraction from uploaded TXT, PDF and DOCX files.

TXT is decoded directly. PDF and DOCX go through docling, which is an
optional dependency (``pip install docsim[extraction]``).
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when a file's text cannot be extracted."""


class FileType(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"

    @classmethod
    def from_extension(cls, extension: str) -> Optional["FileType"]:
        ext = (extension or "").lower().lstrip(".")
        for ft in cls:
            if ft.value == ext:
                return ft
        return None

    @classmethod
    def from_filename(cls, filename: str) -> Optional["FileType"]:
        suffix = Path(filename or "").suffix
        if not suffix:
            return None
        return cls.from_extension(suffix)


def extract_txt(data: bytes) -> str:
    try:
        return data.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise ExtractionError(f"Failed to decode TXT as UTF-8: {e}") from e


_converter = None
_converter_lock = threading.Lock()


def _get_converter():
    global _converter
    with _converter_lock:
        if _converter is None:
            try:
                from docling.document_converter import DocumentConverter
            except ImportError as e:
                raise ExtractionError(
                    "PDF/DOCX extraction requires 'docling' (pip install docsim[extraction])"
                ) from e
            logger.info("Initializing docling DocumentConverter")
            _converter = DocumentConverter()
        return _converter


def extract_with_docling(data: bytes, file_type: FileType) -> str:
    converter = _get_converter()
    label = file_type.value.upper()
    try:
        from docling.datamodel.base_models import DocumentStream

        stream = DocumentStream(name=f"upload.{file_type.value}", stream=BytesIO(data))
        result = converter.convert(stream)
        text = result.document.export_to_text()
    except Exception as e:
        raise ExtractionError(f"Failed to extract {label}: {e}") from e
    return (text or "").strip()


def extract_text(data: bytes, file_type: FileType) -> str:
    """Return the stripped text content of *data* interpreted as *file_type*."""
    if file_type is FileType.TXT:
        return extract_txt(data)
    return extract_with_docling(data, file_type)
