"""Document text extraction for the Contract Validation System."""

from .word_parser import DocxTextExtractor
from .exceptions import (
    ParseError,
    DocumentCorruptedError,
    ExtractionFailedError,
    UnsupportedFormatError,
)

__all__ = [
    "DocxTextExtractor",
    "ParseError",
    "DocumentCorruptedError",
    "ExtractionFailedError",
    "UnsupportedFormatError",
]
