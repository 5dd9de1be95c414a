"""Custom exceptions for document text extraction."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ParseError(Exception):
    """
    Base exception for document parsing errors.

    Provides detailed error information including file name, location,
    and additional context for debugging and user feedback.

    Attributes:
        message: Human-readable error description.
        file_path: Name or path of the file that caused the error.
        location: Specific location within the file (extension, archive part).
        details: Additional error details.
    """
    message: str
    file_path: Optional[str] = None
    location: Optional[str] = None
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.location:
            parts.append(f"Location: {self.location}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "file_path": self.file_path,
            "location": self.location,
            "details": self.details,
        }


@dataclass
class DocumentCorruptedError(ParseError):
    """
    Exception raised when a document is corrupted or unreadable.

    This error indicates that the file was supplied but cannot be opened
    as a valid Office Open XML package.
    """


@dataclass
class ExtractionFailedError(DocumentCorruptedError):
    """Raised when text could not be pulled out of an uploaded document."""


@dataclass
class UnsupportedFormatError(ParseError):
    """
    Exception raised when a document format is not supported.

    The supported extensions are carried in ``details`` when known.
    """
