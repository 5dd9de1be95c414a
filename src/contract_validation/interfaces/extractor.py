"""Extraction interfaces for the Contract Validation System."""

from abc import ABC, abstractmethod
from typing import BinaryIO

from ..models.extraction import ExtractedContractInfo


class IDocumentTextExtractor(ABC):
    """
    Abstract interface for turning an uploaded document into plain text.

    Implementations handle one or more binary office formats.
    """

    @abstractmethod
    def extract(self, stream: BinaryIO, filename: str) -> str:
        """
        Extract the plain-text body of a document.

        Args:
            stream: Readable binary stream with the document content.
            filename: Original file name, used to select the format.

        Returns:
            The document text with paragraphs separated by newlines.

        Raises:
            UnsupportedFormatError: If the format is not supported.
            ExtractionFailedError: If the document cannot be read.
        """
        pass

    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """Return the list of accepted file extensions."""
        pass


class IFieldExtractor(ABC):
    """
    Abstract interface for recovering contract fields from document text.

    Extraction is best-effort: implementations must not raise for fields
    they cannot find.
    """

    @abstractmethod
    def extract(self, text: str) -> ExtractedContractInfo:
        """
        Extract structured contract fields from document text.

        Args:
            text: Full plain text of the contract document.

        Returns:
            ExtractedContractInfo with whatever fields were recognized.
        """
        pass
