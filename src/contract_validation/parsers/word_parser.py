"""Word document (.docx) text extraction."""

import logging
from pathlib import PurePath
from typing import BinaryIO, List, Optional
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from ..interfaces.extractor import IDocumentTextExtractor
from ..models.enums import DocumentType
from .exceptions import ExtractionFailedError, UnsupportedFormatError


logger = logging.getLogger(__name__)


class DocxTextExtractor(IDocumentTextExtractor):
    """
    Plain-text extractor for Word (.docx) documents.

    Walks the body paragraphs in document order and joins their visible
    text with line breaks. Headers, footers and tables are not read.
    """

    SUPPORTED_EXTENSIONS = {".docx": DocumentType.WORD}

    def __init__(self, supported_extensions: Optional[List[str]] = None):
        if supported_extensions is None:
            supported_extensions = list(self.SUPPORTED_EXTENSIONS)
        self._extensions = [
            ext.lower() for ext in supported_extensions
            if ext.lower() in self.SUPPORTED_EXTENSIONS
        ]

    def extract(self, stream: BinaryIO, filename: str) -> str:
        """
        Extract the body text of a document.

        Args:
            stream: Readable binary stream with the document content.
            filename: Original file name; its extension selects the format.

        Returns:
            Paragraph texts, each followed by a newline. May be blank.

        Raises:
            UnsupportedFormatError: If the extension is not supported.
            ExtractionFailedError: If the document cannot be opened or read.
        """
        self.detect_document_type(filename)

        try:
            doc = Document(stream)
        except (BadZipFile, PackageNotFoundError, KeyError) as e:
            raise ExtractionFailedError(
                message=f"Document is corrupted or not a valid Word file: {e}",
                file_path=filename,
                location="package",
                details={"original_error": str(e)},
            ) from e
        except Exception as e:
            raise ExtractionFailedError(
                message=f"Failed to open document: {e}",
                file_path=filename,
                details={"original_error": str(e)},
            ) from e

        lines = []
        for para in doc.paragraphs:
            lines.append(para.text)
            lines.append("\n")
        text = "".join(lines)

        logger.info(
            f"Extracted {len(doc.paragraphs)} paragraphs ({len(text)} chars) from {filename}"
        )
        return text

    def detect_document_type(self, filename: str) -> DocumentType:
        """
        Detect the document type from the file extension.

        Raises:
            UnsupportedFormatError: If the extension is not supported.
        """
        suffix = PurePath(filename).suffix.lower()
        if suffix not in self._extensions:
            raise UnsupportedFormatError(
                message=f"File type {suffix or '(none)'} is not supported",
                file_path=filename,
                location="file extension",
                details={"supported_formats": self.supported_extensions()},
            )
        return self.SUPPORTED_EXTENSIONS[suffix]

    def supported_extensions(self) -> list[str]:
        """Return the list of accepted file extensions."""
        return list(self._extensions)
