"""Abstract interfaces for the Contract Validation System."""

from .extractor import IDocumentTextExtractor, IFieldExtractor
from .repository import IContractRepository

__all__ = [
    "IDocumentTextExtractor",
    "IFieldExtractor",
    "IContractRepository",
]
