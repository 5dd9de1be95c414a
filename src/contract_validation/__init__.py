"""
Contract Validation System

Validates uploaded Vietnamese security service contract documents against
the contract data stored for them.
"""

__version__ = "0.1.0"

# Export main components
from .validator import ContractValidator
from .extractors import ContractFieldExtractor
from .parsers import DocxTextExtractor
from .comparison import RecordComparator, ScoringContext, ValidationAggregator
from .models.enums import (
    DifferenceType,
    DocumentType,
    Severity,
    ValidationErrorType,
    ValidationSection,
)
from .models.extraction import (
    ExtractedContractInfo,
    ExtractedHoliday,
    ExtractedLocation,
    ExtractedShift,
)
from .models.records import (
    ContractRecord,
    ContractSnapshot,
    CounterpartyRecord,
    HolidayRecord,
    LocationRequirement,
    ShiftScheduleRecord,
)
from .models.validation import (
    FieldComparison,
    SectionComparison,
    ValidateContractResult,
    ValidationDifference,
    ValidationSummary,
)
from .interfaces import IContractRepository, IDocumentTextExtractor, IFieldExtractor
from .storage import DatabaseManager, InMemoryContractRepository, SqlContractRepository
from .config import (
    ConfigurationManager,
    ConfigurationError,
    ConfigValidationResult,
    ValidatorConfig,
)
from .serialization import result_to_dict, serialize_result, summary_to_dict

__all__ = [
    "ContractValidator",
    "ContractFieldExtractor",
    "DocxTextExtractor",
    "RecordComparator",
    "ScoringContext",
    "ValidationAggregator",
    "DifferenceType",
    "DocumentType",
    "Severity",
    "ValidationErrorType",
    "ValidationSection",
    "ExtractedContractInfo",
    "ExtractedHoliday",
    "ExtractedLocation",
    "ExtractedShift",
    "ContractRecord",
    "ContractSnapshot",
    "CounterpartyRecord",
    "HolidayRecord",
    "LocationRequirement",
    "ShiftScheduleRecord",
    "FieldComparison",
    "SectionComparison",
    "ValidateContractResult",
    "ValidationDifference",
    "ValidationSummary",
    "IContractRepository",
    "IDocumentTextExtractor",
    "IFieldExtractor",
    "DatabaseManager",
    "InMemoryContractRepository",
    "SqlContractRepository",
    "ConfigurationManager",
    "ConfigurationError",
    "ConfigValidationResult",
    "ValidatorConfig",
    "result_to_dict",
    "serialize_result",
    "summary_to_dict",
]
