"""Record comparison and result aggregation for the Contract Validation System."""

from .aggregator import ValidationAggregator
from .record_comparator import RecordComparator, ScoringContext
from .text_utils import contains_either, fold, percentage, remove_diacritics

__all__ = [
    "ValidationAggregator",
    "RecordComparator",
    "ScoringContext",
    "contains_either",
    "fold",
    "percentage",
    "remove_diacritics",
]
