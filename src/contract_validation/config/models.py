"""Data models for configuration management."""

from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass
class ValidatorConfig:
    """
    Tunable settings for contract validation.

    Tolerances apply to shift matching; the holiday window bounds how much
    of clause 3.4 is searched for holidays.
    """
    shift_minutes_tolerance: int = 30
    shift_hours_tolerance: int = 1
    holiday_window_chars: int = 3000
    supported_extensions: List[str] = field(default_factory=lambda: [".docx"])
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    database_url: Optional[str] = None


@dataclass
class ConfigValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ConfigValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result
