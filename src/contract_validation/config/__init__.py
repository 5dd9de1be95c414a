"""Configuration management for the Contract Validation System."""

from .config_manager import ConfigurationManager
from .models import (
    ConfigurationError,
    ConfigValidationResult,
    ValidatorConfig,
)

__all__ = [
    "ConfigurationManager",
    "ConfigurationError",
    "ConfigValidationResult",
    "ValidatorConfig",
]
