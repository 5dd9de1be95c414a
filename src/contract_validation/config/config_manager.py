"""Configuration Manager implementation for the Contract Validation System.

This module loads validator settings from a dictionary, a JSON file or
environment variables, validates them, and exposes the resulting
ValidatorConfig.
"""

import json
import logging
import os
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .models import ConfigurationError, ConfigValidationResult, ValidatorConfig


logger = logging.getLogger(__name__)

ENV_PREFIX = "CONTRACT_VALIDATION_"

_INT_FIELDS = (
    "shift_minutes_tolerance",
    "shift_hours_tolerance",
    "holiday_window_chars",
    "max_upload_bytes",
)


class ConfigurationManager:
    """
    Manager for validator configuration.

    Starts from the defaults and replaces them only when a source passes
    validation.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self._configuration = config or ValidatorConfig()
        self._is_loaded = False

    @property
    def configuration(self) -> ValidatorConfig:
        """Get the current validator configuration."""
        return self._configuration

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    def load(self, source: Union[str, Path, Dict[str, Any]]) -> ConfigValidationResult:
        """
        Load and validate validator settings.

        Supports loading from:
        - JSON file path
        - Dictionary of settings

        Args:
            source: File path or dictionary.

        Returns:
            ConfigValidationResult indicating success, with any warnings.

        Raises:
            ConfigurationError: If validation fails and configuration cannot be applied.
        """
        raw_data = self._parse_source(source)
        if not isinstance(raw_data, dict):
            raise ConfigurationError("Configuration must be a JSON object")

        result, config = self._validate_settings(raw_data)
        if not result.is_valid:
            raise ConfigurationError(
                "Validator configuration validation failed",
                validation_result=result
            )

        self._configuration = config
        self._is_loaded = True
        logger.info(f"Loaded validator configuration: {self.to_dict()}")
        return result

    def load_from_env(self, environ: Optional[Mapping[str, str]] = None) -> ConfigValidationResult:
        """
        Load settings from ``CONTRACT_VALIDATION_*`` environment variables.

        ``CONTRACT_VALIDATION_SUPPORTED_EXTENSIONS`` is a comma-separated list.
        Variables that are not set keep their current values.
        """
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        for config_field in fields(ValidatorConfig):
            key = f"{ENV_PREFIX}{config_field.name.upper()}"
            if key not in environ:
                continue
            value = environ[key]
            if config_field.name in _INT_FIELDS:
                try:
                    data[config_field.name] = int(value)
                except ValueError:
                    data[config_field.name] = value
            elif config_field.name == "supported_extensions":
                data[config_field.name] = [v.strip() for v in value.split(",") if v.strip()]
            else:
                data[config_field.name] = value or None

        return self.load({**self.to_dict(), **data})

    def _validate_settings(
        self,
        data: Dict[str, Any]
    ) -> tuple[ConfigValidationResult, Optional[ValidatorConfig]]:
        """Validate a settings dictionary and build the config object."""
        result = ConfigValidationResult(is_valid=True)
        known = {f.name for f in fields(ValidatorConfig)}

        for key in data:
            if key not in known:
                result.add_warning(f"Unknown configuration key '{key}' ignored")

        merged = {**asdict(self._configuration), **{k: v for k, v in data.items() if k in known}}

        for name in _INT_FIELDS:
            value = merged[name]
            if not isinstance(value, int) or isinstance(value, bool):
                result.add_error(f"'{name}' must be an integer")
            elif value < 0:
                result.add_error(f"'{name}' must not be negative")

        if isinstance(merged["holiday_window_chars"], int) and merged["holiday_window_chars"] == 0:
            result.add_error("'holiday_window_chars' must be greater than zero")

        extensions = merged["supported_extensions"]
        if not isinstance(extensions, list) or not extensions:
            result.add_error("'supported_extensions' must be a non-empty list")
        elif not all(isinstance(e, str) and e.startswith(".") for e in extensions):
            result.add_error("All supported extensions must be strings starting with '.'")
        else:
            merged["supported_extensions"] = [e.lower() for e in extensions]

        database_url = merged["database_url"]
        if database_url is not None and (not isinstance(database_url, str) or not database_url.strip()):
            result.add_error("'database_url' must be a non-empty string when set")

        if not result.is_valid:
            return result, None

        return result, ValidatorConfig(**merged)

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Any:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)

        return source

    def save(self, path: Union[str, Path]) -> None:
        """Write the current configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._configuration = ValidatorConfig()
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as a dictionary."""
        return asdict(self._configuration)
