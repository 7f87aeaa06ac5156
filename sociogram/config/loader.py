"""
ConfigLoader - Unified fast-fail configuration management.

Resolves each risk-model constant from, in order: explicit overrides,
environment variables, and the schema default. Unknown keys and invalid
values fail immediately instead of silently falling back.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Any, cast

from .errors import (
    ConfigError,
    UnknownKeyError,
    ValidationError,
)
from .schema import CONFIG_SCHEMA
from .types import ConfigType

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Unified configuration loader with fast-fail behavior.

    Usage:
        # Initialize at application startup (validates every key)
        ConfigLoader.initialize(overrides={"analysis.at_risk_threshold": 70})

        # Get singleton instance
        loader = ConfigLoader.get_instance()

        # Typed accessors
        threshold = loader.get_int("analysis.at_risk_threshold")

        # Test substitution
        with ConfigLoader.use(ConfigLoader(overrides={...})):
            pass
    """

    _instance: ConfigLoader | None = None
    _initialized: bool = False

    def __init__(self, overrides: Mapping[str, Any] | None = None):
        """
        Initialize the config loader.

        Args:
            overrides: Values that take precedence over environment and defaults.

        Raises:
            UnknownKeyError: If an override names a key not in the schema
        """
        overrides = dict(overrides or {})
        unknown = sorted(key for key in overrides if key not in CONFIG_SCHEMA)
        if unknown:
            raise UnknownKeyError(f"Unknown config keys in overrides: {unknown}")

        self._overrides = overrides
        self._validated = False

    @classmethod
    def from_json_file(cls, path: str | Path) -> ConfigLoader:
        """
        Build a loader whose overrides come from a flat JSON object.

        Args:
            path: File containing e.g. {"analysis.at_risk_threshold": 70}

        Raises:
            ConfigError: If the file is not a JSON object
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not read config file '{path}': {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file '{path}' must contain a JSON object")

        logger.info(f"Loaded {len(data)} config overrides from {path}")
        return cls(overrides=data)

    @classmethod
    def initialize(
        cls,
        overrides: Mapping[str, Any] | None = None,
        validate_on_init: bool = True,
    ) -> ConfigLoader:
        """
        Initialize the singleton ConfigLoader.

        Args:
            overrides: Explicit values for any schema keys
            validate_on_init: If True, resolves and validates every key now

        Returns:
            The initialized ConfigLoader instance

        Raises:
            ConfigError: If any key resolves to an invalid value
        """
        if cls._initialized:
            logger.debug("ConfigLoader already initialized, returning existing instance")
            return cls._instance  # type: ignore

        instance = cls(overrides=overrides)

        if validate_on_init:
            instance.validate_all()

        cls._instance = instance
        cls._initialized = True
        logger.info("ConfigLoader initialized successfully")
        return instance

    @classmethod
    def get_instance(cls) -> ConfigLoader:
        """
        Get the singleton instance, auto-initializing with defaults.

        Returns:
            The ConfigLoader instance
        """
        if not cls._initialized or cls._instance is None:
            logger.debug("ConfigLoader auto-initializing (no explicit initialize() call)")
            return cls.initialize(validate_on_init=False)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton state. For testing only."""
        cls._instance = None
        cls._initialized = False

    @classmethod
    @contextmanager
    def use(cls, loader: ConfigLoader) -> Iterator[None]:
        """
        Temporarily replace the singleton with a custom loader.

        Args:
            loader: The loader to use temporarily.
        """
        original = cls._instance
        original_initialized = cls._initialized
        cls._instance = loader
        cls._initialized = True
        try:
            yield
        finally:
            cls._instance = original
            cls._initialized = original_initialized

    def validate_all(self) -> None:
        """
        Resolve every schema key and report all problems at once.

        Raises:
            ConfigError: If any key resolves to an invalid value
        """
        invalid_values: list[str] = []

        for key in CONFIG_SCHEMA:
            try:
                self.get(key)
            except ValidationError as e:
                invalid_values.append(str(e))

        if invalid_values:
            raise ConfigError(
                f"Configuration validation failed.\nInvalid values ({len(invalid_values)}): {invalid_values}"
            )

        self._validated = True
        logger.debug(f"Validated {len(CONFIG_SCHEMA)} config keys")

    def _get_env_key(self, key: str) -> str:
        """Convert dot notation to environment variable name."""
        # risk.points.conflict -> CONFIG_RISK_POINTS_CONFLICT
        return "CONFIG_" + key.upper().replace(".", "_")

    def get(self, key: str) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (e.g., "risk.points.conflict")

        Returns:
            The typed configuration value

        Raises:
            UnknownKeyError: If key is not in schema
            ValidationError: If value fails type conversion or validation
        """
        if key not in CONFIG_SCHEMA:
            raise UnknownKeyError(f"Unknown config key: '{key}'")

        schema = CONFIG_SCHEMA[key]
        env_key = self._get_env_key(key)
        env_value = os.environ.get(env_key)

        # Overrides first, then environment, then schema default
        if key in self._overrides:
            raw_value, source = self._overrides[key], "override"
        elif env_value is not None:
            raw_value, source = env_value, f"environment variable {env_key}"
        else:
            return schema.default

        try:
            typed_value = self._convert_type(raw_value, schema.config_type)
        except (ValueError, TypeError) as e:
            raise ValidationError(f"Config key '{key}' from {source} has invalid type: {e}") from e

        error = schema.validate(typed_value)
        if error:
            raise ValidationError(f"Config key '{key}' from {source}: {error}")

        return typed_value

    def get_int(self, key: str) -> int:
        """Get an integer config value."""
        return cast(int, self.get(key))

    def get_float(self, key: str) -> float:
        """Get a float config value."""
        return cast(float, self.get(key))

    def _convert_type(self, value: Any, config_type: ConfigType) -> Any:
        """Convert a raw value to the specified type."""
        if isinstance(value, bool):
            raise TypeError(f"boolean {value!r} is not a number")
        if config_type == ConfigType.INT:
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(f"{value!r} is not a whole number")
            return int(value)
        elif config_type == ConfigType.FLOAT:
            return float(value)
        else:
            return value

    def as_dict(self) -> dict[str, Any]:
        """Resolve every key, for diagnostics and API responses."""
        return {key: self.get(key) for key in CONFIG_SCHEMA}
