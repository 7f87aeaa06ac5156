"""
Configuration management for the classroom risk model.

Every weight and threshold of the risk score is a named key in
CONFIG_SCHEMA. Values resolve from explicit overrides, then CONFIG_*
environment variables, then the schema default.

Usage:
    from sociogram.config import ConfigLoader, RiskConfig

    # Recalibrate at application startup
    ConfigLoader.initialize(overrides={"analysis.at_risk_threshold": 70})

    # Snapshot for one analysis run
    config = RiskConfig.from_loader()
"""

from __future__ import annotations

from .errors import (
    ConfigError,
    UnknownKeyError,
    ValidationError,
)
from .loader import ConfigLoader
from .risk_config import RiskConfig
from .schema import CONFIG_SCHEMA, get_schema_key, validate_key
from .types import ConfigKey, ConfigType

__all__ = [
    # Main loader
    "ConfigLoader",
    "RiskConfig",
    # Error classes
    "ConfigError",
    "ValidationError",
    "UnknownKeyError",
    # Schema
    "CONFIG_SCHEMA",
    "ConfigKey",
    "ConfigType",
    "get_schema_key",
    "validate_key",
]
