"""Configuration schema registry.

Defines all valid configuration keys with their types, defaults and
validation rules. This is the single source of truth for the constants
of the risk model.
"""

from __future__ import annotations

from typing import Any

from .types import ConfigKey, ConfigType

# =============================================================================
# CONFIGURATION SCHEMA REGISTRY
#
# All configuration keys must be defined here. Unknown keys will be rejected.
# =============================================================================

CONFIG_SCHEMA: dict[str, ConfigKey] = {
    # =========================================================================
    # RISK SCORE - Factor points (must add up to 100)
    # =========================================================================
    "risk.points.conflict": ConfigKey(
        key="risk.points.conflict",
        config_type=ConfigType.INT,
        default=50,
        description="Points contributed by a fully saturated conflict factor",
        min_value=0,
        max_value=100,
    ),
    "risk.points.isolation": ConfigKey(
        key="risk.points.isolation",
        config_type=ConfigType.INT,
        default=30,
        description="Points contributed by a fully isolated student",
        min_value=0,
        max_value=100,
    ),
    "risk.points.climate": ConfigKey(
        key="risk.points.climate",
        config_type=ConfigType.INT,
        default=20,
        description="Points contributed by the worst possible climate rating",
        min_value=0,
        max_value=100,
    ),
    # =========================================================================
    # RISK SCORE - Isolation factor split (must add up to 1.0)
    # =========================================================================
    "risk.isolation.not_chosen_weight": ConfigKey(
        key="risk.isolation.not_chosen_weight",
        config_type=ConfigType.FLOAT,
        default=0.7,
        description="Share of isolation risk from receiving few preferred-peer choices",
        min_value=0.0,
        max_value=1.0,
    ),
    "risk.isolation.no_choices_weight": ConfigKey(
        key="risk.isolation.no_choices_weight",
        config_type=ConfigType.FLOAT,
        default=0.3,
        description="Share of isolation risk from choosing nobody",
        min_value=0.0,
        max_value=1.0,
    ),
    # =========================================================================
    # RISK SCORE - Conflict saturation
    # =========================================================================
    "risk.conflict.critical_mentions": ConfigKey(
        key="risk.conflict.critical_mentions",
        config_type=ConfigType.INT,
        default=3,
        description="Negative mentions received at which the conflict factor saturates",
        min_value=1,
        max_value=50,
    ),
    # =========================================================================
    # RISK SCORE - Climate perception
    # =========================================================================
    "risk.climate.missing_default": ConfigKey(
        key="risk.climate.missing_default",
        config_type=ConfigType.FLOAT,
        default=0.5,
        description="Climate risk assumed for a student who did not answer the survey",
        min_value=0.0,
        max_value=1.0,
    ),
    # =========================================================================
    # CLASSROOM ANALYSIS
    # =========================================================================
    "analysis.at_risk_threshold": ConfigKey(
        key="analysis.at_risk_threshold",
        config_type=ConfigType.INT,
        default=60,
        description="Students scoring strictly above this are flagged as at risk",
        min_value=0,
        max_value=100,
    ),
    # =========================================================================
    # GRAPH EDGES
    # =========================================================================
    "graph.positive_edge_weight": ConfigKey(
        key="graph.positive_edge_weight",
        config_type=ConfigType.INT,
        default=1,
        description="Weight attached to preferred-peer edges",
        min_value=1,
        max_value=10,
    ),
    "graph.negative_edge_weight": ConfigKey(
        key="graph.negative_edge_weight",
        config_type=ConfigType.INT,
        default=2,
        description="Weight attached to uncomfortable-peer edges",
        min_value=1,
        max_value=10,
    ),
}


def get_schema_key(key: str) -> ConfigKey | None:
    """
    Get the schema definition for a config key.

    Args:
        key: The dot-notation config key

    Returns:
        ConfigKey if found, None if unknown
    """
    return CONFIG_SCHEMA.get(key)


def validate_key(key: str, value: Any) -> str | None:
    """
    Validate a value against its schema.

    Args:
        key: The config key
        value: The value to validate

    Returns:
        None if valid, error message if invalid
    """
    schema = CONFIG_SCHEMA.get(key)
    if schema is None:
        return f"Unknown config key: {key}"
    return schema.validate(value)
