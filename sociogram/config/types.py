"""Configuration type definitions for the risk model constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ConfigType(Enum):
    """Numeric kinds a risk model constant can take."""

    INT = "int"
    FLOAT = "float"


@dataclass(frozen=True)
class ConfigKey:
    """
    One tunable constant of the risk model.

    Attributes:
        key: Dot-notation name (e.g., "risk.points.conflict")
        config_type: Whether the value is a whole number or a fraction
        default: Value used when neither an override nor the environment sets one
        description: What the constant controls
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
    """

    key: str
    config_type: ConfigType
    default: Any
    description: str = ""
    min_value: float | None = None
    max_value: float | None = None

    def validate(self, value: Any) -> str | None:
        """Return an error message when value is out of bounds, else None."""
        if self.min_value is not None and value < self.min_value:
            return f"Value {value} below minimum {self.min_value}"
        if self.max_value is not None and value > self.max_value:
            return f"Value {value} above maximum {self.max_value}"
        return None
