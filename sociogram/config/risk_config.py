"""Typed snapshot of the risk model constants.

The scorer and analyzer read constants from a RiskConfig rather than the
loader so one classroom run always sees a single consistent set of values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import ValidationError
from .loader import ConfigLoader


@dataclass(frozen=True)
class RiskConfig:
    """Weights and thresholds of the three-factor risk score."""

    conflict_points: int = 50
    isolation_points: int = 30
    climate_points: int = 20
    not_chosen_weight: float = 0.7
    no_choices_weight: float = 0.3
    critical_conflict_mentions: int = 3
    missing_climate_risk: float = 0.5
    at_risk_threshold: int = 60
    positive_edge_weight: int = 1
    negative_edge_weight: int = 2

    def __post_init__(self) -> None:
        total_points = self.conflict_points + self.isolation_points + self.climate_points
        if total_points != 100:
            raise ValidationError(
                f"Risk factor points must add up to 100, got {total_points} "
                f"({self.conflict_points}/{self.isolation_points}/{self.climate_points})"
            )
        if not math.isclose(self.not_chosen_weight + self.no_choices_weight, 1.0):
            raise ValidationError(
                f"Isolation weights must add up to 1.0, got {self.not_chosen_weight} + {self.no_choices_weight}"
            )
        if self.critical_conflict_mentions < 1:
            raise ValidationError("critical_conflict_mentions must be at least 1")

    @classmethod
    def from_loader(cls, loader: ConfigLoader | None = None) -> RiskConfig:
        """Build a snapshot from a loader (the singleton when omitted)."""
        loader = loader or ConfigLoader.get_instance()
        return cls(
            conflict_points=loader.get_int("risk.points.conflict"),
            isolation_points=loader.get_int("risk.points.isolation"),
            climate_points=loader.get_int("risk.points.climate"),
            not_chosen_weight=loader.get_float("risk.isolation.not_chosen_weight"),
            no_choices_weight=loader.get_float("risk.isolation.no_choices_weight"),
            critical_conflict_mentions=loader.get_int("risk.conflict.critical_mentions"),
            missing_climate_risk=loader.get_float("risk.climate.missing_default"),
            at_risk_threshold=loader.get_int("analysis.at_risk_threshold"),
            positive_edge_weight=loader.get_int("graph.positive_edge_weight"),
            negative_edge_weight=loader.get_int("graph.negative_edge_weight"),
        )
