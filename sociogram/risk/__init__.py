"""
Risk scoring and classroom-level aggregation
"""

from .aggregate import AggregateAnalyzer, TensionDetector, TensionPair
from .scorer import RiskScorer, round_half_up

__all__ = ["AggregateAnalyzer", "RiskScorer", "TensionDetector", "TensionPair", "round_half_up"]
