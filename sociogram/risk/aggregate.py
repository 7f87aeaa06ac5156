"""Aggregate Analyzer - Classroom-level alerts from a scored graph

Produces the global risk index, the at-risk and isolated subsets, and the
mutual-conflict (tension) pairs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..config import RiskConfig
from ..errors import EmptyRosterError
from ..models import EdgeType, GraphEdge, GraphNode, RiskAnalysis
from .scorer import round_half_up

logger = logging.getLogger(__name__)


@dataclass
class TensionPair:
    """Two students who each marked the other as uncomfortable"""

    edge1: GraphEdge
    edge2: GraphEdge

    @property
    def pair_id(self) -> tuple[str, str]:
        """Canonical form, smaller id first."""
        a, b = self.edge1.source, self.edge1.target
        return (a, b) if a <= b else (b, a)


class TensionDetector:
    """Detects reciprocal negative edges (2-cycles only)"""

    def detect(self, edges: Sequence[GraphEdge]) -> list[TensionPair]:
        """Find every unordered pair joined by negative edges in both directions.

        Longer rejection chains (A->B->C->A) are not reported.

        Args:
            edges: Edge list of the classroom graph

        Returns:
            One TensionPair per unordered pair, in order of first detection
        """
        negative_edges = [e for e in edges if e.type == EdgeType.NEGATIVE]

        # Build lookup map for linear-time reciprocal search
        edge_map: dict[tuple[str, str], GraphEdge] = {}
        for edge in negative_edges:
            edge_map.setdefault((edge.source, edge.target), edge)

        pairs: list[TensionPair] = []
        processed_pairs: set[tuple[str, str]] = set()

        for edge in negative_edges:
            reciprocal = edge_map.get((edge.target, edge.source))
            if reciprocal is None:
                continue

            pair = TensionPair(edge1=edge, edge2=reciprocal)
            if pair.pair_id not in processed_pairs:
                pairs.append(pair)
                processed_pairs.add(pair.pair_id)

        return pairs


class AggregateAnalyzer:
    """Builds the RiskAnalysis summary for a scored classroom graph"""

    def __init__(self, config: RiskConfig | None = None, tension_detector: TensionDetector | None = None):
        self.config = config or RiskConfig()
        self.tension_detector = tension_detector or TensionDetector()

    def analyze(self, nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]) -> RiskAnalysis:
        """Summarize scored nodes and edges.

        Raises:
            EmptyRosterError: If there are no nodes to average over
        """
        if not nodes:
            raise EmptyRosterError()

        # sorted() is stable, so ties keep roster order
        at_risk = sorted(
            (n for n in nodes if n.risk_score > self.config.at_risk_threshold),
            key=lambda n: n.risk_score,
            reverse=True,
        )
        isolated = sorted((n for n in nodes if n.in_degree == 0), key=lambda n: n.out_degree)
        tension_groups = [pair.pair_id for pair in self.tension_detector.detect(edges)]

        return RiskAnalysis(
            global_risk=self.global_risk(nodes),
            at_risk_students=at_risk,
            isolated_students=isolated,
            tension_groups=tension_groups,
        )

    def global_risk(self, nodes: Sequence[GraphNode]) -> int:
        """Mean risk score of the classroom, rounded half-up."""
        if not nodes:
            raise EmptyRosterError()
        return round_half_up(sum(n.risk_score for n in nodes) / len(nodes))
