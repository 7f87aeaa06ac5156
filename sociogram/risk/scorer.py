"""Risk Scorer - Three-factor psychosocial risk score per student

Combines, per student:

- Conflict: negative mentions received, saturating at a critical count
    conflict(v) = min(conflict_score(v) / critical_mentions, 1)
- Isolation: inverted, normalized positive in-degree plus a penalty for
  choosing nobody
    isolation(v) = (1 - in(v) / max(in)) * 0.7 + (out(v) == 0 ? 0.3 : 0)
- Climate: the student's own inverted Likert rating
    climate(v) = (6 - rating) / 5, 0.5 without a response

    risk(v) = round(conflict * 50 + isolation * 30 + climate * 20)

Conflict is weighted highest because direct peer rejection is the strongest
signal. All weights and thresholds come from RiskConfig."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ..config import RiskConfig
from ..logging_config import TRACE
from ..models import MAX_CLIMATE_RATING, GraphNode, RiskFactors, SurveyResponse

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, .5 going up."""
    return math.floor(value + 0.5)


class RiskScorer:
    """Scores every node of a built classroom graph"""

    def __init__(self, config: RiskConfig | None = None):
        self.config = config or RiskConfig()

    def score(
        self, nodes: Sequence[GraphNode], responses: Sequence[SurveyResponse]
    ) -> tuple[list[GraphNode], dict[str, RiskFactors]]:
        """Populate risk_score on every node.

        Args:
            nodes: Nodes from GraphBuilder, degree counters filled in
            responses: The survey responses the graph was built from

        Returns:
            New node objects in the same order with risk_score set, and the
            factor breakdown keyed by student id
        """
        # First response per student wins
        climate_ratings: dict[str, int] = {}
        for response in responses:
            climate_ratings.setdefault(response.student_id, response.climate_rating)

        # Global aggregate read by every node; floor of 1 avoids division by zero
        max_in_degree = max([node.in_degree for node in nodes] + [1])

        scored: list[GraphNode] = []
        factors: dict[str, RiskFactors] = {}
        for node in nodes:
            node_factors = RiskFactors(
                isolation_risk=self.isolation_risk(node, max_in_degree),
                conflict_risk=self.conflict_risk(node),
                climate_risk=self.climate_risk(climate_ratings.get(node.id)),
            )
            risk_score = self.combine(node_factors)
            factors[node.id] = node_factors
            scored.append(node.model_copy(update={"risk_score": risk_score}))
            logger.log(
                TRACE,
                f"Risk {node.id}: {risk_score} (conflict={node_factors.conflict_risk:.2f}, "
                f"isolation={node_factors.isolation_risk:.2f}, climate={node_factors.climate_risk:.2f})"
            )

        return scored, factors

    def isolation_risk(self, node: GraphNode, max_in_degree: int) -> float:
        """Structural isolation in [0, 1]."""
        not_chosen = (1 - node.in_degree / max_in_degree) * self.config.not_chosen_weight
        no_choices = self.config.no_choices_weight if node.out_degree == 0 else 0
        return not_chosen + no_choices

    def conflict_risk(self, node: GraphNode) -> float:
        """Received rejection in [0, 1], saturating at the critical mention count."""
        return min(node.conflict_score / self.config.critical_conflict_mentions, 1)

    def climate_risk(self, rating: int | None) -> float:
        """Inverted climate perception in [0, 1]; neutral midpoint when unanswered."""
        if rating is None:
            return self.config.missing_climate_risk
        return min(max((MAX_CLIMATE_RATING + 1 - rating) / MAX_CLIMATE_RATING, 0.0), 1.0)

    def combine(self, factors: RiskFactors) -> int:
        """Weighted sum of the factors as an integer score in [0, 100]."""
        raw = (
            factors.conflict_risk * self.config.conflict_points
            + factors.isolation_risk * self.config.isolation_points
            + factors.climate_risk * self.config.climate_points
        )
        return min(max(round_half_up(raw), 0), 100)
