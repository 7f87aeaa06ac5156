"""
Predictive Risk Estimator entry point.

Runs GraphBuilder -> RiskScorer -> AggregateAnalyzer over one classroom.
Nothing is kept between calls: the whole computation re-runs from the
roster and responses it is given, and equal inputs give equal outputs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .config import RiskConfig
from .errors import EmptyRosterError
from .graph import GraphBuilder
from .models import ClassroomAnalysis, Student, SurveyResponse
from .risk import AggregateAnalyzer, RiskScorer

logger = logging.getLogger(__name__)


def analyze(
    roster: Sequence[Student],
    responses: Sequence[SurveyResponse],
    config: RiskConfig | None = None,
) -> ClassroomAnalysis:
    """Analyze one classroom's peer-relationship survey.

    Args:
        roster: Students in the classroom; ids must be unique
        responses: At most one live response per student. Responses and peer
            references for students not on the roster are ignored.
        config: Risk model constants; loaded from ConfigLoader when omitted

    Returns:
        Scored nodes, edges, per-student factor breakdown and classroom summary

    Raises:
        EmptyRosterError: If the roster is empty
    """
    if not roster:
        raise EmptyRosterError()

    config = config or RiskConfig.from_loader()

    nodes, edges = GraphBuilder(config).build(roster, responses)
    nodes, factors = RiskScorer(config).score(nodes, responses)
    analysis = AggregateAnalyzer(config).analyze(nodes, edges)

    logger.info(
        f"Analyzed classroom of {len(nodes)} students ({len(responses)} responses, {len(edges)} edges): "
        f"global risk {analysis.global_risk}, {len(analysis.at_risk_students)} at risk, "
        f"{len(analysis.isolated_students)} isolated, {len(analysis.tension_groups)} tension pairs"
    )

    return ClassroomAnalysis(nodes=nodes, edges=edges, analysis=analysis, factors=factors)
