"""Anonymized analysis summary handed to the report generator.

Only ids and numbers leave the core; student names never reach the
text-generation service.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..models import RiskAnalysis


class AtRiskEntry(BaseModel):
    """One flagged student, as the report prompt sees them."""

    id: str
    risk_score: int
    in_degree: int
    conflict_score: int


class ReportSummary(BaseModel):
    """Everything the report generator is allowed to know about a classroom."""

    grade: str
    global_risk: int = Field(ge=0, le=100)
    at_risk: list[AtRiskEntry] = Field(default_factory=list)
    tension_groups: list[tuple[str, str]] = Field(default_factory=list)
    isolated_count: int = 0
    at_risk_threshold: int = 60


def build_report_summary(grade: str, analysis: RiskAnalysis, at_risk_threshold: int = 60) -> ReportSummary:
    """Project a RiskAnalysis onto the report generator's input contract."""
    return ReportSummary(
        grade=grade,
        global_risk=analysis.global_risk,
        at_risk=[
            AtRiskEntry(
                id=node.id,
                risk_score=node.risk_score,
                in_degree=node.in_degree,
                conflict_score=node.conflict_score,
            )
            for node in analysis.at_risk_students
        ],
        tension_groups=list(analysis.tension_groups),
        isolated_count=len(analysis.isolated_students),
        at_risk_threshold=at_risk_threshold,
    )
