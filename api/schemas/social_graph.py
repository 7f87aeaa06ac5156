"""
Pydantic schemas for classroom social graph endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from sociogram.models import GraphEdge, GraphNode, RiskAnalysis, RiskFactors, Student, SurveyResponse


class ClassroomAnalysisRequest(BaseModel):
    """Roster and survey responses for one classroom"""

    grade: str | None = None  # Classroom label, e.g. "6th grade A"
    roster: list[Student]
    responses: list[SurveyResponse] = Field(default_factory=list)


class ClassroomReportRequest(ClassroomAnalysisRequest):
    """Analysis request that also asks for a narrative report"""

    grade: str


class SocialGraphResponse(BaseModel):
    """Complete scored social graph for a classroom"""

    nodes: list[GraphNode]
    edges: list[GraphEdge]
    analysis: RiskAnalysis
    factors: dict[str, RiskFactors]
    metrics: dict[str, float]
    warnings: list[str] = []  # Isolated students, reciprocal tensions
    edge_type_counts: dict[str, int] = {}  # edge_type -> count


class ClassroomReportResponse(BaseModel):
    """Classroom analysis with the generated report attached"""

    grade: str
    analysis: RiskAnalysis  # recommendations holds the report text
    report: str
    provider: str


class SurveyQuestionsResponse(BaseModel):
    """Questions shown by the survey wizard"""

    questions: list[dict[str, Any]]
