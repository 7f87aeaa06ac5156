"""
Domain models for the classroom sociogram.

Inputs (Student, SurveyResponse) come from the survey collaborator.
Outputs (GraphNode, GraphEdge, RiskFactors, RiskAnalysis, ClassroomAnalysis)
are frozen so that a visualization layer has to copy them before attaching
layout positions.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_PREFERRED_PEERS = 3
MAX_UNCOMFORTABLE_PEERS = 2
MIN_CLIMATE_RATING = 1
MAX_CLIMATE_RATING = 5


def _dedupe(ids: list[str]) -> list[str]:
    """Drop repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


class Student(BaseModel):
    """A roster entry. Identity is the id."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    grade: str  # "5A", "6B", etc.
    avatar: str | None = None


class SurveyResponse(BaseModel):
    """One student's answers to the peer-relationship survey."""

    student_id: str
    submitted_at: datetime | None = None

    # Relational choices
    preferred_peers: list[str] = Field(default_factory=list)  # Positive edges
    uncomfortable_peers: list[str] = Field(default_factory=list)  # Negative edges
    perceived_isolated: list[str] = Field(default_factory=list)  # Perception only, never scored

    # School climate (Likert 1-5)
    climate_rating: int = Field(ge=MIN_CLIMATE_RATING, le=MAX_CLIMATE_RATING)
    safety_rating: int | None = Field(default=None, ge=MIN_CLIMATE_RATING, le=MAX_CLIMATE_RATING)
    belonging_rating: int | None = Field(default=None, ge=MIN_CLIMATE_RATING, le=MAX_CLIMATE_RATING)

    comments: str = ""

    @field_validator("submitted_at")
    @classmethod
    def validate_submitted_at(cls, v: datetime | None) -> datetime | None:
        # Naive timestamps are taken as UTC so submissions stay comparable
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @field_validator("preferred_peers")
    @classmethod
    def validate_preferred_peers(cls, v: list[str]) -> list[str]:
        v = _dedupe(v)
        if len(v) > MAX_PREFERRED_PEERS:
            raise ValueError(f"At most {MAX_PREFERRED_PEERS} preferred peers allowed, got {len(v)}")
        return v

    @field_validator("uncomfortable_peers")
    @classmethod
    def validate_uncomfortable_peers(cls, v: list[str]) -> list[str]:
        v = _dedupe(v)
        if len(v) > MAX_UNCOMFORTABLE_PEERS:
            raise ValueError(f"At most {MAX_UNCOMFORTABLE_PEERS} uncomfortable peers allowed, got {len(v)}")
        return v

    @field_validator("perceived_isolated")
    @classmethod
    def validate_perceived_isolated(cls, v: list[str]) -> list[str]:
        return _dedupe(v)


class EdgeType(str, Enum):
    """Kinds of directed relation recorded from a survey response."""

    POSITIVE = "POSITIVE"  # Respondent prefers the target
    NEGATIVE = "NEGATIVE"  # Respondent is uncomfortable with the target


class GraphEdge(BaseModel):
    """Directed, typed, weighted edge between two roster members."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    type: EdgeType
    weight: int


class GraphNode(BaseModel):
    """Student plus the metrics derived for one analysis run."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    grade: str
    avatar: str | None = None
    in_degree: int = 0  # Popularity
    out_degree: int = 0  # Sociability
    conflict_score: int = 0  # Negative edges received
    risk_score: int = Field(default=0, ge=0, le=100)
    cluster_id: int = 0  # Reserved, never populated


class RiskFactors(BaseModel):
    """Normalized factors a risk score was composed from."""

    model_config = ConfigDict(frozen=True)

    isolation_risk: float
    conflict_risk: float
    climate_risk: float


class RiskAnalysis(BaseModel):
    """Classroom-level summary."""

    model_config = ConfigDict(frozen=True)

    global_risk: int = Field(ge=0, le=100)
    at_risk_students: list[GraphNode]  # Descending risk_score
    isolated_students: list[GraphNode]  # Ascending out_degree
    tension_groups: list[tuple[str, str]]  # Mutual negative pairs, smaller id first
    recommendations: str = ""  # Filled by the report generator, never by the core


class ClassroomAnalysis(BaseModel):
    """Result of one analyze() call."""

    model_config = ConfigDict(frozen=True)

    nodes: list[GraphNode]
    edges: list[GraphEdge]
    analysis: RiskAnalysis
    factors: dict[str, RiskFactors]

    def node(self, student_id: str) -> GraphNode:
        """Look up a node by student id."""
        for node in self.nodes:
            if node.id == student_id:
                return node
        raise KeyError(student_id)
