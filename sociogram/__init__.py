"""
Sociogram - Peer-relationship risk analysis for classrooms.

This package contains:
- models: Domain models (Student, SurveyResponse, GraphNode, etc.)
- graph: Sociogram construction from survey responses
- risk: Three-factor risk scoring and classroom aggregation
- analyzer: The analyze() entry point
- report: Narrative report generation collaborator
- config: Risk model constants
"""

from sociogram.analyzer import analyze
from sociogram.errors import AnalysisError, EmptyRosterError
from sociogram.models import (
    ClassroomAnalysis,
    EdgeType,
    GraphEdge,
    GraphNode,
    RiskAnalysis,
    RiskFactors,
    Student,
    SurveyResponse,
)

__all__ = [
    "AnalysisError",
    "ClassroomAnalysis",
    "EdgeType",
    "EmptyRosterError",
    "GraphEdge",
    "GraphNode",
    "RiskAnalysis",
    "RiskFactors",
    "Student",
    "SurveyResponse",
    "analyze",
]
