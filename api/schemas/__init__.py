"""
Pydantic schemas for the Sociogram API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .social_graph import (
    ClassroomAnalysisRequest,
    ClassroomReportRequest,
    ClassroomReportResponse,
    SocialGraphResponse,
    SurveyQuestionsResponse,
)

__all__ = [
    "ClassroomAnalysisRequest",
    "ClassroomReportRequest",
    "ClassroomReportResponse",
    "SocialGraphResponse",
    "SurveyQuestionsResponse",
]
