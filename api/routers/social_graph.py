"""
Social Graph Router - Endpoints for classroom sociogram analysis.

This router handles:
- Survey question definitions for the survey wizard
- Scored social graph with risk alerts for a classroom
- Narrative report generation on top of a completed analysis
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Annotated

import networkx as nx
from fastapi import APIRouter, Depends, HTTPException

from sociogram import ClassroomAnalysis, EmptyRosterError, analyze
from sociogram.config import RiskConfig
from sociogram.graph import to_networkx
from sociogram.report import ReportProvider, build_report_summary
from sociogram.survey import SURVEY_QUESTIONS

from ..dependencies import get_report_provider, get_risk_config
from ..schemas import (
    ClassroomAnalysisRequest,
    ClassroomReportRequest,
    ClassroomReportResponse,
    SocialGraphResponse,
    SurveyQuestionsResponse,
)
from ..settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["social-graph"])


def _run_analysis(request: ClassroomAnalysisRequest, config: RiskConfig) -> ClassroomAnalysis:
    try:
        return analyze(request.roster, request.responses, config)
    except EmptyRosterError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _graph_metrics(result: ClassroomAnalysis) -> dict[str, float]:
    graph = to_networkx(result.nodes, result.edges)
    # Collapse parallel edges; density and clustering are defined on simple graphs
    simple = nx.DiGraph(graph)
    return {
        "node_count": float(graph.number_of_nodes()),
        "edge_count": float(graph.number_of_edges()),
        "density": nx.density(simple),
        "average_clustering": nx.average_clustering(simple.to_undirected()),
        "number_of_components": float(nx.number_weakly_connected_components(simple)),
        "average_degree": sum(dict(graph.degree()).values()) / len(graph),
    }


def _warnings(result: ClassroomAnalysis) -> list[str]:
    warnings = []
    analysis = result.analysis

    fully_disconnected = [n for n in analysis.isolated_students if n.out_degree == 0]
    if analysis.isolated_students:
        warnings.append(f"{len(analysis.isolated_students)} student(s) were not chosen by any classmate")
    if fully_disconnected:
        warnings.append(f"{len(fully_disconnected)} student(s) neither chose nor were chosen by anyone")

    for a, b in analysis.tension_groups:
        warnings.append(f"Students {a} and {b} reject each other")

    return warnings


# ========================================
# Survey Definition Endpoint
# ========================================


@router.get("/api/survey/questions")
async def get_survey_questions() -> SurveyQuestionsResponse:
    """Get the questions asked by the classroom survey."""
    return SurveyQuestionsResponse(questions=SURVEY_QUESTIONS)


# ========================================
# Classroom Social Graph Endpoint
# ========================================


@router.post("/api/classrooms/analyze")
async def analyze_classroom(
    request: ClassroomAnalysisRequest,
    config: Annotated[RiskConfig, Depends(get_risk_config)],
) -> SocialGraphResponse:
    """Build and score the social graph for one classroom.

    Returns:
        Scored nodes and edges, factor breakdowns, classroom alerts and graph metrics
    """
    logger.info(
        f"Analyzing classroom {request.grade or get_settings().default_grade_label}: "
        f"{len(request.roster)} students, {len(request.responses)} responses"
    )
    result = _run_analysis(request, config)

    return SocialGraphResponse(
        nodes=result.nodes,
        edges=result.edges,
        analysis=result.analysis,
        factors=result.factors,
        metrics=_graph_metrics(result),
        warnings=_warnings(result),
        edge_type_counts=dict(Counter(edge.type.value for edge in result.edges)),
    )


# ========================================
# Classroom Report Endpoint
# ========================================


@router.post("/api/classrooms/report")
async def generate_classroom_report(
    request: ClassroomReportRequest,
    config: Annotated[RiskConfig, Depends(get_risk_config)],
    provider: Annotated[ReportProvider, Depends(get_report_provider)],
) -> ClassroomReportResponse:
    """Analyze a classroom, then ask the report provider for a narrative report.

    The provider only sees the anonymized summary and its answer is passed
    through untouched.
    """
    result = _run_analysis(request, config)

    summary = build_report_summary(request.grade, result.analysis, at_risk_threshold=config.at_risk_threshold)
    report = await provider.generate_report(summary)

    return ClassroomReportResponse(
        grade=request.grade,
        analysis=result.analysis.model_copy(update={"recommendations": report}),
        report=report,
        provider=provider.name,
    )
