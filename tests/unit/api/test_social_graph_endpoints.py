"""Tests for the classroom social graph endpoints"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_report_provider
from api.main import create_app
from sociogram.config import ConfigLoader
from sociogram.report import REPORT_UNAVAILABLE, MockReportProvider
from sociogram.report.openai_provider import OpenAIReportProvider


def _payload(roster: list[Any], responses: list[Any], grade: str | None = "6A") -> dict[str, Any]:
    return {
        "grade": grade,
        "roster": [s.model_dump(mode="json") for s in roster],
        "responses": [r.model_dump(mode="json") for r in responses],
    }


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    app = create_app()
    app.dependency_overrides[get_report_provider] = lambda: MockReportProvider()
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "sociogram-api"}


class TestSurveyQuestions:
    def test_questions(self, client):
        response = client.get("/api/survey/questions")

        assert response.status_code == 200
        questions = response.json()["questions"]
        assert [q["id"] for q in questions] == ["preferred", "uncomfortable", "climate"]


class TestAnalyzeClassroom:
    """Test POST /api/classrooms/analyze"""

    def test_analyze_classroom(self, client, roster, responses):
        response = client.post("/api/classrooms/analyze", json=_payload(roster, responses))

        assert response.status_code == 200
        data = response.json()
        assert len(data["nodes"]) == 20
        assert [n["id"] for n in data["analysis"]["isolated_students"]] == ["s-20"]
        assert data["analysis"]["tension_groups"] == [["s-5", "s-6"]]
        assert data["analysis"]["recommendations"] == ""
        assert data["factors"]["s-20"]["isolation_risk"] == 0.7
        assert data["edge_type_counts"] == {"POSITIVE": 22, "NEGATIVE": 2}

    def test_metrics(self, client, roster, responses):
        data = client.post("/api/classrooms/analyze", json=_payload(roster, responses)).json()
        metrics = data["metrics"]

        assert metrics["node_count"] == 20
        assert metrics["edge_count"] == 24
        assert metrics["number_of_components"] == 1
        assert 0 < metrics["density"] < 1
        assert metrics["average_degree"] == pytest.approx(2 * 24 / 20)

    def test_warnings(self, client, roster, responses):
        data = client.post("/api/classrooms/analyze", json=_payload(roster, responses)).json()

        assert data["warnings"] == [
            "1 student(s) were not chosen by any classmate",
            "Students s-5 and s-6 reject each other",
        ]

    def test_fully_disconnected_warning(self, client, roster):
        data = client.post("/api/classrooms/analyze", json=_payload(roster[:2], [])).json()

        assert data["warnings"] == [
            "2 student(s) were not chosen by any classmate",
            "2 student(s) neither chose nor were chosen by anyone",
        ]

    def test_grade_is_optional(self, client, roster, responses):
        response = client.post("/api/classrooms/analyze", json=_payload(roster, responses, grade=None))

        assert response.status_code == 200

    def test_empty_roster_is_unprocessable(self, client):
        response = client.post("/api/classrooms/analyze", json={"roster": [], "responses": []})

        assert response.status_code == 422
        assert "empty roster" in response.json()["detail"]

    def test_invalid_response_is_rejected(self, client, roster):
        payload = _payload(roster, [])
        payload["responses"] = [
            {"student_id": "s-1", "preferred_peers": ["s-2", "s-3", "s-4", "s-5"], "climate_rating": 3},
        ]

        response = client.post("/api/classrooms/analyze", json=payload)

        assert response.status_code == 422

    def test_threshold_from_config(self, client, roster, responses):
        with ConfigLoader.use(ConfigLoader(overrides={"analysis.at_risk_threshold": 40})):
            data = client.post("/api/classrooms/analyze", json=_payload(roster, responses)).json()

        at_risk = [n["id"] for n in data["analysis"]["at_risk_students"]]
        assert at_risk[:2] == ["s-6", "s-5"]
        assert all(n["risk_score"] > 40 for n in data["analysis"]["at_risk_students"])


class TestClassroomReport:
    """Test POST /api/classrooms/report"""

    def test_report_with_mock_provider(self, client, roster, responses):
        response = client.post("/api/classrooms/report", json=_payload(roster, responses))

        assert response.status_code == 200
        data = response.json()
        assert data["grade"] == "6A"
        assert data["provider"] == "mock"
        assert data["report"].startswith("Class 6A: global risk")
        assert data["analysis"]["recommendations"] == data["report"]

    def test_report_requires_grade(self, client, roster, responses):
        response = client.post("/api/classrooms/report", json=_payload(roster, responses, grade=None))

        assert response.status_code == 422

    def test_unconfigured_provider_placeholder_passes_through(self, client, roster, responses):
        client.app.dependency_overrides[get_report_provider] = lambda: OpenAIReportProvider(
            api_key=None, model="gpt-4.1-mini"
        )

        data = client.post("/api/classrooms/report", json=_payload(roster, responses)).json()

        assert data["report"] == REPORT_UNAVAILABLE
        assert data["provider"] == "openai"

    def test_empty_roster_is_unprocessable(self, client):
        response = client.post("/api/classrooms/report", json={"grade": "6A", "roster": [], "responses": []})

        assert response.status_code == 422
