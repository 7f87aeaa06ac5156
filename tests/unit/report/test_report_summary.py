"""Tests for the anonymized report summary and its prompt"""

from __future__ import annotations

import pytest

from sociogram import analyze
from sociogram.models import GraphNode, RiskAnalysis
from sociogram.report import AtRiskEntry, MockReportProvider, ReportSummary, build_report_summary
from sociogram.report.prompts import format_prompt, load_prompt


def _analysis() -> RiskAnalysis:
    flagged = GraphNode(id="s-3", name="Carla Ruiz", grade="6A", in_degree=0, conflict_score=4, risk_score=88)
    lonely = GraphNode(id="s-9", name="Isabel Nunez", grade="6A", in_degree=0, out_degree=1, risk_score=41)
    return RiskAnalysis(
        global_risk=35,
        at_risk_students=[flagged],
        isolated_students=[flagged, lonely],
        tension_groups=[("s-1", "s-3")],
    )


class TestBuildReportSummary:
    def test_projection(self):
        summary = build_report_summary("6A", _analysis(), at_risk_threshold=60)

        assert summary.grade == "6A"
        assert summary.global_risk == 35
        assert summary.at_risk == [AtRiskEntry(id="s-3", risk_score=88, in_degree=0, conflict_score=4)]
        assert summary.tension_groups == [("s-1", "s-3")]
        assert summary.isolated_count == 2
        assert summary.at_risk_threshold == 60

    def test_names_never_leave_the_core(self):
        summary = build_report_summary("6A", _analysis())

        dumped = summary.model_dump_json()
        assert "Carla" not in dumped
        assert "Isabel" not in dumped

    def test_from_real_analysis(self, roster, responses):
        result = analyze(roster, responses)

        summary = build_report_summary("6A", result.analysis)

        assert summary.isolated_count == 1
        assert summary.tension_groups == [("s-5", "s-6")]
        assert summary.at_risk == []


class TestPrompt:
    def test_template_has_every_placeholder(self):
        template = load_prompt("risk_report")

        for placeholder in (
            "{grade}",
            "{global_risk}",
            "{at_risk_threshold}",
            "{risk_summary}",
            "{tension_summary}",
            "{isolated_count}",
        ):
            assert placeholder in template

    def test_missing_prompt(self):
        with pytest.raises(FileNotFoundError):
            load_prompt("does_not_exist")

    def test_missing_placeholder_value(self):
        with pytest.raises(KeyError):
            format_prompt("risk_report", grade="6A")

    def test_build_prompt_lists_students_and_tensions(self):
        summary = build_report_summary("6A", _analysis())

        prompt = MockReportProvider().build_prompt(summary)

        assert "6A class" in prompt
        assert "Global class risk: 35/100" in prompt
        assert "(score > 60)" in prompt
        assert "- Student ID s-3: risk 88/100. (Popularity: 0, conflicts received: 4)" in prompt
        assert "- Reciprocal tension between ID s-1 and ID s-3" in prompt
        assert "nobody chose them as a preferred peer): 2" in prompt
        assert "Carla" not in prompt

    def test_build_prompt_with_nothing_to_report(self):
        summary = ReportSummary(grade="5B", global_risk=12)

        prompt = MockReportProvider().build_prompt(summary)

        assert prompt.count("- None") == 2
