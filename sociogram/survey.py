"""
Survey definitions and intake helpers.

The question set matches what the survey wizard asks each student. The
replacement policy for repeated submissions lives here, on the intake side:
the analyzer itself processes every response it is handed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .models import (
    MAX_CLIMATE_RATING,
    MAX_PREFERRED_PEERS,
    MAX_UNCOMFORTABLE_PEERS,
    MIN_CLIMATE_RATING,
    SurveyResponse,
)

SURVEY_QUESTIONS: list[dict[str, Any]] = [
    {
        "id": "preferred",
        "text": "Which classmates do you most like to spend breaks or group work with?",
        "type": "select-multi",
        "max": MAX_PREFERRED_PEERS,
    },
    {
        "id": "uncomfortable",
        "text": "Which classmates do you NOT feel comfortable with, or have had recent problems with?",
        "type": "select-multi",
        "max": MAX_UNCOMFORTABLE_PEERS,
    },
    {
        "id": "climate",
        "text": "Overall, how do you feel the atmosphere in your class has been this month?",
        "type": "rating",
        "min": MIN_CLIMATE_RATING,
        "max": MAX_CLIMATE_RATING,
        "labels": ["Very bad", "Bad", "Okay", "Good", "Very good"],
    },
]


def latest_responses(responses: Iterable[SurveyResponse]) -> list[SurveyResponse]:
    """Keep one response per student: the latest submission.

    Responses are compared by submitted_at; when timestamps are equal or
    missing, the one appearing later in the input wins. Output keeps the
    order in which each student first appeared.
    """
    latest: dict[str, SurveyResponse] = {}
    for response in responses:
        current = latest.get(response.student_id)
        if current is None or _is_not_older(response, current):
            latest[response.student_id] = response
    return list(latest.values())


def _is_not_older(candidate: SurveyResponse, current: SurveyResponse) -> bool:
    if candidate.submitted_at is None or current.submitted_at is None:
        return True
    return candidate.submitted_at >= current.submitted_at
