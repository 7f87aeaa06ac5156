"""
Root test configuration and fixtures for the sociogram project.

This conftest.py provides common fixtures for all test categories:
- unit/sociogram: Graph construction, risk scoring and classroom aggregation
- unit/config: Risk model configuration
- unit/report: Report summary, prompts and providers
- unit/api: HTTP endpoints and settings
- unit/scripts: Command-line entry points

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sociogram.models import Student, SurveyResponse  # noqa: E402

# =============================================================================
# Classroom Fixtures
# =============================================================================

CLASSROOM_ROSTER = [
    {"id": "s-1", "name": "Ana Torres", "grade": "6A"},
    {"id": "s-2", "name": "Bruno Diaz", "grade": "6A"},
    {"id": "s-3", "name": "Carla Ruiz", "grade": "6A"},
    {"id": "s-4", "name": "Diego Soto", "grade": "6A"},
    {"id": "s-5", "name": "Elena Vidal", "grade": "6A"},
    {"id": "s-6", "name": "Felipe Mora", "grade": "6A"},
    {"id": "s-7", "name": "Gabriela Rios", "grade": "6A"},
    {"id": "s-8", "name": "Hector Lagos", "grade": "6A"},
    {"id": "s-9", "name": "Isabel Nunez", "grade": "6A"},
    {"id": "s-10", "name": "Javier Pena", "grade": "6A"},
    {"id": "s-11", "name": "Karen Silva", "grade": "6A"},
    {"id": "s-12", "name": "Lucas Fuentes", "grade": "6A"},
    {"id": "s-13", "name": "Martina Rojas", "grade": "6A"},
    {"id": "s-14", "name": "Nicolas Vega", "grade": "6A"},
    {"id": "s-15", "name": "Olivia Campos", "grade": "6A"},
    {"id": "s-16", "name": "Pablo Herrera", "grade": "6A"},
    {"id": "s-17", "name": "Renata Castro", "grade": "6A"},
    {"id": "s-18", "name": "Samuel Ortiz", "grade": "6A"},
    {"id": "s-19", "name": "Tamara Leon", "grade": "6A"},
    {"id": "s-20", "name": "Ulises Paredes", "grade": "6A"},
]

# Preferred peers form a chain s-1 -> s-2 -> ... -> s-19 -> s-1, except that
# s-4 also picks s-6 and both s-5 and s-6 pick s-7. s-20 picks s-1 and s-2
# and is picked by nobody. s-5 and s-6 reject each other.
CLASSROOM_RESPONSES = [
    {"student_id": "s-1", "preferred_peers": ["s-2"], "climate_rating": 4},
    {"student_id": "s-2", "preferred_peers": ["s-3"], "climate_rating": 5},
    {"student_id": "s-3", "preferred_peers": ["s-4"], "climate_rating": 4},
    {"student_id": "s-4", "preferred_peers": ["s-5", "s-6"], "climate_rating": 3},
    {"student_id": "s-5", "preferred_peers": ["s-7"], "uncomfortable_peers": ["s-6"], "climate_rating": 2},
    {"student_id": "s-6", "preferred_peers": ["s-7"], "uncomfortable_peers": ["s-5"], "climate_rating": 1},
    {"student_id": "s-7", "preferred_peers": ["s-8"], "climate_rating": 4},
    {"student_id": "s-8", "preferred_peers": ["s-9"], "climate_rating": 5},
    {"student_id": "s-9", "preferred_peers": ["s-10"], "climate_rating": 3},
    {"student_id": "s-10", "preferred_peers": ["s-11"], "climate_rating": 4},
    {"student_id": "s-11", "preferred_peers": ["s-12"], "climate_rating": 4},
    {"student_id": "s-12", "preferred_peers": ["s-13"], "climate_rating": 5},
    {"student_id": "s-13", "preferred_peers": ["s-14"], "climate_rating": 3},
    {"student_id": "s-14", "preferred_peers": ["s-15"], "climate_rating": 4},
    {"student_id": "s-15", "preferred_peers": ["s-16"], "climate_rating": 2},
    {"student_id": "s-16", "preferred_peers": ["s-17"], "climate_rating": 4},
    {"student_id": "s-17", "preferred_peers": ["s-18"], "climate_rating": 5},
    {"student_id": "s-18", "preferred_peers": ["s-19"], "climate_rating": 3},
    {"student_id": "s-19", "preferred_peers": ["s-1"], "climate_rating": 4},
    {"student_id": "s-20", "preferred_peers": ["s-1", "s-2"], "climate_rating": 2},
]


@pytest.fixture
def roster() -> list[Student]:
    """20-student roster, s-1 through s-20."""
    return [Student(**s) for s in CLASSROOM_ROSTER]


@pytest.fixture
def responses() -> list[SurveyResponse]:
    """One response per student for the 20-student roster.

    s-20 chooses s-1 and s-2 but nobody chooses s-20; s-5 and s-6 reject
    each other.
    """
    return [SurveyResponse(**r) for r in CLASSROOM_RESPONSES]


# =============================================================================
# Configuration Fixtures
# =============================================================================

# Values matching the schema defaults
TEST_CONFIG = {
    "risk.points.conflict": 50,
    "risk.points.isolation": 30,
    "risk.points.climate": 20,
    "risk.isolation.not_chosen_weight": 0.7,
    "risk.isolation.no_choices_weight": 0.3,
    "risk.conflict.critical_mentions": 3,
    "risk.climate.missing_default": 0.5,
    "analysis.at_risk_threshold": 60,
    "graph.positive_edge_weight": 1,
    "graph.negative_edge_weight": 2,
}


@pytest.fixture
def mock_config():
    """
    Provide a ConfigLoader with explicit test values.

    Usage:
        def test_something(mock_config):
            # mock_config is already active via context manager
            from sociogram.config import ConfigLoader
            config = ConfigLoader.get_instance()
            assert config.get_int("analysis.at_risk_threshold") == 60
    """
    from sociogram.config import ConfigLoader

    loader = ConfigLoader(overrides=TEST_CONFIG)
    with ConfigLoader.use(loader):
        yield loader


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset ConfigLoader singleton between tests."""
    yield
    # Reset after each test to prevent state leakage
    from sociogram.config import ConfigLoader

    ConfigLoader.reset()
