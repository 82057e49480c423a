"""
Pytest Configuration
====================

Ensures the 'src' directory is importable without installing the package
and provides shared fixtures.
"""
import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent.absolute() / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from timeslotbubbles.model.geometry_primitives import Canvas  # noqa: E402
from timeslotbubbles.model.timeslots import Candidate  # noqa: E402


@pytest.fixture
def example_candidates():
    return [
        Candidate(label="2024-01-10 09:00", weight=0),
        Candidate(label="2024-01-10 10:00", weight=5),
        Candidate(label="2024-01-10 11:00", weight=5),
    ]


@pytest.fixture
def example_canvas():
    return Canvas(width=320.0, height=300.0)


@pytest.fixture
def suggestions_payload():
    return {
        "suggestions": [
            {"slot": "2024-01-10 11:00", "busy_count": 5},
            {"slot": "2024-01-10 09:00", "busy_count": 0},
            {"slot": "2024-01-10 10:00", "busy_count": 5},
        ]
    }
