from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
API_DIR = ROOT / "API"
if str(API_DIR) not in sys.path:
    sys.path.insert(0, str(API_DIR))

# Test-mode runtime guards:
# - no external LLM traffic, so every schedule comes from the local planner
# - plans persisted to a throwaway directory
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LLM_PROVIDER", "none")
os.environ.setdefault("OPENROUTER_API_KEY", "")
os.environ.setdefault("PLAN_STORE_BACKEND", "file")
os.environ.setdefault("RUNTIME_DATA_DIR", tempfile.mkdtemp(prefix="learnpath-test-"))

from app.core.llm_provider import BaseLLMProvider  # noqa: E402
from app.main import app  # noqa: E402
from app.schemas.curriculum import Curriculum, Subject, Topic, Unit  # noqa: E402
from app.schemas.student import StudentProfile  # noqa: E402


@pytest.fixture(scope="session")
def client() -> TestClient:
    with TestClient(app) as tc:
        yield tc


@pytest.fixture
def student() -> StudentProfile:
    return StudentProfile(learner_id="learner-1", name="Asha", age=15, student_type="school")


def build_curriculum(*subject_specs, roadmap_type=None) -> Curriculum:
    """``subject_specs`` are ``(name, [(unit_title, [topic names], hours), ...])`` tuples."""
    subjects = []
    for name, units in subject_specs:
        built_units = [
            Unit(
                title=title,
                topics=[Topic(name=topic, estimated_hours=hours / max(1, len(topics))) for topic in topics],
                estimated_duration=hours,
                order=index + 1,
            )
            for index, (title, topics, hours) in enumerate(units)
        ]
        subjects.append(
            Subject(name=name, units=built_units, total_hours=sum(unit.estimated_duration for unit in built_units))
        )
    return Curriculum(subjects=subjects, total_duration=30, roadmap_type=roadmap_type)


@pytest.fixture
def single_unit_curriculum() -> Curriculum:
    return build_curriculum(("Math", [("Algebra", ["T1", "T2", "T3", "T4"], 20)]))


@pytest.fixture
def two_subject_curriculum() -> Curriculum:
    return build_curriculum(
        ("Math", [("Algebra", ["A1", "A2", "A3"], 12), ("Geometry", ["G1", "G2"], 8)]),
        ("Science", [("Physics", ["P1", "P2", "P3", "P4"], 16)]),
    )


@pytest.fixture
def curriculum_factory():
    return build_curriculum


class ScriptedProvider(BaseLLMProvider):
    """LLM provider that replays canned replies (strings) or raises canned exceptions, in order."""

    provider_name = "scripted"

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls: list[dict] = []

    async def chat(self, messages: list[dict], temperature: float = 0.7) -> str:
        self.calls.append({"messages": messages, "temperature": temperature})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def scripted_provider():
    return ScriptedProvider


@pytest.fixture
def ai_schedule() -> dict:
    return {
        "weeklyPlan": [
            {
                "day": "Monday",
                "sessions": [
                    {
                        "subject": "Math",
                        "unit": "Algebra",
                        "topics": ["A1", "A2"],
                        "duration": 90,
                        "startTime": "10:00",
                        "endTime": "11:30",
                        "type": "learning",
                    }
                ],
            }
        ],
        "dailyStudyHours": 2,
        "weeklyStudyDays": 4,
        "breakDays": ["Sunday"],
    }
