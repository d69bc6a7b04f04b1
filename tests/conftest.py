"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import asyncio
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.reading.models import Exercise  # noqa: E402
from src.reading.provider import ExerciseGenerationError  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class FakeProvider:
    """
    Scriptable exercise provider.

    Each call pops the next scripted outcome: an Exercise is returned, an
    exception instance is raised. The last outcome repeats.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls: list = []

    async def generate_exercise(self, question_type=None):
        self.calls.append(question_type)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        await asyncio.sleep(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def raw_exercise():
    """Three-paragraph exercise in wire (camelCase) shape; evidence in paragraph 2."""
    return {
        "passage": {
            "title": "The History of Glass",
            "paragraphs": [
                "Glass was first produced in Mesopotamia around 3500 BCE.",
                "Roman craftsmen later developed glassblowing, which made vessels cheaper.",
                "In 1903 Michael Owens patented a machine that automated bottle production.",
            ],
        },
        "question": {
            "type": "True/False/Not Given",
            "questionText": "Bottle manufacturing was mechanised in the early twentieth century.",
            "correctParagraphIndices": [2],
            "explanation": "Paragraph C mentions the 1903 Owens bottle machine.",
            "answer": "True",
        },
    }


@pytest.fixture
def exercise(raw_exercise):
    return Exercise.model_validate(raw_exercise)


@pytest.fixture
def multi_evidence_exercise(raw_exercise):
    """Same passage with evidence in paragraphs 1 and 3 of a longer text."""
    raw = dict(raw_exercise)
    raw["passage"] = {
        "title": "The History of Glass",
        "paragraphs": raw_exercise["passage"]["paragraphs"] + ["Float glass arrived in 1959."],
    }
    raw["question"] = dict(raw_exercise["question"], correctParagraphIndices=[1, 3])
    return Exercise.model_validate(raw)


@pytest.fixture
def provider(exercise):
    return FakeProvider(exercise)


@pytest.fixture
def failing_provider():
    return FakeProvider(ExerciseGenerationError("Failed to generate exercise"))


@pytest.fixture
def fake_provider_cls():
    return FakeProvider
