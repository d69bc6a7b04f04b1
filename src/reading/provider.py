"""
Content provider contract.

The session only knows this protocol; concrete generators live in
src.generation.
"""

from __future__ import annotations

from typing import Protocol

from .models import Exercise, QuestionType


class ExerciseGenerationError(Exception):
    """The provider could not deliver a well-formed exercise."""


class ExerciseProvider(Protocol):
    """Protocol for exercise sources."""

    async def generate_exercise(self, question_type: QuestionType | None = None) -> Exercise:
        """
        Produce one validated exercise.

        Raises ExerciseGenerationError on transport failure or malformed data.
        """
        ...
