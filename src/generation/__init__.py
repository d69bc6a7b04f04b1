"""LLM-based generation of IELTS reading exercises.

Pipeline:
1. Pick a question type (random unless requested)
2. LLM (Gemini) generates passage + question as structured JSON
3. parse_exercise() validates the shape before anything else sees it

Usage:
    from src.generation import GeminiExerciseProvider

    provider = GeminiExerciseProvider()
    exercise = await provider.generate_exercise()
    print(exercise.passage.title)
"""
from src.generation.exercise_provider import (
    GeminiExerciseProvider,
    StaticExerciseProvider,
    parse_exercise,
    random_question_type,
)
from src.generation.samples import load_sample_exercises, sample_provider

__all__ = [
    "GeminiExerciseProvider",
    "StaticExerciseProvider",
    "parse_exercise",
    "random_question_type",
    "load_sample_exercises",
    "sample_provider",
]
