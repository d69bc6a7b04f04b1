"""
Exercise providers.

Implements the ExerciseProvider contract from src.reading.provider:
- GeminiExerciseProvider: generates a passage + question with Gemini
  structured output
- StaticExerciseProvider: serves pre-built exercises (offline play, tests)

Every response is validated here by parse_exercise(); nothing downstream
trusts the raw JSON. Transport failures and shape failures both surface as
ExerciseGenerationError.
"""

from __future__ import annotations

import itertools
import json
import random
import re
from collections.abc import Sequence
from typing import Any, Optional

from loguru import logger
from pydantic import ValidationError

from config import get_settings
from src.reading.models import Exercise, QuestionType
from src.reading.provider import ExerciseGenerationError

from .prompts import RESPONSE_SCHEMA, get_prompt, get_system_prompt

_CODE_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def _summarize_validation_error(error: ValidationError, limit: int = 3) -> str:
    parts = []
    for err in error.errors()[:limit]:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    if error.error_count() > limit:
        parts.append(f"... {error.error_count() - limit} more")
    return "; ".join(parts)


def parse_exercise(raw: str | bytes | dict[str, Any]) -> Exercise:
    """
    Validate a generator response into an Exercise.

    Args:
        raw: Response text (JSON, optionally inside a ```json fence) or an
            already-decoded mapping

    Returns:
        Validated, immutable Exercise

    Raises:
        ExerciseGenerationError: Unparseable JSON or wrong shape
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")

    if isinstance(raw, str):
        text = raw.strip()
        fence = _CODE_FENCE.search(text)
        if fence:
            text = fence.group(1).strip()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ExerciseGenerationError(f"Response is not valid JSON: {e}") from e
    else:
        data = raw

    if not isinstance(data, dict):
        raise ExerciseGenerationError(
            f"Response must be a JSON object, got {type(data).__name__}"
        )

    try:
        return Exercise.model_validate(data)
    except ValidationError as e:
        raise ExerciseGenerationError(
            f"Response does not match the exercise shape: {_summarize_validation_error(e)}"
        ) from e


def random_question_type(rng: Optional[random.Random] = None) -> QuestionType:
    """Pick a question family uniformly."""
    return (rng or random).choice(list(QuestionType))


class GeminiExerciseProvider:
    """
    Generates exercises with Google Gemini.

    The client is created lazily so a missing key or SDK problem shows up as
    an ExerciseGenerationError on the first request rather than at startup.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
        explanation_language: str | None = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the provider.

        Args:
            api_key: Gemini API key (uses settings if not provided)
            model_name: Model to use (uses settings if not provided)
            temperature: Sampling temperature (uses settings if not provided)
            max_output_tokens: Token ceiling (uses settings if not provided)
            explanation_language: Language for explanations (uses settings if not provided)
            rng: Random source for question-type selection
        """
        settings = get_settings()
        self.api_key = api_key or settings.gemini_api_key
        self.model_name = model_name or settings.ai_model
        self.temperature = settings.ai_temperature if temperature is None else temperature
        self.max_output_tokens = max_output_tokens or settings.ai_max_output_tokens
        self.explanation_language = explanation_language or settings.explanation_language
        self._rng = rng or random.Random()
        self._client = None

    @property
    def client(self):
        """Lazy-load Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise ExerciseGenerationError(
                    "Gemini API key required (set GEMINI_API_KEY or add it to .env)"
                )
            import google.generativeai as genai

            genai.configure(api_key=self.api_key)
            self._client = genai.GenerativeModel(
                model_name=self.model_name,
                system_instruction=get_system_prompt(),
            )
        return self._client

    async def generate_exercise(self, question_type: QuestionType | None = None) -> Exercise:
        """Request one passage + question and validate it."""
        question_type = question_type or random_question_type(self._rng)
        prompt = get_prompt(question_type, self.explanation_language)
        logger.debug(f"Generating {question_type.value} exercise with {self.model_name}")

        try:
            response = await self.client.generate_content_async(
                prompt,
                generation_config={
                    "temperature": self.temperature,
                    "max_output_tokens": self.max_output_tokens,
                    "response_mime_type": "application/json",
                    "response_schema": RESPONSE_SCHEMA,
                },
            )
            text = response.text
        except ExerciseGenerationError:
            raise
        except Exception as e:
            logger.error(f"Gemini request failed: {e}")
            raise ExerciseGenerationError("Failed to generate exercise") from e

        if not text:
            raise ExerciseGenerationError("Gemini returned an empty response")

        exercise = parse_exercise(text)
        if exercise.question.type is not question_type:
            logger.warning(
                f"Asked for {question_type.value}, model returned {exercise.question.type.value}"
            )
        return exercise


class StaticExerciseProvider:
    """Serves a fixed set of exercises in rotation."""

    def __init__(self, exercises: Sequence[Exercise]):
        self.exercises = list(exercises)
        self._rotation = itertools.cycle(self.exercises)

    async def generate_exercise(self, question_type: QuestionType | None = None) -> Exercise:
        if not self.exercises:
            raise ExerciseGenerationError("No exercises available")

        if question_type is None:
            return next(self._rotation)

        for _ in range(len(self.exercises)):
            exercise = next(self._rotation)
            if exercise.question.type is question_type:
                return exercise
        raise ExerciseGenerationError(f"No exercise of type '{question_type.value}' available")
