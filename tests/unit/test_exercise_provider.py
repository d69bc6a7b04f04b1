"""
Unit tests for exercise providers and response parsing.
"""

import json
import random

import pytest

from src.generation.exercise_provider import (
    GeminiExerciseProvider,
    StaticExerciseProvider,
    parse_exercise,
    random_question_type,
)
from src.generation.prompts import RESPONSE_SCHEMA, get_prompt
from src.generation.samples import load_sample_exercises, sample_provider
from src.reading.models import Exercise, QuestionType
from src.reading.provider import ExerciseGenerationError
from src.reading.session import ReadingSession, SessionStatus


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModel:
    """Stands in for google.generativeai.GenerativeModel."""

    def __init__(self, text=None, error=None):
        self._text = text
        self._error = error
        self.prompts = []
        self.configs = []

    async def generate_content_async(self, prompt, generation_config=None):
        self.prompts.append(prompt)
        self.configs.append(generation_config)
        if self._error:
            raise self._error
        return FakeResponse(self._text)


class TestParseExercise:
    """Test boundary validation of generator output."""

    def test_parse_json_text(self, raw_exercise):
        exercise = parse_exercise(json.dumps(raw_exercise))

        assert isinstance(exercise, Exercise)
        assert exercise.passage.title == "The History of Glass"

    def test_parse_fenced_json(self, raw_exercise):
        text = "Here you go:\n```json\n" + json.dumps(raw_exercise) + "\n```"

        assert parse_exercise(text).question.answer == "True"

    def test_parse_dict(self, raw_exercise):
        assert parse_exercise(raw_exercise).paragraph_count == 3

    def test_parse_bytes(self, raw_exercise):
        assert parse_exercise(json.dumps(raw_exercise).encode()).paragraph_count == 3

    def test_invalid_json(self):
        with pytest.raises(ExerciseGenerationError, match="not valid JSON"):
            parse_exercise("{not json")

    def test_non_object_json(self):
        with pytest.raises(ExerciseGenerationError, match="JSON object"):
            parse_exercise("[1, 2, 3]")

    def test_wrong_shape_reports_location(self, raw_exercise):
        raw_exercise["question"]["correctParagraphIndices"] = [7]

        with pytest.raises(ExerciseGenerationError, match="out of range"):
            parse_exercise(raw_exercise)

    def test_missing_field(self, raw_exercise):
        del raw_exercise["question"]["explanation"]

        with pytest.raises(ExerciseGenerationError, match="explanation"):
            parse_exercise(raw_exercise)


class TestGeminiExerciseProvider:
    """Test the Gemini provider with the SDK model replaced."""

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        provider = GeminiExerciseProvider(api_key="")
        provider.api_key = None

        with pytest.raises(ExerciseGenerationError, match="API key"):
            await provider.generate_exercise(QuestionType.GAP_FILLING)

    @pytest.mark.asyncio
    async def test_successful_generation(self, raw_exercise):
        provider = GeminiExerciseProvider(api_key="test-key", explanation_language="English")
        model = FakeModel(text=json.dumps(raw_exercise))
        provider._client = model

        exercise = await provider.generate_exercise(QuestionType.TRUE_FALSE_NOT_GIVEN)

        assert exercise.question.correct_paragraph_indices == {2}
        assert '"True/False/Not Given"' in model.prompts[0]
        assert "explanation in English" in model.prompts[0]
        config = model.configs[0]
        assert config["response_mime_type"] == "application/json"
        assert config["response_schema"] is RESPONSE_SCHEMA

    @pytest.mark.asyncio
    async def test_random_type_when_not_requested(self, raw_exercise):
        provider = GeminiExerciseProvider(api_key="test-key", rng=random.Random(7))
        model = FakeModel(text=json.dumps(raw_exercise))
        provider._client = model

        await provider.generate_exercise()

        expected = random_question_type(random.Random(7))
        assert f'"{expected.value}"' in model.prompts[0]

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        provider = GeminiExerciseProvider(api_key="test-key")
        provider._client = FakeModel(error=ConnectionError("network down"))

        with pytest.raises(ExerciseGenerationError) as exc_info:
            await provider.generate_exercise(QuestionType.GAP_FILLING)

        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_client_setup_failure(self, monkeypatch):
        import google.generativeai as genai

        def broken_model(*args, **kwargs):
            raise ValueError("unknown model")

        monkeypatch.setattr(genai, "configure", lambda **kwargs: None)
        monkeypatch.setattr(genai, "GenerativeModel", broken_model)
        provider = GeminiExerciseProvider(api_key="test-key")

        with pytest.raises(ExerciseGenerationError) as exc_info:
            await provider.generate_exercise(QuestionType.GAP_FILLING)

        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.asyncio
    async def test_client_setup_failure_ends_session_in_error(self, monkeypatch):
        import google.generativeai as genai

        monkeypatch.setattr(genai, "configure", lambda **kwargs: None)
        monkeypatch.setattr(genai, "GenerativeModel", lambda **kwargs: 1 / 0)
        session = ReadingSession(GeminiExerciseProvider(api_key="test-key"))

        await session.start_new_exercise()

        assert session.status is SessionStatus.ERROR
        assert session.last_error == "Failed to generate exercise"

    @pytest.mark.asyncio
    async def test_empty_response(self):
        provider = GeminiExerciseProvider(api_key="test-key")
        provider._client = FakeModel(text="")

        with pytest.raises(ExerciseGenerationError, match="empty"):
            await provider.generate_exercise(QuestionType.GAP_FILLING)

    @pytest.mark.asyncio
    async def test_malformed_response(self):
        provider = GeminiExerciseProvider(api_key="test-key")
        provider._client = FakeModel(text='{"passage": {"title": "x"}}')

        with pytest.raises(ExerciseGenerationError):
            await provider.generate_exercise(QuestionType.GAP_FILLING)


class TestStaticExerciseProvider:
    """Test the offline provider."""

    @pytest.mark.asyncio
    async def test_rotation(self, exercise, multi_evidence_exercise):
        provider = StaticExerciseProvider([exercise, multi_evidence_exercise])

        assert await provider.generate_exercise() == exercise
        assert await provider.generate_exercise() == multi_evidence_exercise
        assert await provider.generate_exercise() == exercise

    @pytest.mark.asyncio
    async def test_empty(self):
        with pytest.raises(ExerciseGenerationError):
            await StaticExerciseProvider([]).generate_exercise()

    @pytest.mark.asyncio
    async def test_filter_by_type(self):
        provider = sample_provider()

        exercise = await provider.generate_exercise(QuestionType.GAP_FILLING)

        assert exercise.question.type is QuestionType.GAP_FILLING

    @pytest.mark.asyncio
    async def test_missing_type(self, exercise):
        provider = StaticExerciseProvider([exercise])

        with pytest.raises(ExerciseGenerationError, match="Heading Matching"):
            await provider.generate_exercise(QuestionType.HEADING_MATCHING)


class TestSamplesAndPrompts:
    """Test built-in content and prompt construction."""

    def test_samples_are_valid(self):
        samples = load_sample_exercises()

        assert len(samples) == 3
        assert all(s.question.correct_paragraph_indices for s in samples)

    @pytest.mark.parametrize("question_type", list(QuestionType))
    def test_prompt_for_every_type(self, question_type):
        prompt = get_prompt(question_type)

        assert question_type.value in prompt
        assert "8-12 distinct paragraphs" in prompt
        assert "explanation in Vietnamese" in prompt
