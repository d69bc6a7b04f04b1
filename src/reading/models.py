"""
Exercise data model.

A generated exercise pairs one academic passage with one question whose
evidence lives in specific paragraphs. Everything here is immutable and
validated on construction, so a half-parsed response can never reach the
session.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class QuestionType(str, Enum):
    """IELTS Academic Reading question families."""
    TRUE_FALSE_NOT_GIVEN = "True/False/Not Given"
    GAP_FILLING = "Gap Filling"
    MATCHING_INFORMATION = "Matching Information"
    HEADING_MATCHING = "Heading Matching"
    MULTIPLE_CHOICE = "Multiple Choice"

    @classmethod
    def parse(cls, value: str | QuestionType) -> QuestionType:
        """Accept the display value or the member name, case-insensitive."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown question type: {value!r}")


def paragraph_label(index: int) -> str:
    """Display label for a paragraph: 0 -> 'A', 1 -> 'B', ..."""
    if 0 <= index < 26:
        return chr(ord("A") + index)
    return str(index + 1)


def parse_paragraph_label(token: str) -> int | None:
    """
    Turn user input into a 0-based paragraph index.

    Accepts a letter label ("C") or a 1-based number ("3").
    Returns None for anything else.
    """
    token = token.strip()
    if not token:
        return None
    if token.isdigit():
        number = int(token)
        return number - 1 if number >= 1 else None
    if len(token) == 1 and token.isalpha() and token.isascii():
        return ord(token.upper()) - ord("A")
    return None


class ReadingPassage(BaseModel):
    """Title plus ordered paragraphs, each addressable by position."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    paragraphs: tuple[str, ...] = Field(..., min_length=1)

    @field_validator("paragraphs")
    @classmethod
    def _no_blank_paragraphs(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        blank = [i for i, text in enumerate(value) if not text.strip()]
        if blank:
            raise ValueError(f"blank paragraph(s) at index {blank}")
        return value


class Question(BaseModel):
    """One question and the paragraph indices holding its evidence."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    type: QuestionType
    question_text: str = Field(..., alias="questionText", min_length=1)
    correct_paragraph_indices: frozenset[int] = Field(
        ..., alias="correctParagraphIndices", min_length=1
    )
    explanation: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value):
        if isinstance(value, str):
            return QuestionType.parse(value)
        return value

    @field_validator("correct_paragraph_indices")
    @classmethod
    def _non_negative(cls, value: frozenset[int]) -> frozenset[int]:
        if any(i < 0 for i in value):
            raise ValueError("paragraph indices must be >= 0")
        return value


class Exercise(BaseModel):
    """A passage and its question, validated together."""

    model_config = ConfigDict(frozen=True)

    passage: ReadingPassage
    question: Question

    @model_validator(mode="after")
    def _indices_within_passage(self) -> Exercise:
        count = len(self.passage.paragraphs)
        out_of_range = sorted(i for i in self.question.correct_paragraph_indices if i >= count)
        if out_of_range:
            raise ValueError(
                f"correctParagraphIndices {out_of_range} out of range for {count} paragraphs"
            )
        return self

    @property
    def paragraph_count(self) -> int:
        return len(self.passage.paragraphs)

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.paragraph_count
