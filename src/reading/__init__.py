"""
Reading: IELTS Academic Reading evidence-location practice.

Components:
- models: Passage, question and exercise types (validated, immutable)
- scoring: Exact set-equality verdict and per-paragraph review
- timer: Single armed/disarmed countdown tick source
- session: Session controller driving the loading/playing/submitted/error flow
"""

from .models import (
    Exercise,
    Question,
    QuestionType,
    ReadingPassage,
    paragraph_label,
    parse_paragraph_label,
)
from .scoring import ParagraphOutcome, SelectionReview, is_correct_selection, review_selection
from .session import INITIAL_TIME_SECONDS, ReadingSession, SessionStatus
from .timer import CountdownTimer

__all__ = [
    # Data model
    "Exercise",
    "Question",
    "QuestionType",
    "ReadingPassage",
    "paragraph_label",
    "parse_paragraph_label",
    # Scoring
    "ParagraphOutcome",
    "SelectionReview",
    "is_correct_selection",
    "review_selection",
    # Session
    "INITIAL_TIME_SECONDS",
    "ReadingSession",
    "SessionStatus",
    "CountdownTimer",
]
