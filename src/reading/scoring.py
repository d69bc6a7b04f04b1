"""
Scoring for evidence-location questions.

The verdict is exact set equality: every evidence paragraph selected and
nothing else. There is no partial credit.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


def is_correct_selection(selected: Iterable[int], correct: Iterable[int]) -> bool:
    """True iff the selected indices equal the correct indices as sets."""
    return frozenset(selected) == frozenset(correct)


class ParagraphOutcome(str, Enum):
    """How a paragraph is shown once the answer is revealed."""
    FOUND = "found"  # evidence, selected
    MISSED = "missed"  # evidence, not selected
    EXTRA = "extra"  # selected, not evidence
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class SelectionReview:
    """Per-paragraph breakdown of a submitted selection."""
    selected: frozenset[int]
    correct: frozenset[int]
    paragraph_count: int

    @property
    def found(self) -> frozenset[int]:
        return self.selected & self.correct

    @property
    def missed(self) -> frozenset[int]:
        return self.correct - self.selected

    @property
    def extra(self) -> frozenset[int]:
        return self.selected - self.correct

    @property
    def is_correct(self) -> bool:
        return self.selected == self.correct

    def outcome(self, index: int) -> ParagraphOutcome:
        if index in self.correct:
            return ParagraphOutcome.FOUND if index in self.selected else ParagraphOutcome.MISSED
        if index in self.selected:
            return ParagraphOutcome.EXTRA
        return ParagraphOutcome.NEUTRAL

    def outcomes(self) -> list[ParagraphOutcome]:
        return [self.outcome(i) for i in range(self.paragraph_count)]


def review_selection(
    selected: Iterable[int],
    correct: Iterable[int],
    paragraph_count: int,
) -> SelectionReview:
    """Build the review shown next to the verdict."""
    return SelectionReview(
        selected=frozenset(selected),
        correct=frozenset(correct),
        paragraph_count=paragraph_count,
    )
