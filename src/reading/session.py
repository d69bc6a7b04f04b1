"""
Reading Session: controller for one evidence-location exercise.

State machine:

    LOADING --provider ok--> PLAYING --submit / time up--> SUBMITTED
       |                        |
       +--provider error--> ERROR
    (start_new_exercise() from any state re-enters LOADING)

The session is the only writer of its state. The countdown timer and the
provider result both come back through its methods; views read the
properties and forward user intents.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Optional

from loguru import logger

from .models import Exercise, QuestionType
from .provider import ExerciseGenerationError, ExerciseProvider
from .scoring import SelectionReview, is_correct_selection, review_selection
from .timer import CountdownTimer

INITIAL_TIME_SECONDS = 90  # 1.5 minutes per exercise


class SessionStatus(str, Enum):
    """UI-gating status of a session."""
    LOADING = "loading"
    PLAYING = "playing"
    SUBMITTED = "submitted"
    ERROR = "error"


class ReadingSession:
    """
    Orchestrates exercise loading, paragraph selection, the countdown and
    scoring.

    Invalid interactions (toggling outside PLAYING, submitting twice) are
    silent no-ops: they come from stale UI callbacks or from the timer racing
    an explicit submit, not from faults.
    """

    def __init__(
        self,
        provider: ExerciseProvider,
        *,
        initial_time: int = INITIAL_TIME_SECONDS,
        tick_interval: float = 1.0,
        question_type: Optional[QuestionType] = None,
        on_change: Optional[Callable[[ReadingSession], None]] = None,
    ):
        if initial_time < 1:
            raise ValueError("initial_time must be at least 1 second")
        self.provider = provider
        self.initial_time = initial_time
        self.question_type = question_type
        self._on_change = on_change
        self._timer = CountdownTimer(self._tick, interval=tick_interval)

        self._status = SessionStatus.LOADING
        self._exercise: Optional[Exercise] = None
        self._selected: set[int] = set()
        self._time_remaining = initial_time
        self._verdict: Optional[bool] = None
        self._request_seq = 0
        self.last_error: Optional[str] = None

    # =========================================================================
    # Projections (read-only)
    # =========================================================================

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def exercise(self) -> Optional[Exercise]:
        return self._exercise

    @property
    def selected_paragraphs(self) -> frozenset[int]:
        return frozenset(self._selected)

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def verdict(self) -> Optional[bool]:
        return self._verdict

    @property
    def timer_armed(self) -> bool:
        return self._timer.armed

    @property
    def timed_out(self) -> bool:
        """Submitted with the clock at zero."""
        return self._status is SessionStatus.SUBMITTED and self._time_remaining == 0

    @property
    def can_submit(self) -> bool:
        """Whether a view should offer the submit control."""
        return (
            self._status is SessionStatus.PLAYING
            and self._time_remaining > 0
            and bool(self._selected)
        )

    def review(self) -> Optional[SelectionReview]:
        """Per-paragraph outcome, available once submitted."""
        if self._status is not SessionStatus.SUBMITTED or self._exercise is None:
            return None
        return review_selection(
            self._selected,
            self._exercise.question.correct_paragraph_indices,
            self._exercise.paragraph_count,
        )

    # =========================================================================
    # Operations
    # =========================================================================

    async def start_new_exercise(self) -> None:
        """
        Reset the session and load a fresh exercise.

        Provider failures end in ERROR; they are not raised. When calls
        overlap, only the most recent request's result is applied.
        """
        self.disarm()
        self._request_seq += 1
        request_id = self._request_seq

        self._status = SessionStatus.LOADING
        self._exercise = None
        self._selected = set()
        self._verdict = None
        self._time_remaining = self.initial_time
        self.last_error = None
        self._notify()
        logger.info(f"Requesting new exercise (request={request_id}, type={self.question_type})")

        try:
            exercise = await self.provider.generate_exercise(self.question_type)
            if not isinstance(exercise, Exercise):
                raise ExerciseGenerationError(
                    f"Provider returned {type(exercise).__name__}, expected Exercise"
                )
        except Exception as e:
            if request_id != self._request_seq:
                logger.debug(f"Discarding failure of superseded request {request_id}")
                return
            if isinstance(e, ExerciseGenerationError):
                logger.error(f"Exercise generation failed: {e}")
            else:
                logger.exception(f"Provider raised {type(e).__name__}: {e}")
            self.last_error = str(e) or type(e).__name__
            self._status = SessionStatus.ERROR
            self._notify()
            return

        if request_id != self._request_seq:
            logger.debug(f"Discarding result of superseded request {request_id}")
            return

        self._exercise = exercise
        self._status = SessionStatus.PLAYING
        logger.info(
            f"Exercise ready: '{exercise.passage.title}' "
            f"({exercise.paragraph_count} paragraphs, {exercise.question.type.value})"
        )
        self.arm()
        self._notify()

    def toggle_paragraph(self, index: int) -> None:
        """Add or remove a paragraph from the working selection."""
        if (
            self._status is not SessionStatus.PLAYING
            or self._time_remaining <= 0
            or self._exercise is None
            or not self._exercise.is_valid_index(index)
        ):
            logger.debug(f"Ignoring toggle of paragraph {index} (status={self._status.value})")
            return

        if index in self._selected:
            self._selected.discard(index)
        else:
            self._selected.add(index)
        self._notify()

    def submit(self) -> Optional[bool]:
        """
        Score the selection and freeze the session.

        Returns the verdict, or None when the call was a no-op (not playing,
        e.g. already submitted by the timer).
        """
        if self._status is not SessionStatus.PLAYING or self._exercise is None:
            logger.debug(f"Ignoring submit (status={self._status.value})")
            return None

        self.disarm()
        self._verdict = is_correct_selection(
            self._selected, self._exercise.question.correct_paragraph_indices
        )
        self._status = SessionStatus.SUBMITTED
        logger.info(
            f"Submitted {sorted(self._selected)} with {self._time_remaining}s left: "
            f"{'correct' if self._verdict else 'incorrect'}"
        )
        self._notify()
        return self._verdict

    # =========================================================================
    # Timer ownership
    # =========================================================================

    def arm(self) -> None:
        """Arm the countdown; only meaningful while PLAYING with time left."""
        if self._status is not SessionStatus.PLAYING or self._time_remaining <= 0:
            return
        self._timer.arm()

    def disarm(self) -> None:
        self._timer.disarm()

    def close(self) -> None:
        """Tear down: stop ticking and drop any in-flight provider result."""
        self._request_seq += 1
        self.disarm()

    async def __aenter__(self) -> ReadingSession:
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()

    def _tick(self) -> None:
        if self._status is not SessionStatus.PLAYING:
            self.disarm()
            return

        self._time_remaining = max(0, self._time_remaining - 1)
        if self._time_remaining == 0:
            self.disarm()
            logger.info("Time is up, submitting automatically")
            self.submit()
            return
        self._notify()

    def _notify(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(self)
        except Exception:
            # State is already committed; the view only missed one render
            logger.exception("on_change callback failed")
