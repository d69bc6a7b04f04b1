"""
Reading Locator Visual Components.

Pure projections of ReadingSession state into rich renderables. Nothing in
this module mutates the session.
"""

from __future__ import annotations

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from src.reading.models import Exercise, paragraph_label
from src.reading.scoring import ParagraphOutcome, SelectionReview
from src.reading.session import ReadingSession, SessionStatus

# =============================================================================
# COLOR THEME
# =============================================================================

LOCATOR_THEME = {
    "primary": "#3B82F6",  # Blue - selection and accents
    "secondary": "#64748B",  # Slate - secondary text
    "success": "#10B981",  # Emerald - correct evidence, plenty of time
    "warning": "#F59E0B",  # Amber - time running low
    "error": "#EF4444",  # Red - wrong selection, last seconds
    "dim": "#94A3B8",
    "white": "#F8FAFC",
}

STYLES = {
    "locator_primary": Style(color=LOCATOR_THEME["primary"], bold=True),
    "locator_secondary": Style(color=LOCATOR_THEME["secondary"]),
    "locator_success": Style(color=LOCATOR_THEME["success"], bold=True),
    "locator_warning": Style(color=LOCATOR_THEME["warning"], bold=True),
    "locator_error": Style(color=LOCATOR_THEME["error"], bold=True),
    "locator_dim": Style(color=LOCATOR_THEME["dim"]),
}

# Timer bands (seconds remaining)
TIMER_CRITICAL_SECONDS = 15
TIMER_WARNING_SECONDS = 45

SCANNING_TIP = (
    "Scanning is the key skill here. Look for distinctive keywords such as proper names, "
    "numbers and technical terms to find the region holding the answer as fast as possible."
)

_OUTCOME_STYLES = {
    ParagraphOutcome.FOUND: ("✓", LOCATOR_THEME["success"]),
    ParagraphOutcome.MISSED: ("!", LOCATOR_THEME["success"]),
    ParagraphOutcome.EXTRA: ("✗", LOCATOR_THEME["error"]),
    ParagraphOutcome.NEUTRAL: (" ", LOCATOR_THEME["dim"]),
}


# =============================================================================
# TIMER
# =============================================================================


def format_time(seconds: int) -> str:
    """MM:SS, clamped at zero."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def timer_color(seconds: int) -> str:
    if seconds <= TIMER_CRITICAL_SECONDS:
        return LOCATOR_THEME["error"]
    if seconds <= TIMER_WARNING_SECONDS:
        return LOCATOR_THEME["warning"]
    return LOCATOR_THEME["success"]


def render_timer_badge(seconds: int) -> Text:
    return Text(f"⏱ {format_time(seconds)}", style=Style(color=timer_color(seconds), bold=True))


# =============================================================================
# PASSAGE
# =============================================================================


def render_passage_panel(
    exercise: Exercise,
    selected: frozenset[int] = frozenset(),
    review: SelectionReview | None = None,
) -> Panel:
    """
    Render the lettered passage.

    Args:
        exercise: Current exercise
        selected: Working selection (highlighted while playing)
        review: Post-submission review; when given, paragraphs are styled by outcome

    Returns:
        Rich Panel with one block per paragraph
    """
    body = Text()
    for index, paragraph in enumerate(exercise.passage.paragraphs):
        label = paragraph_label(index)
        if review is not None:
            outcome = review.outcome(index)
            marker, color = _OUTCOME_STYLES[outcome]
            label_style = Style(color=color, bold=True)
            if outcome is ParagraphOutcome.NEUTRAL:
                text_style = STYLES["locator_dim"]
            else:
                text_style = Style(color=color)
        elif index in selected:
            marker = "●"
            label_style = STYLES["locator_primary"]
            text_style = Style(color=LOCATOR_THEME["primary"])
        else:
            marker = " "
            label_style = STYLES["locator_secondary"]
            text_style = Style(color=LOCATOR_THEME["white"])

        if index:
            body.append("\n\n")
        body.append(f"{marker} [{label}] ", style=label_style)
        body.append(paragraph, style=text_style)

    return Panel(
        body,
        title=Text(exercise.passage.title, style=STYLES["locator_primary"]),
        title_align="left",
        subtitle=f"{exercise.paragraph_count} paragraphs",
        border_style=Style(color=LOCATOR_THEME["secondary"]),
        box=box.ROUNDED,
        padding=(1, 2),
    )


# =============================================================================
# QUESTION / RESULT
# =============================================================================


def render_question_panel(session: ReadingSession) -> Panel:
    """Question type, text, and the live selection count."""
    exercise = session.exercise
    content = Text()
    content.append(f"[{exercise.question.type.value.upper()}]\n", style=STYLES["locator_primary"])
    content.append("Find the evidence\n\n", style=Style(bold=True))
    content.append(exercise.question.question_text, style=Style(color=LOCATOR_THEME["white"], bold=True))

    if session.status is SessionStatus.PLAYING:
        chosen = ", ".join(paragraph_label(i) for i in sorted(session.selected_paragraphs)) or "none"
        content.append(f"\n\nSelected ({len(session.selected_paragraphs)}): {chosen}", style=STYLES["locator_dim"])

    return Panel(
        content,
        title=render_timer_badge(session.time_remaining),
        title_align="right",
        border_style=Style(color=LOCATOR_THEME["primary"]),
        box=box.HEAVY,
        padding=(1, 2),
    )


def result_heading(session: ReadingSession) -> str:
    if session.timed_out and not session.verdict:
        return "TIME'S UP"
    return "CORRECT" if session.verdict else "INCORRECT"


def render_result_panel(session: ReadingSession) -> Panel:
    """Verdict, evidence location, literal answer and explanation."""
    question = session.exercise.question
    color = LOCATOR_THEME["success"] if session.verdict else LOCATOR_THEME["error"]

    content = Text()
    content.append(f"{'◉' if session.verdict else '✗'} {result_heading(session)}\n", style=Style(color=color, bold=True))
    if session.verdict:
        content.append("You located the evidence exactly.\n", style=STYLES["locator_dim"])
    else:
        letters = ", ".join(paragraph_label(i) for i in sorted(question.correct_paragraph_indices))
        content.append(f"The evidence is in paragraph(s): {letters}\n", style=STYLES["locator_dim"])

    content.append("\nAnswer: ", style=STYLES["locator_dim"])
    content.append(question.answer, style=STYLES["locator_primary"])
    content.append("\n\nExplanation: ", style=STYLES["locator_warning"])
    content.append(question.explanation, style=Style(color=LOCATOR_THEME["white"]))
    content.append(f"\n\nTip: {SCANNING_TIP}", style=Style(color=LOCATOR_THEME["dim"], italic=True))

    return Panel(
        content,
        border_style=Style(color=color),
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_error_panel(message: str | None = None) -> Panel:
    content = Text()
    content.append("Connection error\n\n", style=STYLES["locator_error"])
    content.append("Could not generate an exercise right now. Request a new one to try again.", style=Style(color=LOCATOR_THEME["white"]))
    if message:
        content.append(f"\n\n{message}", style=STYLES["locator_dim"])
    return Panel(content, border_style=Style(color=LOCATOR_THEME["error"]), box=box.HEAVY, padding=(1, 2))


def render_session(session: ReadingSession) -> Group | Panel | Text:
    """Full-screen projection of the current session state."""
    if session.status is SessionStatus.LOADING:
        return Text("Preparing your exercise...", style=STYLES["locator_dim"])
    if session.status is SessionStatus.ERROR or session.exercise is None:
        return render_error_panel(session.last_error)

    parts = [
        render_passage_panel(session.exercise, session.selected_paragraphs, session.review()),
        render_question_panel(session),
    ]
    if session.status is SessionStatus.SUBMITTED:
        parts.append(render_result_panel(session))
    return Group(*parts)


# =============================================================================
# LOADING STATE
# =============================================================================


class LocatorSpinner:
    """
    Simple spinner for loading states using Rich's console.status().

    Usage:
        with LocatorSpinner(console, "Generating passage..."):
            await session.start_new_exercise()
    """

    def __init__(self, console: Console, message: str = "Processing..."):
        self.console = console
        self.message = message
        self._status = None

    def __enter__(self):
        self._status = self.console.status(f"[cyan]{self.message}[/cyan]", spinner="dots")
        self._status.__enter__()
        return self

    def __exit__(self, *args):
        if self._status:
            self._status.__exit__(*args)
