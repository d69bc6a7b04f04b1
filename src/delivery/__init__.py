"""
Terminal delivery for the Reading Locator.

Components:
- reading_visuals: rich renderables projected from ReadingSession state
"""

from .reading_visuals import (
    LocatorSpinner,
    format_time,
    render_error_panel,
    render_passage_panel,
    render_question_panel,
    render_result_panel,
    render_session,
    timer_color,
)

__all__ = [
    "LocatorSpinner",
    "format_time",
    "render_error_panel",
    "render_passage_panel",
    "render_question_panel",
    "render_result_panel",
    "render_session",
    "timer_color",
]
