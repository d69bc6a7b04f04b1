"""
IELTS Reading Locator CLI

Practise locating the evidence for an IELTS Academic Reading question:
read a generated passage, mark the paragraph(s) that answer the question
before the 90-second timer runs out, then compare with the answer key.

Usage:
    ielts-locator play                 # Gemini-generated exercise
    ielts-locator play -t "Gap Filling"
    ielts-locator sample               # Built-in offline exercises
    ielts-locator types                # List question types
"""

from __future__ import annotations

import asyncio
import sys
import threading
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from config import Settings, get_settings
from src.delivery.reading_visuals import LocatorSpinner, format_time, render_session
from src.generation.exercise_provider import GeminiExerciseProvider
from src.generation.samples import sample_provider
from src.reading.models import QuestionType, parse_paragraph_label
from src.reading.provider import ExerciseProvider
from src.reading.session import INITIAL_TIME_SECONDS, ReadingSession, SessionStatus

__version__ = "1.0.0"

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="ielts-locator",
    help="📖 IELTS Reading Locator - find the evidence before the clock runs out",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

QUIT_COMMANDS = {"q", "quit", "exit"}
NEW_COMMANDS = {"n", "new"}
SUBMIT_COMMANDS = {"s", "submit"}


def configure_logging(settings: Settings) -> None:
    """Route loguru to stderr (and optionally a file) at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG", rotation="1 MB", retention=3)


def _parse_question_type(value: Optional[str]) -> Optional[QuestionType]:
    if value is None:
        return None
    try:
        return QuestionType.parse(value)
    except ValueError:
        choices = ", ".join(f"'{t.value}'" for t in QuestionType)
        console.print(f"[red]Unknown question type '{value}'.[/red] Choose one of: {choices}")
        raise typer.Exit(code=1)


@app.callback()
def main_callback() -> None:
    """IELTS Academic Reading evidence-location practice."""
    configure_logging(get_settings())


# =============================================================================
# Interactive Loop
# =============================================================================


async def read_line(prompt: str) -> str:
    """
    Read one line of terminal input without blocking the event loop.

    The read runs on a daemon thread rather than the default executor, so an
    interrupted session can exit while the thread is still parked in input().
    Raises EOFError at end of input.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def resolve(line: Optional[str], error: Optional[Exception]) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(line)

    def worker() -> None:
        line, error = None, None
        try:
            line = console.input(prompt)
        except Exception as e:
            error = e
        try:
            loop.call_soon_threadsafe(resolve, line, error)
        except RuntimeError:
            logger.debug("Input arrived after the event loop closed")

    threading.Thread(target=worker, name="locator-input", daemon=True).start()
    return await future


def _prompt_for(session: ReadingSession) -> str:
    if session.status is SessionStatus.PLAYING:
        return (
            f"[bold]{format_time(session.time_remaining)}[/bold] "
            "paragraph letter/number to toggle, [b]s[/b] submit, [b]n[/b] new, [b]q[/b] quit > "
        )
    if session.status is SessionStatus.ERROR:
        return "[b]n[/b] try again, [b]q[/b] quit > "
    return "[b]n[/b] next exercise, [b]q[/b] quit > "


async def _load(session: ReadingSession) -> None:
    with LocatorSpinner(console, "Generating an academic passage and question..."):
        await session.start_new_exercise()


async def run_interactive(
    provider: ExerciseProvider,
    question_type: Optional[QuestionType] = None,
    initial_time: int = INITIAL_TIME_SECONDS,
) -> None:
    """
    Drive a ReadingSession from terminal input.

    Input is read on a worker thread so the countdown keeps ticking while
    the user thinks; expiry submits automatically.
    """
    announced = {"timeout": False}

    def on_change(session: ReadingSession) -> None:
        if session.timed_out and not announced["timeout"]:
            announced["timeout"] = True
            console.print("\n[bold red]Time's up![/bold red] Your selection was submitted. Press Enter.")

    async with ReadingSession(
        provider,
        initial_time=initial_time,
        question_type=question_type,
        on_change=on_change,
    ) as session:
        await _load(session)

        while True:
            console.print(render_session(session))
            try:
                raw = await read_line(_prompt_for(session))
            except (EOFError, KeyboardInterrupt):
                console.print()
                break

            command = raw.strip().lower()
            if not command:
                continue
            if command in QUIT_COMMANDS:
                break
            if command in NEW_COMMANDS:
                announced["timeout"] = False
                await _load(session)
                continue
            if session.status is not SessionStatus.PLAYING:
                console.print("[yellow]This exercise is closed. Press n for a new one.[/yellow]")
                continue
            if command in SUBMIT_COMMANDS:
                if not session.can_submit:
                    console.print("[yellow]Select at least one paragraph first.[/yellow]")
                    continue
                session.submit()
                continue

            index = parse_paragraph_label(command)
            if index is None or not session.exercise.is_valid_index(index):
                console.print(f"[yellow]Not a paragraph: '{raw.strip()}'[/yellow]")
                continue
            session.toggle_paragraph(index)


# =============================================================================
# Commands
# =============================================================================


def _run_session(coro) -> None:
    try:
        asyncio.run(coro)
    except KeyboardInterrupt:
        # Ctrl-C cancels the session task; asyncio.run re-raises it here
        console.print("\n[dim]Interrupted.[/dim]")


@app.command()
def play(
    question_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Question type, e.g. 'Gap Filling' (random if omitted)"),
    ] = None,
    seconds: Annotated[
        int, typer.Option("--time", min=1, help="Seconds on the clock")
    ] = INITIAL_TIME_SECONDS,
) -> None:
    """
    Play with a freshly generated exercise (requires GEMINI_API_KEY).

    Examples:
        ielts-locator play
        ielts-locator play -t "Heading Matching"
    """
    parsed_type = _parse_question_type(question_type)
    settings = get_settings()
    if not settings.has_ai_configured():
        console.print(
            "[yellow]GEMINI_API_KEY is not set; generation will fail. "
            "Try [bold]ielts-locator sample[/bold] for offline practice.[/yellow]"
        )
    _run_session(run_interactive(GeminiExerciseProvider(), parsed_type, seconds))


@app.command()
def sample(
    question_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Question type to pick from the built-in set"),
    ] = None,
    seconds: Annotated[
        int, typer.Option("--time", min=1, help="Seconds on the clock")
    ] = INITIAL_TIME_SECONDS,
) -> None:
    """Play the built-in offline exercises."""
    parsed_type = _parse_question_type(question_type)
    _run_session(run_interactive(sample_provider(), parsed_type, seconds))


@app.command()
def types() -> None:
    """List the supported IELTS question types."""
    table = Table(title="Question Types")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    for question_type in QuestionType:
        table.add_row(question_type.name.lower(), question_type.value)
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"ielts-locator {__version__}")


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
