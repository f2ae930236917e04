from __future__ import annotations

import typer

from qapress.digest.render import print_question, print_questions
from qapress.errors import NotFound, StorageError, ValidationError
from qapress.store import create_question, get_question, list_questions

from .common import _db, console

TAG_OPTION = typer.Option(None, "-t", "--tag", help="Tag name (repeatable).")


def post(
    title: str = typer.Argument(..., help="Question title"),
    body: str = typer.Argument(..., help="Question body (markdown)"),
    tag: list[str] = TAG_OPTION,
):
    """Create a question."""
    db = _db()
    try:
        question_id = create_question(db, title, body, tag or [])
    except ValidationError as e:
        console.print(f"[red]Invalid question[/red]: {e}")
        raise typer.Exit(code=1) from e
    except StorageError as e:
        console.print(f"[red]Could not save question[/red]: {e}")
        raise typer.Exit(code=1) from e
    console.print(f"Created question [bold]{question_id}[/bold].")


def show(
    question_id: int = typer.Argument(..., help="Question id"),
    html: bool = typer.Option(False, "--html", help="Show rendered HTML instead of the raw body."),
):
    """Show a question with its tags."""
    db = _db()
    try:
        question = get_question(db, question_id)
    except NotFound as e:
        console.print(f"[red]No such question[/red]: {question_id}")
        raise typer.Exit(code=1) from e
    print_question(question, show_html=html)


def list_():
    """List all questions, newest first."""
    db = _db()
    questions = list_questions(db)
    if not questions:
        console.print("No questions yet. Add one with: qapress post <title> <body>")
        raise typer.Exit(code=0)
    print_questions(questions)
