from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from qapress.store import Question
from qapress.utils.time import format_local

console = Console()


def print_questions(questions: list[Question]) -> None:
    """Print a table of questions.

    Args:
        questions: Questions in display order, usually newest first as
            returned by ``list_questions``.

    Shows id, creation time, title and the question's tags joined by
    commas. Values are escaped so user text is never read as rich markup.
    """
    t = Table(title="Questions")
    t.add_column("id", justify="right")
    t.add_column("created")
    t.add_column("title")
    t.add_column("tags")
    for q in questions:
        t.add_row(
            str(q.id),
            format_local(q.created_at),
            escape(q.title),
            escape(", ".join(q.tags)),
        )
    console.print(t)


def print_question(question: Question, *, show_html: bool = False) -> None:
    """Print a single question with its tags and body."""
    console.print(f"[bold]#{question.id}[/bold] {escape(question.title)}")
    console.print(f"[dim]{format_local(question.created_at)}[/dim]")
    if question.tags:
        console.print("tags: " + ", ".join(f"[cyan]{escape(tag)}[/cyan]" for tag in question.tags))
    else:
        console.print("tags: [dim](none)[/dim]")
    console.print()
    console.print(escape(question.html if show_html else question.body))
