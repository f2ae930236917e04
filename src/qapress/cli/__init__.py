from __future__ import annotations

import typer

from .common import _db, console, load_settings  # noqa: F401
from .questions import list_, post, show
from .server import init, seed, serve

app = typer.Typer(
    add_completion=False, help="qapress: publish questions with tags and sanitized markdown."
)

app.command()(init)
app.command()(seed)
app.command()(serve)
app.command()(post)
app.command()(show)
app.command("list")(list_)

__all__ = ["app", "_db", "console", "load_settings"]
