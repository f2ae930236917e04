from __future__ import annotations

import typer
import uvicorn
from loguru import logger

from qapress.api import create_app
from qapress.logs import configure_logging
from qapress.seed import seed_if_empty

from . import common
from .common import _db, console


def init():
    """Create the database schema."""
    settings = common.load_settings()
    _db()
    console.print(f"Database ready at [bold]{settings.db_path}[/bold]")


def seed():
    """Insert the seed questions into an empty database."""
    db = _db()
    inserted = seed_if_empty(db)
    if inserted:
        console.print(f"Inserted seed questions: [bold]{inserted}[/bold]")
    else:
        console.print("[yellow]Database already has questions; nothing seeded.[/yellow]")


def serve(
    host: str | None = typer.Option(None, help="Bind address (default from settings)."),
    port: int | None = typer.Option(None, help="Port (default from settings)."),
    no_seed: bool = typer.Option(False, "--no-seed", help="Do not seed an empty database."),
):
    """Run the HTTP API."""
    settings = common.load_settings()
    configure_logging(settings)
    db = _db()
    if settings.seed_on_start and not no_seed:
        seed_if_empty(db)
    bind_host = host or settings.host
    bind_port = int(port or settings.port)
    logger.info("Listening on http://{}:{}", bind_host, bind_port)
    uvicorn.run(create_app(db), host=bind_host, port=bind_port, log_config=None)
