"""Database module for qapress.

This module provides database functionality using SQLite to store:
- Questions: title, raw markdown body, sanitized HTML and creation time
- Tags: uniquely named labels, created lazily on first use
- Question tags: the many-to-many link between questions and tags

The schema leans on the storage layer for its invariants: tag names are
UNIQUE, each (question, tag) pair is a composite primary key, and
associations cascade away with their question. Foreign keys are enabled
on every connection.

Every operation opens its own connection through ``session``; nothing is
cached in-process, so independent callers always read the committed state.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator

from loguru import logger

BUSY_TIMEOUT_SECONDS = 30.0

SCHEMA_SQL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS questions (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  title TEXT NOT NULL,
  body TEXT NOT NULL,
  html TEXT NOT NULL,
  created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_questions_created_at ON questions(created_at, id);

CREATE TABLE IF NOT EXISTS tags (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL UNIQUE
);

CREATE TABLE IF NOT EXISTS question_tags (
  question_id INTEGER NOT NULL,
  tag_id INTEGER NOT NULL,
  PRIMARY KEY (question_id, tag_id),
  FOREIGN KEY(question_id) REFERENCES questions(id) ON DELETE CASCADE,
  FOREIGN KEY(tag_id) REFERENCES tags(id)
);

CREATE INDEX IF NOT EXISTS idx_question_tags_tag_id ON question_tags(tag_id);
"""


@dataclass(frozen=True)
class DB:
    """Handle to a qapress database.

    Built once at process start and passed into every store operation.

    Attributes:
        path: File system path to the SQLite database file.
    """
    path: str


def connect(db: DB) -> sqlite3.Connection:
    """Open a connection to the SQLite database.

    The connection uses ``sqlite3.Row`` rows, enforces foreign keys and
    starts write transactions with ``BEGIN IMMEDIATE`` so that concurrent
    writers queue on the database lock (up to ``BUSY_TIMEOUT_SECONDS``)
    instead of failing on a stale snapshot.

    Note:
        The connection is not automatically committed. Caller must commit
        or use the session context manager for automatic commit/rollback.
    """
    conn = sqlite3.connect(
        db.path,
        timeout=BUSY_TIMEOUT_SECONDS,
        isolation_level="IMMEDIATE",
    )
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def init_db(db: DB) -> None:
    """Create all tables and indexes.

    Creates parent directories if needed. Idempotent: the schema only uses
    IF NOT EXISTS clauses.
    """
    Path(db.path).parent.mkdir(parents=True, exist_ok=True)
    conn = connect(db)
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()
    logger.debug("Database schema ensured at {}", db.path)


@contextmanager
def session(db: DB) -> Iterator[sqlite3.Connection]:
    """Context manager for one unit of work.

    Commits when the block exits normally and rolls back when it raises,
    so a failed block leaves no partial writes behind.

    Example:
        >>> with session(db) as conn:
        ...     exec_(conn, "INSERT INTO tags(name) VALUES (?)", ["Bible"])
    """
    conn = connect(db)
    try:
        yield conn
        conn.commit()
    except BaseException:
        conn.rollback()
        raise
    finally:
        conn.close()


def q1(conn: sqlite3.Connection, sql: str, params: Iterable[Any] = ()) -> sqlite3.Row | None:
    """Execute a query and return the first row, or None."""
    cur = conn.execute(sql, tuple(params))
    return cur.fetchone()


def qall(conn: sqlite3.Connection, sql: str, params: Iterable[Any] = ()) -> list[sqlite3.Row]:
    """Execute a query and return all matching rows."""
    cur = conn.execute(sql, tuple(params))
    return cur.fetchall()


def exec_(conn: sqlite3.Connection, sql: str, params: Iterable[Any] = ()) -> int:
    """Execute an INSERT or UPDATE statement and return the last row id.

    For INSERT statements into AUTOINCREMENT tables this is the id of the
    new row.
    """
    cur = conn.execute(sql, tuple(params))
    return int(cur.lastrowid or 0)
