"""Question store.

Owns question rows and their tag associations. Every operation takes the
``DB`` handle explicitly and runs in its own session; ``create_question``
is one transaction, so a failure while linking tags rolls the question
back with it.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable

from loguru import logger

from qapress.db import DB, exec_, q1, qall, session
from qapress.errors import NotFound, StorageError, ValidationError
from qapress.render import render
from qapress.tags import clean_tag_names, resolve
from qapress.utils.time import now_utc_iso

# INTEGER PRIMARY KEY is a signed 64-bit value; larger ints cannot be bound.
SQLITE_MIN_ID = -(2**63)
SQLITE_MAX_ID = 2**63 - 1


@dataclass(frozen=True)
class Question:
    """A stored question together with its tag names.

    Attributes:
        id: Identifier assigned on creation, increasing with each insert.
        title: Non-empty title.
        body: Raw markdown body as submitted.
        html: Sanitized HTML rendered from ``body`` when it was written.
        created_at: ISO 8601 UTC creation timestamp.
        tags: Tag names ordered by tag id.
    """

    id: int
    title: str
    body: str
    html: str
    created_at: str
    tags: tuple[str, ...] = ()


def _require_text(field: str, value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value


def _link_tag(conn: sqlite3.Connection, question_id: int, tag_id: int) -> None:
    conn.execute(
        "INSERT INTO question_tags(question_id, tag_id) VALUES (?, ?) "
        "ON CONFLICT(question_id, tag_id) DO NOTHING",
        (question_id, tag_id),
    )


def create_question(
    db: DB,
    title: str,
    body: str,
    tag_names: Iterable[str] | None = None,
) -> int:
    """Persist a new question with its tags and return its id.

    The body is rendered to sanitized HTML, the question row is inserted
    with a server-assigned timestamp, and each distinct tag name (first-seen
    order) is resolved and linked. All of it commits together or not at all.

    Raises:
        ValidationError: title, body or a tag name is missing or blank.
        StorageError: the database rejected the write; nothing was persisted.
    """
    title = _require_text("title", title)
    body = _require_text("body", body)
    names = clean_tag_names(tag_names)
    html = render(body)

    try:
        with session(db) as conn:
            question_id = exec_(
                conn,
                "INSERT INTO questions(title, body, html, created_at) VALUES (?, ?, ?, ?)",
                (title, body, html, now_utc_iso()),
            )
            for name in names:
                _link_tag(conn, question_id, resolve(conn, name))
    except sqlite3.Error as e:
        logger.exception("Could not create question {!r}", title)
        raise StorageError("Could not create question") from e

    logger.info("Created question {} with {} tag(s)", question_id, len(names))
    return question_id


def _question_from_row(row: sqlite3.Row, tags: Iterable[str]) -> Question:
    return Question(
        id=int(row["id"]),
        title=str(row["title"]),
        body=str(row["body"]),
        html=str(row["html"]),
        created_at=str(row["created_at"]),
        tags=tuple(tags),
    )


def get_question(db: DB, question_id: int) -> Question:
    """Load one question with its tag names, ordered by tag id.

    Raises:
        NotFound: no question has ``question_id``, including ids outside
            the range SQLite can store.
    """
    if not SQLITE_MIN_ID <= int(question_id) <= SQLITE_MAX_ID:
        raise NotFound(question_id)
    with session(db) as conn:
        row = q1(
            conn,
            "SELECT id, title, body, html, created_at FROM questions WHERE id=?",
            (int(question_id),),
        )
        if row is None:
            raise NotFound(question_id)
        tag_rows = qall(
            conn,
            "SELECT t.name FROM tags t "
            "JOIN question_tags qt ON t.id = qt.tag_id "
            "WHERE qt.question_id=? ORDER BY t.id",
            (int(question_id),),
        )
    return _question_from_row(row, (str(r["name"]) for r in tag_rows))


LIST_SQL = """
SELECT q.id, q.title, q.body, q.html, q.created_at, t.name AS tag_name
FROM questions q
LEFT JOIN question_tags qt ON q.id = qt.question_id
LEFT JOIN tags t ON qt.tag_id = t.id
ORDER BY q.created_at DESC, q.id DESC, t.id ASC
"""


def list_questions(db: DB) -> list[Question]:
    """Return every question with its tags, newest first.

    The join fans out one row per tag; rows are folded back into exactly
    one ``Question`` per id. Ties on ``created_at`` go to the higher id.
    """
    with session(db) as conn:
        rows = qall(conn, LIST_SQL)

    out: list[Question] = []
    for _, group in groupby(rows, key=lambda r: int(r["id"])):
        group_rows = list(group)
        tags = [str(r["tag_name"]) for r in group_rows if r["tag_name"] is not None]
        out.append(_question_from_row(group_rows[0], tags))
    return out


def count_questions(db: DB) -> int:
    with session(db) as conn:
        row = q1(conn, "SELECT COUNT(*) AS cnt FROM questions")
    return int(row["cnt"] if row else 0)
