from __future__ import annotations

import sqlite3
from typing import Iterable

from loguru import logger

from qapress.db import exec_, q1
from qapress.errors import ConflictError, StorageError, ValidationError


def clean_tag_names(names: Iterable[str] | None) -> list[str]:
    """Validate tag names and drop repeats, keeping first-seen order.

    Names are kept exactly as supplied: matching is case-sensitive and no
    trimming is applied. Blank or whitespace-only names raise
    ``ValidationError``.
    """
    out: list[str] = []
    seen = set()
    for name in names or []:
        if not isinstance(name, str):
            raise ValidationError(f"Tag names must be text, got {type(name).__name__}")
        if not name.strip():
            raise ValidationError("Tag names must not be blank")
        if name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out


def find_tag_id(conn: sqlite3.Connection, name: str) -> int | None:
    row = q1(conn, "SELECT id FROM tags WHERE name=?", (name,))
    return int(row["id"]) if row else None


def _insert_tag(conn: sqlite3.Connection, name: str) -> int:
    try:
        return exec_(conn, "INSERT INTO tags(name) VALUES (?)", (name,))
    except sqlite3.IntegrityError as e:
        raise ConflictError(name) from e


def resolve(conn: sqlite3.Connection, name: str) -> int:
    """Return the id of the tag called ``name``, creating it if needed.

    Insert and lookup form one idempotent step: when the UNIQUE constraint
    on ``tags.name`` rejects the insert because another writer created the
    same name first, the existing row is looked up and its id returned.
    At most one row per name can ever exist.

    Raises:
        ValidationError: ``name`` is blank.
        StorageError: the conflicting row could not be found afterwards.
    """
    clean_tag_names([name])
    tag_id = find_tag_id(conn, name)
    if tag_id is not None:
        return tag_id
    try:
        tag_id = _insert_tag(conn, name)
        logger.info("Created tag {!r} (id={})", name, tag_id)
        return tag_id
    except ConflictError:
        logger.debug("Tag {!r} was created concurrently; reusing it", name)
    tag_id = find_tag_id(conn, name)
    if tag_id is None:
        raise StorageError(f"Tag {name!r} conflicted on insert but could not be found")
    return tag_id
