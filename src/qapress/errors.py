"""Error kinds raised by the qapress core.

``ValidationError`` and ``NotFound`` are meant to be recovered at the
boundary and shown to the caller. ``StorageError`` aborts the current unit
of work; its detail is logged but not returned to clients.
``ConflictError`` is internal to tag resolution.
"""

from __future__ import annotations


class QAPressError(Exception):
    """Base class for all qapress errors."""


class ValidationError(QAPressError):
    """A required field is missing, empty or malformed."""


class NotFound(QAPressError):
    """No question exists with the requested identifier."""

    def __init__(self, question_id: int):
        super().__init__(f"Question not found: {question_id}")
        self.question_id = question_id


class ConflictError(QAPressError):
    """A tag insert lost a race against another writer for the same name."""

    def __init__(self, name: str):
        super().__init__(f"Tag already exists: {name!r}")
        self.name = name


class StorageError(QAPressError):
    """The database was unavailable or a transaction failed."""
