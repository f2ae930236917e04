"""
HTTP boundary for qapress.

Translates JSON requests into store calls and store errors into status
codes. Tag collections are joined into a comma-separated string only here,
for the list route.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel

from . import __version__
from .db import DB, init_db
from .errors import NotFound, ValidationError
from .store import Question, create_question, get_question, list_questions

router = APIRouter(prefix="/api")


class PostQuestion(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None
    tags: Optional[List[str]] = None


def get_db(request: Request) -> DB:
    """Return the database handle the app was built with."""
    return request.app.state.db


def question_summary(question: Question) -> Dict[str, Any]:
    """Shape a question for the list route (tags comma-joined)."""
    return {
        "id": question.id,
        "title": question.title,
        "body": question.body,
        "html": question.html,
        "created_at": question.created_at,
        "tags": ",".join(question.tags),
    }


def question_detail(question: Question) -> Dict[str, Any]:
    """Shape a question for the single-question route (tags as a list)."""
    return {
        "id": question.id,
        "title": question.title,
        "body": question.body,
        "html": question.html,
        "created_at": question.created_at,
        "tags": list(question.tags),
    }


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/questions")
def get_questions(db: DB = Depends(get_db)):
    """List all questions, newest first."""
    try:
        questions = list_questions(db)
    except Exception:
        logger.exception("Error listing questions")
        return _error(500, "Server error")
    return [question_summary(q) for q in questions]


@router.get("/question/{question_id}")
def get_one_question(question_id: str, db: DB = Depends(get_db)):
    """Fetch one question with its tags.

    Any id that does not name a stored question, numeric or not, is a 404.
    """
    try:
        return question_detail(get_question(db, int(question_id)))
    except (NotFound, ValueError):
        logger.debug("Question {} requested but not found", question_id)
        return _error(404, "Question not found")


@router.post("/post")
def post_question(payload: PostQuestion, db: DB = Depends(get_db)):
    """Create a question. Not idempotent: a retry creates a second question."""
    try:
        question_id = create_question(db, payload.title, payload.body, payload.tags or [])
    except ValidationError as e:
        logger.info("Rejected question: {}", e)
        return _error(400, str(e))
    except Exception:
        logger.exception("Error creating question")
        return _error(500, "Server error")
    return {"success": True, "id": question_id}


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Malformed request to {}: {}", request.url.path, exc.errors())
    return _error(400, "Invalid request")


def create_app(db: DB) -> FastAPI:
    """Build the application around an explicit database handle.

    The schema is ensured up front so the routes can assume the tables exist.
    """
    init_db(db)
    app = FastAPI(
        title="qapress",
        description="Questions with tags and sanitized markdown",
        version=__version__,
    )
    app.state.db = db
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.include_router(router)
    return app
