"""Markdown to sanitized HTML.

Bodies are converted with Python-Markdown and then cleaned with Bleach,
which drops every tag, attribute and URL scheme not on the allow lists
below. Script elements, event handler attributes, ``javascript:`` links and
embedded frames never survive. Cleaning already-clean HTML returns it
unchanged.
"""

from __future__ import annotations

import html
from typing import Iterable

import bleach
import markdown
from loguru import logger

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]
MAX_RENDER_PASSES = 4

# Tags produced by Markdown, plus attribute-free structural blocks.
ALLOWED_TAGS: Iterable[str] = frozenset(
    {
        "a",
        "abbr",
        "b",
        "blockquote",
        "br",
        "code",
        "div",
        "em",
        "figcaption",
        "figure",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "li",
        "ol",
        "p",
        "pre",
        "section",
        "span",
        "strong",
        "table",
        "tbody",
        "td",
        "th",
        "thead",
        "tr",
        "ul",
    }
)

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["src", "alt", "title"],
    "code": ["class"],
    "th": ["align"],
    "td": ["align"],
}

ALLOWED_PROTOCOLS = ["http", "https", "mailto"]


def sanitize(raw_html: str) -> str:
    """Strip script-capable markup from ``raw_html``, keeping formatting."""
    return bleach.clean(
        raw_html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )


def _to_html(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS, output_format="html")


def render(body: str) -> str:
    """Render a markdown ``body`` to sanitized HTML.

    Never raises on malformed markup: if conversion fails the body is
    escaped and wrapped in a paragraph instead.

    Stripping a disallowed block can leave bare text behind, which Markdown
    would wrap in a new paragraph on the next pass. The output is therefore
    re-rendered until it stops changing, so rendering it again is a no-op.
    """
    body = body or ""
    try:
        out = sanitize(_to_html(body))
        for _ in range(MAX_RENDER_PASSES):
            again = sanitize(_to_html(out))
            if again == out:
                break
            out = again
    except Exception:
        logger.warning("Markdown conversion failed; falling back to escaped text", exc_info=True)
        return sanitize("<p>" + html.escape(body) + "</p>")
    return out
