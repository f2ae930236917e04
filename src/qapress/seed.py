from __future__ import annotations

from loguru import logger

from qapress.db import DB
from qapress.store import count_questions, create_question

SEED_QUESTIONS: list[dict] = [
    {
        "title": "Can a person rely on the Bible for morality?",
        "body": "Discussion about morality from the Bible.",
        "tags": ["Morality", "Bible", "Theology"],
    },
    {
        "title": "Do spiritual entities exist in rivers, mountains, trees, fjords, and lakes?",
        "body": "Discussion about spirits in nature.",
        "tags": ["Theology", "Spirits", "Nature"],
    },
    {
        "title": "Did the God of Moses create the Universe?",
        "body": "Exploring creation in the Bible.",
        "tags": ["Bible", "Theology", "Creation"],
    },
    {
        "title": "Did God demand Abraham to sacrifice his son?",
        "body": "Ethics in Abraham's story.",
        "tags": ["Bible", "Theology", "Ethics"],
    },
    {
        "title": "Can the Creator of the Universe be jealous?",
        "body": "God's attributes discussion.",
        "tags": ["Bible", "Theology", "Attributes"],
    },
    {
        "title": "If God gave humans free will, why are we punished for our choices?",
        "body": "Free will and consequences.",
        "tags": ["Theology", "Ethics", "Free Will"],
    },
    {
        "title": "Logic behind giving land occupied by people to another group",
        "body": "Discussion on biblical land promises.",
        "tags": ["Bible", "Theology", "Ethics", "History"],
    },
    {
        "title": "If God spared Abraham's son, why not Jephtah's daughter?",
        "body": "Ethical questions in biblical stories.",
        "tags": ["Bible", "Theology", "Ethics"],
    },
    {
        "title": "God instructs King Saul to kill the Amalekites, aren't they His creation?",
        "body": "Ethics and war in the Bible.",
        "tags": ["Bible", "Theology", "Ethics", "Warfare"],
    },
    {
        "title": "God appears to Abram as El, Exodus 6:3; but did not know him as Yahweh – which one is God?",
        "body": "Names of God discussion.",
        "tags": ["Bible", "Theology", "Names of God"],
    },
    {
        "title": "God instructs Israelites to rape female captives – Deuteronomy 21:10",
        "body": "Controversial ethical instructions in the Bible.",
        "tags": ["Bible", "Ethics", "Controversial"],
    },
    {
        "title": "Is evolution supported in the Bible?",
        "body": "Bible and evolution discussion.",
        "tags": ["Bible", "Theology", "Science", "Evolution"],
    },
]


def seed_if_empty(db: DB) -> int:
    """Insert ``SEED_QUESTIONS`` when the database holds no questions.

    Seeds go through ``create_question`` like any user post. Returns the
    number of questions inserted (0 when the database was not empty).
    """
    if count_questions(db) > 0:
        return 0
    logger.info("Database empty; inserting {} seed questions", len(SEED_QUESTIONS))
    for q in SEED_QUESTIONS:
        create_question(db, q["title"], q["body"], q["tags"])
    return len(SEED_QUESTIONS)
