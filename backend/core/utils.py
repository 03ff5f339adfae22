"""Shared utility functions"""
import re
from datetime import datetime

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def serialize_doc(doc: dict) -> dict:
    """Serialize a single MongoDB document for JSON response"""
    if doc is None:
        return None
    result = {k: v for k, v in doc.items() if k != '_id'}
    for key, value in result.items():
        if isinstance(value, datetime):
            result[key] = value.isoformat()
    return result


def serialize_docs(docs: list) -> list:
    """Serialize a list of MongoDB documents"""
    return [serialize_doc(doc) for doc in docs]


def normalize_faq_question(question: str) -> str:
    """
    Normalize an FAQ question for duplicate detection.
    Lowercases, strips punctuation and collapses whitespace, so
    "What are your hours?" and "what ARE your  hours" compare equal.
    """
    text = _NON_WORD_RE.sub("", (question or "").lower())
    return _WHITESPACE_RE.sub(" ", text).strip()
