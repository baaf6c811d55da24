"""
Module: extractor.utils.text

Purpose:
    Text normalisation helpers for extracted PDF text.

Key Functions:
    - normalize_whitespace(): Collapse whitespace runs and trim
    - is_header_like(): All-caps heuristic used to drop titles

Used By:
    - extractor.classification: Normalises every fragment text
"""

from __future__ import annotations

import re

# Soft hyphen, zero-width space/joiners, byte order mark
_INVISIBLE_RE = re.compile("[\u00ad\u200b\u200c\u200d\ufeff]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """
    Collapse whitespace runs to single spaces and trim.

    Invisible characters PDF text layers often carry are removed first.

    Example:
        >>> normalize_whitespace("  What is\\n 2+2?\\u00ad ")
        'What is 2+2?'
    """
    text = _INVISIBLE_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def is_header_like(text: str) -> bool:
    """
    Check whether text is entirely upper case (titles, running headers).

    Text without any cased characters is not header-like.

    Example:
        >>> is_header_like("CHAPTER 3 REVIEW QUESTIONS")
        True
        >>> is_header_like("Read each question carefully.")
        False
    """
    return text.isupper()
