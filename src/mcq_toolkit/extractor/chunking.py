"""
Module: extractor.chunking

Purpose:
    Splits raw page text into chunks for classification. Two strategies:
    question blocks (cut before every question number token) and lines
    (every non-blank line is a chunk).

Key Functions:
    - split_chunks(): Dispatch on SplitStrategy
    - split_question_blocks(): Strategy QUESTION_BLOCKS
    - split_lines(): Strategy LINES

Dependencies:
    - extractor.detection.markers: Question number detection

Used By:
    - extractor.classification.classify_text
"""

from __future__ import annotations

import re
from typing import List

from .config import SplitStrategy
from .detection.markers import question_starts

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_question_blocks(text: str, *, lenient: bool = False) -> List[str]:
    """
    Split text before every question number token.

    Text ahead of the first question number (page headers, instructions)
    becomes its own leading chunk. Blank chunks are dropped.

    Args:
        text: Raw page text
        lenient: Count bullet-less option letters as markers

    Returns:
        Chunks in input order

    Example:
        >>> split_question_blocks("Quiz 1. A? • x 2. B? • y")
        ['Quiz ', '1. A? • x ', '2. B? • y']
    """
    cuts = [pos for pos in question_starts(text, lenient=lenient) if pos > 0]
    bounds = [0, *cuts, len(text)]
    chunks = [text[start:end] for start, end in zip(bounds, bounds[1:])]
    return [chunk for chunk in chunks if chunk.strip()]


def split_lines(text: str) -> List[str]:
    """
    Split text on line breaks, dropping blank lines.

    Example:
        >>> split_lines("1. A?\\n\\n(a) x\\n")
        ['1. A?', '(a) x']
    """
    return [line for line in _LINE_BREAK_RE.split(text) if line.strip()]


def split_chunks(text: str, strategy: SplitStrategy, *, lenient: bool = False) -> List[str]:
    """
    Split text into classification chunks using the given strategy.

    Args:
        text: Raw page text
        strategy: QUESTION_BLOCKS or LINES
        lenient: Count bullet-less option letters as markers

    Returns:
        Non-blank chunks in input order
    """
    if strategy is SplitStrategy.LINES:
        return split_lines(text)
    return split_question_blocks(text, lenient=lenient)
