"""
Module: extractor.detection.markers

Purpose:
    Marker detection for quiz text - finds question numbers ("1.", "12)"),
    option bullets ("• (a)", "- B."), answer labels ("Answer:") and
    explanation labels ("Explanation:") in raw extracted text.

Key Functions:
    - match_marker(): Marker of a given kind starting exactly at a position
    - find_next_marker(): Earliest marker of the given kinds after a position
    - question_starts(): Positions where question blocks begin

Key Classes:
    - MarkerKind: QUESTION / OPTION / ANSWER / EXPLANATION
    - Marker: Immutable detected marker span

Dependencies:
    - re (std)

Used By:
    - extractor.classification: Rule predicates and span boundaries
    - extractor.chunking: Question block splitting
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from mcq_toolkit.common.thresholds import TEXT_THRESHOLDS


class MarkerKind(str, Enum):
    """Kind of marker token found in quiz text."""
    QUESTION = "question"
    OPTION = "option"
    ANSWER = "answer"
    EXPLANATION = "explanation"

    def __str__(self) -> str:
        return self.value


ALL_MARKER_KINDS = frozenset(MarkerKind)


@dataclass(frozen=True)
class Marker:
    """
    Detected marker span.

    Attributes:
        kind: What the marker introduces
        start: Index of the first marker character (may include indentation)
        end: Index just past the marker; content starts here
        letter: Option letter (upper case) when the marker names one
        number: Question number for QUESTION markers
    """
    kind: MarkerKind
    start: int
    end: int
    letter: Optional[str] = None
    number: Optional[int] = None


_DIGITS = TEXT_THRESHOLDS.max_question_number_digits

# Start of text or preceded by whitespace
_BOUNDARY = r"(?:^|(?<=\s))"

_ROUND_BULLET = r"[•●○◦▪■▸►]"
_LINE_BULLET = r"[-–*]"  # Only a bullet at line start or before a letter


def _letter(paren_group: str, dot_group: str) -> str:
    """Letter token "(a)", "a)" or "a." followed by whitespace or end."""
    return (
        rf"(?:(?:\((?P<{paren_group}>[A-Da-d])\)|(?P<{dot_group}>[A-Da-d])[.)])(?=\s|$))"
    )


QUESTION_RE = re.compile(
    rf"{_BOUNDARY}(?P<number>\d{{1,{_DIGITS}}})[.)](?=\s)",
    re.MULTILINE,
)

OPTION_RE = re.compile(
    rf"^[ \t]*{_LINE_BULLET}[ \t]+{_letter('l1', 'l2')}?"
    rf"|{_BOUNDARY}{_ROUND_BULLET}\s*{_letter('l3', 'l4')}?"
    rf"|(?<=\s){_LINE_BULLET}\s*{_letter('l5', 'l6')}",
    re.MULTILINE,
)

# Accepted in addition to OPTION_RE when options need no bullet
LENIENT_OPTION_RE = re.compile(
    rf"^[ \t]*{_letter('l1', 'l2')}"
    r"|(?<=\s)\((?P<l3>[A-Da-d])\)(?=\s)",
    re.MULTILINE,
)

ANSWER_RE = re.compile(
    rf"{_BOUNDARY}(?:correct\s+answer|answer|ans|correct|solution)\s*:",
    re.MULTILINE | re.IGNORECASE,
)

EXPLANATION_RE = re.compile(
    rf"{_BOUNDARY}(?:explanation|because|reason|solution)\s*:",
    re.MULTILINE | re.IGNORECASE,
)


_SENTENCE_END = ".?!:;"
_BODY_KINDS = (MarkerKind.OPTION, MarkerKind.ANSWER, MarkerKind.EXPLANATION)


def _option_patterns(lenient: bool) -> List[re.Pattern[str]]:
    return [OPTION_RE, LENIENT_OPTION_RE] if lenient else [OPTION_RE]


def _patterns_for(kind: MarkerKind, lenient: bool) -> List[re.Pattern[str]]:
    if kind is MarkerKind.OPTION:
        return _option_patterns(lenient)
    if kind is MarkerKind.ANSWER:
        return [ANSWER_RE]
    return [EXPLANATION_RE]


@lru_cache(maxsize=64)
def _question_markers(text: str, lenient: bool) -> Tuple[Marker, ...]:
    """
    Question number tokens in text that actually start a question.

    A "<n>." token only counts when
    - some stem text follows it before the next marker,
    - it does not open an option, answer or explanation body ("• 6."), and
    - inside a question stem, it sits at line start or after sentence-ending
      punctuation ("costs 5. Then" stays in the stem).
    """
    others = sorted(
        (match.start(), match.end(), kind)
        for kind in _BODY_KINDS
        for pattern in _patterns_for(kind, lenient)
        for match in pattern.finditer(text)
        if match.end() > match.start()
    )

    accepted: List[Marker] = []
    last_kind: Optional[MarkerKind] = None
    last_end = 0
    index = 0
    for match in QUESTION_RE.finditer(text):
        start, end = match.start(), match.end()
        while index < len(others) and others[index][0] < start:
            last_end, last_kind = others[index][1], others[index][2]
            index += 1

        following = next((other[0] for other in others[index:] if other[0] >= end), len(text))
        if not text[end:following].strip():
            continue
        if last_kind in _BODY_KINDS and not text[last_end:start].strip():
            continue
        before = text[:start].rstrip(" \t")
        if (
            last_kind is MarkerKind.QUESTION
            and before
            and before[-1] not in "\r\n"
            and before[-1] not in _SENTENCE_END
        ):
            continue

        accepted.append(_to_marker(MarkerKind.QUESTION, match))
        last_kind, last_end = MarkerKind.QUESTION, end
    return tuple(accepted)


def _to_marker(kind: MarkerKind, match: re.Match[str]) -> Marker:
    letter = None
    number = None
    for name, value in match.groupdict().items():
        if value is None:
            continue
        if name == "number":
            number = int(value)
        elif name.startswith("l"):
            letter = value.upper()
    return Marker(kind=kind, start=match.start(), end=match.end(), letter=letter, number=number)


def match_marker(
    text: str,
    kind: MarkerKind,
    pos: int = 0,
    *,
    lenient: bool = False,
) -> Optional[Marker]:
    """
    Match a marker of the given kind starting exactly at pos.

    Leading whitespace at pos is skipped first.

    Args:
        text: Chunk text
        kind: Marker kind to test
        pos: Position to test at
        lenient: Accept bullet-less option letters

    Returns:
        Marker or None

    Example:
        >>> match_marker("• (b) 4", MarkerKind.OPTION).letter
        'B'
    """
    start = pos
    while start < len(text) and text[start].isspace():
        start += 1
    if kind is MarkerKind.QUESTION:
        for marker in _question_markers(text, lenient):
            if marker.start in (pos, start):
                return marker
        return None
    for pattern in _patterns_for(kind, lenient):
        # Indentation belongs to line-start bullets, so try both positions
        for candidate in dict.fromkeys((pos, start)):
            match = pattern.match(text, candidate)
            if match and match.end() > candidate:
                return _to_marker(kind, match)
    return None


def find_next_marker(
    text: str,
    pos: int,
    kinds: Iterable[MarkerKind] = ALL_MARKER_KINDS,
    *,
    lenient: bool = False,
) -> Optional[Marker]:
    """
    Find the earliest marker of the given kinds starting at or after pos.

    Args:
        text: Chunk text
        pos: Search start
        kinds: Marker kinds that count
        lenient: Accept bullet-less option letters

    Returns:
        Earliest Marker, or None if there is none
    """
    best: Optional[Marker] = None
    wanted = set(kinds)
    for kind in MarkerKind:
        if kind not in wanted:
            continue
        if kind is MarkerKind.QUESTION:
            marker = next((m for m in _question_markers(text, lenient) if m.start >= pos), None)
            if marker is not None and (best is None or marker.start < best.start):
                best = marker
            continue
        for pattern in _patterns_for(kind, lenient):
            for match in pattern.finditer(text, pos):
                if match.end() == match.start():
                    continue
                if best is None or match.start() < best.start:
                    best = _to_marker(kind, match)
                break
    return best


def question_starts(text: str, *, lenient: bool = False) -> List[int]:
    """
    Return positions where a question begins.

    Number tokens that open an option or answer body, or that end a
    sentence inside a stem, are not question starts.

    Example:
        >>> question_starts("1. First? 2) Second?")
        [0, 10]
        >>> question_starts("1. Legs on a spider? • 6. • 8.")
        [0]
    """
    return [marker.start for marker in _question_markers(text, lenient)]
