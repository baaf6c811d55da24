"""
Module: extractor.classification

Purpose:
    Rule-based fragment classification. Turns raw extracted text into an
    ordered sequence of Fragments tagged Question / Option / Answer /
    Explanation / Plain.

Key Functions:
    - classify_text(): Main entry point, raw text -> fragments
    - classify_chunk(): Role/text pairs for one chunk
    - build_rules(): The ordered rule list

Key Classes:
    - ClassificationRule: One (predicate, extractor) pair
    - RuleMatch: What a rule consumed from the remaining text

Algorithm:
    1. Split the text into chunks (extractor.chunking).
    2. Walk each chunk left to right. At every position the rules are
       tried in priority order (Question, Option, Answer, Explanation,
       Plain); the first whose predicate matches extracts a span and the
       walk continues after it, so no text is classified twice.
    3. Spans end at the next marker the rule stops at. Plain spans
       no longer than the threshold, or entirely upper case, are dropped.
    4. source_order is a running counter over the whole input. Options
       without an explicit letter get A-D by position after the most
       recent Question.

Dependencies:
    - extractor.detection.markers: Marker patterns
    - extractor.chunking: Chunk splitting
    - core.models: Fragment, FragmentRole, OptionLetter
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Tuple

from mcq_toolkit.core.models.fragments import Fragment, FragmentRole
from mcq_toolkit.core.models.questions import OPTION_COUNT, OptionLetter

from .chunking import split_chunks
from .config import ClassifierConfig
from .detection.markers import (
    ALL_MARKER_KINDS,
    Marker,
    MarkerKind,
    find_next_marker,
    match_marker,
)
from .utils.text import is_header_like, normalize_whitespace

logger = logging.getLogger(__name__)

# (role, text, letter) produced for one chunk before orders are assigned
ChunkItem = Tuple[FragmentRole, str, Optional[str]]


@dataclass(frozen=True)
class RuleMatch:
    """
    Result of applying a rule at a position.

    Attributes:
        end: Index just past the consumed span
        text: Normalised fragment text, None when the span is dropped
        letter: Option letter captured from the marker
    """
    end: int
    text: Optional[str]
    letter: Optional[str] = None


# predicate(text, pos, config) -> marker found at pos, or None
Predicate = Callable[[str, int, ClassifierConfig], Optional[Marker]]
# extractor(text, pos, marker, config) -> consumed span
Extractor = Callable[[str, int, Optional[Marker], ClassifierConfig], RuleMatch]


@dataclass(frozen=True)
class ClassificationRule:
    """
    One classification rule: a predicate and an extractor.

    Attributes:
        name: Rule name for logging
        role: Role given to the extracted fragment
        predicate: Returns the marker the rule starts at, or None
        extractor: Consumes the span the rule claims
        fallback: Applies whenever no earlier rule matched
    """
    name: str
    role: FragmentRole
    predicate: Predicate
    extractor: Extractor
    fallback: bool = False

    def applies(self, text: str, pos: int, config: ClassifierConfig) -> Tuple[bool, Optional[Marker]]:
        """Evaluate the predicate at pos."""
        marker = self.predicate(text, pos, config)
        return (marker is not None or self.fallback), marker


# ─────────────────────────────────────────────────────────────────────────────
# Rule building blocks
# ─────────────────────────────────────────────────────────────────────────────

def _marker_predicate(kind: MarkerKind):
    def predicate(text: str, pos: int, config: ClassifierConfig) -> Optional[Marker]:
        return match_marker(text, kind, pos, lenient=bool(config.lenient_option_letters))
    predicate.__name__ = f"starts_with_{kind.value}_marker"
    return predicate


def _span_end(text: str, start: int, stops: FrozenSet[MarkerKind], config: ClassifierConfig) -> int:
    following = find_next_marker(
        text, start, stops, lenient=bool(config.lenient_option_letters)
    )
    return following.start if following else len(text)


def _marker_extractor(stops: FrozenSet[MarkerKind]):
    def extractor(text: str, pos: int, marker: Marker, config: ClassifierConfig) -> RuleMatch:
        end = _span_end(text, marker.end, stops, config)
        content = normalize_whitespace(text[marker.end:end])
        return RuleMatch(end=end, text=content or None, letter=marker.letter)
    return extractor


def _no_marker(text: str, pos: int, config: ClassifierConfig) -> Optional[Marker]:
    # Plain text has no marker of its own
    return None


def _plain_extractor(
    text: str, pos: int, marker: Optional[Marker], config: ClassifierConfig
) -> RuleMatch:
    end = _span_end(text, pos, ALL_MARKER_KINDS, config)
    if end <= pos:
        # A marker sits at pos that no rule accepted; skip one character
        end = pos + 1
    content = normalize_whitespace(text[pos:end])
    if len(content) <= config.min_plain_length or is_header_like(content):
        if content:
            logger.debug(f"Dropped unmatched text {content!r}")
        return RuleMatch(end=end, text=None)
    return RuleMatch(end=end, text=content)


_QUESTION_STOPS = frozenset(
    {MarkerKind.QUESTION, MarkerKind.OPTION, MarkerKind.ANSWER, MarkerKind.EXPLANATION}
)
_OPTION_STOPS = ALL_MARKER_KINDS
_ANSWER_STOPS = frozenset({MarkerKind.QUESTION, MarkerKind.EXPLANATION})
_EXPLANATION_STOPS = frozenset({MarkerKind.QUESTION, MarkerKind.ANSWER})


def build_rules() -> Tuple[ClassificationRule, ...]:
    """
    Return the classification rules in priority order.

    First match wins at every position. Plain is last and always applies.
    """
    return (
        ClassificationRule(
            name="question",
            role=FragmentRole.QUESTION,
            predicate=_marker_predicate(MarkerKind.QUESTION),
            extractor=_marker_extractor(_QUESTION_STOPS),
        ),
        ClassificationRule(
            name="option",
            role=FragmentRole.OPTION,
            predicate=_marker_predicate(MarkerKind.OPTION),
            extractor=_marker_extractor(_OPTION_STOPS),
        ),
        ClassificationRule(
            name="answer",
            role=FragmentRole.ANSWER,
            predicate=_marker_predicate(MarkerKind.ANSWER),
            extractor=_marker_extractor(_ANSWER_STOPS),
        ),
        ClassificationRule(
            name="explanation",
            role=FragmentRole.EXPLANATION,
            predicate=_marker_predicate(MarkerKind.EXPLANATION),
            extractor=_marker_extractor(_EXPLANATION_STOPS),
        ),
        ClassificationRule(
            name="plain",
            role=FragmentRole.PLAIN,
            predicate=_no_marker,
            extractor=_plain_extractor,
            fallback=True,
        ),
    )


RULES = build_rules()


# ─────────────────────────────────────────────────────────────────────────────
# Classification
# ─────────────────────────────────────────────────────────────────────────────

def classify_chunk(
    chunk: str,
    config: Optional[ClassifierConfig] = None,
    rules: Tuple[ClassificationRule, ...] = RULES,
) -> List[ChunkItem]:
    """
    Classify one chunk into (role, text, letter) items.

    Args:
        chunk: Raw chunk text
        config: Classifier configuration
        rules: Rules in priority order; one should be a fallback

    Returns:
        Items in chunk order. Dropped spans are omitted.

    Example:
        >>> classify_chunk("• (b) 4 Answer: b")
        [(<FragmentRole.OPTION: 'option'>, '4', 'B'), (<FragmentRole.ANSWER: 'answer'>, 'b', None)]
    """
    config = config or ClassifierConfig()
    items: List[ChunkItem] = []
    pos = 0
    while pos < len(chunk):
        if not chunk[pos:].strip():
            break
        for rule in rules:
            applies, marker = rule.applies(chunk, pos, config)
            if not applies:
                continue
            result = rule.extractor(chunk, pos, marker, config)
            if result.text is not None:
                items.append((rule.role, result.text, result.letter))
            pos = max(result.end, pos + 1)
            break
        else:
            pos += 1
    return items


def classify_text(
    text: str,
    config: Optional[ClassifierConfig] = None,
    *,
    start_order: int = 0,
) -> List[Fragment]:
    """
    Classify raw text into an ordered fragment sequence.

    Deterministic: identical text and config always give an identical
    sequence. Never raises for malformed text; the worst case is an
    empty list.

    Args:
        text: Raw text of one page or logical unit
        config: Classifier configuration (default: question blocks)
        start_order: source_order of the first emitted fragment, so a
            caller can keep a running counter across pages

    Returns:
        Fragments in input order

    Example:
        >>> frags = classify_text("1. What is 2+2? • (a) 3 • (b) 4 • (c) 5 • (d) 6 Answer: b")
        >>> [(f.role.value, f.text) for f in frags][:2]
        [('question', 'What is 2+2?'), ('option', '3')]
    """
    config = config or ClassifierConfig()
    fragments: List[Fragment] = []
    order = start_order
    options_since_question = 0

    chunks = split_chunks(
        text or "", config.strategy, lenient=bool(config.lenient_option_letters)
    )
    for chunk in chunks:
        for role, content, letter in classify_chunk(chunk, config):
            option_letter = None
            if role is FragmentRole.QUESTION:
                options_since_question = 0
            elif role is FragmentRole.OPTION:
                if letter is not None:
                    option_letter = OptionLetter.coerce(letter)
                elif options_since_question < OPTION_COUNT:
                    option_letter = OptionLetter.from_index(options_since_question)
                options_since_question += 1
            fragments.append(Fragment.create(role, content, order, letter=option_letter))
            order += 1

    logger.debug(
        f"Classified {len(chunks)} chunk(s) into {len(fragments)} fragment(s) "
        f"using {config.strategy} strategy"
    )
    return fragments
