"""
Module: questions

Purpose:
    Provides the question-side data model: the mutable QuestionDraft being
    assembled, the immutable QuestionRecord it is frozen into on commit,
    and the ExportSet handed to serialization. Also defines OptionLetter
    (the A-D option slots) and TransferTarget (where a fragment is sent).

Key Classes:
    - OptionLetter: A/B/C/D option slot, with coerce() and parse() helpers
    - TransferTarget: Stem or Option(letter) destination for a fragment
    - QuestionDraft: The single in-progress question (mutable)
    - QuestionRecord: Committed snapshot of a draft (immutable)
    - ExportSet: Ordered records produced by an export

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.fragments.Fragment (letter metadata)
    - core.schemas.validator (committability checks)
    - core.utils.serialization (questions.json format)
    - assembly.session.AssemblySession
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

OPTION_COUNT = 4

# "b", "(B)", "B.", "option c", "Answer is D", "2"
_ANSWER_LETTER_RE = re.compile(
    r"^\s*(?:(?:option|choice|answer(?:\s+is)?)\s*)?[\(\[]?\s*([A-Da-d1-4])\s*[\)\]\.]?\s*$",
    re.IGNORECASE,
)


class OptionLetter(str, Enum):
    """Option slot of a multiple-choice question."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    def __str__(self) -> str:
        return self.value

    @property
    def position(self) -> int:
        """Zero-based position of this slot (A=0 ... D=3)."""
        return "ABCD".index(self.value)

    @classmethod
    def from_index(cls, index: int) -> OptionLetter:
        """Return the letter for a zero-based position."""
        if not 0 <= index < OPTION_COUNT:
            raise ValueError(f"option index must be 0-{OPTION_COUNT - 1}: {index}")
        return cls("ABCD"[index])

    @classmethod
    def coerce(cls, value: Union[OptionLetter, str]) -> OptionLetter:
        """
        Convert a letter-like value to an OptionLetter.

        Accepts enum members and single letters in either case.

        Raises:
            ValueError: If value is not one of A-D
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().upper()
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"option letter must be one of A-D: {value!r}") from None

    @classmethod
    def parse(cls, text: str) -> Optional[OptionLetter]:
        """
        Read an answer-key letter out of free text.

        Digits 1-4 map to A-D. Returns None when the text does not name
        exactly one option.

        Example:
            >>> OptionLetter.parse("(b)")
            <OptionLetter.B: 'B'>
            >>> OptionLetter.parse("3")
            <OptionLetter.C: 'C'>
        """
        match = _ANSWER_LETTER_RE.match(text or "")
        if not match:
            return None
        token = match.group(1).upper()
        if token.isdigit():
            return cls.from_index(int(token) - 1)
        return cls(token)


@dataclass(frozen=True, slots=True)
class TransferTarget:
    """
    Destination slot for a fragment transfer.

    Attributes:
        kind: "stem" or "option"
        letter: Option slot, only set when kind == "option"
    """
    kind: str
    letter: Optional[OptionLetter] = None

    def __post_init__(self) -> None:
        if self.kind not in ("stem", "option"):
            raise ValueError(f"transfer target kind must be 'stem' or 'option': {self.kind!r}")
        if (self.kind == "option") != (self.letter is not None):
            raise ValueError("option targets need a letter, stem targets must not have one")

    @classmethod
    def stem(cls) -> TransferTarget:
        return cls("stem")

    @classmethod
    def option(cls, letter: Union[OptionLetter, str]) -> TransferTarget:
        return cls("option", OptionLetter.coerce(letter))


def _empty_options() -> list[str]:
    return [""] * OPTION_COUNT


@dataclass
class QuestionDraft:
    """
    The single in-progress question (mutable).

    Field assignment never validates; only commit checks the draft
    against the committability rule in core.schemas.validator.

    Attributes:
        number: Sequence number this draft will be committed under
        stem: Question text, empty until assigned
        images: Opaque image references (always empty for text extraction)
        options: Exactly four option texts in A, B, C, D order
        answer: Correct option, defaults to A
    """

    number: int
    stem: str = ""
    images: list[str] = field(default_factory=list)
    options: list[str] = field(default_factory=_empty_options)
    answer: OptionLetter = OptionLetter.A

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"question number must be positive: {self.number}")
        if len(self.options) != OPTION_COUNT:
            raise ValueError(f"a draft has exactly {OPTION_COUNT} options: {len(self.options)}")

    def option(self, letter: Union[OptionLetter, str]) -> str:
        """Return the option text stored under letter."""
        return self.options[OptionLetter.coerce(letter).position]

    def snapshot(self) -> QuestionRecord:
        """Freeze the current contents into a QuestionRecord."""
        return QuestionRecord(
            number=self.number,
            stem=self.stem,
            options=tuple(self.options),
            answer=self.answer,
            images=tuple(self.images),
        )


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    """
    Committed question (immutable).

    Attributes:
        number: Question number, fixed at commit time
        stem: Question text
        options: Four option texts in A, B, C, D order
        answer: Correct option
        images: Image references (always empty for text extraction)
    """

    number: int
    stem: str
    options: Tuple[str, str, str, str]
    answer: OptionLetter
    images: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"question number must be positive: {self.number}")
        if len(self.options) != OPTION_COUNT:
            raise ValueError(f"a record has exactly {OPTION_COUNT} options: {len(self.options)}")

    def __repr__(self) -> str:
        return f"QuestionRecord({self.number}, {self.stem[:40]!r}, answer={self.answer})"


@dataclass(frozen=True, slots=True)
class ExportSet:
    """Ordered, immutable set of records produced by one export."""

    records: Tuple[QuestionRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[QuestionRecord]:
        return iter(self.records)

    @property
    def numbers(self) -> list[int]:
        return [record.number for record in self.records]
