"""
Module: fragments

Purpose:
    Provides the Fragment dataclass - one classified unit of extracted
    text tagged with a semantic role. Fragments are values: the classifier
    creates them once and any number of transfers may read them.

Key Classes:
    - FragmentRole: Question / Option / Answer / Explanation / Plain
    - Fragment: Immutable classified text unit

Key Functions:
    - make_token(): Deterministic correlation token for transfer UIs

Dependencies:
    - dataclasses (std)
    - hashlib (std)
    - .questions.OptionLetter

Used By:
    - extractor.classification: Creates fragments
    - extractor.pipeline: Creates sentinel fragments for failed pages
    - assembly.session.AssemblySession.assign_fragment
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .questions import OptionLetter


class FragmentRole(str, Enum):
    """Semantic role of a classified text fragment."""
    QUESTION = "question"
    OPTION = "option"
    ANSWER = "answer"
    EXPLANATION = "explanation"
    PLAIN = "plain"

    def __str__(self) -> str:
        return self.value


def make_token(source_order: int, role: FragmentRole, text: str) -> str:
    """
    Build an opaque correlation token for a fragment.

    The token only identifies a fragment to a transfer mechanism. It is
    derived from the fragment's content so classification stays
    deterministic.
    """
    digest = hashlib.sha256(f"{source_order}:{role.value}:{text}".encode("utf-8"))
    return f"frag-{digest.hexdigest()[:12]}"


@dataclass(frozen=True, slots=True)
class Fragment:
    """
    Classified text fragment (immutable).

    Attributes:
        role: Semantic role assigned by the classifier
        text: Whitespace-collapsed, trimmed text (markers removed)
        source_order: Running position across the whole document
        letter: Option slot for OPTION fragments (explicit or positional)
        token: Opaque correlation token, ignored by equality

    Example:
        >>> frag = Fragment.create(FragmentRole.OPTION, "4", 2, letter=OptionLetter.B)
        >>> frag.text, frag.letter
        ('4', <OptionLetter.B: 'B'>)
    """

    role: FragmentRole
    text: str
    source_order: int
    letter: Optional[OptionLetter] = None
    token: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.source_order < 0:
            raise ValueError(f"source_order must be non-negative: {self.source_order}")
        if self.letter is not None and self.role is not FragmentRole.OPTION:
            raise ValueError(f"only option fragments carry a letter: {self.role}")

    @classmethod
    def create(
        cls,
        role: FragmentRole,
        text: str,
        source_order: int,
        *,
        letter: Optional[OptionLetter] = None,
    ) -> Fragment:
        """Create a fragment with its correlation token filled in."""
        return cls(
            role=role,
            text=text,
            source_order=source_order,
            letter=letter,
            token=make_token(source_order, role, text),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary (for UI transport and debugging)."""
        d = {
            "role": self.role.value,
            "text": self.text,
            "source_order": self.source_order,
            "token": self.token,
        }
        if self.letter is not None:
            d["letter"] = self.letter.value
        return d

    def __repr__(self) -> str:
        letter = f"({self.letter})" if self.letter else ""
        return f"Fragment({self.source_order}, {self.role}{letter}, {self.text[:40]!r})"
