"""
Core Models Package

Data models shared by the extractor and the assembly session.

Fragments and committed records are frozen dataclasses: they are values
that can be passed around and compared freely. The QuestionDraft is the
one deliberately mutable model, edited in place until it is committed.
"""

from .fragments import Fragment, FragmentRole, make_token
from .questions import (
    OPTION_COUNT,
    ExportSet,
    OptionLetter,
    QuestionDraft,
    QuestionRecord,
    TransferTarget,
)

__all__ = [
    "OPTION_COUNT",
    "ExportSet",
    "Fragment",
    "FragmentRole",
    "OptionLetter",
    "QuestionDraft",
    "QuestionRecord",
    "TransferTarget",
    "make_token",
]
