"""
MCQ Toolkit Core Package

Shared data models, validation and serialization used by both the
extractor (fragment classification) and the assembly session.

Models:
- Fragment / FragmentRole: classifier output, immutable values
- QuestionDraft: the single mutable in-progress question
- QuestionRecord / ExportSet: committed, immutable questions

The commit rule (stem and four options non-empty after trimming) is
defined once in `core.schemas.validator`.
"""

from .models import (
    ExportSet,
    Fragment,
    FragmentRole,
    OptionLetter,
    QuestionDraft,
    QuestionRecord,
    TransferTarget,
)
from .schemas import ValidationError

__all__ = [
    "ExportSet",
    "Fragment",
    "FragmentRole",
    "OptionLetter",
    "QuestionDraft",
    "QuestionRecord",
    "TransferTarget",
    "ValidationError",
]
