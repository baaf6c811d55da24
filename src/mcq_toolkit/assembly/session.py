"""
Module: assembly.session

Purpose:
    The question assembly engine. An AssemblySession owns one mutable
    draft question and the ordered list of committed records; fragments
    and direct edits are applied to the draft, commit() freezes it.

Key Classes:
    - AssemblySession: Draft + committed list for one editing session

State:
    The draft is either incomplete or committable, decided solely by
    can_commit(). Setters never validate. commit() is the only operation
    that enforces the rule, and either applies fully or changes nothing.

Dependencies:
    - core.models: QuestionDraft, QuestionRecord, ExportSet, Fragment
    - core.schemas.validator: The single committability rule

Used By:
    - assembly.writer: Exports what export_all() returns
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from mcq_toolkit.core.models.fragments import Fragment
from mcq_toolkit.core.models.questions import (
    ExportSet,
    OptionLetter,
    QuestionDraft,
    QuestionRecord,
    TransferTarget,
)
from mcq_toolkit.core.schemas.validator import ValidationError, draft_issues, validate_draft

logger = logging.getLogger(__name__)

LetterLike = Union[OptionLetter, str]


class AssemblySession:
    """
    One question assembly session.

    Sessions share no state; create one per document being edited.

    Example:
        >>> session = AssemblySession()
        >>> session.set_stem("What is 2+2?")
        >>> for letter, text in zip("ABCD", ["3", "4", "5", "6"]):
        ...     session.set_option(letter, text)
        >>> session.set_answer("B")
        >>> session.commit()
        QuestionRecord(1, 'What is 2+2?', answer=B)
        >>> session.draft.number
        2
    """

    def __init__(self) -> None:
        self._committed: List[QuestionRecord] = []
        self._draft = QuestionDraft(number=1)

    def __repr__(self) -> str:
        return f"AssemblySession(committed={len(self._committed)}, draft={self._draft.number})"

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def draft(self) -> QuestionDraft:
        """The in-progress question."""
        return self._draft

    @property
    def committed(self) -> Tuple[QuestionRecord, ...]:
        """Committed records in commit order."""
        return tuple(self._committed)

    @property
    def committed_count(self) -> int:
        return len(self._committed)

    # ─────────────────────────────────────────────────────────────────────────
    # Draft edits (never validate)
    # ─────────────────────────────────────────────────────────────────────────

    def set_stem(self, text: str) -> None:
        """Replace the draft stem."""
        self._draft.stem = text

    def set_option(self, letter: LetterLike, text: str) -> None:
        """Replace the draft option stored under letter."""
        self._draft.options[OptionLetter.coerce(letter).position] = text

    def set_answer(self, letter: LetterLike) -> None:
        """Set the correct option. The option text may still be empty."""
        self._draft.answer = OptionLetter.coerce(letter)

    def assign_fragment(self, fragment: Fragment, target: TransferTarget) -> None:
        """
        Apply a transferred fragment to the draft.

        The fragment's role is not checked: any fragment may fill any slot.

        Args:
            fragment: Fragment being transferred
            target: TransferTarget.stem() or TransferTarget.option(letter)
        """
        if target.kind == "stem":
            self.set_stem(fragment.text)
        else:
            self.set_option(target.letter, fragment.text)
        logger.debug(f"Assigned {fragment.role} fragment {fragment.token} to {target}")

    def set_answer_from_fragment(self, fragment: Fragment) -> Optional[OptionLetter]:
        """
        Set the answer from answer-key text such as "b" or "(C)".

        Returns:
            The letter applied, or None if the text names no option (the
            draft is left unchanged)
        """
        letter = OptionLetter.parse(fragment.text)
        if letter is None:
            logger.warning(f"Answer text {fragment.text!r} does not name an option A-D")
            return None
        self.set_answer(letter)
        return letter

    def reset_draft(self) -> None:
        """Discard the draft contents, keeping its number."""
        self._draft = QuestionDraft(number=self._draft.number)

    # ─────────────────────────────────────────────────────────────────────────
    # Commit / export
    # ─────────────────────────────────────────────────────────────────────────

    def commit_issues(self) -> List[str]:
        """Reasons the draft cannot be committed; empty when it can."""
        return draft_issues(self._draft.stem, self._draft.options)

    def can_commit(self) -> bool:
        """True iff the stem and all four options are non-blank."""
        return not self.commit_issues()

    def commit(self) -> QuestionRecord:
        """
        Freeze the draft into a committed record and start a new draft.

        Returns:
            The committed record

        Raises:
            ValidationError: If the draft is incomplete. Nothing changes.
        """
        try:
            validate_draft(self._draft)
        except ValidationError as e:
            logger.warning(f"Commit rejected: {e}")
            raise

        record = self._draft.snapshot()
        next_draft = QuestionDraft(number=len(self._committed) + 2)

        self._committed.append(record)
        self._draft = next_draft
        logger.info(f"Committed question {record.number} ({len(self._committed)} total)")
        return record

    def export_all(self) -> ExportSet:
        """
        Build the export set without changing the session.

        Returns:
            Committed records, followed by a snapshot of the draft if it
            is committable at this moment
        """
        records = list(self._committed)
        if self.can_commit():
            records.append(self._draft.snapshot())
        return ExportSet(records=tuple(records))
