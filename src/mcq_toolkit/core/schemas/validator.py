"""
Schema Validation Utilities

Validates question drafts before commit and questions.json payloads
before they are turned back into records.

The committability rule lives here and nowhere else: the assembly
session's can_commit(), commit() and export_all() all go through
`draft_issues()`.

Full questions.json checks use JSON Schema (`questions.schema.json`)
when `strict=True`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

import jsonschema

from ..models.questions import OPTION_COUNT, OptionLetter, QuestionDraft

# Field names of one questions.json element, in serialization order
EXPORT_FIELDS = (
    "questionNumber",
    "questionText",
    "question_images",
    "option_with_images_",
    "correct_answer",
)


# Loaded lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when a draft cannot be committed or data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def draft_issues(stem: str, options: Sequence[str]) -> list[str]:
    """
    List the reasons a draft cannot be committed.

    A draft is committable when the stem and all four options are
    non-empty after trimming whitespace.

    Args:
        stem: Draft stem text
        options: Draft option texts in A-D order

    Returns:
        Human-readable issues, empty when the draft is committable
    """
    issues: list[str] = []
    if not stem.strip():
        issues.append("Question text is empty")
    if len(options) != OPTION_COUNT:
        issues.append(f"Expected {OPTION_COUNT} options, got {len(options)}")
        return issues
    for index, text in enumerate(options):
        if not text.strip():
            issues.append(f"Option {OptionLetter.from_index(index)} is empty")
    return issues


def is_committable(draft: QuestionDraft) -> bool:
    """Return True if the draft passes the commit rule."""
    return not draft_issues(draft.stem, draft.options)


def validate_draft(draft: QuestionDraft) -> None:
    """
    Validate a draft before commit.

    Raises:
        ValidationError: Listing every missing field
    """
    issues = draft_issues(draft.stem, draft.options)
    if issues:
        raise ValidationError(
            f"Question {draft.number} is incomplete: {'; '.join(issues)}",
            path=f"question[{draft.number}]",
            errors=issues,
        )


def validate_export_record(data: dict[str, Any]) -> None:
    """
    Validate one questions.json element.

    Args:
        data: Dictionary loaded from JSON

    Raises:
        ValidationError: If a field is missing or has the wrong shape
    """
    missing = [name for name in EXPORT_FIELDS if name not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {name}" for name in missing],
        )

    number = data["questionNumber"]
    if not isinstance(number, int) or isinstance(number, bool) or number < 1:
        raise ValidationError(
            f"Invalid questionNumber: {number!r} (must be a positive integer)",
            path="questionNumber",
        )

    if not isinstance(data["questionText"], str):
        raise ValidationError("questionText must be a string", path="questionText")

    if not isinstance(data["question_images"], list):
        raise ValidationError("question_images must be a list", path="question_images")

    options = data["option_with_images_"]
    if not isinstance(options, list) or len(options) != OPTION_COUNT:
        raise ValidationError(
            f"option_with_images_ must hold exactly {OPTION_COUNT} entries",
            path="option_with_images_",
        )
    if not all(isinstance(option, str) for option in options):
        raise ValidationError("option_with_images_ entries must be strings", path="option_with_images_")

    answer = data["correct_answer"]
    if answer not in {letter.value for letter in OptionLetter}:
        raise ValidationError(
            f"Invalid correct_answer: {answer!r} (must be A, B, C or D)",
            path="correct_answer",
        )


def validate_export_list(data: Any, *, strict: bool = False) -> None:
    """
    Validate a full questions.json payload.

    Checks every element and that question numbers are unique.

    Args:
        data: Payload loaded from JSON
        strict: Also validate against questions.schema.json (rejects
            unknown fields)

    Raises:
        ValidationError: On the first invalid element
    """
    if not isinstance(data, list):
        raise ValidationError("questions.json must contain a JSON array", path="")

    seen: set[int] = set()
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValidationError(f"Element {position} is not an object", path=f"[{position}]")
        try:
            validate_export_record(item)
        except ValidationError as e:
            raise ValidationError(
                f"Element {position}: {e}",
                path=f"[{position}].{e.path}" if e.path else f"[{position}]",
                errors=e.errors,
            ) from e
        number = item["questionNumber"]
        if number in seen:
            raise ValidationError(
                f"Duplicate questionNumber: {number}",
                path=f"[{position}].questionNumber",
            )
        seen.add(number)

    if strict:
        try:
            jsonschema.validate(data, _load_schema("questions"))
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e
