"""
Serialization Utilities

Provides to/from JSON utilities for the questions.json export artifact.

Format (one element per record, keys in this order):

    {
      "questionNumber": 1,
      "questionText": "What is 2+2?",
      "question_images": [],
      "option_with_images_": ["3", "4", "5", "6"],
      "correct_answer": "B"
    }

The array is pretty-printed with 2-space indentation. Output is a pure
function of the ExportSet, so identical input gives identical bytes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.questions import ExportSet, OptionLetter, QuestionRecord
from ..schemas.validator import ValidationError, validate_export_list, validate_export_record

logger = logging.getLogger(__name__)

JSON_INDENT = 2


# ─────────────────────────────────────────────────────────────────────────────
# Record Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_record(record: QuestionRecord) -> dict[str, Any]:
    """
    Serialize a QuestionRecord to a questions.json element.

    Args:
        record: Committed record

    Returns:
        Dictionary with keys in export order
    """
    return {
        "questionNumber": record.number,
        "questionText": record.stem,
        "question_images": list(record.images),
        "option_with_images_": list(record.options),
        "correct_answer": record.answer.value,
    }


def deserialize_record(data: dict[str, Any], *, validate: bool = True) -> QuestionRecord:
    """
    Deserialize a QuestionRecord from a questions.json element.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the element first

    Returns:
        QuestionRecord instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_export_record(data)

    return QuestionRecord(
        number=data["questionNumber"],
        stem=data["questionText"],
        options=tuple(data["option_with_images_"]),
        answer=OptionLetter(data["correct_answer"]),
        images=tuple(data.get("question_images", [])),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Export Set Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_export_set(export_set: ExportSet) -> list[dict[str, Any]]:
    """Serialize every record of an ExportSet, preserving order."""
    return [serialize_record(record) for record in export_set]


def dumps_export_set(export_set: ExportSet) -> str:
    """
    Render an ExportSet as questions.json text.

    Returns:
        JSON array pretty-printed with 2-space indentation
    """
    return json.dumps(serialize_export_set(export_set), indent=JSON_INDENT, ensure_ascii=False)


def save_questions_json(export_set: ExportSet, path: Path) -> None:
    """
    Save an ExportSet to a JSON file.

    Writes UTF-8 bytes directly so the output does not depend on the
    platform's newline translation.

    Args:
        export_set: Records to save
        path: Output path, usually ``questions.json``
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dumps_export_set(export_set).encode("utf-8"))
    logger.debug(f"Saved {len(export_set)} question(s) to {path}")


def load_questions_json(path: Path, *, validate: bool = True) -> ExportSet:
    """
    Load an ExportSet from a questions.json file.

    Args:
        path: Path to questions.json
        validate: Whether to validate the payload

    Returns:
        ExportSet in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path.name}: {e}", path=str(path), errors=[str(e)]) from e

    if validate:
        validate_export_list(data, strict=True)

    return ExportSet(tuple(deserialize_record(item, validate=False) for item in data))
