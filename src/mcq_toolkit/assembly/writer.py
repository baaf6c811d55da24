"""
Module: assembly.writer

Purpose:
    Writes an export set to disk as questions.json.

Key Functions:
    - write_questions_json(): Write an ExportSet
    - export_session(): Export a session and write the result

Dependencies:
    - core.utils.serialization: questions.json rendering
    - core.schemas.validator: Payload validation

Used By:
    - Callers finishing an assembly session
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from mcq_toolkit.core.models.questions import ExportSet
from mcq_toolkit.core.schemas.validator import validate_export_list
from mcq_toolkit.core.utils.serialization import dumps_export_set, serialize_export_set

from .session import AssemblySession

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "questions.json"


def write_questions_json(
    export_set: ExportSet,
    output_dir: Path,
    filename: str = DEFAULT_FILENAME,
    *,
    validate: bool = True,
) -> Path:
    """
    Write an export set as questions.json.

    The file holds exactly the bytes of dumps_export_set() in UTF-8, so
    the same ExportSet always produces the same file. The write is
    atomic (temp file then replace).

    Args:
        export_set: Records to write
        output_dir: Directory for the file (created if needed)
        filename: Output file name
        validate: Validate the payload before writing

    Returns:
        Path to the written file

    Raises:
        ValidationError: If validate=True and a record is malformed

    Example:
        >>> path = write_questions_json(session.export_all(), Path("out"))
        >>> path.name
        'questions.json'
    """
    if validate:
        validate_export_list(serialize_export_set(export_set), strict=True)

    output_dir = Path(output_dir)
    path = output_dir / filename
    _atomic_write_bytes(dumps_export_set(export_set).encode("utf-8"), path)

    logger.info(f"Wrote {len(export_set)} question(s) to {path}")
    return path


def export_session(
    session: AssemblySession,
    output_dir: Path,
    filename: str = DEFAULT_FILENAME,
) -> Path:
    """Export a session (including a committable draft) and write it."""
    return write_questions_json(session.export_all(), output_dir, filename)


def _atomic_write_bytes(data: bytes, path: Path) -> None:
    """Write bytes atomically using temp file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="wb",
        suffix=".json",
        dir=path.parent,
        delete=False,
    ) as f:
        f.write(data)
        temp_path = Path(f.name)

    # replace() overwrites existing files on all platforms
    temp_path.replace(path)
