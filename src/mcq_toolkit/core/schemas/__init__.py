"""
Schemas Package

Draft committability checks and questions.json validation.
"""

from .validator import (
    EXPORT_FIELDS,
    ValidationError,
    draft_issues,
    is_committable,
    validate_draft,
    validate_export_list,
    validate_export_record,
)

__all__ = [
    "EXPORT_FIELDS",
    "ValidationError",
    "draft_issues",
    "is_committable",
    "validate_draft",
    "validate_export_list",
    "validate_export_record",
]
