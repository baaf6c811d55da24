"""
Utils Package

Serialization of the questions.json export artifact.
"""

from .serialization import (
    serialize_record,
    deserialize_record,
    serialize_export_set,
    dumps_export_set,
    save_questions_json,
    load_questions_json,
)

__all__ = [
    "serialize_record",
    "deserialize_record",
    "serialize_export_set",
    "dumps_export_set",
    "save_questions_json",
    "load_questions_json",
]
