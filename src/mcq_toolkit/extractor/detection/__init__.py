"""
Module: extractor.detection

Purpose:
    Detection subpackage for identifying quiz markers in extracted text.

Key Modules:
    - markers: Question numbers, option bullets, answer and explanation labels

Used By:
    - extractor.chunking: Splits text into question blocks
    - extractor.classification: Rule predicates and span boundaries
"""

from .markers import (
    ALL_MARKER_KINDS,
    Marker,
    MarkerKind,
    find_next_marker,
    match_marker,
    question_starts,
)

__all__ = [
    "ALL_MARKER_KINDS",
    "Marker",
    "MarkerKind",
    "find_next_marker",
    "match_marker",
    "question_starts",
]
