"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    PREVIEW_THRESHOLDS,
    TEXT_THRESHOLDS,
    PreviewThresholds,
    TextClassificationThresholds,
)

__all__ = [
    "PREVIEW_THRESHOLDS",
    "TEXT_THRESHOLDS",
    "PreviewThresholds",
    "TextClassificationThresholds",
]
