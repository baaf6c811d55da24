"""Centralized threshold and magic number configuration.

This module contains the heuristic thresholds used by the fragment
classifier and the page preview renderer. Having these in one place
makes tuning easier and documents what each value controls.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextClassificationThresholds:
    """Thresholds for text-based fragment classification."""

    min_plain_length: int = 15  # Unmatched text must be longer than this to be kept
    max_question_number_digits: int = 3  # "1." .. "999." count as question markers


@dataclass(frozen=True)
class PreviewThresholds:
    """Settings for rendering page previews."""

    page_scale: float = 0.8  # Render scale relative to 72 dpi page points


TEXT_THRESHOLDS = TextClassificationThresholds()
PREVIEW_THRESHOLDS = PreviewThresholds()
