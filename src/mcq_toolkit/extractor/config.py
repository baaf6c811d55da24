"""
Module: extractor.config

Purpose:
    Configuration dataclasses for fragment classification and the
    per-page extraction pipeline.

Key Classes:
    - SplitStrategy: How raw text is cut into chunks before classification
    - ClassifierConfig: Classifier settings (strategy, Plain threshold)
    - ExtractionConfig: Pipeline settings wrapping ClassifierConfig

Dependencies:
    - dataclasses: For frozen dataclass support
    - common.thresholds: Default Plain length threshold

Used By:
    - extractor.classification: Uses ClassifierConfig
    - extractor.pipeline: Uses ExtractionConfig
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from mcq_toolkit.common.thresholds import TEXT_THRESHOLDS


class SplitStrategy(str, Enum):
    """Chunking strategy applied before classification."""
    QUESTION_BLOCKS = "question_blocks"  # Split before each "<n>." / "<n>)" token
    LINES = "lines"                      # Every non-blank line is its own chunk

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClassifierConfig:
    """
    Configuration for the fragment classifier.

    QUESTION_BLOCKS is the default: a block runs from one question number
    to the next and is decomposed by the option/answer/explanation markers
    embedded in it. Option markers must start with a bullet in this mode.

    LINES classifies every line on its own and also accepts bare letter
    markers such as "B) text" or "(c) text" as options.

    Attributes:
        strategy: Chunk splitting strategy
        min_plain_length: Unmatched text no longer than this is dropped
        lenient_option_letters: Accept options without a bullet. Defaults
            to True for LINES and False for QUESTION_BLOCKS.
    """
    strategy: SplitStrategy = SplitStrategy.QUESTION_BLOCKS
    min_plain_length: int = TEXT_THRESHOLDS.min_plain_length
    lenient_option_letters: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.min_plain_length < 1:
            raise ValueError(f"min_plain_length must be positive: {self.min_plain_length}")
        if self.lenient_option_letters is None:
            object.__setattr__(
                self, "lenient_option_letters", self.strategy is SplitStrategy.LINES
            )


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for the per-page extraction pipeline.

    Attributes:
        classifier: Classifier settings applied to every page
        flag_image_only_pages: Treat a page with images but no text as an
            extraction failure (sentinel fragment) instead of an empty page
    """
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    flag_image_only_pages: bool = True
