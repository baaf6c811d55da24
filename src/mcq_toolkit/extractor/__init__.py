"""
Module: extractor

Purpose:
    Fragment extraction for multiple-choice quiz documents. Reads PDF
    pages and classifies their text into Question / Option / Answer /
    Explanation / Plain fragments for the assembly engine.

Key Functions:
    - extract_fragments(): PDF path -> ExtractionResult
    - classify_pages(): Page texts -> ExtractionResult
    - classify_text(): Raw text -> fragments

Key Classes:
    - ClassifierConfig, ExtractionConfig, SplitStrategy: Settings
    - ExtractionResult: Container for extraction output

Dependencies:
    - fitz (PyMuPDF): PDF text extraction
    - mcq_toolkit.core.models: Fragment model

Used By:
    - mcq_toolkit.assembly: Consumes fragments
"""

from .classification import classify_chunk, classify_text
from .config import ClassifierConfig, ExtractionConfig, SplitStrategy
from .pipeline import ExtractionResult, classify_pages, extract_fragments
from .utils.pdf import ExtractionError

__all__ = [
    "ClassifierConfig",
    "ExtractionConfig",
    "ExtractionError",
    "ExtractionResult",
    "SplitStrategy",
    "classify_chunk",
    "classify_pages",
    "classify_text",
    "extract_fragments",
]
