"""
Module: extractor.utils

Purpose:
    Utility subpackage with PDF access and text normalisation helpers.

Key Modules:
    - pdf: Document opening, per-page text, previews
    - text: Whitespace normalisation and header detection

Dependencies:
    - fitz (PyMuPDF): PDF operations
    - PIL: Preview images

Used By:
    - extractor.pipeline: Reads pages
    - extractor.classification: Normalises fragment text
"""

from .pdf import (
    DocumentInfo,
    ExtractionError,
    PageStatus,
    PageText,
    extract_page_text,
    get_document_info,
    iter_page_texts,
    open_document,
    render_page_preview,
)
from .text import is_header_like, normalize_whitespace

__all__ = [
    "DocumentInfo",
    "ExtractionError",
    "PageStatus",
    "PageText",
    "extract_page_text",
    "get_document_info",
    "is_header_like",
    "iter_page_texts",
    "normalize_whitespace",
    "open_document",
    "render_page_preview",
]
