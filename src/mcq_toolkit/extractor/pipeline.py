"""
Module: extractor.pipeline

Purpose:
    Page-by-page orchestration of fragment extraction. Reads each page of
    a PDF, classifies its text, and concatenates the fragments with a
    document-wide running source_order.

Key Functions:
    - extract_fragments(): Main entry point, PDF path -> fragments
    - classify_pages(): Same, from already extracted page texts

Key Classes:
    - ExtractionResult: Container for extraction output

Dependencies:
    - extractor.utils.pdf: Page text source (PyMuPDF)
    - extractor.classification: Text -> fragments

Used By:
    - Callers driving the assembly engine with classified fragments
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from mcq_toolkit.core.models.fragments import Fragment, FragmentRole

from .classification import classify_text
from .config import ExtractionConfig
from .utils.pdf import PageText, iter_page_texts, open_document

logger = logging.getLogger(__name__)

NO_TEXT_PLACEHOLDER = "No text found in PDF"
EXTRACTION_FAILED_PLACEHOLDER = "Error extracting text from PDF"


def failed_page_text(page_number: int, reason: str) -> str:
    """Sentinel text standing in for a page whose text could not be read."""
    return f"[Page {page_number}] Unable to extract text: {reason}"


@dataclass
class ExtractionResult:
    """
    Result of extracting fragments from a document.

    Attributes:
        fragments: Classified fragments in document order
        page_count: Number of pages processed
        failed_pages: 1-based numbers of pages whose text could not be read
        warnings: Warning messages
        document_text: Combined page text with "--- Page N ---" headers, or a
            placeholder when no page yielded text
    """
    fragments: List[Fragment] = field(default_factory=list)
    page_count: int = 0
    failed_pages: List[int] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    document_text: str = NO_TEXT_PLACEHOLDER

    @property
    def fragment_count(self) -> int:
        return len(self.fragments)

    @property
    def is_partial(self) -> bool:
        """True when some pages failed but others were classified."""
        return bool(self.failed_pages) and len(self.failed_pages) < self.page_count


def classify_pages(
    pages: Iterable[PageText],
    *,
    config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """
    Classify a sequence of page texts into one fragment sequence.

    Each page is classified independently. A failed page contributes a
    single Plain sentinel fragment and a warning; the remaining pages are
    still classified.

    Args:
        pages: Page texts in document order
        config: Extraction configuration

    Returns:
        ExtractionResult with fragments numbered across all pages
    """
    config = config or ExtractionConfig()
    result = ExtractionResult()
    page_texts: List[str] = []
    has_text = False
    order = 0

    for page in pages:
        result.page_count += 1

        if page.failed:
            reason = page.error or "unknown error"
            sentinel = failed_page_text(page.page_number, reason)
            result.fragments.append(Fragment.create(FragmentRole.PLAIN, sentinel, order))
            result.failed_pages.append(page.page_number)
            result.warnings.append(sentinel)
            page_texts.append(f"--- Page {page.page_number} ---\n{sentinel}\n\n")
            order += 1
            continue

        page_texts.append(f"--- Page {page.page_number} ---\n{page.text}\n\n")
        if not page.text.strip():
            continue
        has_text = True

        fragments = classify_text(page.text, config.classifier, start_order=order)
        result.fragments.extend(fragments)
        order += len(fragments)
        logger.debug(
            f"Page {page.page_number}/{page.page_count}: {len(fragments)} fragment(s)"
        )

    if has_text:
        result.document_text = "".join(page_texts)
    elif result.failed_pages:
        result.document_text = EXTRACTION_FAILED_PLACEHOLDER
    return result


def extract_fragments(
    pdf_path: Path,
    *,
    config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """
    Extract classified fragments from a PDF.

    Pipeline:
    1. Open the document
    2. Read each page's text (failures isolated per page)
    3. Classify each page, keeping a running source_order

    Args:
        pdf_path: Path to PDF file
        config: Optional extraction configuration

    Returns:
        ExtractionResult with fragments, failed pages and warnings

    Raises:
        FileNotFoundError: If pdf_path doesn't exist
        ExtractionError: If the PDF can't be opened or has no pages

    Example:
        >>> result = extract_fragments(Path("quiz.pdf"))
        >>> print(f"{result.fragment_count} fragments from {result.page_count} pages")
        12 fragments from 2 pages
    """
    config = config or ExtractionConfig()
    pdf_path = Path(pdf_path)

    with open_document(pdf_path) as doc:
        pages = iter_page_texts(doc, flag_image_only_pages=config.flag_image_only_pages)
        result = classify_pages(pages, config=config)

    if result.failed_pages:
        logger.warning(
            f"{pdf_path.name}: text extraction failed on {len(result.failed_pages)} "
            f"of {result.page_count} page(s)"
        )
    logger.info(
        f"Extracted {result.fragment_count} fragments from {pdf_path.name} "
        f"({result.page_count} pages)"
    )
    return result
