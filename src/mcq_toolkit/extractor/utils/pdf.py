"""
Module: extractor.utils.pdf

Purpose:
    PDF access for the extraction pipeline. Opens documents, yields the
    text of each page with an explicit status, and renders page previews.

Key Functions:
    - open_document(): Open a PDF, failing loudly
    - extract_page_text(): Plain text of one page
    - iter_page_texts(): Per-page text with TEXT / EMPTY / FAILED status
    - get_document_info(): Name, page count and file size
    - render_page_preview(): Render a page to a PIL image

Key Classes:
    - ExtractionError: A document or page could not be read
    - PageStatus, PageText: Per-page extraction outcome
    - DocumentInfo: Summary of a PDF file

Dependencies:
    - fitz (PyMuPDF): PDF parsing and rendering
    - PIL.Image: Preview images

Used By:
    - extractor.pipeline: Reads pages for classification
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

import fitz
from PIL import Image

from mcq_toolkit.common.thresholds import PREVIEW_THRESHOLDS

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """
    Raised when a PDF or one of its pages cannot be read.

    Attributes:
        message: Human-readable reason
        page_number: 1-based page the failure belongs to, if any
    """

    def __init__(self, message: str, page_number: Optional[int] = None):
        self.message = message
        self.page_number = page_number
        super().__init__(message)

    def __str__(self) -> str:
        if self.page_number is not None:
            return f"Page {self.page_number}: {self.message}"
        return self.message


class PageStatus(str, Enum):
    """Outcome of reading one page."""
    TEXT = "text"      # Page yielded text
    EMPTY = "empty"    # Page is genuinely blank
    FAILED = "failed"  # Text could not be extracted

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PageText:
    """
    Text of one page plus how it was obtained.

    Attributes:
        page_number: 1-based page index
        page_count: Total pages in the document
        text: Extracted text ("" unless status is TEXT)
        status: TEXT, EMPTY or FAILED
        error: Failure reason when status is FAILED
    """
    page_number: int
    page_count: int
    text: str
    status: PageStatus = PageStatus.TEXT
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status is PageStatus.FAILED


@dataclass(frozen=True)
class DocumentInfo:
    """
    Summary of a PDF file.

    Attributes:
        name: File name
        page_count: Number of pages
        size_kb: File size in kilobytes
    """
    name: str
    page_count: int
    size_kb: float


def open_document(path: Path) -> fitz.Document:
    """
    Open a PDF document.

    Args:
        path: Path to the PDF

    Returns:
        Open fitz.Document; the caller closes it (usable as a context manager)

    Raises:
        FileNotFoundError: If path does not exist
        ExtractionError: If PyMuPDF cannot open the file, it is not a PDF,
            or it has no pages
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"PDF not found: {path}")

    try:
        doc = fitz.open(path)
    except (RuntimeError, ValueError) as e:
        raise ExtractionError(f"Cannot open {path.name}: {e}") from e

    if not doc.is_pdf:
        doc.close()
        raise ExtractionError(f"{path.name} is not a PDF")

    if doc.page_count == 0:
        doc.close()
        raise ExtractionError(f"{path.name} has no pages")

    logger.debug(f"Opened {path.name} ({doc.page_count} pages)")
    return doc


def extract_page_text(page: fitz.Page, *, flag_image_only: bool = True) -> str:
    """
    Extract the plain text of one page.

    Args:
        page: PyMuPDF page object
        flag_image_only: Raise for a page that has images but no text,
            since its content is there but unreadable as text

    Returns:
        Page text, "" for a blank page

    Raises:
        ExtractionError: If PyMuPDF fails on the page, or the page is
            image-only and flag_image_only is set
    """
    page_number = page.number + 1
    try:
        text = page.get_text("text") or ""
    except (RuntimeError, ValueError) as e:
        raise ExtractionError(str(e), page_number=page_number) from e

    if not text.strip():
        if flag_image_only and page.get_images():
            raise ExtractionError("page contains only images", page_number=page_number)
        return ""
    return text


def iter_page_texts(
    doc: fitz.Document,
    *,
    flag_image_only_pages: bool = True,
) -> Iterator[PageText]:
    """
    Yield the text of every page in order.

    A page that cannot be read yields a FAILED PageText carrying the
    reason; iteration always continues with the next page.

    Example:
        >>> with open_document(Path("quiz.pdf")) as doc:
        ...     for page in iter_page_texts(doc):
        ...         print(page.page_number, page.status)
        1 text
        2 empty
    """
    page_count = doc.page_count
    for index in range(page_count):
        page_number = index + 1
        try:
            text = extract_page_text(doc[index], flag_image_only=flag_image_only_pages)
        except ExtractionError as e:
            logger.warning(f"Text extraction failed on page {page_number}/{page_count}: {e.message}")
            yield PageText(page_number, page_count, "", PageStatus.FAILED, e.message)
            continue

        status = PageStatus.TEXT if text.strip() else PageStatus.EMPTY
        yield PageText(page_number, page_count, text, status)


def get_document_info(path: Path) -> DocumentInfo:
    """
    Summarise a PDF file.

    Raises:
        FileNotFoundError: If path does not exist
        ExtractionError: If the file cannot be opened
    """
    path = Path(path)
    with open_document(path) as doc:
        page_count = doc.page_count
    size_kb = round(path.stat().st_size / 1024, 1)
    return DocumentInfo(name=path.name, page_count=page_count, size_kb=size_kb)


def render_page_preview(
    doc: fitz.Document,
    page_number: int,
    scale: float = PREVIEW_THRESHOLDS.page_scale,
) -> Image.Image:
    """
    Render a page to an RGB image.

    Args:
        doc: Open document
        page_number: 1-based page index
        scale: Zoom factor relative to 72 dpi

    Returns:
        PIL image of the whole page

    Raises:
        ValueError: If page_number is out of range or scale is not positive
    """
    if not 1 <= page_number <= doc.page_count:
        raise ValueError(f"Page {page_number} out of range (1-{doc.page_count})")
    if scale <= 0:
        raise ValueError(f"Scale must be positive: {scale}")

    matrix = fitz.Matrix(scale, scale)
    pix = doc[page_number - 1].get_pixmap(matrix=matrix, alpha=False)
    return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
