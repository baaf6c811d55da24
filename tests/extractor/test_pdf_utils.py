"""
Tests for extractor.utils.pdf module.
"""

from unittest.mock import Mock

import pytest
from PIL import Image

from mcq_toolkit.extractor.utils.pdf import (
    ExtractionError,
    PageStatus,
    extract_page_text,
    get_document_info,
    iter_page_texts,
    open_document,
    render_page_preview,
)


class TestOpenDocument:
    """Tests for open_document() function."""

    def test_open_when_missing_then_raises_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="PDF not found"):
            open_document(tmp_path / "nope.pdf")

    def test_open_when_not_a_pdf_then_raises_extraction_error(self, corrupt_pdf):
        with pytest.raises(ExtractionError, match="Cannot open broken.pdf"):
            open_document(corrupt_pdf)

    def test_open_when_text_file_then_raises_extraction_error(self, tmp_path):
        """PyMuPDF opens plain text as a document; only PDFs are accepted."""
        notes = tmp_path / "notes.txt"
        notes.write_text("Quiz notes\nnot a pdf", encoding="utf-8")
        with pytest.raises(ExtractionError, match="notes.txt is not a PDF"):
            open_document(notes)

    def test_open_when_valid_then_returns_document(self, quiz_pdf):
        with open_document(quiz_pdf) as doc:
            assert doc.page_count == 2


class TestExtractPageText:
    """Tests for extract_page_text() function."""

    def test_extract_when_text_page_then_returns_lines(self, quiz_pdf):
        with open_document(quiz_pdf) as doc:
            text = extract_page_text(doc[0])
        assert "What is 2+2?" in text
        assert "Answer: b" in text

    def test_extract_when_blank_page_then_empty_string(self, quiz_pdf):
        with open_document(quiz_pdf) as doc:
            assert extract_page_text(doc[1]) == ""

    def test_extract_when_image_only_then_raises_error(self, image_only_pdf):
        with open_document(image_only_pdf) as doc:
            with pytest.raises(ExtractionError) as exc_info:
                extract_page_text(doc[1])
        assert exc_info.value.page_number == 2
        assert str(exc_info.value) == "Page 2: page contains only images"

    def test_extract_when_image_only_not_flagged_then_empty_string(self, image_only_pdf):
        with open_document(image_only_pdf) as doc:
            assert extract_page_text(doc[1], flag_image_only=False) == ""

    def test_extract_when_backend_fails_then_raises_error(self):
        """PyMuPDF errors are wrapped with the 1-based page number."""
        page = Mock()
        page.number = 4
        page.get_text.side_effect = RuntimeError("broken content stream")

        with pytest.raises(ExtractionError) as exc_info:
            extract_page_text(page)
        assert exc_info.value.page_number == 5
        assert "broken content stream" in exc_info.value.message


class TestIterPageTexts:
    """Tests for iter_page_texts() function."""

    def test_iter_when_text_and_blank_then_statuses(self, quiz_pdf):
        with open_document(quiz_pdf) as doc:
            pages = list(iter_page_texts(doc))
        assert [p.page_number for p in pages] == [1, 2]
        assert [p.page_count for p in pages] == [2, 2]
        assert [p.status for p in pages] == [PageStatus.TEXT, PageStatus.EMPTY]

    def test_iter_when_image_only_page_then_failed_and_continues(self, image_only_pdf):
        with open_document(image_only_pdf) as doc:
            pages = list(iter_page_texts(doc))
        assert [p.status for p in pages] == [PageStatus.TEXT, PageStatus.FAILED, PageStatus.TEXT]
        assert pages[1].failed
        assert pages[1].error == "page contains only images"
        assert pages[1].text == ""

    def test_iter_when_flag_disabled_then_image_page_empty(self, image_only_pdf):
        with open_document(image_only_pdf) as doc:
            pages = list(iter_page_texts(doc, flag_image_only_pages=False))
        assert pages[1].status is PageStatus.EMPTY


class TestDocumentInfo:
    """Tests for get_document_info() function."""

    def test_info_when_valid_pdf_then_name_pages_size(self, quiz_pdf):
        info = get_document_info(quiz_pdf)
        assert info.name == "quiz.pdf"
        assert info.page_count == 2
        assert info.size_kb > 0


class TestRenderPagePreview:
    """Tests for render_page_preview() function."""

    def test_render_when_default_scale_then_scaled_rgb_image(self, quiz_pdf):
        with open_document(quiz_pdf) as doc:
            image = render_page_preview(doc, 1)
        assert isinstance(image, Image.Image)
        assert image.mode == "RGB"
        assert abs(image.width - 595 * 0.8) <= 1
        assert abs(image.height - 842 * 0.8) <= 1

    @pytest.mark.parametrize("page_number", [0, 3])
    def test_render_when_page_out_of_range_then_raises_error(self, quiz_pdf, page_number):
        with open_document(quiz_pdf) as doc:
            with pytest.raises(ValueError, match="out of range"):
                render_page_preview(doc, page_number)

    def test_render_when_scale_not_positive_then_raises_error(self, quiz_pdf):
        with open_document(quiz_pdf) as doc:
            with pytest.raises(ValueError, match="Scale"):
                render_page_preview(doc, 1, scale=0)
