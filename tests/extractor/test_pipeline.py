"""
Tests for extractor.pipeline module.
"""

import pytest

from mcq_toolkit.core.models.fragments import FragmentRole
from mcq_toolkit.extractor.config import ClassifierConfig, ExtractionConfig, SplitStrategy
from mcq_toolkit.extractor.pipeline import (
    EXTRACTION_FAILED_PLACEHOLDER,
    NO_TEXT_PLACEHOLDER,
    classify_pages,
    extract_fragments,
    failed_page_text,
)
from mcq_toolkit.extractor.utils.pdf import ExtractionError, PageStatus, PageText


def _page(number, text, status=PageStatus.TEXT, error=None, count=3):
    return PageText(number, count, text, status, error)


class TestClassifyPages:
    """Tests for classify_pages() function."""

    def test_classify_pages_when_two_pages_then_running_source_order(self):
        pages = [
            _page(1, "1. First? • red • blue • green • black", count=2),
            _page(2, "2. Second? • up • down • left • right", count=2),
        ]
        result = classify_pages(pages)
        assert result.page_count == 2
        assert [f.source_order for f in result.fragments] == list(range(10))
        assert result.fragments[5].role is FragmentRole.QUESTION
        assert result.fragments[5].text == "Second?"

    def test_classify_pages_when_middle_page_fails_then_sentinel_and_partial(self):
        pages = [
            _page(1, "1. First? • red • blue • green • black"),
            _page(2, "", PageStatus.FAILED, "page contains only images"),
            _page(3, "2. Second? • up • down • left • right"),
        ]
        result = classify_pages(pages)

        sentinel = result.fragments[5]
        assert sentinel.role is FragmentRole.PLAIN
        assert sentinel.text == "[Page 2] Unable to extract text: page contains only images"
        assert sentinel.source_order == 5
        assert result.fragments[6].text == "Second?"
        assert result.failed_pages == [2]
        assert result.warnings == [sentinel.text]
        assert result.is_partial is True

    def test_classify_pages_when_every_page_fails_then_not_partial(self):
        result = classify_pages([_page(1, "", PageStatus.FAILED, "boom", count=1)])
        assert result.fragment_count == 1
        assert result.is_partial is False
        assert result.document_text == EXTRACTION_FAILED_PLACEHOLDER

    def test_classify_pages_when_failed_and_blank_pages_then_failure_placeholder(self):
        """A failed page is reported even when the other pages are merely blank."""
        pages = [
            _page(1, "", PageStatus.EMPTY, count=2),
            _page(2, "", PageStatus.FAILED, "page contains only images", count=2),
        ]
        result = classify_pages(pages)
        assert result.failed_pages == [2]
        assert result.document_text == EXTRACTION_FAILED_PLACEHOLDER
        assert result.document_text != NO_TEXT_PLACEHOLDER

    def test_classify_pages_when_empty_page_then_no_sentinel(self):
        """A blank page is a normal empty unit, not a failure."""
        result = classify_pages([_page(1, "", PageStatus.EMPTY, count=1)])
        assert result.fragments == []
        assert result.failed_pages == []
        assert result.document_text == NO_TEXT_PLACEHOLDER

    def test_classify_pages_when_text_then_document_text_has_page_headers(self):
        pages = [_page(1, "Intro text for the quiz.", count=2), _page(2, "", PageStatus.EMPTY, count=2)]
        result = classify_pages(pages)
        assert result.document_text == (
            "--- Page 1 ---\nIntro text for the quiz.\n\n--- Page 2 ---\n\n\n"
        )

    def test_classify_pages_when_lines_config_then_used_for_every_page(self):
        config = ExtractionConfig(classifier=ClassifierConfig(strategy=SplitStrategy.LINES))
        result = classify_pages([_page(1, "1. Q?\nA) yes\nB) no", count=1)], config=config)
        assert [f.role for f in result.fragments] == [
            FragmentRole.QUESTION, FragmentRole.OPTION, FragmentRole.OPTION,
        ]

    def test_failed_page_text_when_called_then_formats_notice(self):
        assert failed_page_text(7, "bad") == "[Page 7] Unable to extract text: bad"


class TestExtractFragments:
    """Integration tests for extract_fragments() with generated PDFs."""

    @pytest.mark.integration
    def test_extract_when_quiz_pdf_then_question_options_answer(self, quiz_pdf):
        result = extract_fragments(quiz_pdf)
        assert result.page_count == 2
        assert result.failed_pages == []
        assert [(f.role, f.text) for f in result.fragments] == [
            (FragmentRole.QUESTION, "What is 2+2?"),
            (FragmentRole.OPTION, "3"),
            (FragmentRole.OPTION, "4"),
            (FragmentRole.OPTION, "5"),
            (FragmentRole.OPTION, "6"),
            (FragmentRole.ANSWER, "b"),
        ]
        assert result.document_text.startswith("--- Page 1 ---\n")

    @pytest.mark.integration
    def test_extract_when_image_only_page_then_isolated(self, image_only_pdf):
        result = extract_fragments(image_only_pdf)
        assert result.failed_pages == [2]
        questions = [f.text for f in result.fragments if f.role is FragmentRole.QUESTION]
        assert questions == ["First question?", "Second question?"]
        assert any(f.text.startswith("[Page 2] Unable to extract text") for f in result.fragments)

    def test_extract_when_missing_file_then_raises_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            extract_fragments(tmp_path / "missing.pdf")

    def test_extract_when_corrupt_file_then_raises_extraction_error(self, corrupt_pdf):
        with pytest.raises(ExtractionError):
            extract_fragments(corrupt_pdf)

    def test_extract_when_text_file_then_raises_extraction_error(self, tmp_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("1. What is 2+2?\n- (a) 3\n- (b) 4\n", encoding="utf-8")
        with pytest.raises(ExtractionError, match="not a PDF"):
            extract_fragments(notes)
