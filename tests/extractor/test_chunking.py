"""
Tests for extractor.chunking module.
"""

from mcq_toolkit.extractor.chunking import split_chunks, split_lines, split_question_blocks
from mcq_toolkit.extractor.config import SplitStrategy


class TestSplitQuestionBlocks:
    """Tests for split_question_blocks() function."""

    def test_split_when_header_before_first_question_then_own_chunk(self):
        assert split_question_blocks("Quiz 1. A? • x 2. B? • y") == ["Quiz ", "1. A? • x ", "2. B? • y"]

    def test_split_when_no_question_numbers_then_single_chunk(self):
        assert split_question_blocks("Just some prose here.") == ["Just some prose here."]

    def test_split_when_empty_then_no_chunks(self):
        assert split_question_blocks("") == []
        assert split_question_blocks("   \n ") == []

    def test_split_when_numeric_options_then_single_block(self):
        text = "1. Legs on a spider? • 6. • 8. • 10. • 4."
        assert split_question_blocks(text) == [text]

    def test_split_when_stem_sentence_ends_in_number_then_single_block(self):
        text = "1. A shirt costs 5. Then what is the price? • (a) 3"
        assert split_question_blocks(text) == [text]

    def test_split_when_multiline_then_blocks_keep_their_lines(self):
        text = "1. First?\n- (a) x\n2. Second?\n- (a) y\n"
        assert split_question_blocks(text) == ["1. First?\n- (a) x\n", "2. Second?\n- (a) y\n"]


class TestSplitLines:
    """Tests for split_lines() function."""

    def test_split_when_blank_lines_then_dropped(self):
        assert split_lines("1. A?\n\n(a) x\n") == ["1. A?", "(a) x"]

    def test_split_when_windows_newlines_then_split(self):
        assert split_lines("one\r\ntwo\rthree") == ["one", "two", "three"]


class TestSplitChunks:
    """Tests for split_chunks() dispatch."""

    def test_split_chunks_when_lines_strategy_then_splits_lines(self):
        assert split_chunks("1. A?\n2. B?", SplitStrategy.LINES) == ["1. A?", "2. B?"]

    def test_split_chunks_when_block_strategy_then_splits_on_numbers(self):
        assert split_chunks("1. A? 2. B?", SplitStrategy.QUESTION_BLOCKS) == ["1. A? ", "2. B?"]
