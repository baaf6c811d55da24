"""
Unit Tests for questions.json Writer
"""

import json

import pytest

from mcq_toolkit.assembly.session import AssemblySession
from mcq_toolkit.assembly.writer import export_session, write_questions_json
from mcq_toolkit.core.models.questions import ExportSet, OptionLetter, QuestionRecord
from mcq_toolkit.core.schemas.validator import ValidationError
from mcq_toolkit.core.utils.serialization import load_questions_json


class TestWriteQuestionsJson:
    """Tests for write_questions_json() function."""

    def test_write_when_scenario_then_expected_document(self, tmp_path, committable_session):
        committable_session.commit()
        path = write_questions_json(committable_session.export_all(), tmp_path)

        assert path == tmp_path / "questions.json"
        assert json.loads(path.read_text(encoding="utf-8")) == [
            {
                "questionNumber": 1,
                "questionText": "What is 2+2?",
                "question_images": [],
                "option_with_images_": ["3", "4", "5", "6"],
                "correct_answer": "B",
            }
        ]

    def test_write_when_same_export_set_then_identical_bytes(self, tmp_path, committable_session):
        committable_session.commit()
        export_set = committable_session.export_all()
        first = write_questions_json(export_set, tmp_path / "a").read_bytes()
        second = write_questions_json(export_set, tmp_path / "b").read_bytes()
        assert first == second
        assert first.startswith(b'[\n  {\n    "questionNumber": 1,')

    def test_write_when_committable_draft_then_n_plus_one_elements(self, tmp_path, committable_session):
        committable_session.commit()
        committable_session.set_stem("Second?")
        for letter in "ABCD":
            committable_session.set_option(letter, letter.lower())
        path = export_session(committable_session, tmp_path)

        data = json.loads(path.read_bytes())
        assert [item["questionNumber"] for item in data] == [1, 2]
        assert data[1]["option_with_images_"] == ["a", "b", "c", "d"]
        assert data[1]["correct_answer"] == "A"

    def test_write_when_empty_session_then_empty_array(self, tmp_path):
        path = export_session(AssemblySession(), tmp_path)
        assert path.read_text(encoding="utf-8") == "[]"

    def test_write_when_existing_file_then_replaced(self, tmp_path, committable_session):
        (tmp_path / "questions.json").write_text("old", encoding="utf-8")
        path = write_questions_json(committable_session.export_all(), tmp_path)
        assert len(load_questions_json(path)) == 1
        assert sorted(p.name for p in tmp_path.iterdir()) == ["questions.json"]

    def test_write_when_custom_filename_then_used(self, tmp_path):
        path = write_questions_json(ExportSet(), tmp_path / "out", filename="quiz.json")
        assert path.name == "quiz.json"
        assert path.exists()

    def test_write_when_duplicate_numbers_then_raises_error(self, tmp_path):
        record = QuestionRecord(1, "Q", ("a", "b", "c", "d"), OptionLetter.A)
        with pytest.raises(ValidationError, match="Duplicate"):
            write_questions_json(ExportSet((record, record)), tmp_path)
        assert not (tmp_path / "questions.json").exists()
