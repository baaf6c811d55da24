"""
Module: assembly

Purpose:
    Question assembly engine. Accumulates fragments and direct edits into
    a draft question, commits validated drafts, and exports the records
    as questions.json.

Key Classes:
    - AssemblySession: Draft + committed list for one editing session

Key Functions:
    - write_questions_json(): Write an ExportSet to disk
    - export_session(): export_all() + write

Dependencies:
    - mcq_toolkit.core: Models, validation and serialization
"""

from .session import AssemblySession
from .writer import export_session, write_questions_json

__all__ = [
    "AssemblySession",
    "export_session",
    "write_questions_json",
]
