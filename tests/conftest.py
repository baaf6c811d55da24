import io
import sys
from pathlib import Path

import fitz
import pytest
from PIL import Image

# Add src to sys.path so we can import mcq_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mcq_toolkit.assembly import AssemblySession  # noqa: E402


SCENARIO_TEXT = "1. What is 2+2? • (a) 3 • (b) 4 • (c) 5 • (d) 6 Answer: b"

QUIZ_PAGE_LINES = [
    "1. What is 2+2?",
    "- (a) 3",
    "- (b) 4",
    "- (c) 5",
    "- (d) 6",
    "Answer: b",
]


def _png_bytes(size=(60, 40), color=(200, 30, 30)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color=color).save(buf, format="PNG")
    return buf.getvalue()


# Common test fixtures
@pytest.fixture
def scenario_text():
    """Single-line quiz question with bullets and an answer key."""
    return SCENARIO_TEXT


@pytest.fixture
def quiz_pdf(tmp_path: Path) -> Path:
    """Two-page PDF: one quiz question, then a blank page."""
    path = tmp_path / "quiz.pdf"
    doc = fitz.open()
    page = doc.new_page(width=595, height=842)
    page.insert_text((72, 72), "\n".join(QUIZ_PAGE_LINES), fontsize=11)
    doc.new_page(width=595, height=842)
    doc.save(path)
    doc.close()
    return path


@pytest.fixture
def image_only_pdf(tmp_path: Path) -> Path:
    """Three-page PDF whose middle page carries only an image."""
    path = tmp_path / "scanned.pdf"
    doc = fitz.open()
    first = doc.new_page(width=595, height=842)
    first.insert_text((72, 72), "1. First question?\n- (a) yes\n- (b) no\n- (c) maybe\n- (d) never")
    scanned = doc.new_page(width=595, height=842)
    scanned.insert_image(fitz.Rect(72, 72, 300, 220), stream=_png_bytes())
    last = doc.new_page(width=595, height=842)
    last.insert_text((72, 72), "2. Second question?\n- (a) red\n- (b) green\n- (c) blue\n- (d) black")
    doc.save(path)
    doc.close()
    return path


@pytest.fixture
def corrupt_pdf(tmp_path: Path) -> Path:
    """File with a .pdf name that is not a PDF."""
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf document at all")
    return path


@pytest.fixture
def committable_session() -> AssemblySession:
    """Session whose draft passes the commit rule."""
    session = AssemblySession()
    session.set_stem("What is 2+2?")
    for letter, text in zip("ABCD", ["3", "4", "5", "6"]):
        session.set_option(letter, text)
    session.set_answer("B")
    return session
