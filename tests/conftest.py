import io
from collections.abc import Callable
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from pdfnamer.llm.client_base import BaseChatClient


def _render_pdf(pages: list[str]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _render_pdf(["Invoice from Acme Corp dated 15 November 2023"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _render_pdf(["Page one content", "Page two content"])


@pytest.fixture()
def blank_middle_page_pdf_bytes() -> bytes:
    """Three pages, the middle one without any text."""
    return _render_pdf(["First page", "", "Third page"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _render_pdf([""])


@pytest.fixture()
def write_pdf(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Write PDF bytes under tmp_path and return the path."""

    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write


class ScriptedChatClient(BaseChatClient):
    """Answers each pipeline prompt with a fixed reply and records every prompt."""

    def __init__(
        self,
        date_reply: str = "2023-11-15",
        summary_reply: str = "Quarterly financial report for Acme Corp covering Q4 revenue.",
        filename_reply: str = "Q4 Financial Report for Acme Corp",
    ) -> None:
        self.date_reply = date_reply
        self.summary_reply = summary_reply
        self.filename_reply = filename_reply
        self.prompts: list[str] = []
        self.temperatures: list[float] = []

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        user_prompt: str,
    ) -> str:
        self.prompts.append(user_prompt)
        self.temperatures.append(temperature)
        if "most relevant date" in user_prompt:
            return self.date_reply
        if "summarizing the contents" in user_prompt:
            return self.summary_reply
        return self.filename_reply


@pytest.fixture()
def scripted_client() -> ScriptedChatClient:
    return ScriptedChatClient()
