import io

import pdfplumber

from pdfnamer.pdf.base import BasePdfExtractor
from pdfnamer.pdf.exceptions import ExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber could not open document: {exc}") from exc
        return "\n".join(pages).strip()
