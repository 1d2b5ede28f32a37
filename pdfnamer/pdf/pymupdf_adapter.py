import pymupdf

from pdfnamer.pdf.base import BasePdfExtractor
from pdfnamer.pdf.exceptions import ExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() or "" for page in doc]
        except Exception as exc:
            raise ExtractionError(f"pymupdf could not open document: {exc}") from exc
        return "\n".join(pages).strip()
