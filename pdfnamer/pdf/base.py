from abc import ABC, abstractmethod
from pathlib import Path

from pdfnamer.pdf.exceptions import ExtractionError


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    def extract_file(self, path: Path) -> str:
        """Read the PDF at *path* and return the text of all its pages.

        Raises:
            ExtractionError: if the file cannot be read or parsed.
        """
        try:
            pdf_bytes = path.read_bytes()
        except OSError as exc:
            raise ExtractionError(f"Cannot read {path}: {exc}") from exc
        return self.extract(pdf_bytes)

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Pages are visited in order; a page without a text layer contributes an
        empty string instead of failing the document.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts joined by newlines, stripped.

        Raises:
            ExtractionError: if the bytes are not a readable PDF.
        """
