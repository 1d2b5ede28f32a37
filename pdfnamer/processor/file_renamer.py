import os
from pathlib import Path

from pdfnamer.logging.logger import Log
from pdfnamer.processor.exceptions import DocumentStateError, FileRenameError
from pdfnamer.processor.models import Document


def renamed_path(location: Path, generated_filename: str) -> Path:
    """Target path for an accepted filename: same directory, source suffix if none given."""
    name = generated_filename
    # An empty stem leaves just ".ext", which Path treats as suffix-less.
    if not Path(name).suffix and not name.startswith("."):
        name += location.suffix
    return location.parent / name


class FileRenamer:
    """Moves a document's source file to its generated filename."""

    def apply(self, document: Document) -> Path:
        """Rename the file and return its new location.

        Raises:
            DocumentStateError: if the document has no generated filename.
            FileRenameError: if the target exists or the move fails.
        """
        if not document.generated_filename:
            raise DocumentStateError(f"Document {document.id} has no generated filename")
        target = renamed_path(document.location, document.generated_filename)
        # link() fails if the target exists, so a file created meanwhile is never replaced.
        try:
            os.link(document.location, target)
        except FileExistsError:
            raise FileRenameError(f"Target already exists: {target}") from None
        except OSError as exc:
            raise FileRenameError(f"Failed to rename {document.location}: {exc}") from exc
        try:
            document.location.unlink()
        except OSError as exc:
            target.unlink(missing_ok=True)
            raise FileRenameError(f"Failed to rename {document.location}: {exc}") from exc
        Log.info(f"Renamed {document.location.name} -> {target.name}", document_id=document.id)
        return target
