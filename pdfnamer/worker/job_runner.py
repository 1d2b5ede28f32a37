from pdfnamer.logging.logger import Log
from pdfnamer.processor.models import Document
from pdfnamer.processor.processor import Processor
from pdfnamer.store.document_store import DocumentStore


class JobRunner:
    """Run one claimed document and record its outcome in the store.

    A failure is recorded on the document and never propagates, so the
    worker always moves on to the next pending document. There are no
    automatic retries.
    """

    def __init__(self, processor: Processor, store: DocumentStore) -> None:
        self._processor = processor
        self._store = store

    def run(self, document: Document) -> None:
        Log.info(f"Running {document.location.name}", document_id=document.id)
        try:
            filename = self._processor.process(
                document,
                on_progress=lambda progress: self._store.update_progress(document.id, progress),
            )
        except Exception as exc:
            self._handle_failure(document, exc)
            return
        self._store.mark_succeeded(document.id, filename)
        Log.info(f"Suggested {filename!r}", document_id=document.id)

    def _handle_failure(self, document: Document, exc: Exception) -> None:
        reason = str(exc) or type(exc).__name__
        Log.error(f"{type(exc).__name__}: {reason}", document_id=document.id)
        self._store.mark_failed(document.id, reason)
