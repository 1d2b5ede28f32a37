import threading
from collections.abc import Callable
from pathlib import Path

from pdfnamer.config.settings import Settings
from pdfnamer.llm.client_base import BaseChatClient
from pdfnamer.logging.logger import Log
from pdfnamer.processor.models import Document
from pdfnamer.processor.processor import build_processor
from pdfnamer.store.document_store import DocumentStore, Subscriber
from pdfnamer.worker.job_runner import JobRunner
from pdfnamer.worker.worker import Worker


class ProcessingQueue:
    """FIFO front door for callers (UI, CLI).

    Enqueueing is safe from any thread at any time; a single background
    worker owns all processing, so at most one document is running.
    """

    def __init__(self, store: DocumentStore, worker: Worker) -> None:
        self._store = store
        self._worker = worker
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    def start(self) -> None:
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return
            self._worker.reset()
            self._thread = threading.Thread(
                target=self._worker.run,
                name="pdfnamer-worker",
                daemon=True,
            )
            self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        with self._lock:
            thread = self._thread
            self._thread = None
        self._worker.stop()
        if thread is not None:
            thread.join(timeout)

    def enqueue(self, location: Path | str) -> Document:
        document = self._store.add(Path(location))
        Log.info(f"Queued {document.location}", document_id=document.id)
        return document

    def retry(self, document_id: str) -> Document:
        document = self._store.requeue(document_id)
        Log.info(f"Requeued {document.location}", document_id=document_id)
        return document

    def get(self, document_id: str) -> Document:
        return self._store.get(document_id)

    def snapshot(self) -> list[Document]:
        return self._store.snapshot()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        return self._store.subscribe(callback)

    def accept_filename(self, document_id: str, new_location: Path | str) -> Document:
        return self._store.accept_filename(document_id, Path(new_location))

    def reject_filename(self, document_id: str) -> Document:
        return self._store.reject_filename(document_id)

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        return self._store.wait_until_idle(timeout)


def build_processing_queue(
    settings: Settings,
    client: BaseChatClient | None = None,
) -> ProcessingQueue:
    """Wire store, processor, runner and worker into a queue (not yet started)."""
    store = DocumentStore()
    job_runner = JobRunner(build_processor(settings, client=client), store)
    worker = Worker(store, job_runner, settings)
    return ProcessingQueue(store, worker)
