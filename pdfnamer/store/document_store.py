import threading
from collections import deque
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from pdfnamer.logging.logger import Log
from pdfnamer.processor.exceptions import DocumentNotFoundError, DocumentStateError
from pdfnamer.processor.models import Document, DocumentStatus

Subscriber = Callable[[Document], None]


class DocumentStore:
    """In-memory home of every document and the FIFO of pending ids.

    All reads and writes go through one condition variable. Documents are
    frozen snapshots, so whatever a reader gets back is consistent even while
    the worker keeps updating the same document. Subscribers are called with
    the new snapshot after the lock is released.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._documents: dict[str, Document] = {}
        self._pending: deque[str] = deque()
        self._running_id: str | None = None
        self._subscribers: list[Subscriber] = []

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, document_id: str) -> Document:
        with self._condition:
            return self._require(document_id)

    def snapshot(self) -> list[Document]:
        """All documents in the order they were added."""
        with self._condition:
            return list(self._documents.values())

    def running(self) -> Document | None:
        with self._condition:
            if self._running_id is None:
                return None
            return self._documents[self._running_id]

    def pending_count(self) -> int:
        with self._condition:
            return len(self._pending)

    # ------------------------------------------------------------------
    # Queue transitions
    # ------------------------------------------------------------------

    def add(self, location: Path) -> Document:
        document = Document(location=Path(location))
        with self._condition:
            self._documents[document.id] = document
            self._pending.append(document.id)
            self._condition.notify_all()
        self._publish(document)
        return document

    def requeue(self, document_id: str) -> Document:
        """Put a finished document back at the end of the queue."""
        with self._condition:
            current = self._require(document_id)
            if not current.is_terminal:
                raise DocumentStateError(
                    f"Document {document_id} is {current.status.value}, cannot requeue"
                )
            document = self._replace(
                document_id,
                status=DocumentStatus.PENDING,
                progress=0.0,
                generated_filename=None,
                error_message=None,
            )
            self._pending.append(document_id)
            self._condition.notify_all()
        self._publish(document)
        return document

    def claim_next(self) -> Document | None:
        """Move the oldest pending document to running.

        Returns None when nothing is pending or a document is already running.
        """
        with self._condition:
            if self._running_id is not None or not self._pending:
                return None
            document_id = self._pending.popleft()
            document = self._replace(
                document_id,
                status=DocumentStatus.RUNNING,
                progress=0.0,
                generated_filename=None,
                processed=False,
                error_message=None,
            )
            self._running_id = document_id
        self._publish(document)
        return document

    def update_progress(self, document_id: str, progress: float) -> Document:
        with self._condition:
            current = self._require_running(document_id)
            document = self._replace(
                document_id,
                progress=max(current.progress, min(progress, 1.0)),
            )
        self._publish(document)
        return document

    def mark_succeeded(self, document_id: str, generated_filename: str) -> Document:
        with self._condition:
            self._require_running(document_id)
            document = self._replace(
                document_id,
                status=DocumentStatus.SUCCEEDED,
                progress=1.0,
                generated_filename=generated_filename,
                processed=True,
            )
            self._finish_running()
        self._publish(document)
        return document

    def mark_failed(self, document_id: str, error_message: str) -> Document:
        with self._condition:
            self._require_running(document_id)
            document = self._replace(
                document_id,
                status=DocumentStatus.FAILED,
                progress=0.0,
                generated_filename=None,
                error_message=error_message,
            )
            self._finish_running()
        self._publish(document)
        return document

    # ------------------------------------------------------------------
    # Caller decisions on a suggestion
    # ------------------------------------------------------------------

    def accept_filename(self, document_id: str, new_location: Path) -> Document:
        """Record that the caller renamed the file; clears the suggestion."""
        with self._condition:
            current = self._require(document_id)
            if current.generated_filename is None:
                raise DocumentStateError(f"Document {document_id} has no filename to accept")
            document = self._replace(
                document_id,
                location=Path(new_location),
                generated_filename=None,
                processed=True,
            )
        self._publish(document)
        return document

    def reject_filename(self, document_id: str) -> Document:
        with self._condition:
            self._require(document_id)
            document = self._replace(document_id, generated_filename=None, processed=False)
        self._publish(document)
        return document

    # ------------------------------------------------------------------
    # Observation and waiting
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call *callback* with every new snapshot; returns an unsubscribe function."""
        with self._condition:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._condition:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def wait_for_work(self, timeout: float | None) -> bool:
        """Block until a document can be claimed, ``wake`` is called, or *timeout*."""
        with self._condition:
            if not self._has_claimable():
                self._condition.wait(timeout)
            return self._has_claimable()

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        """Block until nothing is pending or running. False on timeout."""
        with self._condition:
            return self._condition.wait_for(
                lambda: not self._pending and self._running_id is None,
                timeout,
            )

    def wake(self) -> None:
        with self._condition:
            self._condition.notify_all()

    # ------------------------------------------------------------------
    # Internals (callers hold the lock)
    # ------------------------------------------------------------------

    def _require(self, document_id: str) -> Document:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(f"Unknown document {document_id}") from None

    def _require_running(self, document_id: str) -> Document:
        document = self._require(document_id)
        if self._running_id != document_id:
            raise DocumentStateError(f"Document {document_id} is not running")
        return document

    def _replace(self, document_id: str, **changes: object) -> Document:
        document = replace(self._documents[document_id], **changes)  # type: ignore[arg-type]
        self._documents[document_id] = document
        return document

    def _finish_running(self) -> None:
        self._running_id = None
        self._condition.notify_all()

    def _has_claimable(self) -> bool:
        return bool(self._pending) and self._running_id is None

    def _publish(self, document: Document) -> None:
        with self._condition:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(document)
            except Exception as exc:
                Log.error(f"Subscriber {callback!r} failed: {exc}", document_id=document.id)
