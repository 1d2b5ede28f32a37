import threading

from pdfnamer.config.settings import Settings
from pdfnamer.logging.logger import Log
from pdfnamer.store.document_store import DocumentStore
from pdfnamer.worker.job_runner import JobRunner


class Worker:
    """Claim loop: wait -> claim -> dispatch, one document at a time."""

    def __init__(
        self,
        store: DocumentStore,
        job_runner: JobRunner,
        settings: Settings,
    ) -> None:
        self._store = store
        self._job_runner = job_runner
        self._settings = settings
        self._stop_event = threading.Event()

    def run(self, max_jobs: int | None = None) -> None:
        """Main loop. Runs until ``stop`` is called.

        Ctrl-C only reaches this loop when ``run`` is driven directly on the main
        thread; under ``ProcessingQueue`` the loop ends through ``stop``.

        If max_jobs is set, stop after processing that many documents (for testing).
        """
        Log.info("Worker started, waiting for documents")
        jobs_done = 0
        try:
            while not self._stop_event.is_set():
                if max_jobs is not None and jobs_done >= max_jobs:
                    break
                document = self._store.claim_next()
                if document is None:
                    self._store.wait_for_work(self._settings.worker_poll_interval_seconds)
                    continue
                self._job_runner.run(document)
                jobs_done += 1
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")
        Log.info(f"Worker stopped after {jobs_done} document(s)")

    def reset(self) -> None:
        """Allow ``run`` to loop again after a previous ``stop``."""
        self._stop_event.clear()

    def stop(self) -> None:
        self._stop_event.set()
        self._store.wake()
