import argparse
import sys
from collections.abc import Sequence

from pdfnamer.config.settings import Settings
from pdfnamer.logging.logger import Log
from pdfnamer.processor.exceptions import ProcessorError
from pdfnamer.processor.file_renamer import FileRenamer
from pdfnamer.processor.models import Document, DocumentStatus
from pdfnamer.worker.processing_queue import ProcessingQueue, build_processing_queue


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pdfnamer",
        description="Suggest dated, descriptive filenames for PDF documents.",
    )
    parser.add_argument("pdfs", nargs="+", help="PDF files to name, processed in order")
    parser.add_argument(
        "--apply",
        action="store_true",
        help="rename each file to its suggested name",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> queue -> enqueue all -> wait -> report."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    queue = build_processing_queue(settings)
    queue.subscribe(_log_progress)
    queue.start()
    try:
        documents = [queue.enqueue(path) for path in args.pdfs]
        queue.wait_until_idle()
    finally:
        queue.stop()

    failed = False
    for document in documents:
        document = queue.get(document.id)
        if document.status is DocumentStatus.FAILED:
            failed = True
            print(f"{document.location} -> FAILED: {document.error_message}")
            continue
        print(f"{document.location} -> {document.generated_filename}")
        if args.apply:
            failed = not _apply(queue, document) or failed
    return 1 if failed else 0


def _apply(queue: ProcessingQueue, document: Document) -> bool:
    try:
        new_location = FileRenamer().apply(document)
    except ProcessorError as exc:
        Log.error(f"Rename failed: {exc}", document_id=document.id)
        return False
    queue.accept_filename(document.id, new_location)
    return True


def _log_progress(document: Document) -> None:
    Log.debug(
        f"{document.status.value} {document.progress:.0%}",
        document_id=document.id,
    )


if __name__ == "__main__":
    sys.exit(main())
