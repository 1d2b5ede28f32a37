import dataclasses
import threading
from pathlib import Path
from unittest.mock import patch

import pytest

from pdfnamer.processor.exceptions import DocumentNotFoundError, DocumentStateError
from pdfnamer.processor.models import Document, DocumentStatus
from pdfnamer.store.document_store import DocumentStore


def _store_with(*names: str) -> tuple[DocumentStore, list[Document]]:
    store = DocumentStore()
    documents = [store.add(Path("/inbox") / name) for name in names]
    return store, documents


def _succeed(store: DocumentStore, filename: str = "Acme Invoice.pdf") -> Document:
    document = store.claim_next()
    assert document is not None
    return store.mark_succeeded(document.id, filename)


class TestAdd:
    def test_new_document_is_pending(self) -> None:
        store, (document,) = _store_with("a.pdf")

        assert document.status is DocumentStatus.PENDING
        assert document.progress == 0.0
        assert document.generated_filename is None
        assert store.pending_count() == 1

    def test_ids_are_unique(self) -> None:
        _store, documents = _store_with("a.pdf", "a.pdf", "a.pdf")

        assert len({d.id for d in documents}) == 3

    def test_snapshot_keeps_insertion_order(self) -> None:
        store, documents = _store_with("a.pdf", "b.pdf", "c.pdf")

        assert [d.id for d in store.snapshot()] == [d.id for d in documents]

    def test_concurrent_adds_are_all_recorded(self) -> None:
        store = DocumentStore()

        def _add_many(prefix: str) -> None:
            for i in range(50):
                store.add(Path(f"/inbox/{prefix}-{i}.pdf"))

        threads = [threading.Thread(target=_add_many, args=(p,)) for p in "abcd"]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.pending_count() == 200
        assert len(store.snapshot()) == 200


class TestClaim:
    def test_claims_in_fifo_order(self) -> None:
        store, documents = _store_with("a.pdf", "b.pdf", "c.pdf")
        claimed = []

        for _ in documents:
            document = store.claim_next()
            assert document is not None
            claimed.append(document.id)
            store.mark_succeeded(document.id, "x.pdf")

        assert claimed == [d.id for d in documents]

    def test_only_one_document_runs_at_a_time(self) -> None:
        store, (first, _second) = _store_with("a.pdf", "b.pdf")

        claimed = store.claim_next()

        assert claimed is not None and claimed.id == first.id
        assert claimed.status is DocumentStatus.RUNNING
        assert store.claim_next() is None
        assert store.running() == claimed

    def test_next_document_claimable_after_finish(self) -> None:
        store, (first, second) = _store_with("a.pdf", "b.pdf")
        store.claim_next()
        store.mark_failed(first.id, "boom")

        claimed = store.claim_next()

        assert claimed is not None and claimed.id == second.id

    def test_concurrent_adds_keep_each_thread_in_order(self) -> None:
        store = DocumentStore()
        start = threading.Barrier(4)

        def _add_many(prefix: str) -> None:
            start.wait()
            for i in range(50):
                store.add(Path(f"/inbox/{prefix}-{i:02d}.pdf"))

        threads = [threading.Thread(target=_add_many, args=(p,)) for p in "abcd"]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        claimed_ids: list[str] = []
        claimed_names: list[str] = []
        while (document := store.claim_next()) is not None:
            claimed_ids.append(document.id)
            claimed_names.append(document.location.stem)
            store.mark_succeeded(document.id, "x.pdf")

        assert len(claimed_ids) == 200
        assert len(set(claimed_ids)) == 200
        assert [d.id for d in store.snapshot()] == claimed_ids
        for prefix in "abcd":
            mine = [name for name in claimed_names if name.startswith(f"{prefix}-")]
            assert mine == [f"{prefix}-{i:02d}" for i in range(50)]

    def test_empty_store_returns_none(self) -> None:
        assert DocumentStore().claim_next() is None


class TestProgress:
    def test_progress_is_monotonic(self) -> None:
        store, (document,) = _store_with("a.pdf")
        store.claim_next()

        store.update_progress(document.id, 0.5)
        updated = store.update_progress(document.id, 0.25)

        assert updated.progress == 0.5

    def test_progress_capped_at_one(self) -> None:
        store, (document,) = _store_with("a.pdf")
        store.claim_next()

        assert store.update_progress(document.id, 1.5).progress == 1.0

    def test_progress_on_pending_document_rejected(self) -> None:
        store, (document,) = _store_with("a.pdf")

        with pytest.raises(DocumentStateError):
            store.update_progress(document.id, 0.25)

    def test_success_sets_full_progress_and_filename(self) -> None:
        store, (document,) = _store_with("a.pdf")

        succeeded = _succeed(store, "2023-11-15 Acme Invoice.pdf")

        assert succeeded.status is DocumentStatus.SUCCEEDED
        assert succeeded.progress == 1.0
        assert succeeded.generated_filename == "2023-11-15 Acme Invoice.pdf"
        assert succeeded.processed is True
        assert store.running() is None

    def test_failure_resets_progress(self) -> None:
        store, (document,) = _store_with("a.pdf")
        store.claim_next()
        store.update_progress(document.id, 0.75)

        failed = store.mark_failed(document.id, "model timeout")

        assert failed.status is DocumentStatus.FAILED
        assert failed.progress == 0.0
        assert failed.generated_filename is None
        assert failed.error_message == "model timeout"

    def test_mark_succeeded_twice_rejected(self) -> None:
        store, (document,) = _store_with("a.pdf")
        _succeed(store)

        with pytest.raises(DocumentStateError):
            store.mark_succeeded(document.id, "again.pdf")


class TestLookup:
    def test_unknown_id_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError):
            DocumentStore().get("missing")

    def test_snapshots_are_frozen(self) -> None:
        store, (document,) = _store_with("a.pdf")

        with pytest.raises(dataclasses.FrozenInstanceError):
            document.progress = 0.5  # type: ignore[misc]

    def test_earlier_snapshot_unchanged_by_later_updates(self) -> None:
        store, (document,) = _store_with("a.pdf")
        before = store.get(document.id)

        _succeed(store)

        assert before.status is DocumentStatus.PENDING
        assert store.get(document.id).status is DocumentStatus.SUCCEEDED


class TestAcceptReject:
    def test_accept_updates_location_and_clears_suggestion(self) -> None:
        store, (document,) = _store_with("a.pdf")
        _succeed(store)

        accepted = store.accept_filename(document.id, Path("/inbox/Acme Invoice.pdf"))

        assert accepted.location == Path("/inbox/Acme Invoice.pdf")
        assert accepted.generated_filename is None
        assert accepted.processed is True

    def test_accept_without_suggestion_rejected(self) -> None:
        store, (document,) = _store_with("a.pdf")

        with pytest.raises(DocumentStateError):
            store.accept_filename(document.id, Path("/inbox/x.pdf"))

    def test_reject_keeps_location(self) -> None:
        store, (document,) = _store_with("a.pdf")
        _succeed(store)

        rejected = store.reject_filename(document.id)

        assert rejected.location == Path("/inbox/a.pdf")
        assert rejected.generated_filename is None
        assert rejected.processed is False

    def test_reject_is_idempotent(self) -> None:
        store, (document,) = _store_with("a.pdf")
        _succeed(store)

        first = store.reject_filename(document.id)
        second = store.reject_filename(document.id)

        assert first == second

    def test_reject_unknown_document_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError):
            DocumentStore().reject_filename("missing")


class TestRequeue:
    def test_failed_document_goes_back_to_end_of_queue(self) -> None:
        store, (first, second) = _store_with("a.pdf", "b.pdf")
        store.claim_next()
        store.mark_failed(first.id, "boom")

        requeued = store.requeue(first.id)

        assert requeued.status is DocumentStatus.PENDING
        assert requeued.error_message is None
        claimed = store.claim_next()
        assert claimed is not None and claimed.id == second.id

    def test_pending_document_cannot_be_requeued(self) -> None:
        store, (document,) = _store_with("a.pdf")

        with pytest.raises(DocumentStateError):
            store.requeue(document.id)


class TestSubscribe:
    def test_subscriber_sees_every_transition(self) -> None:
        store = DocumentStore()
        statuses: list[DocumentStatus] = []
        store.subscribe(lambda doc: statuses.append(doc.status))

        document = store.add(Path("/inbox/a.pdf"))
        store.claim_next()
        store.update_progress(document.id, 0.25)
        store.mark_succeeded(document.id, "x.pdf")

        assert statuses == [
            DocumentStatus.PENDING,
            DocumentStatus.RUNNING,
            DocumentStatus.RUNNING,
            DocumentStatus.SUCCEEDED,
        ]

    def test_unsubscribe_stops_notifications(self) -> None:
        store = DocumentStore()
        seen: list[Document] = []
        unsubscribe = store.subscribe(seen.append)

        store.add(Path("/inbox/a.pdf"))
        unsubscribe()
        store.add(Path("/inbox/b.pdf"))

        assert len(seen) == 1

    def test_failing_subscriber_does_not_break_store(self) -> None:
        store = DocumentStore()
        seen: list[Document] = []

        def _broken(_doc: Document) -> None:
            raise RuntimeError("display gone")

        store.subscribe(_broken)
        store.subscribe(seen.append)

        with patch("pdfnamer.store.document_store.Log") as mock_log:
            document = store.add(Path("/inbox/a.pdf"))

        assert seen == [document]
        mock_log.error.assert_called_once()


class TestWaiting:
    def test_wait_until_idle_true_when_empty(self) -> None:
        assert DocumentStore().wait_until_idle(timeout=0) is True

    def test_wait_until_idle_times_out_with_pending_work(self) -> None:
        store, _docs = _store_with("a.pdf")

        assert store.wait_until_idle(timeout=0.05) is False

    def test_wait_until_idle_released_by_finish(self) -> None:
        store, (document,) = _store_with("a.pdf")
        store.claim_next()
        timer = threading.Timer(0.05, store.mark_succeeded, args=(document.id, "x.pdf"))
        timer.start()

        assert store.wait_until_idle(timeout=5) is True
        timer.join()

    def test_wait_for_work_returns_immediately_when_claimable(self) -> None:
        store, _docs = _store_with("a.pdf")

        assert store.wait_for_work(timeout=5) is True

    def test_wait_for_work_false_while_document_running(self) -> None:
        store, _docs = _store_with("a.pdf", "b.pdf")
        store.claim_next()

        assert store.wait_for_work(timeout=0.05) is False
