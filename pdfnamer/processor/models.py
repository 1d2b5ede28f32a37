import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DocumentStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Document:
    """Snapshot of one PDF tracked by the queue.

    Instances are immutable; the store swaps in a new snapshot on every change.
    """

    location: Path
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    status: DocumentStatus = DocumentStatus.PENDING
    progress: float = 0.0
    generated_filename: str | None = None
    processed: bool = False
    error_message: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (DocumentStatus.SUCCEEDED, DocumentStatus.FAILED)
