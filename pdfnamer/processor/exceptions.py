class ProcessorError(Exception):
    """Base exception for document bookkeeping errors."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a document id is not known to the store."""


class DocumentStateError(ProcessorError):
    """Raised when an action does not fit the document's current status."""


class FileRenameError(ProcessorError):
    """Raised when an accepted filename cannot be applied on disk."""
