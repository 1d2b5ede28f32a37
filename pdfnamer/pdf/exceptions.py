class ExtractionError(Exception):
    """Raised when a source file cannot be read or parsed as a PDF."""
