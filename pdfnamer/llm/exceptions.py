class ModelInvocationError(Exception):
    """Raised when the language model cannot be reached or returns no usable reply."""
