class TsvError(Exception):
    """Base exception for TSV parsing errors."""


class EmptyDocumentError(TsvError):
    """Raised when the document has no usable content after line normalization."""


class MissingHeadersError(TsvError):
    """Raised when no header row survives line filtering."""
