class FinderError(Exception):
    """Base exception for controller-level errors."""


class MissingSourceError(FinderError):
    """Raised when no TSV source URL is configured."""
