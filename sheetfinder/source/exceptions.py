class TransportError(Exception):
    """Raised when the raw document cannot be fetched."""
