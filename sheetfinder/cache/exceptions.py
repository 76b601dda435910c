class CachePersistenceError(Exception):
    """Raised by a cache medium when it cannot store or remove an entry."""
