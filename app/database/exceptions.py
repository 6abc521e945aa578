class PersistenceError(Exception):
    """Raised when a record cannot be written to the persistence store."""
