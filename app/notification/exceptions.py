class NotificationError(Exception):
    """Raised when subscribers could not be notified of a new document."""
