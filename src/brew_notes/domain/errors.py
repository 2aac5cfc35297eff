"""Domain exceptions for the drink journal."""


class JournalError(Exception):
    """Base exception for journal errors."""


class PersistenceError(JournalError):
    """Storage is unavailable or a write failed."""


class NotFoundError(JournalError):
    """Entry does not exist."""


class InvalidEntryError(JournalError, ValueError):
    """Entry values are outside their allowed range."""
