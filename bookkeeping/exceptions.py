"""
Typed exceptions for the bookkeeping engine.

    BookkeepingError
    +-- ValidationError   input breaks a static constraint
    +-- BalanceError      a journal's entries do not sum to zero
    +-- NotFoundError     referenced account or setting is missing
    +-- StorageError      the database rejected or failed an operation

ValidationError and BalanceError are also ValueErrors, and
NotFoundError is also a LookupError.
"""


class BookkeepingError(Exception):
    """Base class for every error raised by the engine."""


class ValidationError(BookkeepingError, ValueError):
    """Input violates a static constraint. Raised before any write."""


class BalanceError(BookkeepingError, ValueError):
    """A journal's entry amounts do not sum to zero."""

    def __init__(self, message: str = "journal does not balance", total: int | None = None):
        super().__init__(message)
        self.total = total


class NotFoundError(BookkeepingError, LookupError):
    """A referenced account or setting does not exist."""


class StorageError(BookkeepingError):
    """
    The backing store failed a read or write.

    The underlying SQLAlchemy exception is kept as ``__cause__``.
    Never retried by the engine.
    """
