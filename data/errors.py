# Error taxonomy shared by the repository, the parsers and the storage adapter

from enum import Enum


class ErrorKind(Enum):
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"
    PERSISTENCE_FAILURE = "persistence_failure"


class StockkeeperError(Exception):
    """
    Base class for every failure raised by this project.

    Each subclass pins a single ErrorKind so callers can branch on
    ``exc.kind`` instead of on the concrete class.
    """
    kind = None

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail


class DuplicateKeyError(StockkeeperError, ValueError):
    kind = ErrorKind.DUPLICATE_KEY


class NotFoundError(StockkeeperError, LookupError):
    kind = ErrorKind.NOT_FOUND


class InvalidArgumentError(StockkeeperError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT


class MissingFieldError(StockkeeperError, ValueError):
    kind = ErrorKind.MISSING_FIELD


class InvalidFormatError(StockkeeperError, ValueError):
    kind = ErrorKind.INVALID_FORMAT


class PersistenceFailure(StockkeeperError):
    """Raised by load/save; the underlying I/O or decode error is chained as __cause__."""
    kind = ErrorKind.PERSISTENCE_FAILURE
