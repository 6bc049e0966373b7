"""Custom application-wide exceptions."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure kinds; callers match on ``error.kind``."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"
    IO_FAILURE = "io_failure"
    DECODE_FAILURE = "decode_failure"


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    kind: ErrorKind | None = None

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class DuplicateKeyError(ApplicationError):
    """Raised when an entity with the same id is already in the store."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, entity_id: int, message: str | None = None) -> None:
        super().__init__(message or f"Item with ID {entity_id} already exists.")
        self.entity_id = entity_id


class NotFoundError(ApplicationError):
    """Raised when a lookup, removal or update references an absent id."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_id: int, message: str | None = None) -> None:
        super().__init__(message or f"Item with ID {entity_id} was not found.")
        self.entity_id = entity_id


class InvalidValueError(ApplicationError):
    """Raised when a value violates a field invariant."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, field_name: str, value: Any, message: str | None = None) -> None:
        super().__init__(message or f"Invalid value for '{field_name}': {value!r}")
        self.field_name = field_name
        self.value = value


class LineParseError(ApplicationError):
    """Base for errors raised while parsing a delimited text line."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class MissingFieldError(LineParseError):
    """Raised when a line has the wrong number of fields or an empty field."""

    kind = ErrorKind.MISSING_FIELD


class InvalidFormatError(LineParseError):
    """Raised when a numeric field cannot be parsed as an integer."""

    kind = ErrorKind.INVALID_FORMAT

    def __init__(
        self, message: str, line_number: int | None = None, line: str | None = None, field_name: str | None = None
    ) -> None:
        super().__init__(message, line_number, line)
        self.field_name = field_name


class PersistenceError(ApplicationError):
    """Exception raised when a backing file cannot be read or written."""

    kind = ErrorKind.IO_FAILURE

    def __init__(self, path: str, message: str = "File operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.path = path
        self.message = f"Persistence Error: {message} ({path})"


class DecodeError(ApplicationError):
    """Exception raised when persisted content is not a valid snapshot."""

    kind = ErrorKind.DECODE_FAILURE

    def __init__(self, path: str, message: str = "Invalid snapshot content", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.path = path
        self.message = f"Decode Error: {message} ({path})"
