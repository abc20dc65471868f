"""Exceptions for cellgrid."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class CellGridError(Exception):
    """
    Base exception for all cellgrid errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Argument Exceptions
# ---------------------------------------------------------------------------


class InvalidArgumentError(CellGridError):
    """
    Raised when an operation is called with an unusable argument.

    Always detected before any side effect: no cell is stored and no line
    reaches the sink.

    Attributes:
        field: Name of the offending argument
        value: The value that was rejected
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class GridShapeError(InvalidArgumentError):
    """Raised when the entry count is not a whole number of rows."""

    def __init__(self, entries: int, columns: int) -> None:
        self.entries = entries
        self.columns = columns
        super().__init__(
            "columns",
            columns,
            f"{entries} entries cannot be split into rows of {columns} columns",
        )


# ---------------------------------------------------------------------------
# Resource Exceptions
# ---------------------------------------------------------------------------


class ResourceExhaustedError(CellGridError):
    """
    Raised when memory for a cell or a render buffer cannot be obtained.

    Attributes:
        what: The buffer that could not be allocated
        cause: The underlying exception (usually ``MemoryError``)
    """

    def __init__(self, what: str, cause: BaseException | None = None) -> None:
        self.what = what
        self.cause = cause
        super().__init__(f"Out of memory allocating {what}")


class BufferOverflowError(CellGridError):
    """
    Raised when a line buffer is written past its precomputed capacity.

    Lines are sized exactly before they are written, so this signals a
    broken width calculation rather than bad input.
    """

    def __init__(self, capacity: int, requested: int) -> None:
        self.capacity = capacity
        self.requested = requested
        super().__init__(
            f"Line buffer overflow: {requested} characters requested, capacity is {capacity}"
        )
