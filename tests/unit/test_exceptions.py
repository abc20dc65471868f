"""Tests for exception classes."""

from cellgrid.exceptions import (
    BufferOverflowError,
    CellGridError,
    GridShapeError,
    InvalidArgumentError,
    ResourceExhaustedError,
)


class TestExceptionHierarchy:
    """Tests for the exception hierarchy."""

    def test_all_derive_from_base(self) -> None:
        """Every library error is a CellGridError."""
        for exc_type in (
            InvalidArgumentError,
            GridShapeError,
            ResourceExhaustedError,
            BufferOverflowError,
        ):
            assert issubclass(exc_type, CellGridError)

    def test_grid_shape_is_invalid_argument(self) -> None:
        """Non-rectangular grids are argument errors."""
        assert issubclass(GridShapeError, InvalidArgumentError)


class TestMessages:
    """Tests for exception messages and attributes."""

    def test_invalid_argument(self) -> None:
        """InvalidArgumentError formats field, value and reason."""
        e = InvalidArgumentError("indent", 31, "must be between 0 and 30")
        assert e.field == "indent"
        assert e.value == 31
        assert str(e) == "Invalid indent=31: must be between 0 and 30"

    def test_grid_shape(self) -> None:
        """GridShapeError reports entries and columns."""
        e = GridShapeError(7, 3)
        assert e.field == "columns"
        assert "7 entries" in str(e)
        assert "3 columns" in str(e)

    def test_resource_exhausted_keeps_cause(self) -> None:
        """ResourceExhaustedError keeps the underlying error."""
        cause = MemoryError()
        e = ResourceExhaustedError("cell", cause)
        assert e.cause is cause
        assert str(e) == "Out of memory allocating cell"
