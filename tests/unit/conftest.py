"""Unit test fixtures."""

from collections.abc import Iterator

import pytest

from cellgrid import Table
from tests.fixtures.sinks import LineRecorder


@pytest.fixture
def sink() -> LineRecorder:
    """Line-recording sink."""
    return LineRecorder()


@pytest.fixture
def table() -> Iterator[Table]:
    """Empty table with default configuration."""
    t = Table()
    yield t
    t.teardown()


@pytest.fixture
def grid_table(table: Table) -> Table:
    """Three-row, two-column table with a multi-line body cell."""
    table.append(None, "Head1")
    table.append(None, "Head2")
    table.append(None, "Row2Column1")
    table.append(None, "Row2Column2\nColumnRow2")
    table.append(None, "Row3Column1")
    table.append(None, "Row3Column2")
    return table
