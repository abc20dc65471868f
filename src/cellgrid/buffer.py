"""Fixed-capacity line buffer."""

from __future__ import annotations

from .exceptions import BufferOverflowError


class LineBuffer:
    """
    A reusable text buffer whose capacity is fixed when it is created.

    Every write is checked against the capacity, so a line never grows past
    the width that was computed for it.

    Example:
        >>> buf = LineBuffer(5)
        >>> buf.write("ab")
        >>> buf.fill("-", 3)
        >>> buf.getvalue()
        'ab---'
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._parts: list[str] = []
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._length

    def _reserve(self, count: int) -> None:
        if self._length + count > self._capacity:
            raise BufferOverflowError(self._capacity, self._length + count)
        self._length += count

    def write(self, text: str) -> None:
        """Append ``text``."""
        self._reserve(len(text))
        self._parts.append(text)

    def fill(self, char: str, count: int) -> None:
        """Append ``count`` copies of ``char``."""
        if count <= 0:
            return
        self._reserve(count)
        self._parts.append(char * count)

    def reset(self) -> None:
        """Empty the buffer, keeping its capacity."""
        self._parts.clear()
        self._length = 0

    def getvalue(self) -> str:
        """Return the buffer contents as one string."""
        return "".join(self._parts)
