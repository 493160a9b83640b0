"""BoundedSink: byte accumulator that accounts against a size ceiling.

Follows the StringBuilder pattern (append parts to a list, join once at
the end) and adds byte accounting. Writes are never refused: ``remaining``
may go negative, the walk always completes, and the caller judges the result
with ``exceeded`` afterwards. Truncating mid-walk would leave unbalanced
markup behind.

Thread Safety:
BoundedSink instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class BoundedSink:
    """Byte accumulator with a soft ceiling.

    Usage:
            >>> sink = BoundedSink(limit=8)
            >>> sink.write(b"<p>Hi</p>")
            9
            >>> sink.exceeded
            True
            >>> sink.getvalue()
            b'<p>Hi</p>'

    Thread Safety:
        Instance is local to each render() call.
        No shared mutable state.

    """

    __slots__ = ("_limit", "_parts", "_remaining")

    def __init__(self, limit: int) -> None:
        """Initialize an empty sink.

        Args:
            limit: Byte ceiling
        """
        self._limit = limit
        self._remaining = limit
        self._parts: list[bytes] = []

    def write(self, data: bytes) -> int:
        """Append data and charge it against the ceiling.

        Args:
            data: Bytes to append (empty writes are skipped)

        Returns:
            Number of bytes accepted, always len(data)
        """
        if data:
            self._parts.append(data)
            self._remaining -= len(data)
        return len(data)

    def write_text(self, s: str) -> int:
        """Encode s as UTF-8 and write it."""
        return self.write(s.encode("utf-8"))

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def remaining(self) -> int:
        """Bytes left before the ceiling; negative once exceeded."""
        return self._remaining

    @property
    def size(self) -> int:
        """Total bytes written."""
        return self._limit - self._remaining

    @property
    def exceeded(self) -> bool:
        """True if more than limit bytes were written."""
        return self._remaining < 0

    def getvalue(self) -> bytes:
        """Join all parts, whether or not the ceiling was exceeded."""
        return b"".join(self._parts)

    def __len__(self) -> int:
        """Return total bytes written."""
        return self.size
