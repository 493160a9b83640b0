"""Source positions attached to declarations, example bodies, and comments.

Source-link resolvers receive model nodes and typically read their
location to build a URL into a code browser.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in the documented module's source.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        source_file: Source file path, relative to the module root (optional)

    Examples:
            >>> loc = SourceLocation(12, source_file="ring.go")
            >>> str(loc)
            'ring.go:12:1'

    """

    lineno: int
    col_offset: int = 1
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as file:line:col for links and error messages."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
