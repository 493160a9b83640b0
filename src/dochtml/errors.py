"""Exception classes for dochtml.

Two failure kinds leave ``render()``: ``TooLargeError`` when the produced
document exceeds the byte ceiling, and ``RenderError`` for anything a
rendering hook raised during the walk. The ceiling check wins when both
happen in the same call.
"""

from __future__ import annotations


class DocHTMLError(Exception):
    """Base exception for all dochtml errors.

    Subclass this for specific error categories.
    """

    pass


class TooLargeError(DocHTMLError):
    """Rendered documentation HTML size exceeded the configured limit.

    No partial output is attached; the caller should raise the limit or
    render a smaller model.
    """

    def __init__(self, limit: int, size: int, package: str = "") -> None:
        """Initialize with the ceiling and the number of bytes produced.

        Args:
            limit: Byte ceiling that was in effect
            size: Total bytes written by the document walk
            package: Import path or name of the rendered module (optional)
        """
        self.limit = limit
        self.size = size
        self.package = package

        where = f" for {package}" if package else ""
        super().__init__(
            f"rendered documentation HTML size exceeded the specified limit{where}: "
            f"{size} > {limit} bytes"
        )


class RenderError(DocHTMLError):
    """Error during the document walk.

    Raised when a rendering hook or the template itself fails. The original
    exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, package: str = "") -> None:
        self.message = message
        self.package = package
        prefix = f"dochtml.render({package})" if package else "dochtml.render"
        super().__init__(f"{prefix}: {message}")


class TemplateBindingError(RenderError):
    """A hook was called on a template that never had it bound."""

    def __init__(self, hook: str) -> None:
        self.hook = hook
        super().__init__(f"hook {hook!r} is not bound; bind hooks before running")


class ModelError(DocHTMLError, ValueError):
    """Serialized documentation model is malformed."""

    pass
