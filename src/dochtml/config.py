"""ContextVar-based render options for dochtml.

``render()`` takes explicit RenderOptions; when none are passed it reads the
options active in the current context. Hosting services typically set the
options once per worker or request.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    html = render(pkg, RenderOptions(source_link=link_for, limit=5_000_000))

    # Or set defaults for a block of renders
    with render_options_context(RenderOptions(source_link=link_for)):
        for pkg in packages:
            html = render(pkg)

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dochtml.model import Node

# 10 megabytes
DEFAULT_LIMIT = 10 * 1000 * 1000


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable render options.

    Attributes:
        source_link: Resolves a declaration or example node to a source URL.
            An empty string (or no resolver) means the plain name is shown.
        limit: Byte ceiling for the rendered document; 0 selects DEFAULT_LIMIT

    """

    source_link: Callable[[Node], str] | None = None
    limit: int = 0

    def __post_init__(self) -> None:
        if self.limit < 0:
            msg = f"limit must be >= 0, got {self.limit}"
            raise ValueError(msg)

    @property
    def effective_limit(self) -> int:
        """The ceiling actually enforced."""
        return self.limit or DEFAULT_LIMIT

    def link_for(self, node: Node) -> str:
        """Resolve node to a URL, or "" when no resolver is configured."""
        if self.source_link is None:
            return ""
        return self.source_link(node)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> RenderOptions:
        """Create RenderOptions from a dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> RenderOptions.from_dict({"limit": 1000, "theme": "dark"}).limit
            1000

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_OPTIONS: RenderOptions = RenderOptions()

_render_options: ContextVar[RenderOptions] = ContextVar(
    "render_options",
    default=_DEFAULT_OPTIONS,
)


def get_render_options() -> RenderOptions:
    """Get the render options active in this context."""
    return _render_options.get()


def set_render_options(options: RenderOptions) -> None:
    """Set render options for the current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_options.set(options)


def reset_render_options() -> None:
    """Reset to the default options (no source links, default limit)."""
    _render_options.set(_DEFAULT_OPTIONS)


@contextmanager
def render_options_context(options: RenderOptions) -> Iterator[None]:
    """Context manager for temporary option changes.

    Restores the previous options even if an exception is raised.

    Example:
        >>> with render_options_context(RenderOptions(limit=1000)):
        ...     get_render_options().limit
        1000

    """
    token = _render_options.set(options)
    try:
        yield
    finally:
        _render_options.reset(token)


__all__ = [
    "DEFAULT_LIMIT",
    "RenderOptions",
    "get_render_options",
    "reset_render_options",
    "render_options_context",
    "set_render_options",
]
