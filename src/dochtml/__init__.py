"""
dochtml: size-bounded HTML documentation for compiled modules

Renders a module's documentation model (overview, constants, variables,
functions, types, methods, runnable examples, notes) into one navigable
HTML document with stable anchors and a hard ceiling on output size.

Quick Start:
    >>> from dochtml import Func, Decl, Package, render
    >>> pkg = Package(name="ring", doc="Package ring implements circular lists.",
    ...               funcs=(Func("New", decl=Decl("func New(n int) *Ring")),))
    >>> html = render(pkg)
    >>> b'<h3 id="New">' in html
    True

    >>> # Link declarations to a source browser
    >>> from dochtml import RenderOptions
    >>> opts = RenderOptions(source_link=lambda node: f"/src/ring.go#L{node.location.lineno}")

Errors:
    TooLargeError   output exceeded RenderOptions.limit (default 10 MB)
    RenderError     a rendering hook failed; the cause is chained

Thread Safety:
    render() keeps all per-call state local and binds hooks onto a private
    copy of the shared, immutable document template. Concurrent calls from
    different threads do not interfere.
"""

from __future__ import annotations

from dochtml.config import (
    DEFAULT_LIMIT,
    RenderOptions,
    get_render_options,
    render_options_context,
    reset_render_options,
    set_render_options,
)
from dochtml.errors import DocHTMLError, ModelError, RenderError, TemplateBindingError, TooLargeError
from dochtml.examples import ExampleIndex, IndexedExample, collect_examples, example_id
from dochtml.location import SourceLocation
from dochtml.model import (
    Code,
    Comment,
    Decl,
    Example,
    Func,
    ModuleRole,
    Node,
    Note,
    Package,
    Type,
    Value,
)
from dochtml.renderers.html import HtmlRenderer
from dochtml.renderers.protocol import DeclHTML, Renderer
from dochtml.serialization import from_dict, from_json, to_dict, to_json
from dochtml.sink import BoundedSink
from dochtml.template import MASTER_TEMPLATE, DocumentTemplate, Hooks
from dochtml.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)

_DEFAULT_RENDERER = HtmlRenderer()


def render(
    package: Package,
    options: RenderOptions | None = None,
    *,
    renderer: Renderer | None = None,
) -> bytes:
    """Render package documentation HTML.

    Command modules keep only their overview and notes; their declarations
    and examples are left out. The caller's Package is never modified.

    Args:
        package: Documentation model to render
        options: Source-link resolver and size limit (uses the context's
            options if None, see render_options_context)
        renderer: Declaration renderer (uses HtmlRenderer if None)

    Returns:
        The complete HTML document, UTF-8 encoded

    Raises:
        TooLargeError: Output exceeded the limit. Takes precedence over any
            rendering failure in the same call.
        RenderError: A hook or the template failed

    Example:
        >>> render(Package(name="main", role=ModuleRole.COMMAND, doc="Tool does X."))
        b'<ul>\\n<li><a href="#pkg-overview">Overview</a></li>\\n</ul>\\n...'
    """
    opts = options if options is not None else get_render_options()

    if package.is_command:
        package = package.without_declarations()

    examples = collect_examples(package)
    hooks = Hooks.from_renderer(renderer or _DEFAULT_RENDERER, opts.link_for)
    sink = BoundedSink(opts.effective_limit)

    failure: Exception | None = None
    try:
        MASTER_TEMPLATE.bind(hooks).run(package, examples, sink)
    except Exception as exc:
        failure = exc

    if sink.exceeded:
        logger.warning(
            "documentation for %s exceeded size limit: %d > %d bytes",
            package.label,
            sink.size,
            sink.limit,
        )
        raise TooLargeError(sink.limit, sink.size, package.label) from failure
    if failure is not None:
        # A RenderError from a hook already carries a prefix; keep only its text
        message = failure.message if isinstance(failure, RenderError) else str(failure)
        raise RenderError(message, package.label) from failure

    logger.debug(
        "rendered %s: %d bytes, %d examples (limit %d)",
        package.label,
        sink.size,
        len(examples),
        sink.limit,
    )
    return sink.getvalue()


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render",
    # Model
    "Code",
    "Comment",
    "Decl",
    "Example",
    "Func",
    "ModuleRole",
    "Node",
    "Note",
    "Package",
    "SourceLocation",
    "Type",
    "Value",
    # Examples
    "ExampleIndex",
    "IndexedExample",
    "collect_examples",
    "example_id",
    # Assembly
    "BoundedSink",
    "DocumentTemplate",
    "Hooks",
    "MASTER_TEMPLATE",
    # Renderers
    "DeclHTML",
    "HtmlRenderer",
    "Renderer",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "DEFAULT_LIMIT",
    "RenderOptions",
    "get_render_options",
    "render_options_context",
    "reset_render_options",
    "set_render_options",
    # Errors
    "DocHTMLError",
    "ModelError",
    "RenderError",
    "TemplateBindingError",
    "TooLargeError",
]
