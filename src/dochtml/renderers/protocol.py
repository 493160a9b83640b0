"""Renderer protocol: the hooks the document template calls.

A Renderer turns one piece of the model into markup: a declaration's
one-line synopsis, doc prose, the full declaration, or an example body.
The built-in ``HtmlRenderer`` is the reference implementation; hosting
services may inject their own (e.g. with syntax highlighting or
identifier hotlinking).

Example:
    from dochtml import render
    from dochtml.renderers.protocol import Renderer

    def render_with(renderer: Renderer, pkg: Package) -> bytes:
        return render(pkg, renderer=renderer)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from dochtml.model import Code, Comment, Decl


@dataclass(frozen=True, slots=True)
class DeclHTML:
    """Rendered declaration, split into its code and prose parts."""

    decl: str
    doc: str


class Renderer(Protocol):
    """Protocol for declaration-level renderers.

    Every method returns markup that the document template inserts verbatim,
    so implementations are responsible for escaping their input.

    """

    def synopsis(self, decl: Decl) -> str:
        """One-line summary of a declaration, used in the index."""
        ...

    def doc_html(self, text: str) -> str:
        """Convert doc-comment prose to block markup."""
        ...

    def decl_html(self, doc: str, decl: Decl) -> DeclHTML:
        """Render a declaration and its documentation."""
        ...

    def code_html(self, code: Code, comments: tuple[Comment, ...] = ()) -> str:
        """Render an example body, merging attached comments into it."""
        ...
