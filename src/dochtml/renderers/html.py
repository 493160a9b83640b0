"""HTML renderer for declarations, doc prose, and example code.

Reference implementation of the Renderer protocol. Output is plain,
unhighlighted HTML; identifiers are not hotlinked.

Doc Prose:
Doc text is split into blocks separated by blank lines. Unindented runs
become paragraphs, indented runs become preformatted blocks with the common
indent removed. A one-line paragraph that looks like a title and sits
between two paragraphs becomes an ``<h3>`` with an ``hdr-`` anchor.

Thread Safety:
HtmlRenderer holds no per-render state. A single instance can be shared
across threads and used by concurrent render() calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from markupsafe import escape

from dochtml.model import Code, Comment, Decl
from dochtml.renderers.protocol import DeclHTML

# Characters that disqualify a line from being a heading
_NOT_HEADING = frozenset(';:!?+*/=[]{}_^°&§~%#@<">\\`')
_ANCHOR_UNSAFE = re.compile(r"[^0-9A-Za-z]")


def html_escape(s: str) -> str:
    """Escape HTML special characters, returning a plain str."""
    return str(escape(s))


def _indent_len(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


@dataclass(frozen=True, slots=True)
class _Block:
    kind: str  # "p", "pre" or "h"
    lines: tuple[str, ...]


def _split_blocks(text: str) -> list[_Block]:
    """Group doc lines into paragraph and preformatted blocks."""
    blocks: list[_Block] = []
    lines = text.splitlines()
    i = 0
    while i < len(lines):
        line = lines[i]
        if not line.strip():
            i += 1
            continue
        if _indent_len(line) > 0:
            # Preformatted run: indented lines plus interior blank lines
            j = i
            while j < len(lines) and (not lines[j].strip() or _indent_len(lines[j]) > 0):
                j += 1
            run = lines[i:j]
            while run and not run[-1].strip():
                run.pop()
            indent = min(_indent_len(ln) for ln in run if ln.strip())
            blocks.append(_Block("pre", tuple(ln[indent:] for ln in run)))
            i = j
            continue
        j = i
        while j < len(lines) and lines[j].strip() and _indent_len(lines[j]) == 0:
            j += 1
        blocks.append(_Block("p", tuple(lines[i:j])))
        i = j
    return _mark_headings(blocks)


def _is_heading_text(line: str) -> bool:
    line = line.strip()
    if not line or not line[0].isupper() or not line[-1].isalnum():
        return False
    return not any(ch in _NOT_HEADING for ch in line)


def _mark_headings(blocks: list[_Block]) -> list[_Block]:
    out: list[_Block] = []
    for i, block in enumerate(blocks):
        if (
            block.kind == "p"
            and len(block.lines) == 1
            and out
            and out[-1].kind == "p"
            and i + 1 < len(blocks)
            and blocks[i + 1].kind == "p"
            and _is_heading_text(block.lines[0])
        ):
            out.append(_Block("h", block.lines))
        else:
            out.append(block)
    return out


def heading_id(text: str) -> str:
    """Anchor for a doc heading: ``hdr-`` plus the text with non-alphanumerics as ``_``."""
    return "hdr-" + _ANCHOR_UNSAFE.sub("_", text.strip())


def _merge_comments(code: Code, comments: tuple[Comment, ...]) -> str:
    """Insert comments into the example body at their source lines.

    Comments without a location, or positioned past the body, are appended.
    """
    lines = code.text.splitlines()
    if not comments:
        return "\n".join(lines)

    start = code.location.lineno if code.location is not None else 1
    inserts: dict[int, list[str]] = {}
    for c in sorted(comments, key=lambda c: c.location.lineno if c.location else 1 << 30):
        if c.location is None:
            idx = len(lines)
        else:
            idx = min(max(c.location.lineno - start, 0), len(lines))
        inserts.setdefault(idx, []).extend(c.text.splitlines() or [""])

    merged: list[str] = []
    for idx in range(len(lines) + 1):
        if idx in inserts:
            pad = ""
            if idx < len(lines):
                pad = lines[idx][: _indent_len(lines[idx])]
            merged.extend(pad + text for text in inserts[idx])
        if idx < len(lines):
            merged.append(lines[idx])
    return "\n".join(merged)


class HtmlRenderer:
    """Render model pieces to HTML.

    Usage:
        >>> r = HtmlRenderer()
        >>> r.synopsis(Decl("type Ring struct {"))
        'type Ring struct {...}'

    Thread Safety:
        Stateless. Safe for concurrent use.

    """

    __slots__ = ("_code_class",)

    def __init__(self, *, code_class: str = "Documentation-exampleCode") -> None:
        """Initialize the renderer.

        Args:
            code_class: CSS class for example code blocks ("" for none)
        """
        self._code_class = code_class

    def synopsis(self, decl: Decl) -> str:
        lines = decl.text.strip().splitlines()
        if not lines:
            return ""
        first = lines[0].rstrip()
        if first.endswith("{"):
            first = first[:-1].rstrip() + " {...}"
        elif first.endswith("("):
            first = first + "...)"
        return html_escape(first)

    def doc_html(self, text: str) -> str:
        parts: list[str] = []
        for block in _split_blocks(text):
            body = html_escape("\n".join(block.lines))
            if block.kind == "h":
                parts.append(f'<h3 id="{heading_id(block.lines[0])}">{body}</h3>\n')
            elif block.kind == "pre":
                parts.append(f"<pre>{body}</pre>\n")
            else:
                parts.append(f"<p>{body}</p>\n")
        return "".join(parts)

    def decl_html(self, doc: str, decl: Decl) -> DeclHTML:
        return DeclHTML(
            decl=f"<pre>{html_escape(decl.text)}</pre>\n",
            doc=self.doc_html(doc),
        )

    def code_html(self, code: Code, comments: tuple[Comment, ...] = ()) -> str:
        body = html_escape(_merge_comments(code, comments))
        if self._code_class:
            return f'<pre class="{html_escape(self._code_class)}">{body}</pre>'
        return f"<pre>{body}</pre>"
