"""Document template: walks a Package and writes the HTML document.

The template source is compiled once per process into an immutable master
(MASTER_TEMPLATE). Rendering hooks are not part of the master: each render()
call binds its own Hooks onto a copy, so a source-link resolver that closes
over one caller's state is never visible to another call.

Document Order:
    navigation list
    overview (package doc + package examples)
    index (constants, variables, functions, types with their members, notes)
    examples list
    constants, variables, functions, types (each with inline examples)
    notes, one section per marker

Thread Safety:
The master template and its Environment are never mutated after module
import. bind() returns a new DocumentTemplate; run() creates a fresh Jinja
context per call. No locks are needed.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, StrictUndefined, Template
from markupsafe import Markup, escape

from dochtml.errors import TemplateBindingError
from dochtml.renderers.protocol import DeclHTML

if TYPE_CHECKING:
    from dochtml.examples import ExampleIndex, IndexedExample
    from dochtml.model import Decl, Node, Package
    from dochtml.renderers.protocol import Renderer
    from dochtml.sink import BoundedSink

# Template-visible hook names, in Hooks field order
HOOK_NAMES = ("render_synopsis", "render_doc", "render_decl", "render_code", "source_link")

_DANGEROUS_SCHEMES = frozenset(("javascript:", "data:", "vbscript:"))

# Stand-in href for rejected source links; matches no anchor and runs nothing
UNSAFE_URL = "#ZgotmplZ"


def _is_dangerous_url(url: str) -> bool:
    """Check if URL uses a script-capable scheme.

    Browsers drop ASCII tabs and newlines inside a scheme, so they are
    removed before the check.
    """
    lower = url.strip().lower().translate({ord(c): None for c in "\t\n\r"})
    return any(lower.startswith(s) for s in _DANGEROUS_SCHEMES)

_SOURCE = """\
{% macro example_block(items) %}
{% for ex in items %}
<details id="{{ ex.id }}" class="example">
<summary class="example-header">Example{% if ex.suffix %} ({{ ex.suffix }}){% endif %} <a href="#{{ ex.id }}">¶</a></summary>
<div class="example-body">
{% if ex.doc %}
{{ render_doc(ex.doc) }}
{% endif %}
<p>Code:</p>
{{ render_code(ex) }}
{% if ex.has_output %}
<p>{{ "Unordered output:" if ex.unordered else "Output:" }}</p>
<pre>
{{ ex.output }}</pre>
{% endif %}
</div>
</details>

{% endfor %}
{% endmacro %}
{% macro decl_block(item) %}
{% set out = render_decl(item.doc, item.decl) %}
{{ out.decl }}{{ out.doc }}
{% endmacro %}
{% set has_decls = package.has_declarations %}
{% set has_overview = package.doc or examples.package_examples %}
{% if has_overview or has_decls or examples %}
<ul>
  {% if has_overview %}
<li><a href="#pkg-overview">Overview</a></li>
  {% endif %}
  {% if has_decls %}
<li><a href="#pkg-index">Index</a></li>
  {% endif %}
  {% if examples %}
<li><a href="#pkg-examples">Examples</a></li>
  {% endif %}
</ul>
{% endif %}
{% if has_overview %}
<h2 id="pkg-overview">Overview <a href="#pkg-overview">¶</a></h2>

{{ render_doc(package.doc) }}
{{ example_block(examples.package_examples) -}}
{% endif %}
{% if has_decls %}
<h2 id="pkg-index">Index <a href="#pkg-index">¶</a></h2>

<ul>
  {% if package.consts %}
<li><a href="#pkg-constants">Constants</a></li>
  {% endif %}
  {% if package.vars %}
<li><a href="#pkg-variables">Variables</a></li>
  {% endif %}
  {% for f in package.funcs %}
<li><a href="#{{ f.name }}">{{ render_synopsis(f.decl) }}</a></li>
  {% endfor %}
  {% for t in package.types %}
<li><a href="#{{ t.name }}">type {{ t.name }}</a></li>
    {% if t.funcs %}
<ul>
      {% for f in t.funcs %}
<li><a href="#{{ f.name }}">{{ render_synopsis(f.decl) }}</a></li>
      {% endfor %}
</ul>
    {% endif %}
    {% if t.methods %}
<ul>
      {% for m in t.methods %}
<li><a href="#{{ t.name }}.{{ m.name }}">{{ render_synopsis(m.decl) }}</a></li>
      {% endfor %}
</ul>
    {% endif %}
  {% endfor %}
  {% for marker in package.notes|sort %}
<li><a href="#pkg-note-{{ marker }}">{{ marker }}s</a></li>
  {% endfor %}
</ul>
{% endif %}
{% if examples %}
<h3 id="pkg-examples">Examples <a href="#pkg-examples">¶</a></h3>
<ul>
  {% for ex in examples %}
<li><a href="#{{ ex.id }}">{{ ex.parent_id or "Package" }}{% if ex.suffix %} ({{ ex.suffix }}){% endif %}</a></li>
  {% endfor %}
</ul>
{% endif %}
{% if package.consts %}
<h3 id="pkg-constants">Constants <a href="#pkg-constants">¶</a></h3>
{% endif %}
{% for v in package.consts %}
{{ decl_block(v) -}}
{% endfor %}
{% if package.vars %}
<h3 id="pkg-variables">Variables <a href="#pkg-variables">¶</a></h3>
{% endif %}
{% for v in package.vars %}
{{ decl_block(v) -}}
{% endfor %}
{% for f in package.funcs %}
<h3 id="{{ f.name }}">func {{ source_link(f.name, f.decl) }} <a href="#{{ f.name }}">¶</a></h3>
{{ decl_block(f) -}}
{{ example_block(examples.for_parent(f.name)) -}}
{% endfor %}
{% for t in package.types %}
<h3 id="{{ t.name }}">type {{ source_link(t.name, t.decl) }} <a href="#{{ t.name }}">¶</a></h3>
{{ decl_block(t) -}}
{{ example_block(examples.for_parent(t.name)) -}}
  {% for v in t.consts %}
{{ decl_block(v) -}}
  {% endfor %}
  {% for v in t.vars %}
{{ decl_block(v) -}}
  {% endfor %}
  {% for f in t.funcs %}
<h3 id="{{ f.name }}">func {{ source_link(f.name, f.decl) }} <a href="#{{ f.name }}">¶</a></h3>
{{ decl_block(f) -}}
{{ example_block(examples.for_parent(f.name)) -}}
  {% endfor %}
  {% for m in t.methods %}
    {% set method_id = t.name ~ "." ~ m.name %}
<h3 id="{{ method_id }}">func ({{ m.recv }}) {{ source_link(m.name, m.decl) }} <a href="#{{ method_id }}">¶</a></h3>
{{ decl_block(m) -}}
{{ example_block(examples.for_parent(method_id)) -}}
  {% endfor %}
{% endfor %}
{% for marker in package.notes|sort %}
<h2 id="pkg-note-{{ marker }}">{{ marker }}s <a href="#pkg-note-{{ marker }}">¶</a></h2>
<ul style="padding-left: 20px; list-style: initial;">
  {% for note in package.notes[marker] %}
<li style="margin: 6px 0 6px 0;">{{ render_doc(note.body) }}</li>
  {% endfor %}
</ul>
{% endfor %}
"""


@dataclass(frozen=True, slots=True)
class Hooks:
    """Rendering callbacks bound into one template run.

    Every callback returns Markup; the template inserts it without escaping.

    Attributes:
        synopsis: Decl -> one-line index entry
        prose: doc text -> block markup
        declaration: (doc, Decl) -> DeclHTML
        code: IndexedExample -> example body markup
        source_link: (name, Node) -> link markup or the escaped name;
            javascript:, data: and vbscript: links become UNSAFE_URL

    """

    synopsis: Callable[[Decl], Markup]
    prose: Callable[[str], Markup]
    declaration: Callable[[str, Decl], DeclHTML]
    code: Callable[[IndexedExample], Markup]
    source_link: Callable[[str, Node], Markup]

    @classmethod
    def from_renderer(
        cls,
        renderer: Renderer,
        link_for: Callable[[Node], str],
    ) -> Hooks:
        """Wrap a Renderer and a source-link resolver as template hooks.

        Args:
            renderer: Produces markup for declarations, prose and code
            link_for: Node -> URL, or "" when the node has no source link

        Returns:
            Hooks closing over renderer and link_for
        """

        def synopsis(decl: Decl) -> Markup:
            return Markup(renderer.synopsis(decl))

        def prose(text: str) -> Markup:
            return Markup(renderer.doc_html(text))

        def declaration(doc: str, decl: Decl) -> DeclHTML:
            out = renderer.decl_html(doc, decl)
            return DeclHTML(decl=Markup(out.decl), doc=Markup(out.doc))

        def code(ex: IndexedExample) -> Markup:
            return Markup(renderer.code_html(ex.code, ex.comments))

        def source_link(name: str, node: Node) -> Markup:
            link = link_for(node)
            if not link:
                return escape(name)
            if _is_dangerous_url(link):
                link = UNSAFE_URL
            return Markup('<a class="Documentation-source" href="{}">{}</a>').format(link, name)

        return cls(
            synopsis=synopsis,
            prose=prose,
            declaration=declaration,
            code=code,
            source_link=source_link,
        )

    def as_template_vars(self) -> dict[str, Callable[..., Any]]:
        return dict(
            zip(
                HOOK_NAMES,
                (self.synopsis, self.prose, self.declaration, self.code, self.source_link),
                strict=True,
            )
        )


def _unbound(name: str) -> Callable[..., Any]:
    def hook(*args: Any, **kwargs: Any) -> Any:
        raise TemplateBindingError(name)

    hook.__name__ = name
    return hook


def _build_environment() -> Environment:
    """Build the Jinja2 environment for the package document.

    Hook names resolve to placeholders that raise TemplateBindingError, so a
    template run without bound hooks fails loudly instead of rendering
    partial output.
    """
    env = Environment(
        undefined=StrictUndefined,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.globals.update({name: _unbound(name) for name in HOOK_NAMES})
    return env


@dataclass(frozen=True, slots=True)
class DocumentTemplate:
    """Compiled package document template plus its call-scoped hook bindings.

    The master instance has no bindings. bind() returns a copy carrying
    the given hooks; the master is left untouched.

    """

    template: Template
    bindings: Mapping[str, Callable[..., Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def is_bound(self) -> bool:
        return bool(self.bindings)

    def bind(self, hooks: Hooks) -> DocumentTemplate:
        """Return a copy of this template with hooks bound."""
        return replace(self, bindings=MappingProxyType(hooks.as_template_vars()))

    def run(self, package: Package, examples: ExampleIndex, sink: BoundedSink) -> None:
        """Walk the package and write every produced chunk to sink.

        Success or failure with respect to the size ceiling is not decided
        here; the caller inspects sink afterwards.

        Raises:
            TemplateBindingError: A hook was needed but not bound
            Exception: Whatever a bound hook raised, unchanged
        """
        context = {"package": package, "examples": examples, **self.bindings}
        for chunk in self.template.generate(context):
            sink.write_text(chunk)


_ENV = _build_environment()

MASTER_TEMPLATE = DocumentTemplate(_ENV.from_string(_SOURCE))


__all__ = ["HOOK_NAMES", "MASTER_TEMPLATE", "UNSAFE_URL", "DocumentTemplate", "Hooks"]
