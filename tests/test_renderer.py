"""Tests for HtmlRenderer."""

from __future__ import annotations

from dochtml.location import SourceLocation
from dochtml.model import Code, Comment, Decl
from dochtml.renderers.html import HtmlRenderer, heading_id


class TestDocHtml:
    """Doc prose to HTML."""

    def test_paragraphs(self) -> None:
        html = HtmlRenderer().doc_html("First line\ncontinues.\n\nSecond paragraph.")
        assert html == "<p>First line\ncontinues.</p>\n<p>Second paragraph.</p>\n"

    def test_empty(self) -> None:
        assert HtmlRenderer().doc_html("") == ""
        assert HtmlRenderer().doc_html("\n\n") == ""

    def test_preformatted_block(self) -> None:
        html = HtmlRenderer().doc_html("Usage:\n\n\tr := New(3)\n\n\tr.Do(f)\n\nDone.")
        assert html == "<p>Usage:</p>\n<pre>r := New(3)\n\nr.Do(f)</pre>\n<p>Done.</p>\n"

    def test_preformatted_keeps_relative_indent(self) -> None:
        html = HtmlRenderer().doc_html("Code:\n    if x {\n        y()\n    }")
        assert "<pre>if x {\n    y()\n}</pre>" in html

    def test_heading(self) -> None:
        html = HtmlRenderer().doc_html("Intro text.\n\nThread Safety\n\nAll methods are safe.")
        assert html == (
            "<p>Intro text.</p>\n"
            '<h3 id="hdr-Thread_Safety">Thread Safety</h3>\n'
            "<p>All methods are safe.</p>\n"
        )

    def test_first_block_is_never_heading(self) -> None:
        html = HtmlRenderer().doc_html("Overview\n\nBody.")
        assert "<h3" not in html

    def test_punctuated_line_is_not_heading(self) -> None:
        html = HtmlRenderer().doc_html("Intro.\n\nSee below: details\n\nBody.")
        assert "<h3" not in html
        html = HtmlRenderer().doc_html("Intro.\n\nThis ends with a period.\n\nBody.")
        assert "<h3" not in html

    def test_heading_needs_following_paragraph(self) -> None:
        html = HtmlRenderer().doc_html("Intro.\n\nExamples")
        assert "<h3" not in html

    def test_escaping(self) -> None:
        assert HtmlRenderer().doc_html("a < b && c") == "<p>a &lt; b &amp;&amp; c</p>\n"

    def test_heading_id(self) -> None:
        assert heading_id("Thread Safety (v2)") == "hdr-Thread_Safety__v2_"


class TestSynopsis:
    def test_function(self) -> None:
        assert HtmlRenderer().synopsis(Decl("func New(n int) *Ring")) == "func New(n int) *Ring"

    def test_struct_body_elided(self) -> None:
        decl = Decl("type Ring struct {\n\tnext *Ring\n}")
        assert HtmlRenderer().synopsis(decl) == "type Ring struct {...}"

    def test_group_elided(self) -> None:
        assert HtmlRenderer().synopsis(Decl("const (\n\tA = 1\n)")) == "const (...)"

    def test_escaped(self) -> None:
        assert HtmlRenderer().synopsis(Decl("func F() <-chan int")) == "func F() &lt;-chan int"

    def test_empty(self) -> None:
        assert HtmlRenderer().synopsis(Decl()) == ""


class TestDeclHtml:
    def test_split_into_code_and_doc(self) -> None:
        out = HtmlRenderer().decl_html("Len returns the size.", Decl("func (r *Ring) Len() int"))
        assert out.decl == "<pre>func (r *Ring) Len() int</pre>\n"
        assert out.doc == "<p>Len returns the size.</p>\n"


class TestCodeHtml:
    def test_plain(self) -> None:
        html = HtmlRenderer().code_html(Code('fmt.Println("hi")'))
        assert html == '<pre class="Documentation-exampleCode">fmt.Println(&#34;hi&#34;)</pre>'

    def test_no_class(self) -> None:
        assert HtmlRenderer(code_class="").code_html(Code("f()")) == "<pre>f()</pre>"

    def test_comments_merged_by_line(self) -> None:
        code = Code("a()\nif x {\n\tb()\n}", location=SourceLocation(10))
        comments = (
            Comment("// first", location=SourceLocation(10)),
            Comment("// inside", location=SourceLocation(12)),
        )
        html = HtmlRenderer(code_class="").code_html(code, comments)
        assert html == "<pre>// first\na()\nif x {\n\t// inside\n\tb()\n}</pre>"

    def test_comment_past_end_appended(self) -> None:
        code = Code("a()", location=SourceLocation(1))
        html = HtmlRenderer(code_class="").code_html(code, (Comment("// tail", location=SourceLocation(9)),))
        assert html == "<pre>a()\n// tail</pre>"
