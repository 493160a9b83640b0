"""Tests for BoundedSink byte accounting."""

from dochtml.sink import BoundedSink


class TestBoundedSink:
    def test_empty(self) -> None:
        sink = BoundedSink(10)
        assert sink.getvalue() == b""
        assert sink.remaining == 10
        assert sink.size == 0
        assert not sink.exceeded

    def test_write_accumulates(self) -> None:
        sink = BoundedSink(100)
        sink.write(b"<p>")
        sink.write(b"hi")
        sink.write(b"</p>")
        assert sink.getvalue() == b"<p>hi</p>"
        assert sink.remaining == 91
        assert len(sink) == 9

    def test_exactly_at_limit_is_not_exceeded(self) -> None:
        sink = BoundedSink(4)
        sink.write(b"abcd")
        assert sink.remaining == 0
        assert not sink.exceeded

    def test_one_byte_over_is_exceeded(self) -> None:
        sink = BoundedSink(4)
        sink.write(b"abcde")
        assert sink.remaining == -1
        assert sink.exceeded

    def test_writes_never_refused(self) -> None:
        """Output past the ceiling is still kept."""
        sink = BoundedSink(2)
        assert sink.write(b"abc") == 3
        assert sink.write(b"def") == 3
        assert sink.getvalue() == b"abcdef"
        assert sink.remaining == -4

    def test_empty_write_skipped(self) -> None:
        sink = BoundedSink(0)
        assert sink.write(b"") == 0
        assert not sink.exceeded

    def test_write_text_counts_utf8_bytes(self) -> None:
        sink = BoundedSink(2)
        sink.write_text("¶")
        assert sink.size == 2
        assert not sink.exceeded
        sink.write_text("a")
        assert sink.exceeded
        assert sink.getvalue().decode("utf-8") == "¶a"
