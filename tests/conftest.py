"""Shared fixtures: a small circular-list package exercising every model part."""

import pytest

from dochtml import (
    Code,
    Comment,
    Decl,
    Example,
    Func,
    Note,
    Package,
    SourceLocation,
    Type,
    Value,
)


def _loc(line: int) -> SourceLocation:
    return SourceLocation(lineno=line, source_file="ring.go")


@pytest.fixture
def ring_package() -> Package:
    """Package with constants, a function, a type, a method and examples."""
    return Package(
        name="ring",
        import_path="container/ring",
        doc="Package ring implements operations on circular lists.",
        consts=(
            Value(
                names=("MaxLen",),
                doc="MaxLen bounds ring sizes.",
                decl=Decl("const MaxLen = 1 << 20", location=_loc(5)),
            ),
        ),
        vars=(
            Value(
                names=("ErrEmpty",),
                decl=Decl('var ErrEmpty = errors.New("empty")', location=_loc(8)),
            ),
        ),
        funcs=(
            Func(
                "Merge",
                doc="Merge joins two rings.",
                decl=Decl("func Merge(a, b *Ring) *Ring", location=_loc(12)),
                examples=(Example(code=Code("ring.Merge(a, b)")),),
            ),
        ),
        types=(
            Type(
                "Ring",
                doc="A Ring is an element of a circular list.",
                decl=Decl("type Ring struct {\n\tValue any\n}", location=_loc(20)),
                funcs=(
                    Func(
                        "New",
                        doc="New creates a ring of n elements.",
                        decl=Decl("func New(n int) *Ring", location=_loc(30)),
                        examples=(
                            Example(
                                code=Code("r := ring.New(3)\nfmt.Println(r.Len())", location=_loc(100)),
                                comments=(Comment("// Three elements.", location=_loc(101)),),
                                output="3",
                            ),
                        ),
                    ),
                ),
                methods=(
                    Func(
                        "Do",
                        recv="r *Ring",
                        doc="Do calls f on each element.",
                        decl=Decl("func (r *Ring) Do(f func(any))", location=_loc(40)),
                        examples=(
                            Example(code=Code("r.Do(print)"), output="a\nb", unordered=True),
                            Example(suffix="empty", code=Code("new(ring.Ring).Do(print)"), empty_output=True),
                        ),
                    ),
                ),
                examples=(Example(doc="Rings wrap around.", code=Code("r.Next().Prev()")),),
            ),
        ),
        examples=(Example(code=Code("ring.New(1)")),),
        notes={"BUG": (Note("Len is O(n).", uid="gri"),)},
    )
