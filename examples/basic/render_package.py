"""Render a small package's documentation to HTML."""

from dochtml import Code, Decl, Example, Func, Package, render

pkg = Package(
    name="ring",
    doc="Package ring implements operations on circular lists.",
    funcs=(
        Func(
            "New",
            doc="New creates a ring of n elements.",
            decl=Decl("func New(n int) *Ring"),
            examples=(Example(code=Code("fmt.Println(ring.New(3).Len())"), output="3"),),
        ),
    ),
)

print(render(pkg).decode())
