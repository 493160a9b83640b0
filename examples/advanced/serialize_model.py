"""Ship a documentation model between processes as JSON round-trip."""

from dochtml import Decl, Func, Package, render
from dochtml.serialization import from_json, to_json

pkg = Package(name="ring", doc="Circular lists.", funcs=(Func("New", decl=Decl("func New(n int) *Ring")),))

json_str = to_json(pkg)
restored = from_json(json_str)

print("Original == restored:", pkg == restored)
print("Same HTML:", render(pkg) == render(restored))
