"""Bound output size: oversized documents fail instead of growing without limit."""

from dochtml import Package, RenderOptions, TooLargeError, render

pkg = Package(name="huge", doc="word " * 50_000)

try:
    render(pkg, RenderOptions(limit=100_000))
except TooLargeError as exc:
    print("Rejected:", exc)

print("Default limit accepts it:", len(render(pkg)), "bytes")
