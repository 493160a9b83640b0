"""Example discovery and anchoring.

Collects every runnable example reachable from a Package, gives each one a
document anchor derived from the declaration it belongs to, and orders them
for the examples list.

Anchor Scheme:
    parent ""         suffix ""      -> example-package
    parent ""         suffix "x"     -> example-package-x
    parent "New"      suffix ""      -> example-New
    parent "Ring.Do"  suffix "x"     -> example-Ring.Do-x

Anchors are part of the public deep-link surface and must not change for a
given model.

Thread Safety:
The index is built fresh for each render() call and is immutable afterwards.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from dochtml.model import Code, Comment, Example, Package

PACKAGE_PARENT = ""


def example_id(parent_id: str, suffix: str) -> str:
    """Return the document anchor for an example.

    Args:
        parent_id: Enclosing declaration ("" for package-level examples)
        suffix: Example suffix ("" when the declaration has one example)

    Returns:
        Anchor string, e.g. ``example-Ring.Do-basic``

    Example:
        >>> example_id("", "")
        'example-package'
        >>> example_id("New", "")
        'example-New'
    """
    if not parent_id:
        return f"example-package-{suffix}" if suffix else "example-package"
    return f"example-{parent_id}-{suffix}" if suffix else f"example-{parent_id}"


@dataclass(frozen=True, slots=True)
class IndexedExample:
    """An Example placed in the document.

    Attributes:
        example: The model example
        id: Document anchor, see example_id()
        parent_id: Enclosing declaration ("" for package-level)

    """

    example: Example
    id: str
    parent_id: str

    @classmethod
    def attach(cls, example: Example, parent_id: str) -> IndexedExample:
        return cls(example=example, id=example_id(parent_id, example.suffix), parent_id=parent_id)

    @property
    def suffix(self) -> str:
        return self.example.suffix

    @property
    def doc(self) -> str:
        return self.example.doc

    @property
    def code(self) -> Code:
        return self.example.code

    @property
    def comments(self) -> tuple[Comment, ...]:
        return self.example.comments

    @property
    def output(self) -> str:
        return self.example.output

    @property
    def has_output(self) -> bool:
        return self.example.has_output

    @property
    def unordered(self) -> bool:
        return self.example.unordered


@dataclass(frozen=True, slots=True)
class ExampleIndex:
    """All examples of one package.

    Attributes:
        examples: Every example, stably sorted by parent_id
        by_parent: parent_id -> examples of that declaration, in discovery order

    """

    examples: tuple[IndexedExample, ...]
    by_parent: Mapping[str, tuple[IndexedExample, ...]]

    def for_parent(self, parent_id: str) -> tuple[IndexedExample, ...]:
        """Examples attached to parent_id, or an empty tuple."""
        return self.by_parent.get(parent_id, ())

    @property
    def package_examples(self) -> tuple[IndexedExample, ...]:
        return self.for_parent(PACKAGE_PARENT)

    def __iter__(self) -> Iterator[IndexedExample]:
        return iter(self.examples)

    def __len__(self) -> int:
        return len(self.examples)

    def __bool__(self) -> bool:
        return bool(self.examples)


def _discover(pkg: Package) -> Iterator[IndexedExample]:
    """Yield examples in discovery order.

    Package examples first, then functions, then per type: the type's own
    examples, its associated functions, and its methods. Functions listed
    under a type are anchored by their own name, methods by Type.Method.
    """
    for ex in pkg.examples:
        yield IndexedExample.attach(ex, PACKAGE_PARENT)
    for f in pkg.funcs:
        for ex in f.examples:
            yield IndexedExample.attach(ex, f.name)
    for t in pkg.types:
        for ex in t.examples:
            yield IndexedExample.attach(ex, t.name)
        for f in t.funcs:
            for ex in f.examples:
                yield IndexedExample.attach(ex, f.name)
        for m in t.methods:
            method_id = f"{t.name}.{m.name}"
            for ex in m.examples:
                yield IndexedExample.attach(ex, method_id)


def collect_examples(pkg: Package) -> ExampleIndex:
    """Build the ExampleIndex for a package.

    The flat list is sorted by parent_id only. sorted() is stable, so examples
    sharing a parent keep their discovery order; ties are not broken by suffix.

    Args:
        pkg: Package to scan

    Returns:
        ExampleIndex (empty when the package has no examples)
    """
    discovered = list(_discover(pkg))

    groups: dict[str, list[IndexedExample]] = {}
    for ex in discovered:
        groups.setdefault(ex.parent_id, []).append(ex)

    return ExampleIndex(
        examples=tuple(sorted(discovered, key=lambda ex: ex.parent_id)),
        by_parent=MappingProxyType({k: tuple(v) for k, v in groups.items()}),
    )


__all__ = [
    "ExampleIndex",
    "IndexedExample",
    "PACKAGE_PARENT",
    "collect_examples",
    "example_id",
]
